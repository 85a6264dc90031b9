"""Allow ``python -m rotfile``."""

import sys

from .cli import main

sys.exit(main())
