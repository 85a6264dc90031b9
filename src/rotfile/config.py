"""Command-line invocation parsing."""

from collections.abc import Sequence
from dataclasses import dataclass

USAGE = "usage: infile.txt outfile.txt -verbose"

VERBOSE_PREFIXES = ("-v", "--v")


class ArgumentError(ValueError):
    """Raised when the command line does not describe a valid run."""


@dataclass(frozen=True)
class Invocation:
    """Paths and flags for a single run."""

    in_file_path: str
    out_file_path: str
    verbose: bool = False

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "Invocation":
        """Create an Invocation from a raw argument list.

        The first element is the program name. The third user argument turns
        on verbose mode when it starts with ``-v`` or ``--v``; anything else
        (including a one-character argument) leaves it off.

        Args:
            argv: Process arguments, program name included.

        Returns:
            Parsed invocation.

        Raises:
            ArgumentError: If fewer than two paths were given.
        """
        if len(argv) < 2:
            raise ArgumentError(USAGE)
        if len(argv) < 3:
            raise ArgumentError("Not enough arguments.")

        verbose = False
        if len(argv) > 3:
            verbose = argv[3].startswith(VERBOSE_PREFIXES)

        return cls(in_file_path=argv[1], out_file_path=argv[2], verbose=verbose)
