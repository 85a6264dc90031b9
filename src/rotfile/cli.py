#!/usr/bin/env python3
"""ROT13 file encryption/decryption CLI."""

import sys
from collections.abc import Sequence

from .config import ArgumentError, Invocation
from .executor import ConsoleReporter, run


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt/decrypt a file.

    Args:
        argv: Process arguments including the program name. Defaults to sys.argv.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    if argv is None:
        argv = sys.argv

    try:
        invocation = Invocation.from_argv(argv)
    except ArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    in_path = invocation.in_file_path
    out_path = invocation.out_file_path

    if invocation.verbose:
        print(f"File to encrypt/decrypt: {in_path}")
        print(f"File to save to: {out_path}")
    else:
        print(f"Encrypting/decrypting {in_path} to {out_path}...", end="", flush=True)

    reporter = ConsoleReporter()
    try:
        run(in_path, out_path, verbose=invocation.verbose, reporter=reporter)
    except (OSError, UnicodeError) as e:
        if invocation.verbose:
            reporter.interrupt()
        else:
            print()
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if invocation.verbose:
        print("Program completed.")
    else:
        print("success.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
