"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_args
from .sorting import solve


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        return _error()
    operations = solve(values)
    sys.stdout.write("".join(name + "\n" for name in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())