"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.parsing import ParseError, parse_numbers
from pushswap.sorting import solve


def run(args: Sequence[str]) -> str:
    """Return the program's output for ``args``: one operation per line, or an error line."""
    try:
        values = parse_numbers(args)
    except ParseError:
        return "error\n"
    return "".join(f"{operation}\n" for operation in solve(values))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the operations for the arguments to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.write(run(args))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())