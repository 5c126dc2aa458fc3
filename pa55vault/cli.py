"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .handler import Handler

_USAGE = "Usage of pa55:"


def _flag_exit_code(arg: str) -> int:
    name = arg[2:] if arg.startswith("--") else arg[1:]
    name = name.split("=", 1)[0]
    if name in ("h", "help"):
        print(_USAGE, file=sys.stderr)
        return 0
    print(f"flag provided but not defined: -{name}", file=sys.stderr)
    print(_USAGE, file=sys.stderr)
    return 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        first = args[0]
        if first == "--":
            args = args[1:]
        elif len(first) > 1 and first.startswith("-"):
            return _flag_exit_code(first)
    try:
        Handler(args).run()
    except (OSError, ValueError, LookupError) as err:
        print("Error:", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())