"""Command line: sort the given integers and report the action count."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.operations import Stacks
from pushswap.parse import ParseError, parse_list
from pushswap.sort import sort


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, sort them, print the stack and the count."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    try:
        nodes = parse_list(args)
    except ParseError as exc:
        out.write(str(exc))
        nodes = []
    stacks = Stacks(nodes, [], out)
    try:
        count = sort(stacks)
    except ValueError as exc:
        out.write(f"Error: {exc}\n")
        return 1
    for node in stacks.a:
        out.write(f"{node.value}\n")
    out.write(f"il faut {count} fois d'oeperations")
    return 0


if __name__ == "__main__":
    sys.exit(main())