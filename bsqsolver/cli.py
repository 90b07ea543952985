"""Command line entry point: solve each map named, or standard input."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from bsqsolver.parser import MapError, load_map, parse_map
from bsqsolver.solver import render, solve

MAP_ERROR = "map error\n"


def process(filename: str | None, out: TextIO) -> None:
    """Solve one map (standard input when filename is None) and write it."""
    try:
        grid_map = parse_map(sys.stdin) if filename is None else load_map(filename)
    except MapError:
        out.write(MAP_ERROR)
        return
    out.write(render(grid_map, solve(grid_map)))


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        process(None, sys.stdout)
        return 0
    for index, name in enumerate(args):
        if index:
            sys.stdout.write("\n")
        process(name, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())