"""Finding and drawing the largest empty square of a map."""

from __future__ import annotations

from dataclasses import dataclass

from bsqsolver.parser import Map


@dataclass(frozen=True)
class Square:
    """A square given by its bottom-right corner and side length."""

    x: int
    y: int
    size: int


def solve(grid_map: Map) -> Square:
    """Return the largest square free of obstacles, topmost then leftmost."""
    best = Square(0, 0, 0)
    previous: list[int] = [0] * grid_map.cols
    for y, row in enumerate(grid_map.rows):
        current: list[int] = []
        for x, cell in enumerate(row):
            if cell == grid_map.obstacle:
                size = 0
            elif x == 0 or y == 0:
                size = 1
            else:
                size = 1 + min(previous[x], current[x - 1], previous[x - 1])
            current.append(size)
            if size > best.size:
                best = Square(x, y, size)
        previous = current
    return best


def render(grid_map: Map, square: Square) -> str:
    """Return the map text with the square drawn in the full symbol."""
    top = square.y - square.size + 1
    left = square.x - square.size + 1
    fill = grid_map.full * square.size
    lines = []
    for y, row in enumerate(grid_map.rows):
        if top <= y <= square.y:
            row = row[:left] + fill + row[square.x + 1:]
        lines.append(row + "\n")
    return "".join(lines)