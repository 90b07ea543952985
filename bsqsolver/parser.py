"""Reading map files: a header line followed by the grid rows."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TextIO

HEADER_LIMIT = 31
_DIGITS = frozenset("0123456789")


class MapError(ValueError):
    """Raised when a map is malformed or cannot be read."""


@dataclass(frozen=True)
class Map:
    """A parsed map: its three symbols and the grid rows."""

    empty: str
    obstacle: str
    full: str
    rows: tuple[str, ...]

    @property
    def lines(self) -> int:
        return len(self.rows)

    @property
    def cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0


def _leading_number(text: str) -> int:
    digits = "".join(itertools.takewhile(lambda ch: ch in _DIGITS, text))
    return int(digits) if digits else 0


def parse_header(line: str) -> tuple[int, str, str, str]:
    """Return (line count, empty, obstacle, full) from a header line."""
    if len(line) < 4:
        raise MapError("header too short")
    empty, obstacle, full = line[-3:]
    count = _leading_number(line[:-3])
    if count <= 0:
        raise MapError("invalid line count")
    if len({empty, obstacle, full}) != 3:
        raise MapError("map symbols must be distinct")
    return count, empty, obstacle, full


def _split_header(text: str) -> tuple[str, str]:
    newline = text.find("\n", 0, HEADER_LIMIT)
    if newline == -1:
        return text[:HEADER_LIMIT], text[HEADER_LIMIT:]
    return text[:newline], text[newline + 1:]


def _read_rows(body: str, count: int) -> tuple[str, ...]:
    pieces = body.split("\n", count)[:count]
    width = len(pieces[0])
    if any(len(piece) != width for piece in pieces):
        raise MapError("rows differ in length")
    missing = count - len(pieces)
    if missing and width:
        raise MapError("not enough rows")
    return tuple(pieces) + ("",) * missing


def parse_map(stream: TextIO) -> Map:
    """Parse a map from a text stream."""
    header, body = _split_header(stream.read())
    count, empty, obstacle, full = parse_header(header)
    return Map(empty, obstacle, full, _read_rows(body, count))


def load_map(filename: str) -> Map:
    """Parse the map stored in the named file."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return parse_map(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read {filename}") from exc