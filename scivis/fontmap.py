"""Character position tables for bitmap fonts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CharPosition:
    """Location of one glyph inside a font atlas image."""

    c: str
    top_left: tuple[int, int]
    bottom_right: tuple[int, int]

    @property
    def size(self) -> tuple[int, int]:
        """Width and height of the glyph rectangle."""
        return (
            self.bottom_right[0] - self.top_left[0],
            self.bottom_right[1] - self.top_left[1],
        )


def _tokens(line: str) -> list[str]:
    # Split on single spaces, keeping empty fields except a trailing one.
    if not line:
        return []
    parts = line.split(" ")
    if line.endswith(" "):
        parts.pop()
    return parts


def _parse_line(line: str) -> CharPosition | None:
    vals = _tokens(line)
    if len(vals) == 5:
        char, coords = vals[0][0], vals[1:5]
    elif len(vals) == 6:
        char, coords = " ", vals[2:6]
    else:
        return None
    x1, y1, x2, y2 = (int(v) for v in coords)
    return CharPosition(char, (x1, y1), (x2, y2))


def load_positions(filename: str | Path) -> list[CharPosition]:
    """Read a glyph position file; a file that cannot be opened yields no entries.

    Each line holds a character followed by the top-left and bottom-right
    corners, separated by single spaces. A line for the space character
    starts with the space itself and therefore has six fields.
    """
    try:
        with open(filename, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError:
        return []
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    positions = []
    for line in lines:
        entry = _parse_line(line)
        if entry is not None:
            positions.append(entry)
    return positions


def find_element(positions: Sequence[CharPosition], c: str) -> CharPosition:
    """Return the entry for ``c``, or the first entry if ``c`` is not present."""
    if not positions:
        raise LookupError("no character positions available")
    return next((p for p in positions if p.c == c), positions[0])