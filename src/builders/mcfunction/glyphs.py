"""Foreground cells for the 7 block tall sign alphabet.

Each glyph lives in a 5 wide by 7 tall cell (3 wide for ``I`` and ``1``).
Cells are (column, row) pairs, 1-based, with (1, 1) at the lower left.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

GLYPH_HEIGHT = 7
GLYPH_WIDTH = 5
NARROW_GLYPH_WIDTH = 3
NARROW_GLYPHS = frozenset({"I", "1"})

Cells = Tuple[Tuple[int, int], ...]


def _cells(*coords: int) -> Cells:
    return tuple(zip(coords[0::2], coords[1::2]))


GLYPHS: Mapping[str, Cells] = MappingProxyType(
    {
        "A": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 5, 1, 5, 2, 5, 3, 5, 4, 5, 5, 5, 6,
                    2, 7, 3, 7, 4, 7, 2, 4, 3, 4, 4, 4),
        "B": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 7, 3, 7, 4, 7, 2, 4, 3, 4,
                    4, 4, 2, 1, 3, 1, 4, 1, 5, 2, 5, 3, 5, 5, 5, 6),
        "C": _cells(1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 2, 7, 3, 7, 4, 7, 2, 1, 3, 1, 4, 1, 5, 2,
                    5, 6),
        "D": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 7, 3, 7, 4, 7, 2, 1, 3, 1,
                    4, 1, 5, 2, 5, 3, 5, 4, 5, 5, 5, 6),
        "E": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 7, 3, 7, 4, 7, 5, 7, 2, 1,
                    3, 1, 4, 1, 5, 1, 2, 4, 3, 4, 4, 4),
        "F": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 7, 3, 7, 4, 7, 5, 7, 2, 4,
                    3, 4, 4, 4),
        "G": _cells(1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 2, 7, 3, 7, 4, 7, 5, 6, 2, 1, 3, 1, 4, 1,
                    5, 2, 5, 3, 4, 3),
        "H": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 5, 1, 5, 2, 5, 3, 5, 4, 5, 5,
                    5, 6, 5, 7, 2, 4, 3, 4, 4, 4),
        "I": _cells(1, 1, 2, 1, 3, 1, 1, 7, 2, 7, 3, 7, 2, 2, 2, 3, 2, 4, 2, 5, 2, 6),
        "J": _cells(1, 2, 2, 1, 3, 1, 4, 2, 4, 3, 4, 4, 4, 5, 4, 6, 4, 7, 5, 7, 3, 7),
        "K": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 4, 3, 5, 4, 6, 5, 7, 3, 3,
                    4, 2, 4, 1),
        "L": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 1, 3, 1, 4, 1, 5, 1),
        "M": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 5, 1, 5, 2, 5, 3, 5, 4, 5, 5,
                    5, 6, 5, 7, 2, 6, 3, 5, 3, 4, 4, 6),
        "N": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 5, 1, 5, 2, 5, 3, 5, 4, 5, 5,
                    5, 6, 5, 7, 2, 5, 3, 4, 4, 3),
        "O": _cells(1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 5, 2, 5, 3, 5, 4, 5, 5, 5, 6, 2, 7, 3, 7,
                    4, 7, 2, 1, 3, 1, 4, 1),
        "P": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 7, 3, 7, 4, 7, 5, 6, 5, 5,
                    4, 4, 3, 4, 2, 4),
        "Q": _cells(1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 2, 7, 3, 7, 4, 7, 5, 6, 5, 5, 5, 4, 5, 3,
                    3, 3, 4, 2, 5, 1, 2, 1, 3, 1),
        "R": _cells(1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 2, 7, 3, 7, 4, 7, 5, 6, 5, 5,
                    4, 4, 3, 4, 2, 4, 3, 3, 4, 2, 5, 1),
        "S": _cells(1, 1, 2, 1, 3, 1, 4, 1, 5, 2, 5, 3, 4, 4, 3, 4, 2, 4, 1, 5, 1, 6, 2, 7,
                    3, 7, 4, 7, 5, 7),
        "T": _cells(3, 1, 3, 2, 3, 3, 3, 4, 3, 5, 3, 6, 3, 7, 2, 7, 1, 7, 4, 7, 5, 7),
        "U": _cells(2, 1, 3, 1, 4, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7, 5, 2, 5, 3, 5, 4,
                    5, 5, 5, 6, 5, 7),
        "V": _cells(1, 7, 1, 6, 1, 5, 1, 4, 2, 3, 2, 2, 3, 1, 4, 2, 4, 3, 5, 4, 5, 5, 5, 6,
                    5, 7),
        "W": _cells(1, 7, 1, 6, 1, 5, 1, 4, 1, 3, 1, 2, 2, 1, 3, 2, 3, 3, 3, 4, 4, 1, 5, 2,
                    5, 3, 5, 4, 5, 5, 5, 6, 5, 7),
        "X": _cells(1, 7, 1, 6, 2, 5, 3, 4, 4, 3, 5, 2, 5, 1, 1, 1, 1, 2, 2, 3, 4, 5, 5, 6,
                    5, 7),
        "Y": _cells(1, 7, 1, 6, 2, 5, 3, 4, 4, 5, 5, 6, 5, 7, 3, 1, 3, 2, 3, 3),
        "Z": _cells(1, 7, 2, 7, 3, 7, 4, 7, 5, 7, 5, 6, 4, 5, 3, 4, 2, 3, 1, 2, 1, 1, 2, 1,
                    3, 1, 4, 1, 5, 1),
        "0": _cells(1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 5, 2, 5, 3, 5, 4, 5, 5, 5, 6, 2, 7, 3, 7,
                    4, 7, 2, 1, 3, 1, 4, 1, 2, 3, 3, 4, 4, 5),
        "1": _cells(1, 6, 2, 7, 2, 6, 2, 5, 2, 4, 2, 3, 2, 2, 2, 1, 3, 1, 1, 1),
        "2": _cells(1, 6, 2, 7, 3, 7, 4, 7, 5, 6, 5, 5, 4, 4, 3, 3, 2, 2, 1, 1, 2, 1, 3, 1,
                    4, 1, 5, 1),
        "3": _cells(1, 7, 2, 7, 3, 7, 4, 7, 5, 7, 4, 6, 3, 5, 4, 4, 5, 3, 5, 2, 4, 1, 3, 1,
                    2, 1, 1, 2),
        "4": _cells(1, 3, 1, 4, 2, 5, 3, 6, 4, 7, 4, 6, 4, 5, 4, 4, 4, 3, 4, 2, 4, 1, 2, 3,
                    3, 3, 5, 3),
        "5": _cells(5, 7, 4, 7, 3, 7, 2, 7, 1, 7, 1, 6, 1, 5, 2, 5, 3, 5, 4, 5, 5, 4, 5, 3,
                    5, 2, 4, 1, 3, 1, 2, 1, 1, 2),
        "6": _cells(4, 7, 3, 7, 2, 6, 1, 5, 1, 4, 1, 3, 1, 2, 2, 4, 3, 4, 4, 4, 5, 3, 5, 2,
                    4, 1, 3, 1, 2, 1),
        "7": _cells(1, 7, 2, 7, 3, 7, 4, 7, 5, 7, 5, 6, 4, 5, 3, 4, 2, 3, 2, 2, 2, 1),
        "8": _cells(2, 7, 3, 7, 4, 7, 5, 6, 5, 5, 4, 4, 3, 4, 2, 4, 1, 5, 1, 6, 1, 3, 1, 2,
                    2, 1, 3, 1, 4, 1, 5, 2, 5, 3),
        "9": _cells(2, 7, 3, 7, 4, 7, 5, 6, 5, 5, 5, 4, 4, 4, 3, 4, 2, 4, 1, 5, 1, 6, 5, 3,
                    4, 2, 3, 1, 2, 1),
    }
)


class UnsupportedCharacterError(ValueError):
    """Raised for sign text characters that have no glyph."""


def glyph_cells(char: str) -> Cells:
    try:
        return GLYPHS[char]
    except KeyError:
        raise UnsupportedCharacterError(
            f"unsupported character {char!r}; signs support A-Z and 0-9"
        ) from None


def glyph_width(char: str) -> int:
    glyph_cells(char)
    if char in NARROW_GLYPHS:
        return NARROW_GLYPH_WIDTH
    return GLYPH_WIDTH


def text_width_blocks(text: str) -> int:
    """Blocks needed for the glyphs of ``text``, not counting spacing."""
    return sum(glyph_width(char) for char in text)
