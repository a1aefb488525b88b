"""Layout computation for letter signs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from src.builders.mcfunction.glyphs import GLYPH_HEIGHT, text_width_blocks

MAX_SIGN_LINES = 3
BORDER = 2
LINE_SPACING = 1
CHAR_SPACING = 1


@dataclass(frozen=True)
class SignLayout:
    lines: Tuple[str, ...]
    line_widths: Tuple[int, ...]
    line_starts_x: Tuple[int, ...]
    line_bottoms_y: Tuple[int, ...]
    width: int
    height: int

    @property
    def max_x(self) -> int:
        return self.width - 1

    @property
    def max_y(self) -> int:
        return self.height - 1


def _present_lines(lines: Sequence[Optional[str]]) -> Tuple[str, ...]:
    present = tuple(line for line in lines if line)
    if not present:
        raise ValueError("sign needs at least one line of text")
    if len(present) > MAX_SIGN_LINES:
        raise ValueError(f"sign supports at most {MAX_SIGN_LINES} lines, got {len(present)}")
    return present


def line_width(text: str) -> int:
    # glyphs + one block between characters + border on both sides
    return text_width_blocks(text) + (len(text) - 1) * CHAR_SPACING + 2 * BORDER


def compute_sign_layout(lines: Sequence[Optional[str]]) -> SignLayout:
    present = _present_lines(lines)
    widths = tuple(line_width(text) for text in present)
    width = max(widths)
    count = len(present)
    height = GLYPH_HEIGHT * count + (count - 1) * LINE_SPACING + 2 * BORDER

    starts = tuple(BORDER + (width - w) // 2 for w in widths)
    first_bottom = (height - 1) - BORDER - GLYPH_HEIGHT + 1
    bottoms = tuple(first_bottom - i * (GLYPH_HEIGHT + LINE_SPACING) for i in range(count))

    return SignLayout(
        lines=present,
        line_widths=widths,
        line_starts_x=starts,
        line_bottoms_y=bottoms,
        width=width,
        height=height,
    )
