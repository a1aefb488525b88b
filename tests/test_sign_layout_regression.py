from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.builders.mcfunction.components.sign import build_sign, build_sign_removal
from src.builders.mcfunction.geom_utils import bbox_contains, boxes_union_bbox
from src.builders.mcfunction.glyphs import GLYPHS, UnsupportedCharacterError, glyph_cells, glyph_width
from src.builders.mcfunction.layout import compute_sign_layout, line_width
from src.builders.mcfunction.orientation import Facing, Point
from src.builders.mcfunction.plan_types import BuildPlan
from src.builders.mcfunction.spec.types import BuildContext, SignSpec

GOLD = "minecraft:gold_block"
LAPIS = "minecraft:lapis_block"


def _spec(*lines, back=LAPIS, edge=GOLD, text=GOLD) -> SignSpec:
    padded = tuple(lines) + (None,) * (3 - len(lines))
    return SignSpec(index=0, lines=padded, back=back, edge=edge, text=text)


def _build(spec: SignSpec, removal: bool = False) -> BuildPlan:
    plan = BuildPlan(function_name="s_N_0.mcfunction", subdir="Sign7")
    if removal:
        build_sign_removal(plan, spec, BuildContext())
    else:
        build_sign(plan, spec, BuildContext())
    return plan


def test_alphabet_coverage() -> None:
    expected = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
    assert set(GLYPHS) == expected
    for char, cells in GLYPHS.items():
        width = glyph_width(char)
        assert len(set(cells)) == len(cells), f"duplicate cells in {char!r}"
        for cx, cy in cells:
            assert 1 <= cx <= width
            assert 1 <= cy <= 7


def test_narrow_glyphs() -> None:
    assert glyph_width("I") == 3
    assert glyph_width("1") == 3
    assert glyph_width("A") == 5


def test_line_width_values() -> None:
    assert line_width("A") == 9
    assert line_width("I") == 7
    assert line_width("AB") == 15
    assert line_width("HI") == 13


def test_single_line_layout() -> None:
    layout = compute_sign_layout(["HI", None, None])
    assert layout.lines == ("HI",)
    assert layout.width == 13
    assert layout.height == 11
    assert layout.line_starts_x == (2,)
    assert layout.line_bottoms_y == (2,)


def test_two_line_layout_centers_shorter_line() -> None:
    layout = compute_sign_layout(["AB", "I"])
    assert layout.width == 15
    assert layout.height == 19
    assert layout.line_starts_x == (2, 6)
    assert layout.line_bottoms_y == (10, 2)


def test_absent_middle_line_is_compacted() -> None:
    layout = compute_sign_layout(["A", None, "B"])
    assert layout.lines == ("A", "B")
    assert layout.height == 19


def test_width_is_monotonic_in_text() -> None:
    text = "CASTLE1WALL"
    widths = [compute_sign_layout([text[: n + 1]]).width for n in range(len(text))]
    assert widths == sorted(widths)
    assert len(set(widths)) == len(widths)


def test_unsupported_characters_are_rejected() -> None:
    with pytest.raises(UnsupportedCharacterError):
        glyph_cells("a")
    with pytest.raises(UnsupportedCharacterError):
        compute_sign_layout(["HELLO WORLD"])
    with pytest.raises(ValueError):
        compute_sign_layout([None, None, None])


def test_bad_character_leaves_plan_untouched() -> None:
    plan = BuildPlan(function_name="s_N_0.mcfunction")
    with pytest.raises(UnsupportedCharacterError):
        build_sign(plan, _spec("OK?"), BuildContext())
    assert plan.shapes == []


def test_single_glyph_sign_geometry() -> None:
    plan = _build(_spec("I"))
    boxes = list(plan.boxes())
    assert len(boxes) == 5 + len(GLYPHS["I"])

    back = boxes[0]
    assert back.name == "back"
    assert back.material == LAPIS
    assert (back.corner1, back.corner2) == (Point(0, 0, -2), Point(6, 10, -2))
    assert [b.name for b in boxes[1:5]] == ["edge_lower", "edge_upper", "edge_left", "edge_right"]
    assert all(b.material == GOLD for b in boxes[1:5])

    # Glyph cell (1, 1) lands at the text origin (BORDER, bottom line).
    first = boxes[5]
    assert first.corner1 == first.corner2 == Point(2, 2, -2)
    assert all(b.corner1.z == -2 for b in boxes)


def test_empty_frame_materials_emit_text_only() -> None:
    plan = _build(_spec("I", back=None, edge=None))
    boxes = list(plan.boxes())
    assert len(boxes) == len(GLYPHS["I"])
    assert {b.material for b in boxes} == {GOLD}


def test_text_stays_inside_backing() -> None:
    spec = _spec("WELCOME", "TO", "CASTLE1")
    plan = _build(spec)
    layout = compute_sign_layout(spec.lines)
    for box in plan.boxes():
        assert 0 <= box.corner1.x <= layout.max_x
        assert 0 <= box.corner1.y <= layout.max_y


@pytest.mark.parametrize("facing", list(Facing))
@pytest.mark.parametrize(
    "frame",
    [
        {"back": LAPIS, "edge": GOLD},
        {"back": LAPIS, "edge": None},
        {"back": None, "edge": GOLD},
        {"back": None, "edge": None},
    ],
)
def test_removal_stays_inside_creation(facing, frame) -> None:
    spec = _spec("NORTH", "GATE", **frame)
    created = boxes_union_bbox(_build(spec).orient(facing).boxes())
    removal_boxes = list(_build(spec, removal=True).orient(facing).boxes())

    assert {box.material for box in removal_boxes} == {"minecraft:air"}
    assert bbox_contains(created, boxes_union_bbox(removal_boxes))
    assert boxes_union_bbox(removal_boxes) == created


def test_frameless_removal_clears_only_text_cells() -> None:
    spec = _spec("HI", back=None, edge=None)
    created = [(box.corner1, box.corner2) for box in _build(spec).boxes()]
    removal_boxes = list(_build(spec, removal=True).boxes())

    assert [(box.corner1, box.corner2) for box in removal_boxes] == created
    assert boxes_union_bbox(removal_boxes) == {"min": (2, 2, -2), "max": (10, 8, -2)}


def test_framed_removal_is_one_air_plane() -> None:
    removal_boxes = list(_build(_spec("I"), removal=True).boxes())
    assert len(removal_boxes) == 1
    assert (removal_boxes[0].corner1, removal_boxes[0].corner2) == (Point(0, 0, -2), Point(6, 10, -2))
