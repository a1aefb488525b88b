"""Letter sign component (7 block tall glyphs on a flat backing plane)."""

from __future__ import annotations

from typing import List, Optional

from src.builders.mcfunction.diagnostics import Severity, emit_simple
from src.builders.mcfunction.geom_utils import boxes_union_bbox
from src.builders.mcfunction.glyphs import glyph_cells, glyph_width
from src.builders.mcfunction.layout import CHAR_SPACING, SignLayout, compute_sign_layout
from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import Box, BuildPlan
from src.builders.mcfunction.spec.types import BuildContext, SignSpec

SIGN_Z = -2
AIR = "minecraft:air"


def _plane_box(x1: int, y1: int, x2: int, y2: int, material: str, name: str) -> Box:
    return Box(Point(x1, y1, SIGN_Z), Point(x2, y2, SIGN_Z), material=material, name=name)


def _frame_boxes(layout: SignLayout, back: Optional[str], edge: Optional[str]) -> List[Box]:
    bw, bh = layout.max_x, layout.max_y
    boxes: List[Box] = []
    if back is not None:
        boxes.append(_plane_box(0, 0, bw, bh, back, "back"))
    if edge is not None:
        boxes.append(_plane_box(0, 0, bw, 0, edge, "edge_lower"))
        boxes.append(_plane_box(0, bh, bw, bh, edge, "edge_upper"))
        boxes.append(_plane_box(0, 0, 0, bh, edge, "edge_left"))
        boxes.append(_plane_box(bw, 0, bw, bh, edge, "edge_right"))
    return boxes


def _text_boxes(layout: SignLayout, material: str) -> List[Box]:
    boxes: List[Box] = []
    for line_no, text in enumerate(layout.lines):
        xs = layout.line_starts_x[line_no]
        ys = layout.line_bottoms_y[line_no]
        for char in text:
            for cx, cy in glyph_cells(char):
                x = xs + cx - 1
                y = ys + cy - 1
                boxes.append(_plane_box(x, y, x, y, material, f"glyph_{line_no}_{char}"))
            xs += glyph_width(char) + CHAR_SPACING
    return boxes


def build_sign(plan: BuildPlan, spec: SignSpec, ctx: BuildContext) -> None:
    layout = compute_sign_layout(spec.lines)
    # Glyphs are resolved before anything is added so a bad character leaves the plan untouched.
    text = _text_boxes(layout, spec.text)
    frame = _frame_boxes(layout, spec.back, spec.edge)
    plan.extend(frame)
    plan.extend(text)
    _log_sign_build(ctx, plan, frame + text, layout, "create")


def build_sign_removal(plan: BuildPlan, spec: SignSpec, ctx: BuildContext) -> None:
    layout = compute_sign_layout(spec.lines)
    if spec.back is None and spec.edge is None:
        # Frameless: only the glyph cells were ever placed.
        boxes = _text_boxes(layout, AIR)
    else:
        boxes = [_plane_box(0, 0, layout.max_x, layout.max_y, AIR, "back")]
    plan.extend(boxes)
    _log_sign_build(ctx, plan, boxes, layout, "remove")


def _log_sign_build(ctx: BuildContext, plan: BuildPlan, boxes: list, layout: SignLayout, variant: str) -> None:
    bbox = boxes_union_bbox(boxes)
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="sign",
        code="SIGN_BUILD",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        reason="component geometry emitted",
        payload={
            "variant": variant,
            "lines": len(layout.lines),
            "width": layout.width,
            "height": layout.height,
            "boxes": len(boxes),
            "bbox_min": list(bbox["min"]),
            "bbox_max": list(bbox["max"]),
        },
    )
