"""Castle wall ("M-wall") component.

The wall is built from a two column wide construction unit that is copied
along +X until the requested width is reached. Depth runs along -Z: a brick
course on the near and far faces, wood posts three blocks inside each face,
and a gold block with a torch on top of every other post.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from src.builders.mcfunction.diagnostics import Severity, emit_simple
from src.builders.mcfunction.geom_utils import boxes_union_bbox
from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import Box, BuildPlan
from src.builders.mcfunction.spec.types import BuildContext, MWallSpec

CONSTRUCTION_UNIT_WIDTH = 2
FACE_INSET = 3

GOLD = "minecraft:gold_block"
TORCH = "minecraft:torch"
AIR = "minecraft:air"


@dataclass(frozen=True)
class WallFaces:
    near_brick: int
    far_brick: int
    near_wood: int
    far_wood: int


def unit_count(width: int) -> int:
    return width // CONSTRUCTION_UNIT_WIDTH


def replica_offsets(width: int) -> List[int]:
    return [k * CONSTRUCTION_UNIT_WIDTH for k in range(unit_count(width))]


def wall_faces(depth: int) -> WallFaces:
    total_depth = depth + 2 * FACE_INSET
    near_brick = -2
    near_wood = near_brick - 1
    return WallFaces(
        near_brick=near_brick,
        far_brick=near_brick - total_depth + 1,
        near_wood=near_wood,
        far_wood=near_wood - FACE_INSET - depth,
    )


def _replicate(
    plan: BuildPlan,
    corner1: Point,
    corner2: Point,
    material: str,
    width: int,
    name: str,
    out: list,
) -> None:
    for k, dx in enumerate(replica_offsets(width)):
        box = Box(corner1.offset(dx=dx), corner2.offset(dx=dx), material=material, name=f"{name}_{k}")
        plan.add(box)
        out.append(box)


def _envelope(spec: MWallSpec, faces: WallFaces):
    return Point(0, 0, faces.near_brick), Point(1, spec.height - 1, faces.far_brick)


def build_mwall(plan: BuildPlan, spec: MWallSpec, ctx: BuildContext) -> None:
    faces = wall_faces(spec.depth)
    h = spec.height - 2
    nb, fb = faces.near_brick, faces.far_brick
    nw, fw = faces.near_wood, faces.far_wood
    wood, brick = spec.wood, spec.brick
    boxes: list = []

    def add(x1, y1, z1, x2, y2, z2, material, name):
        _replicate(plan, Point(x1, y1, z1), Point(x2, y2, z2), material, spec.width, name, boxes)

    env1, env2 = _envelope(spec, faces)
    _replicate(plan, env1, env2, AIR, spec.width, "clear", boxes)

    add(0, 0, nw, 1, 0, nw, wood, "wood_low_near")
    add(0, 0, fw, 1, 0, fw, wood, "wood_low_far")

    add(0, 1, nb, 0, 1, fb, brick, "brick_low_outer")
    add(1, 1, nb - 2, 1, 1, fb + 2, brick, "brick_low_inner")

    add(1, 1, nw, 1, h - 2, nw, wood, "post_near")
    add(1, 1, fw, 1, h - 2, fw, wood, "post_far")

    add(0, 2, nb, 0, h - 3, nb, brick, "column_near")
    add(0, 2, fb, 0, h - 3, fb, brick, "column_far")

    add(0, 2, nb - 2, 1, h - 3, nb - 2, brick, "course_near")
    add(0, 2, fb + 2, 1, h - 3, fb + 2, brick, "course_far")

    add(0, h - 2, nb, 0, h - 2, fb, brick, "brick_high_outer")
    add(1, h - 2, nb - 2, 1, h - 2, fb + 2, brick, "brick_high_inner")

    add(0, h - 1, nw, 1, h - 1, nw, wood, "wood_top_near")
    add(0, h - 1, fw, 1, h - 1, fw, wood, "wood_top_far")

    add(0, h, nw, 0, h, nw, GOLD, "gold_near")
    add(0, h, fw, 0, h, fw, GOLD, "gold_far")
    add(0, h + 1, nw, 0, h + 1, nw, TORCH, "torch_near")
    add(0, h + 1, fw, 0, h + 1, fw, TORCH, "torch_far")

    _log_wall_build(ctx, plan, boxes, spec, "create")


def build_mwall_removal(plan: BuildPlan, spec: MWallSpec, ctx: BuildContext) -> None:
    faces = wall_faces(spec.depth)
    corner1, corner2 = _envelope(spec, faces)
    boxes: list = []
    _replicate(plan, corner1, corner2, AIR, spec.width, "clear", boxes)
    _log_wall_build(ctx, plan, boxes, spec, "remove")


def _log_wall_build(ctx: BuildContext, plan: BuildPlan, boxes: list, spec: MWallSpec, variant: str) -> None:
    bbox = boxes_union_bbox(boxes)
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="mwall",
        code="MWALL_BUILD",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        reason="component geometry emitted",
        payload={
            "variant": variant,
            "units": unit_count(spec.width),
            "boxes": len(boxes),
            "bbox_min": list(bbox["min"]),
            "bbox_max": list(bbox["max"]),
        },
    )
