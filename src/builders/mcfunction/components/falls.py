"""Water and lava falls.

A fall is a sheet of flowing liquid spilling from a ledge ``height`` blocks up
into a basin at ground level. Parts are authored facing north around an
origin two blocks in front of the player and always emitted in this order:
basin, left side wall, right side wall, back wall, bottom ledge, front wall,
heater, heat isolation, falling sheet.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from src.builders.mcfunction.diagnostics import Severity, emit_simple
from src.builders.mcfunction.geom_utils import boxes_union_bbox
from src.builders.mcfunction.orientation import Facing, Point
from src.builders.mcfunction.plan_types import DEFAULT_MATERIAL, Box, BuildPlan
from src.builders.mcfunction.spec.types import BuildContext, FallsSpec

FALLS_ORIGIN = Point(0, 0, -2)
DEFAULT_WIDTH = 102
DEFAULT_HEIGHT = 30

WALL_MATERIAL = "minecraft:stone 4"
HEATER_MATERIAL = "minecraft:flowing_lava"
ISOLATION_MATERIAL = "minecraft:glass"
FLOW_MATERIALS: Dict[str, str] = {
    "water": "minecraft:flowing_water",
    "lava": "minecraft:flowing_lava",
}

# Clearing footprint depth behind the origin (z from origin.z to origin.z - 4).
FOOTPRINT_DEPTH = 5

RC_NORTH_ORIGIN = Point(2, 0, -2)
RC_SOUTH_ORIGIN = Point(2, 0, 2)
RC_SOUTH_FACING = Facing.south_refl
RC_POWER_MATERIAL = "minecraft:redstone_block"
RC_RAIL_MATERIAL = "minecraft:golden_rail"


def flow_material(kind: str) -> str:
    try:
        return FLOW_MATERIALS[kind]
    except KeyError:
        raise ValueError(f"unknown fall kind {kind!r}; expected one of {sorted(FLOW_MATERIALS)}") from None


def _box(x1, y1, z1, x2, y2, z2, material: str, name: str) -> Box:
    return Box(Point(x1, y1, z1), Point(x2, y2, z2), material=material, name=name)


def basin(o: Point, spec: FallsSpec) -> List[Box]:
    right = o.x + spec.width - 1
    return [
        _box(o.x, o.y, o.z, right, o.y, o.z, DEFAULT_MATERIAL, "basin_front"),
        _box(o.x, o.y, o.z - 1, o.x, o.y, o.z - 1, DEFAULT_MATERIAL, "basin_left"),
        _box(right, o.y, o.z - 1, right, o.y, o.z - 1, DEFAULT_MATERIAL, "basin_right"),
    ]


def side_wall(o: Point, spec: FallsSpec, side: str) -> List[Box]:
    if side == "left":
        x = o.x
    elif side == "right":
        x = o.x + spec.width - 1
    else:
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")
    top = o.y + spec.height
    return [
        _box(x, o.y, o.z - 2, x, top, o.z - 2, WALL_MATERIAL, f"side_{side}"),
        _box(x, top - 3, o.z - 4, x, top, o.z - 3, WALL_MATERIAL, f"side_{side}_ledge"),
    ]


def back_wall(o: Point, spec: FallsSpec) -> List[Box]:
    top = o.y + spec.height
    return [_box(o.x, top, o.z - 4, o.x + spec.width - 2, top - 3, o.z - 4, WALL_MATERIAL, "back_wall")]


def bottom(o: Point, spec: FallsSpec) -> List[Box]:
    y = o.y + spec.height - 3
    return [_box(o.x + 1, y, o.z - 3, o.x + spec.width - 2, y, o.z - 3, WALL_MATERIAL, "bottom")]


def front_wall(o: Point, spec: FallsSpec) -> List[Box]:
    return [
        _box(
            o.x + 1, o.y, o.z - 2,
            o.x + spec.width - 2, o.y + spec.height - 1, o.z - 2,
            DEFAULT_MATERIAL, "front_wall",
        )
    ]


def heater(o: Point, spec: FallsSpec) -> List[Box]:
    # Lava even under a water fall so the sheet never freezes.
    y = o.y + spec.height - 2
    return [_box(o.x + 1, y, o.z - 3, o.x + spec.width - 2, y, o.z - 3, HEATER_MATERIAL, "heater")]


def heat_isolation(o: Point, spec: FallsSpec) -> List[Box]:
    y = o.y + spec.height - 1
    return [_box(o.x + 1, y, o.z - 3, o.x + spec.width - 2, y, o.z - 3, ISOLATION_MATERIAL, "heat_isolation")]


def falling_sheet(o: Point, spec: FallsSpec) -> List[Box]:
    y = o.y + spec.height
    material = flow_material(spec.kind)
    return [_box(o.x + 1, y, o.z - 3, o.x + spec.width - 2, y, o.z - 3, material, "falls")]


PARTS: List[Callable[[Point, FallsSpec], List[Box]]] = [
    basin,
    lambda o, spec: side_wall(o, spec, "left"),
    lambda o, spec: side_wall(o, spec, "right"),
    back_wall,
    bottom,
    front_wall,
    heater,
    heat_isolation,
    falling_sheet,
]


def falls_boxes(origin: Point, spec: FallsSpec) -> List[Box]:
    boxes: List[Box] = []
    for part in PARTS:
        boxes.extend(part(origin, spec))
    return boxes


def clearing_boxes(origin: Point, spec: FallsSpec) -> List[Box]:
    return [
        _box(
            origin.x, origin.y, origin.z,
            origin.x + spec.width - 1, origin.y + spec.height, origin.z - FOOTPRINT_DEPTH + 1,
            "minecraft:air", "clear",
        )
    ]


def ground_boxes(origin: Point, spec: FallsSpec) -> List[Box]:
    return [
        _box(
            origin.x, origin.y, origin.z,
            origin.x + spec.width - 1, origin.y, origin.z - FOOTPRINT_DEPTH + 1,
            spec.filler, "ground",
        )
    ]


def build_falls(plan: BuildPlan, spec: FallsSpec, ctx: BuildContext) -> None:
    boxes = falls_boxes(FALLS_ORIGIN, spec)
    plan.extend(boxes)
    _log_falls_build(ctx, plan, boxes, spec, "create")


def build_falls_clearing(plan: BuildPlan, spec: FallsSpec, ctx: BuildContext) -> None:
    boxes = clearing_boxes(FALLS_ORIGIN, spec)
    plan.extend(boxes)
    _log_falls_build(ctx, plan, boxes, spec, "clear")


def build_falls_removal(plan: BuildPlan, spec: FallsSpec, ctx: BuildContext) -> None:
    boxes = clearing_boxes(FALLS_ORIGIN, spec) + ground_boxes(FALLS_ORIGIN, spec)
    plan.extend(boxes)
    _log_falls_build(ctx, plan, boxes, spec, "remove")


def build_roller_coaster_falls(plan: BuildPlan, spec: FallsSpec, ctx: BuildContext) -> None:
    """Two water falls facing each other across a powered rail line.

    The north fall is authored as usual. The south fall is authored at
    ``RC_SOUTH_ORIGIN`` and mirrored here, so its basin front lands on the
    north fall's basin front. That shared row becomes redstone with golden
    rail on top. The builder orients the whole plan north, which leaves
    these coordinates unchanged.
    """
    north = falls_boxes(RC_NORTH_ORIGIN, spec)
    south = [box.orient(RC_SOUTH_FACING) for box in falls_boxes(RC_SOUTH_ORIGIN, spec)]

    rail_z = RC_SOUTH_ORIGIN.z - 4
    x1 = RC_SOUTH_ORIGIN.x
    x2 = RC_SOUTH_ORIGIN.x + spec.width - 1
    y = RC_SOUTH_ORIGIN.y
    track = [
        _box(x1, y, rail_z, x2, y, rail_z, RC_POWER_MATERIAL, "rc_power"),
        _box(x1, y + 1, rail_z, x2, y + 1, rail_z, RC_RAIL_MATERIAL, "rc_rail"),
    ]

    boxes = north + south + track
    plan.extend(boxes)
    _log_falls_build(ctx, plan, boxes, spec, "roller_coaster")


def _log_falls_build(ctx: BuildContext, plan: BuildPlan, boxes: list, spec: FallsSpec, variant: str) -> None:
    bbox = boxes_union_bbox(boxes)
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="falls",
        code="FALLS_BUILD",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        reason="component geometry emitted",
        payload={
            "variant": variant,
            "kind": spec.kind,
            "width": spec.width,
            "height": spec.height,
            "boxes": len(boxes),
            "bbox_min": list(bbox["min"]),
            "bbox_max": list(bbox["max"]),
        },
    )
