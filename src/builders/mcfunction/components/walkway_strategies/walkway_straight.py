"""Straight walkway strategies: the tunnel, its end cap, and its removal."""

from __future__ import annotations

from typing import List, Tuple

from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import Box
from src.builders.mcfunction.spec.types import WalkwaySpec

AIR = "minecraft:air"
STONE = "minecraft:stone 4"
GLASS = "minecraft:glass"
FENCE = "minecraft:fence"
GLOWSTONE = "minecraft:glowstone"
SEA_LANTERN = "minecraft:sea_lantern"
CAP_GLASS = "minecraft:stained_glass 5"

NEAR_Z = -1
CHANDELIER_START_Z = -3
CHANDELIER_SPACING = 5

# (half width, y) rows of the arch, bottom to top.
CLEAR_PROFILE: Tuple[Tuple[int, int], ...] = (
    (8, 0),
    (8, 1),
    (7, 2),
    (7, 3),
    (6, 4),
    (5, 5),
    (4, 6),
    (2, 7),
    (2, 8),
)

# (x1, x2, material) stripes of the floor at y = -1.
FLOOR_STRIPES: Tuple[Tuple[int, int, str], ...] = (
    (0, 0, "minecraft:gold_block"),
    (-1, -1, GLOWSTONE),
    (1, 1, GLOWSTONE),
    (-2, -2, "minecraft:lapis_block"),
    (2, 2, "minecraft:lapis_block"),
    (-3, -3, "minecraft:redstone_block"),
    (3, 3, "minecraft:redstone_block"),
)
RAILS: Tuple[Tuple[int, int, str], ...] = (
    (-3, -3, "minecraft:golden_rail"),
    (3, 3, "minecraft:golden_rail"),
)
OUTER_FLOOR_STRIPES: Tuple[Tuple[int, int, str], ...] = (
    (-4, -4, "minecraft:lapis_block"),
    (4, 4, "minecraft:lapis_block"),
    (-5, -5, SEA_LANTERN),
    (5, 5, SEA_LANTERN),
    (-6, -8, STONE),
    (6, 8, STONE),
)

# (x1, y1, x2, y2, material) side walls and ceiling, working up both sides.
WALLS: Tuple[Tuple[int, int, int, int, str], ...] = (
    (-8, 0, -8, 1, GLASS),
    (8, 0, 8, 1, GLASS),
    (-7, 2, -7, 3, GLASS),
    (7, 2, 7, 3, GLASS),
    (-6, 4, -6, 4, STONE),
    (6, 4, 6, 4, STONE),
    (-5, 5, -5, 5, STONE),
    (5, 5, 5, 5, STONE),
    (-4, 6, -3, 6, STONE),
    (4, 6, 3, 6, STONE),
    (-2, 7, 2, 7, STONE),
)


def _run(x1: int, y1: int, x2: int, y2: int, far_z: int, material: str, name: str) -> Box:
    return Box(Point(x1, y1, NEAR_Z), Point(x2, y2, far_z), material=material, name=name)


def _unit(x: int, y: int, z: int, material: str, name: str) -> Box:
    return Box.at(Point(x, y, z), material=material, name=name)


def clear_profile_boxes(length: int) -> List[Box]:
    return [_run(-half, y, half, y, -length, AIR, f"clear_{y}") for half, y in CLEAR_PROFILE]


def chandelier_boxes(x: int, z: int) -> List[Box]:
    """Fence cross hanging from the ceiling with four glowstone lights below it."""
    return [
        _unit(x, 6, z, FENCE, "chandelier"),
        _unit(x, 5, z, FENCE, "chandelier"),
        _unit(x - 1, 5, z, FENCE, "chandelier"),
        _unit(x + 1, 5, z, FENCE, "chandelier"),
        _unit(x, 5, z - 1, FENCE, "chandelier"),
        _unit(x, 5, z + 1, FENCE, "chandelier"),
        _unit(x - 1, 4, z, GLOWSTONE, "chandelier_light"),
        _unit(x + 1, 4, z, GLOWSTONE, "chandelier_light"),
        _unit(x, 4, z - 1, GLOWSTONE, "chandelier_light"),
        _unit(x, 4, z + 1, GLOWSTONE, "chandelier_light"),
    ]


def chandelier_positions(length: int) -> List[int]:
    return list(range(CHANDELIER_START_Z, -length, -CHANDELIER_SPACING))


def build_walkway_straight_strategy(spec: WalkwaySpec) -> List[Box]:
    far_z = -spec.length
    boxes = clear_profile_boxes(spec.length)
    boxes.extend(_run(x1, -1, x2, -1, far_z, material, "floor") for x1, x2, material in FLOOR_STRIPES)
    boxes.extend(_run(x1, 0, x2, 0, far_z, material, "rail") for x1, x2, material in RAILS)
    boxes.extend(_run(x1, -1, x2, -1, far_z, material, "floor") for x1, x2, material in OUTER_FLOOR_STRIPES)
    boxes.extend(_run(x1, y1, x2, y2, far_z, material, "wall") for x1, y1, x2, y2, material in WALLS)
    for z in chandelier_positions(spec.length):
        boxes.extend(chandelier_boxes(0, z))
    # Lantern roof so the walkway is visible from the air.
    boxes.append(_run(-2, 8, 2, 8, far_z, SEA_LANTERN, "roof"))
    return boxes


def build_walkway_cap_strategy(spec: WalkwaySpec) -> List[Box]:
    del spec
    boxes = [_run(-8, -1, 8, -1, NEAR_Z, CAP_GLASS, "cap_-1")]
    boxes.extend(_run(-half, y, half, y, NEAR_Z, CAP_GLASS, f"cap_{y}") for half, y in CLEAR_PROFILE)
    return boxes


def build_walkway_straight_removal_strategy(spec: WalkwaySpec) -> List[Box]:
    boxes = [_run(-8, -1, 8, -1, -spec.length, spec.filler, "ground")]
    boxes.extend(clear_profile_boxes(spec.length))
    return boxes
