"""Diagonal walkway strategies.

The diagonal runs from the player toward -X/-Z in chunks of ten blocks. Each
cross-section cell is laid as a ten cell staircase ``(x - n, z - n)`` and most
cells are mirrored across the x = z diagonal, which gives the walkway its
second half. Floor cells clear the column above them to air first.
"""

from __future__ import annotations

from typing import List, Tuple

from src.builders.mcfunction.components.walkway_strategies.walkway_straight import (
    AIR,
    GLASS,
    SEA_LANTERN,
    STONE,
    chandelier_boxes,
)
from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import Box
from src.builders.mcfunction.spec.types import AngledWalkwaySpec

CHUNK_BLOCKS = 10
FLOOR_Y = -1
CHANDELIER_OFFSETS = (-3, -8)

RAIL = "minecraft:rail"
GOLDEN_RAIL = "minecraft:golden_rail"
REDSTONE = "minecraft:redstone_block"

# (dx, y, dz, clear height, material, mirrored) relative to the chunk corner.
PATHS: Tuple[Tuple[int, int, int, int, str, bool], ...] = (
    (-1, -1, -1, 8, "minecraft:gold_block", False),
    (-1, -1, -2, 8, "minecraft:gold_block", True),
    (0, -1, -2, 8, "minecraft:glowstone", True),
    (0, -1, -3, 8, "minecraft:glowstone", True),
    (1, -1, -3, 8, "minecraft:lapis_block", True),
    (1, -1, -4, 8, "minecraft:lapis_block", True),
    (2, -1, -4, 6, REDSTONE, True),
    (2, -1, -5, 6, REDSTONE, True),
    (3, -1, -5, 6, "minecraft:lapis_block", True),
    (3, -1, -6, 6, "minecraft:lapis_block", True),
    (4, -1, -6, 5, SEA_LANTERN, True),
    (4, -1, -7, 5, SEA_LANTERN, True),
    (5, -1, -7, 4, STONE, True),
    (5, -1, -8, 4, STONE, True),
    (6, -1, -8, 3, STONE, True),
    (6, -1, -9, 3, STONE, True),
    (7, -1, -9, 1, STONE, True),
    (7, 0, -9, 0, GLASS, True),
    (7, 1, -9, 0, GLASS, True),
    (6, 2, -8, 0, GLASS, True),
    (6, 2, -9, 0, GLASS, True),
    (6, 3, -8, 0, GLASS, True),
    (6, 3, -9, 0, GLASS, True),
    (5, 4, -7, 0, STONE, True),
    (5, 4, -8, 0, STONE, True),
    (4, 5, -6, 0, STONE, True),
    (4, 5, -7, 0, STONE, True),
    (3, 6, -5, 0, STONE, True),
    (3, 6, -6, 0, STONE, True),
    (2, 6, -4, 0, STONE, True),
    (2, 6, -5, 0, STONE, True),
    (1, 7, -3, 0, STONE, True),
    (1, 7, -4, 0, STONE, True),
    (0, 7, -2, 0, STONE, True),
    (0, 7, -3, 0, STONE, True),
    (-1, 7, -2, 0, STONE, True),
    (-1, 7, -1, 0, STONE, False),
    (1, 8, -3, 0, SEA_LANTERN, True),
    (1, 8, -4, 0, SEA_LANTERN, True),
    (0, 8, -2, 0, SEA_LANTERN, True),
    (0, 8, -3, 0, SEA_LANTERN, True),
    (-1, 8, -2, 0, SEA_LANTERN, True),
    (-1, 8, -1, 0, SEA_LANTERN, False),
    (2, 0, -4, 6, RAIL, True),
    (2, 0, -5, 6, RAIL, True),
)

# (dx, y, dz, material) rail junction where consecutive chunks meet.
JUNCTION: Tuple[Tuple[int, int, int, str], ...] = (
    (-7, -1, -12, REDSTONE),
    (-6, 0, -13, AIR),
    (-6, 0, -12, GOLDEN_RAIL),
    (-7, 0, -12, RAIL),
    (-7, 0, -13, GOLDEN_RAIL),
)


def chunk_origin(chunk: int) -> int:
    return -chunk * CHUNK_BLOCKS


def _cell_column(x: int, y: int, z: int, clear_height: int, material: str) -> List[Box]:
    boxes: List[Box] = []
    if y == FLOOR_Y:
        boxes.extend(Box.at(Point(x, cy, z), material=AIR, name="clear") for cy in range(clear_height + 1))
    boxes.append(Box.at(Point(x, y, z), material=material, name="path"))
    return boxes


def path_boxes(xs: int, y: int, zs: int, clear_height: int, material: str, mirrored: bool) -> List[Box]:
    boxes: List[Box] = []
    for n in range(CHUNK_BLOCKS):
        x = xs - n
        z = zs - n
        boxes.extend(_cell_column(x, y, z, clear_height, material))
        if mirrored:
            boxes.extend(_cell_column(z, y, x, clear_height, material))
    return boxes


def chunk_boxes(chunk: int) -> List[Box]:
    t = chunk_origin(chunk)
    boxes: List[Box] = []
    for dx, y, dz, clear_height, material, mirrored in PATHS:
        boxes.extend(path_boxes(t + dx, y, t + dz, clear_height, material, mirrored))
    for dx, y, dz, material in JUNCTION:
        boxes.append(Box.at(Point(t + dx, y, t + dz), material=material, name="junction"))
    for dx, y, dz, material in JUNCTION:
        boxes.append(Box.at(Point(t + dz, y, t + dx), material=material, name="junction"))
    for offset in CHANDELIER_OFFSETS:
        boxes.extend(chandelier_boxes(t + offset, t + offset))
    return boxes


def build_walkway_angled_strategy(spec: AngledWalkwaySpec) -> List[Box]:
    boxes: List[Box] = []
    for chunk in range(spec.chunks):
        boxes.extend(chunk_boxes(chunk))
    return boxes


def build_walkway_angled_removal_strategy(spec: AngledWalkwaySpec) -> List[Box]:
    removal: List[Box] = []
    for box in build_walkway_angled_strategy(spec):
        material = spec.filler if box.corner1.y == FLOOR_Y else AIR
        removal.append(box.with_material(material))
    return removal
