"""Shared integer geometry and material helpers for mcfunction builder modules."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from src.builders.mcfunction.plan_types import Box

NAMESPACE = "minecraft"
EMPTY_MATERIAL_NAMES = frozenset({"", "none", "nothing"})

BBox = Dict[str, Tuple[int, int, int]]


def block(name: Optional[str]) -> Optional[str]:
    """Return the full material identifier, or None for the empty sentinel."""
    if name is None:
        return None
    text = str(name).strip()
    if text.lower() in EMPTY_MATERIAL_NAMES:
        return None
    block_id = text.split(" ", 1)[0]
    if ":" in block_id:
        return text
    return f"{NAMESPACE}:{text}"


def material_label(material: Optional[str]) -> str:
    """Short block name for file names and summaries (``minecraft:stone 4`` -> ``stone``)."""
    if material is None:
        return "none"
    block_id = material.split(" ", 1)[0]
    return block_id.split(":", 1)[-1]


def centered_span(width: int) -> Tuple[int, int]:
    x1 = -(width // 2)
    x2 = -x1 - 1
    if width % 2 != 0:
        x2 += 1
    return x1, x2


def box_bbox(box: Box) -> BBox:
    c1 = box.corner1
    c2 = box.corner2
    return {
        "min": (min(c1.x, c2.x), min(c1.y, c2.y), min(c1.z, c2.z)),
        "max": (max(c1.x, c2.x), max(c1.y, c2.y), max(c1.z, c2.z)),
    }


def boxes_union_bbox(boxes: Iterable[Box]) -> BBox:
    min_x = min_y = min_z = None
    max_x = max_y = max_z = None
    for box in boxes:
        bbox = box_bbox(box)
        bmin = bbox["min"]
        bmax = bbox["max"]
        if min_x is None:
            min_x, min_y, min_z = bmin
            max_x, max_y, max_z = bmax
            continue
        min_x = min(min_x, bmin[0])
        min_y = min(min_y, bmin[1])
        min_z = min(min_z, bmin[2])
        max_x = max(max_x, bmax[0])
        max_y = max(max_y, bmax[1])
        max_z = max(max_z, bmax[2])
    if min_x is None:
        return {
            "min": (0, 0, 0),
            "max": (0, 0, 0),
        }
    return {
        "min": (min_x, min_y, min_z),
        "max": (max_x, max_y, max_z),
    }


def bbox_contains(outer: BBox, inner: BBox) -> bool:
    return all(
        outer["min"][axis] <= inner["min"][axis] and inner["max"][axis] <= outer["max"][axis]
        for axis in range(3)
    )
