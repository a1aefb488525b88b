"""Integer point type and the shared eight-way facing transforms.

Structures are authored once, facing north: the player stands at the origin,
the structure starts a couple of blocks in front (negative Z) and runs along
positive X. Every other facing is reached by remapping corner coordinates with
one of the integer matrices below. Y is never touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Tuple


@dataclass(frozen=True)
class Point:
    """Integer block coordinate relative to the command's execution point."""

    x: int = 0
    y: int = 0
    z: int = 0

    def offset(self, dx: int = 0, dy: int = 0, dz: int = 0) -> "Point":
        return Point(self.x + dx, self.y + dy, self.z + dz)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)


class Facing(str, Enum):
    north = "north"
    north_refl = "north_refl"
    east = "east"
    east_refl = "east_refl"
    south = "south"
    south_refl = "south_refl"
    west = "west"
    west_refl = "west_refl"


class UnsupportedFacingError(ValueError):
    """Raised when an orientation name does not map onto a Facing."""


# (a, b, c, d): x' = a*x + b*z, z' = c*x + d*z
_MATRICES: dict[Facing, Tuple[int, int, int, int]] = {
    Facing.north: (1, 0, 0, 1),
    Facing.north_refl: (-1, 0, 0, 1),
    Facing.east: (0, -1, 1, 0),
    Facing.east_refl: (0, -1, -1, 0),
    Facing.south: (-1, 0, 0, -1),
    Facing.south_refl: (1, 0, 0, -1),
    Facing.west: (0, 1, -1, 0),
    Facing.west_refl: (0, 1, 1, 0),
}

ROTATIONS: Tuple[Facing, ...] = (Facing.north, Facing.east, Facing.south, Facing.west)
REFLECTIONS: Tuple[Facing, ...] = (
    Facing.north_refl,
    Facing.east_refl,
    Facing.south_refl,
    Facing.west_refl,
)


def parse_facing(value) -> Facing:
    if isinstance(value, Facing):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for facing in Facing:
            if facing.value == normalized:
                return facing
    raise UnsupportedFacingError(f"unsupported facing: {value!r}")


def resolve_facing(vocabulary: Mapping[str, Facing], name: str, family: str = "") -> Facing:
    """Map a family-local orientation name (e.g. ``"NWE"``) onto a Facing."""
    facing = vocabulary.get(name)
    if facing is None:
        label = f" for {family}" if family else ""
        raise UnsupportedFacingError(
            f"unsupported facing {name!r}{label}; expected one of {sorted(vocabulary)}"
        )
    return facing


def transform_point(point: Point, facing) -> Point:
    a, b, c, d = _MATRICES[parse_facing(facing)]
    return Point(a * point.x + b * point.z, point.y, c * point.x + d * point.z)


def orient(corner1: Point, corner2: Point, facing) -> Tuple[Point, Point]:
    return transform_point(corner1, facing), transform_point(corner2, facing)


def inverse_facing(facing) -> Facing:
    # Every matrix is orthogonal, so the inverse is the transpose.
    a, b, c, d = _MATRICES[parse_facing(facing)]
    transposed = (a, c, b, d)
    for candidate, matrix in _MATRICES.items():
        if matrix == transposed:
            return candidate
    raise UnsupportedFacingError(f"no inverse for facing: {facing!r}")
