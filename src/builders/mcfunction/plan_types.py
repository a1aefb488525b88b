"""Shape primitives and the plan container shared by builder and components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Protocol, Union

from src.builders.mcfunction.orientation import Point, orient, transform_point

DEFAULT_MATERIAL = "minecraft:sandstone"
SHELL_THICKNESS = 2


class ShapeLike(Protocol):
    def orient(self, facing) -> "ShapeLike": ...

    def emit(self) -> str: ...

    def boxes(self) -> Iterator["Box"]: ...


@dataclass
class Box:
    """Axis-aligned block region, both corners inclusive, one material."""

    corner1: Point = field(default_factory=Point)
    corner2: Point = field(default_factory=Point)
    material: str = DEFAULT_MATERIAL
    name: str = ""

    @classmethod
    def at(cls, point: Point, material: str = DEFAULT_MATERIAL, name: str = "") -> "Box":
        return cls(corner1=point, corner2=point, material=material, name=name)

    def with_material(self, material: str) -> "Box":
        self.material = material
        return self

    def with_corners(self, corner1: Point, corner2: Point) -> "Box":
        self.corner1 = corner1
        self.corner2 = corner2
        return self

    def orient(self, facing) -> "Box":
        self.corner1, self.corner2 = orient(self.corner1, self.corner2, facing)
        return self

    def emit(self) -> str:
        c1 = self.corner1
        c2 = self.corner2
        return f"fill ~{c1.x} ~{c1.y} ~{c1.z} ~{c2.x} ~{c2.y} ~{c2.z} {self.material}\n"

    def boxes(self) -> Iterator["Box"]:
        yield self


@dataclass
class Sphere:
    """Spherical shell expanded into unit boxes at emission time.

    Points whose distance from the center lies in [radius - 2, radius] get the
    exterior material. Points closer in get the interior material, or nothing
    when ``interior_material`` is None.
    """

    radius: int = 30
    center: Point = field(default_factory=lambda: Point(0, 30, 0))
    exterior_material: str = "minecraft:glass"
    interior_material: Optional[str] = None
    name: str = "sphere"

    def classify(self, dx: int, dy: int, dz: int) -> Optional[str]:
        distance = math.sqrt(float(dx * dx + dy * dy + dz * dz))
        if float(self.radius - SHELL_THICKNESS) <= distance <= float(self.radius):
            return "shell"
        if distance < float(self.radius - SHELL_THICKNESS):
            return "interior"
        return None

    def boxes(self) -> Iterator[Box]:
        r = self.radius
        cx, cy, cz = self.center.x, self.center.y, self.center.z
        for x in range(-r, r + 1):
            for y in range(-r, r + 1):
                for z in range(-r, r + 1):
                    band = self.classify(x, y, z)
                    if band == "shell":
                        material = self.exterior_material
                    elif band == "interior" and self.interior_material is not None:
                        material = self.interior_material
                    else:
                        continue
                    yield Box.at(Point(x + cx, y + cy, z + cz), material=material, name=self.name)

    def orient(self, facing) -> "Sphere":
        self.center = transform_point(self.center, facing)
        return self

    def emit(self) -> str:
        return "".join(box.emit() for box in self.boxes())


Shape = Union[Box, Sphere]


@dataclass
class BuildPlan:
    """Ordered shapes for one function file plus descriptive metadata."""

    function_name: str = ""
    subdir: str = ""
    shapes: List[Shape] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    def add(self, shape: Shape) -> Shape:
        self.shapes.append(shape)
        return shape

    def extend(self, shapes) -> None:
        self.shapes.extend(shapes)

    def orient(self, facing) -> "BuildPlan":
        for shape in self.shapes:
            shape.orient(facing)
        return self

    def boxes(self) -> Iterator[Box]:
        for shape in self.shapes:
            yield from shape.boxes()
