"""Stable serialization of build plans for regression snapshots."""

from __future__ import annotations

from typing import Any

from src.builders.mcfunction.plan_types import Box, BuildPlan, Sphere


def _normalize(value: Any):
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    if isinstance(value, dict):
        normalized: dict[str, Any] = {}
        for key in sorted(value):
            normalized[str(key)] = _normalize(value[key])
        return normalized
    return value


def shape_to_snapshot(shape) -> dict[str, Any]:
    if isinstance(shape, Sphere):
        # Spheres stay symbolic; their unit boxes are an emission detail.
        return {
            "kind": "sphere",
            "name": shape.name,
            "radius": shape.radius,
            "center": list(shape.center.as_tuple()),
            "exterior_material": shape.exterior_material,
            "interior_material": shape.interior_material,
        }
    if isinstance(shape, Box):
        return {
            "kind": "box",
            "name": shape.name,
            "corner1": list(shape.corner1.as_tuple()),
            "corner2": list(shape.corner2.as_tuple()),
            "material": shape.material,
        }
    raise TypeError(f"unsupported shape type: {type(shape).__name__}")


def plan_to_snapshot(plan: BuildPlan) -> dict[str, Any]:
    return {
        "function_name": plan.function_name,
        "subdir": plan.subdir,
        "metadata": _normalize(plan.metadata),
        "shapes": [shape_to_snapshot(shape) for shape in plan.shapes],
    }


def plans_to_snapshot(plans) -> list[dict[str, Any]]:
    return [plan_to_snapshot(plan) for plan in plans]
