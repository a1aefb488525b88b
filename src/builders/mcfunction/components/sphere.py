"""Sphere decoration: a single shell placed beside the player."""

from __future__ import annotations

from src.builders.mcfunction.diagnostics import Severity, emit_simple
from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import BuildPlan, Sphere
from src.builders.mcfunction.spec.types import BuildContext, SphereSpec


def sphere_center(radius: int) -> Point:
    # Sits on the ground, two blocks clear of the player.
    return Point(radius, 0, radius + 2)


def build_sphere(plan: BuildPlan, spec: SphereSpec, ctx: BuildContext) -> None:
    sphere = plan.add(
        Sphere(
            radius=spec.radius,
            center=sphere_center(spec.radius),
            exterior_material=spec.exterior,
            interior_material=spec.interior,
            name="sphere",
        )
    )
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="sphere",
        code="SPHERE_BUILD",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        reason="component geometry emitted",
        payload={
            "radius": spec.radius,
            "center": list(sphere.center.as_tuple()),
            "exterior": spec.exterior,
            "interior": spec.interior,
            "filled": spec.interior is not None,
        },
    )
