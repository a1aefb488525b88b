"""Clear-volume component: fills a width x depth x height block in front of the player."""

from __future__ import annotations

from src.builders.mcfunction.diagnostics import Severity, emit_simple
from src.builders.mcfunction.geom_utils import boxes_union_bbox, centered_span
from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import Box, BuildPlan
from src.builders.mcfunction.spec.types import BuildContext, ClearVolumeSpec

NEAR_Z = -2


def build_clear_volume(plan: BuildPlan, spec: ClearVolumeSpec, ctx: BuildContext) -> None:
    # Facing north: width runs along +X centered on the player, depth along -Z.
    x1, x2 = centered_span(spec.width)
    z1 = NEAR_Z
    z2 = z1 - spec.depth + 1

    layers = []
    for y in range(spec.height):
        layers.append(
            plan.add(Box(Point(x1, y, z1), Point(x2, y, z2), material=spec.material, name=f"layer_{y}"))
        )

    bbox = boxes_union_bbox(layers)
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="clear_volume",
        code="CLEAR_VOLUME_BUILD",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        reason="component geometry emitted",
        payload={
            "layers": len(layers),
            "material": spec.material,
            "bbox_min": list(bbox["min"]),
            "bbox_max": list(bbox["max"]),
        },
    )
