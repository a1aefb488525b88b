"""Walkway component: picks the straight, angled or cap strategy for a job."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple, Union

from src.builders.mcfunction.components.walkway_strategies import (
    build_walkway_angled_removal_strategy,
    build_walkway_angled_strategy,
    build_walkway_cap_strategy,
    build_walkway_straight_removal_strategy,
    build_walkway_straight_strategy,
)
from src.builders.mcfunction.diagnostics import Severity, emit_simple
from src.builders.mcfunction.geom_utils import boxes_union_bbox
from src.builders.mcfunction.plan_types import Box, BuildPlan
from src.builders.mcfunction.spec.types import AngledWalkwaySpec, BuildContext, WalkwaySpec

AnyWalkwaySpec = Union[WalkwaySpec, AngledWalkwaySpec]
StrategyHandler = Callable[[AnyWalkwaySpec], List[Box]]

STRATEGY_DISPATCH: Dict[Tuple[str, str], Tuple[str, StrategyHandler]] = {
    ("straight", "create"): ("walkway_straight", build_walkway_straight_strategy),
    ("straight", "cap"): ("walkway_cap", build_walkway_cap_strategy),
    ("straight", "remove"): ("walkway_straight_removal", build_walkway_straight_removal_strategy),
    ("angled", "create"): ("walkway_angled", build_walkway_angled_strategy),
    ("angled", "remove"): ("walkway_angled_removal", build_walkway_angled_removal_strategy),
}


def walkway_shape(spec: AnyWalkwaySpec) -> str:
    if isinstance(spec, AngledWalkwaySpec):
        return "angled"
    return "straight"


def _build_with_strategy(plan: BuildPlan, spec: AnyWalkwaySpec, ctx: BuildContext, variant: str) -> None:
    shape = walkway_shape(spec)
    key = (shape, variant)
    if key not in STRATEGY_DISPATCH:
        raise ValueError(f"no walkway strategy for shape={shape!r} variant={variant!r}")
    handler_name, handler = STRATEGY_DISPATCH[key]

    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="walkway",
        code="STRATEGY_SELECTED",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        payload={
            "key": {"shape": shape, "variant": variant},
            "handler": handler_name,
        },
        resolved_value={"shape": shape, "variant": variant},
        reason="dispatch walkway build strategy",
    )

    boxes = handler(spec)
    plan.extend(boxes)

    bbox = boxes_union_bbox(boxes)
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="walkway",
        code="WALKWAY_BUILD",
        severity=Severity.INFO,
        path=plan.function_name,
        source="computed",
        reason="component geometry emitted",
        payload={
            "variant": variant,
            "shape": shape,
            "boxes": len(boxes),
            "bbox_min": list(bbox["min"]),
            "bbox_max": list(bbox["max"]),
        },
    )


def build_walkway(plan: BuildPlan, spec: AnyWalkwaySpec, ctx: BuildContext) -> None:
    _build_with_strategy(plan, spec, ctx, "create")


def build_walkway_cap(plan: BuildPlan, spec: WalkwaySpec, ctx: BuildContext) -> None:
    _build_with_strategy(plan, spec, ctx, "cap")


def build_walkway_removal(plan: BuildPlan, spec: AnyWalkwaySpec, ctx: BuildContext) -> None:
    _build_with_strategy(plan, spec, ctx, "remove")
