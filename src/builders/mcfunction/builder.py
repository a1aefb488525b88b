"""Turn an input document into oriented build plans, one per output function."""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from src.builders.mcfunction.components import (
    build_clear_volume,
    build_falls,
    build_falls_clearing,
    build_falls_removal,
    build_mwall,
    build_mwall_removal,
    build_roller_coaster_falls,
    build_sign,
    build_sign_removal,
    build_sphere,
    build_walkway,
    build_walkway_cap,
    build_walkway_removal,
)
from src.builders.mcfunction.diagnostics import Severity, make_event
from src.builders.mcfunction.plan_types import BuildPlan
from src.builders.mcfunction.spec.resolve import resolve
from src.builders.mcfunction.spec.types import BuildContext, FunctionJob, ResolveDiagnostics

JobBuilder = Callable[[BuildPlan, object, BuildContext], None]

JOB_BUILDERS: Dict[Tuple[str, str], JobBuilder] = {
    ("clear_volume", "create"): build_clear_volume,
    ("mwall", "create"): build_mwall,
    ("mwall", "remove"): build_mwall_removal,
    ("sign", "create"): build_sign,
    ("sign", "remove"): build_sign_removal,
    ("sphere", "create"): build_sphere,
    ("falls", "create"): build_falls,
    ("falls", "clear"): build_falls_clearing,
    ("falls", "remove"): build_falls_removal,
    ("falls", "roller_coaster"): build_roller_coaster_falls,
    ("walkway", "create"): build_walkway,
    ("walkway", "cap"): build_walkway_cap,
    ("walkway", "remove"): build_walkway_removal,
}


@dataclass
class BuildResult:
    plans: List[BuildPlan] = field(default_factory=list)
    failed: List[FunctionJob] = field(default_factory=list)
    diagnostics: ResolveDiagnostics = field(default_factory=ResolveDiagnostics)
    run_id: str = ""

    @property
    def ok(self) -> bool:
        return not self.failed and not self.diagnostics.errors


def _debug_env_enabled() -> bool:
    # Any non-falsey DEBUG* env variable enables debug-mode prints.
    falsey = {"", "0", "false", "off", "no", "none"}
    for key, value in os.environ.items():
        if not key.startswith("DEBUG"):
            continue
        if str(value).strip().lower() not in falsey:
            return True
    return False


def _diag_sink_from_env():
    # Diagnostics are opt-in: JSONL sink only when MCFD_DIAG_JSONL is set.
    from src.builders.mcfunction.diagnostics import JsonlDiagnosticsSink, NoopDiagnosticsSink

    path = os.environ.get("MCFD_DIAG_JSONL", "")
    if isinstance(path, str) and path.strip():
        return JsonlDiagnosticsSink(path.strip())
    return NoopDiagnosticsSink()


def new_build_context() -> BuildContext:
    return BuildContext(
        run_id=uuid.uuid4().hex,
        debug=_debug_env_enabled(),
        diag=_diag_sink_from_env(),
    )


def build_job(job: FunctionJob, ctx: BuildContext) -> BuildPlan:
    """Build one function plan in the canonical facing, then orient it to the job's facing."""
    try:
        builder = JOB_BUILDERS[(job.family, job.variant)]
    except KeyError:
        raise ValueError(f"no builder for family={job.family!r} variant={job.variant!r}") from None

    plan = BuildPlan(function_name=job.function_name, subdir=job.subdir)
    plan.metadata.update(
        {
            "family": job.family,
            "variant": job.variant,
            "facing": job.facing.value,
        }
    )
    plan.metadata.update(job.summary)

    builder(plan, job.spec, ctx)
    return plan.orient(job.facing)


def _emit_resolve_diagnostics(ctx: BuildContext, diagnostics: ResolveDiagnostics) -> None:
    for warning in diagnostics.warnings:
        ctx.diag.emit(
            make_event(
                run_id=ctx.run_id,
                stage="resolve",
                component="resolver",
                code=str(warning.get("code", "RESOLVE_WARNING")),
                severity=Severity.WARN,
                path=str(warning.get("path", "")),
                source="fallback",
                input_value=warning.get("old"),
                resolved_value=warning.get("new"),
                reason=str(warning.get("message", "")),
            )
        )
    for error in diagnostics.errors:
        ctx.diag.emit(
            make_event(
                run_id=ctx.run_id,
                stage="resolve",
                component="resolver",
                code=str(error.get("code", "INPUT_INVALID")),
                severity=Severity.ERROR,
                path=str(error.get("family", "")),
                source="input",
                reason=str(error.get("message", "")),
                meta={"errors": error.get("errors", [])},
            )
        )


def build_plans(raw: dict, ctx: Optional[BuildContext] = None) -> BuildResult:
    """Resolve ``raw`` and build every job it expands to.

    Families that fail validation are skipped (reported in ``diagnostics``).
    A job whose build raises ``ValueError`` (an unsupported sign character,
    say) is recorded in ``failed``; the remaining jobs still build.
    """
    build_ctx = ctx or new_build_context()
    jobs, diagnostics = resolve(raw)

    # Structured lifecycle event for external logging/analysis.
    build_ctx.diag.emit(
        make_event(
            run_id=build_ctx.run_id,
            stage="build",
            component="builder",
            code="BUILD_START",
            severity=Severity.INFO,
            source="computed",
            reason="build pipeline start",
            resolved_value={"jobs_count": len(jobs)},
        )
    )
    _emit_resolve_diagnostics(build_ctx, diagnostics)

    result = BuildResult(diagnostics=diagnostics, run_id=build_ctx.run_id)
    for job in jobs:
        try:
            plan = build_job(job, build_ctx)
        except ValueError as exc:
            result.failed.append(job)
            build_ctx.diag.emit(
                make_event(
                    run_id=build_ctx.run_id,
                    stage="build",
                    component=job.family,
                    code="JOB_FAILED",
                    severity=Severity.ERROR,
                    path=job.function_name,
                    source="input",
                    reason=str(exc),
                    meta={"variant": job.variant, "facing": job.facing.value},
                )
            )
            continue
        if build_ctx.debug:
            print(f"[builder] {job.subdir or '.'}/{job.function_name}: {len(plan.shapes)} shapes")
        result.plans.append(plan)

    build_ctx.diag.emit(
        make_event(
            run_id=build_ctx.run_id,
            stage="build",
            component="builder",
            code="BUILD_DONE",
            severity=Severity.INFO,
            source="computed",
            reason="build pipeline done",
            resolved_value={
                "plans_count": len(result.plans),
                "failed_count": len(result.failed),
                "invalid_families": [e.get("family") for e in diagnostics.errors],
            },
        )
    )
    return result
