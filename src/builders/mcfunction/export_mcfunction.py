"""Write build plans out as .mcfunction files, plus the ``mcfd`` command line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from src.builders.mcfunction.builder import build_plans, new_build_context
from src.builders.mcfunction.diagnostics import (
    FanoutDiagnosticsSink,
    Severity,
    StreamDiagnosticsSink,
    emit_simple,
)
from src.builders.mcfunction.plan_types import BuildPlan
from src.builders.mcfunction.spec.types import BuildContext
from src.pipeline.load_input import load_function_paths, load_input

FUNCTIONS_DIR_ENV = "MCFD_FUNCTIONS_DIR"


def write_shapes(stream: TextIO, shapes: Iterable) -> int:
    """Write one command line per box, in order. Returns the number of lines written.

    A failed write propagates immediately; nothing after it is written.
    """
    count = 0
    for shape in shapes:
        for box in shape.boxes():
            stream.write(box.emit())
            count += 1
    return count


def function_path(basepath, plan: BuildPlan) -> Path:
    base = Path(basepath)
    if plan.subdir:
        base = base / plan.subdir
    return base / plan.function_name


def write_plan(plan: BuildPlan, basepath, ctx: Optional[BuildContext] = None) -> Path:
    path = function_path(basepath, plan)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        lines = write_shapes(handle, plan.shapes)
    if ctx is not None:
        emit_simple(
            ctx.diag,
            run_id=ctx.run_id,
            stage="emit",
            component="writer",
            code="FUNCTION_WRITTEN",
            severity=Severity.INFO,
            path=str(path),
            source="computed",
            reason="function file written",
            payload={"lines": lines, "function": plan.function_name, "subdir": plan.subdir},
        )
    return path


def write_plans(plans: Iterable[BuildPlan], basepath, ctx: Optional[BuildContext] = None) -> List[Path]:
    """Write plans in order. An OSError stops the run; files already written stay."""
    return [write_plan(plan, basepath, ctx) for plan in plans]


def resolve_basepath(out: Optional[str], init_file: Optional[str]) -> Path:
    # --out > MCFD_FUNCTIONS_DIR > init file > current directory
    if out:
        return Path(out)
    env_dir = os.environ.get(FUNCTIONS_DIR_ENV, "")
    if env_dir.strip():
        return Path(env_dir.strip())
    if init_file:
        return load_function_paths(init_file).basepath
    return Path(".")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Generate Minecraft .mcfunction files from a structure request.")
    parser.add_argument("input", help="Structure request file (TOML, or JSON with a .json suffix).")
    parser.add_argument("--init", default=None, help="Init file with mc_saves_dir / mc_world_functions_dir.")
    parser.add_argument("--out", default=None, help="Output base directory (overrides env and init file).")
    parser.add_argument("--dry-run", action="store_true", help="Build everything but write nothing.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every diagnostics event to stderr.")
    args = parser.parse_args(argv)

    try:
        raw = load_input(args.input)
        basepath = resolve_basepath(args.out, args.init)
    except (OSError, ValueError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    ctx = new_build_context()
    if args.verbose:
        ctx.diag = FanoutDiagnosticsSink(ctx.diag, StreamDiagnosticsSink(sys.stderr, Severity.INFO))
    result = build_plans(raw, ctx)

    for error in result.diagnostics.errors:
        print(f"error: {error['message']}", file=sys.stderr)
        for item in error.get("errors", []):
            print(f"  {item['loc']}: {item['msg']}", file=sys.stderr)
    for job in result.failed:
        print(f"error: {job.function_name} not generated", file=sys.stderr)

    if args.dry_run:
        for plan in result.plans:
            print(function_path(basepath, plan))
        print(f"{len(result.plans)} functions (dry run, nothing written)")
        return 0 if result.ok else 1

    written: List[Path] = []
    try:
        for plan in result.plans:
            path = write_plan(plan, basepath, ctx)
            written.append(path)
            print(f"wrote {path}")
    except OSError as exc:
        print(f"error: write failed: {exc}", file=sys.stderr)
        print(f"{len(written)} functions written")
        return 1

    print(f"{len(written)} functions written")
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
