"""Wrapper around the structure resolver for callers holding a file path."""

from __future__ import annotations

from typing import List, Tuple

from src.builders.mcfunction.spec.resolve import resolve
from src.builders.mcfunction.spec.types import FunctionJob, ResolveDiagnostics
from src.pipeline.load_input import load_input


def resolve_input_file(path) -> Tuple[List[FunctionJob], ResolveDiagnostics]:
    """Load a request file and expand it into function jobs."""
    return resolve(load_input(path))


def job_table(jobs: List[FunctionJob]) -> List[dict]:
    """One row per job, for run summaries."""
    rows = []
    for job in jobs:
        row = {
            "function": f"{job.subdir}/{job.function_name}" if job.subdir else job.function_name,
            "family": job.family,
            "variant": job.variant,
            "facing": job.facing.value,
        }
        row.update(job.summary)
        rows.append(row)
    return rows
