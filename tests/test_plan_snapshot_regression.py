from __future__ import annotations

import io
import json
import os
import sys
from contextlib import redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.builders.mcfunction.builder import build_plans
from src.builders.mcfunction.plan_snapshot import plans_to_snapshot
from src.pipeline.load_input import load_input


CASES = [
    "data/examples/clear_volume_small.toml",
]

GOLDEN_DIR = ROOT / "tests" / "golden"


def _update_golden_enabled() -> bool:
    value = os.environ.get("UPDATE_GOLDEN", "")
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _golden_path(input_path: str) -> Path:
    basename = Path(input_path).stem
    return GOLDEN_DIR / f"{basename}.plans.json"


def _build_plans_silent(raw: dict):
    with redirect_stdout(io.StringIO()):
        return build_plans(raw)


def test_plan_snapshot_regression():
    update = _update_golden_enabled()
    GOLDEN_DIR.mkdir(parents=True, exist_ok=True)

    for input_path in CASES:
        raw = load_input(ROOT / input_path)
        result = _build_plans_silent(raw)
        assert result.ok
        snapshot = plans_to_snapshot(result.plans)
        golden_path = _golden_path(input_path)

        if update:
            golden_path.write_text(
                json.dumps(snapshot, ensure_ascii=False, indent=2, sort_keys=False) + "\n",
                encoding="utf-8",
            )
            continue

        assert golden_path.exists(), (
            f"Golden snapshot not found: {golden_path}. "
            "Run with UPDATE_GOLDEN=1 to generate."
        )
        expected = json.loads(golden_path.read_text(encoding="utf-8"))
        assert snapshot == expected
