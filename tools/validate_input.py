# tools/validate_input.py
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from src.builders.mcfunction.spec.resolve import resolve  # noqa: E402
from src.pipeline.load_input import load_input  # noqa: E402
from src.schema import FAMILY_INPUTS  # noqa: E402


def _input_family(job):
    # Roller coasters are falls jobs but have their own input arrays.
    return "roller_coaster" if job.variant == "roller_coaster" else job.family


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else ROOT / "data" / "examples" / "mcfd_input.toml"
    raw = load_input(path)

    print(f"INPUT: {path}")

    jobs, diagnostics = resolve(raw)
    invalid = {error["family"] for error in diagnostics.errors}

    for family, model in FAMILY_INPUTS.items():
        if family in invalid:
            print(f"  {family:<15} INVALID")
            continue
        count = model.model_validate(raw).instance_count()
        functions = sum(1 for job in jobs if _input_family(job) == family)
        print(f"  {family:<15} instances={count:<3} functions={functions}")

    for warning in diagnostics.warnings:
        print(f"\nWARNING {warning['code']}: {warning['path']}: {warning['message']}")

    if diagnostics.errors:
        print("\nVALIDATION ERROR")
        print(json.dumps(diagnostics.errors, ensure_ascii=False, indent=2))
        sys.exit(1)

    print(f"\nOK: {len(jobs)} functions")


if __name__ == "__main__":
    main()
