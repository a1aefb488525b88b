from __future__ import annotations

import io
import json
import sys
from collections import Counter
from contextlib import redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.builders.mcfunction.builder import build_plans
from src.builders.mcfunction.diagnostics import (
    Event,
    FanoutDiagnosticsSink,
    JsonlDiagnosticsSink,
    Severity,
    StreamDiagnosticsSink,
    VALID_COMPONENTS,
    VALID_SEVERITIES,
    VALID_SOURCES,
    VALID_STAGES,
    emit_simple,
    format_event,
)
from src.pipeline.load_input import load_input


class ListDiagnosticsSink:
    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)


def _quiet_debug(monkeypatch) -> None:
    import src.builders.mcfunction.builder as builder_mod

    monkeypatch.setattr(builder_mod, "_debug_env_enabled", lambda: False)


def test_build_pipeline_is_stdout_silent(monkeypatch):
    sink = ListDiagnosticsSink()
    import src.builders.mcfunction.builder as builder_mod

    monkeypatch.setattr(builder_mod, "_diag_sink_from_env", lambda: sink)
    _quiet_debug(monkeypatch)
    raw = load_input(ROOT / "data" / "examples" / "mcfd_input.toml")

    buf = io.StringIO()
    with redirect_stdout(buf):
        result = build_plans(raw)
    assert result.plans
    assert result.ok
    assert buf.getvalue() == ""


def test_diagnostics_event_contract_and_stability(monkeypatch):
    sink = ListDiagnosticsSink()
    import src.builders.mcfunction.builder as builder_mod

    monkeypatch.setattr(builder_mod, "_diag_sink_from_env", lambda: sink)
    _quiet_debug(monkeypatch)
    raw = load_input(ROOT / "data" / "examples" / "mcfd_input.toml")
    # Force one resolve warning (odd wall width) and one rejected family.
    raw["MWallWidth"] = [21]
    raw["SphereRadius"] = [12]

    buf = io.StringIO()
    with redirect_stdout(buf):
        result = build_plans(raw)
    assert buf.getvalue() == ""
    assert [e["family"] for e in result.diagnostics.errors] == ["sphere"]

    assert sink.events
    required_keys = {
        "ts",
        "run_id",
        "stage",
        "component",
        "code",
        "severity",
        "path",
        "source",
        "input_value",
        "resolved_value",
        "reason",
        "meta",
    }
    signatures: list[tuple[str, str, str, int]] = []
    for event in sink.events:
        payload = event.to_dict()
        assert set(payload.keys()) == required_keys
        assert payload["run_id"] == result.run_id
        assert payload["severity"] in VALID_SEVERITIES
        assert payload["stage"] in VALID_STAGES
        assert payload["source"] in VALID_SOURCES
        assert payload["component"] in VALID_COMPONENTS
        assert isinstance(payload["code"], str) and payload["code"]
        if payload["path"] == "":
            assert payload["code"] in {"BUILD_START", "BUILD_DONE"}
            assert payload["reason"] or payload["meta"]
        signatures.append(
            (
                payload["stage"],
                payload["component"],
                payload["code"],
                int(payload["severity"]),
            )
        )

    counts = Counter(signatures)
    assert counts[("build", "builder", "BUILD_START", int(Severity.INFO))] == 1
    assert counts[("build", "builder", "BUILD_DONE", int(Severity.INFO))] == 1
    assert counts[("resolve", "resolver", "MWALL_WIDTH_ROUNDED", int(Severity.WARN))] == 1
    assert counts[("resolve", "resolver", "INPUT_INVALID", int(Severity.ERROR))] == 1
    assert counts[("build", "mwall", "MWALL_BUILD", int(Severity.INFO))] == 16
    assert counts[("build", "sign", "SIGN_BUILD", int(Severity.INFO))] == 16
    # No sphere jobs after the family was rejected.
    assert counts[("build", "sphere", "SPHERE_BUILD", int(Severity.INFO))] == 0


def test_failed_job_is_reported_and_others_still_build(monkeypatch):
    sink = ListDiagnosticsSink()
    import src.builders.mcfunction.builder as builder_mod

    monkeypatch.setattr(builder_mod, "_diag_sink_from_env", lambda: sink)
    _quiet_debug(monkeypatch)
    raw = {
        "Sign7Text1": ["HI?"],
        "Sign7Text2": ["none"],
        "Sign7Text3": ["none"],
        "Sign7BackBlockType": ["none"],
        "Sign7EdgeBlockType": ["none"],
        "Sign7TextBlockType": ["gold_block"],
        "SphereRadius": [3],
        "SphereExteriorBlockType": ["glass"],
        "SphereInteriorBlockType": ["none"],
    }

    result = build_plans(raw)
    assert not result.ok
    assert len(result.failed) == 8
    assert {job.family for job in result.failed} == {"sign"}
    assert [plan.function_name for plan in result.plans] == ["Sphere_glass_3.mcfunction"]

    failed_events = [event for event in sink.events if event.code == "JOB_FAILED"]
    assert len(failed_events) == 8
    assert all(event.component == "sign" for event in failed_events)
    assert all(event.severity == int(Severity.ERROR) for event in failed_events)
    assert "'?'" in failed_events[0].reason

    done = [event for event in sink.events if event.code == "BUILD_DONE"][-1]
    assert done.resolved_value["plans_count"] == 1
    assert done.resolved_value["failed_count"] == 8


def test_emit_simple_contract_and_normalization() -> None:
    sink = ListDiagnosticsSink()
    event = emit_simple(
        sink,
        run_id="run-1",
        stage="resolve",
        component="mwall",
        code="UNIT_EVENT",
        path="MWallWidth[0]",
        payload={"old": 21, "new": 20},
        severity=Severity.WARN,
        iter_index=2,
        source="fallback",
        reason="unit test",
        input_value=21,
        resolved_value=20,
        meta={"hint": "round down"},
    )
    assert sink.events and sink.events[-1] is event
    event_payload = event.to_dict()
    assert event_payload["stage"] == "resolve"
    assert event_payload["component"] == "mwall"
    assert event_payload["source"] == "fallback"
    assert event_payload["meta"]["iter_index"] == 2
    assert event_payload["meta"]["payload"] == {"old": 21, "new": 20}
    assert event_payload["meta"]["hint"] == "round down"

    normalized = emit_simple(
        sink,
        code="UNIT_EVENT_NORMALIZE",
        stage="unknown_stage",
        component="unknown_component",
        source="unknown_source",
        severity=99,
    )
    assert normalized.stage == "build"
    assert normalized.component == "builder"
    assert normalized.source == "computed"
    assert normalized.severity == int(Severity.FATAL)
    assert normalized.meta["normalized_from"] == {
        "stage": "unknown_stage",
        "component": "unknown_component",
        "source": "unknown_source",
    }


def test_jsonl_sink_appends_one_object_per_line(tmp_path) -> None:
    path = tmp_path / "diag" / "events.jsonl"
    sink = JsonlDiagnosticsSink(str(path))
    emit_simple(sink, code="FIRST", path="a", run_id="r")
    emit_simple(sink, code="SECOND", path="b", run_id="r")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["code"] for line in lines] == ["FIRST", "SECOND"]


def test_diag_sink_is_opt_in(monkeypatch, tmp_path) -> None:
    import src.builders.mcfunction.builder as builder_mod
    from src.builders.mcfunction.diagnostics import NoopDiagnosticsSink

    monkeypatch.delenv("MCFD_DIAG_JSONL", raising=False)
    assert isinstance(builder_mod._diag_sink_from_env(), NoopDiagnosticsSink)

    monkeypatch.setenv("MCFD_DIAG_JSONL", str(tmp_path / "run.jsonl"))
    assert isinstance(builder_mod._diag_sink_from_env(), JsonlDiagnosticsSink)


def test_stream_sink_filters_by_severity_and_fans_out() -> None:
    stream = io.StringIO()
    collected = ListDiagnosticsSink()
    sink = FanoutDiagnosticsSink(collected, StreamDiagnosticsSink(stream, Severity.WARN))

    emit_simple(sink, code="MWALL_BUILD", component="mwall", path="mw_NWE_12_20.mcfunction")
    warning = emit_simple(
        sink,
        code="MWALL_WIDTH_ROUNDED",
        stage="resolve",
        component="resolver",
        path="MWallWidth[0]",
        severity=Severity.WARN,
        reason="odd width rounds down",
    )

    assert [event.code for event in collected.events] == ["MWALL_BUILD", "MWALL_WIDTH_ROUNDED"]
    assert stream.getvalue() == format_event(warning) + "\n"
    assert format_event(warning) == (
        "[warn] resolver MWallWidth[0]: MWALL_WIDTH_ROUNDED: odd width rounds down"
    )
