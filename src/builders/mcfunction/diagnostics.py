"""Diagnostics events for the generation pipeline and the sinks that receive them."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from pathlib import Path
from typing import Any, Protocol, TextIO


class Severity(IntEnum):
    INFO = 0
    WARN = 1
    ERROR = 2
    FATAL = 3


SEVERITY_LABELS: dict[int, str] = {
    int(Severity.INFO): "info",
    int(Severity.WARN): "warn",
    int(Severity.ERROR): "error",
    int(Severity.FATAL): "fatal",
}
SEVERITY_MIN = int(Severity.INFO)
SEVERITY_MAX = int(Severity.FATAL)
VALID_SEVERITIES = frozenset(SEVERITY_LABELS.keys())

VALID_STAGES = frozenset({"load", "resolve", "build", "emit"})
VALID_SOURCES = frozenset({"input", "default", "fallback", "computed"})
VALID_COMPONENTS = frozenset(
    {
        "loader",
        "resolver",
        "clear_volume",
        "mwall",
        "sign",
        "sphere",
        "falls",
        "walkway",
        "builder",
        "writer",
    }
)
DEFAULT_STAGE = "build"
DEFAULT_SOURCE = "computed"
DEFAULT_COMPONENT = "builder"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class Event:
    """One structured diagnostics record."""

    ts: str
    run_id: str
    stage: str
    component: str
    code: str
    severity: int
    path: str
    source: str
    input_value: Any
    resolved_value: Any
    reason: str
    meta: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _canonical(value: Any, valid: frozenset, default: str) -> tuple[str, bool]:
    candidate = value.strip().lower() if isinstance(value, str) else ""
    if candidate in valid:
        return candidate, False
    return default, True


def make_event(
    *,
    run_id: str = "",
    stage: str,
    component: str,
    code: str,
    severity: int = 0,
    path: str = "",
    source: str = "",
    input_value: Any = None,
    resolved_value: Any = None,
    reason: str = "",
    meta: dict[str, Any] | None = None,
    ts: str = "",
) -> Event:
    stage_value, stage_fixed = _canonical(stage, VALID_STAGES, DEFAULT_STAGE)
    component_value, component_fixed = _canonical(component, VALID_COMPONENTS, DEFAULT_COMPONENT)
    source_value, source_fixed = _canonical(source, VALID_SOURCES, DEFAULT_SOURCE)
    try:
        severity_value = int(severity)
    except (TypeError, ValueError):
        severity_value = int(Severity.INFO)

    meta_value = dict(meta) if isinstance(meta, dict) else {}
    normalized_from: dict[str, Any] = {}
    if stage_fixed:
        normalized_from["stage"] = stage
    if component_fixed:
        normalized_from["component"] = component
    if source_fixed:
        normalized_from["source"] = source
    if normalized_from:
        existing = meta_value.get("normalized_from")
        if isinstance(existing, dict):
            normalized_from.update(existing)
        meta_value["normalized_from"] = normalized_from
        if not reason:
            reason = "normalized diagnostics vocabulary"

    return Event(
        ts=ts or utc_now_iso(),
        run_id=run_id,
        stage=stage_value,
        component=component_value,
        code=code,
        severity=max(SEVERITY_MIN, min(SEVERITY_MAX, severity_value)),
        path=path,
        source=source_value,
        input_value=input_value,
        resolved_value=resolved_value,
        reason=reason,
        meta=meta_value,
    )


def emit_simple(
    sink: DiagnosticsSink,
    *,
    code: str,
    path: str = "",
    payload: Any = None,
    severity: int = Severity.INFO,
    component: str = DEFAULT_COMPONENT,
    stage: str = DEFAULT_STAGE,
    source: str = DEFAULT_SOURCE,
    reason: str = "",
    run_id: str = "",
    input_value: Any = None,
    resolved_value: Any = None,
    meta: dict[str, Any] | None = None,
    **extra_meta: Any,
) -> Event:
    merged_meta = dict(meta) if isinstance(meta, dict) else {}
    merged_meta.update(extra_meta)
    if payload is not None and "payload" not in merged_meta:
        merged_meta["payload"] = payload
    event = make_event(
        run_id=run_id,
        stage=stage,
        component=component,
        code=code,
        severity=severity,
        path=path,
        source=source,
        input_value=input_value,
        resolved_value=resolved_value,
        reason=reason,
        meta=merged_meta,
    )
    sink.emit(event)
    return event


class DiagnosticsSink(Protocol):
    """Sink interface for structured diagnostics events."""

    def emit(self, event: Event) -> None:
        """Publish one diagnostics event."""


class NoopDiagnosticsSink:
    """Default sink; drops every event."""

    def emit(self, event: Event) -> None:
        del event


class JsonlDiagnosticsSink:
    """Append events to a JSONL file, one object per line."""

    def __init__(self, path: str) -> None:
        self._path = Path(path)

    def emit(self, event: Event) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(event.to_dict(), ensure_ascii=False, sort_keys=True, default=str)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(f"{line}\n")


def format_event(event: Event) -> str:
    """One human readable line: ``[warn] resolver MWallWidth[0]: MWALL_WIDTH_ROUNDED: ...``."""
    label = SEVERITY_LABELS.get(int(event.severity), str(event.severity))
    where = f" {event.path}" if event.path else ""
    return f"[{label}] {event.component}{where}: {event.code}: {event.reason or '-'}"


class StreamDiagnosticsSink:
    """Write events at or above ``min_severity`` to a text stream."""

    def __init__(self, stream: TextIO, min_severity: int = Severity.WARN) -> None:
        self._stream = stream
        self._min_severity = int(min_severity)

    def emit(self, event: Event) -> None:
        if int(event.severity) < self._min_severity:
            return
        self._stream.write(format_event(event) + "\n")


class FanoutDiagnosticsSink:
    """Forward every event to each wrapped sink, in order."""

    def __init__(self, *sinks: DiagnosticsSink) -> None:
        self._sinks = sinks

    def emit(self, event: Event) -> None:
        for sink in self._sinks:
            sink.emit(event)
