from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.builders.mcfunction.export_mcfunction import (
    FUNCTIONS_DIR_ENV,
    function_path,
    main,
    resolve_basepath,
    write_plan,
    write_plans,
    write_shapes,
)
from src.builders.mcfunction.orientation import Point
from src.builders.mcfunction.plan_types import Box, BuildPlan, Sphere
from src.builders.mcfunction.spec.types import BuildContext

SMALL_INPUT = ROOT / "data" / "examples" / "clear_volume_small.toml"
FULL_INPUT = ROOT / "data" / "examples" / "mcfd_input.toml"


class ListDiagnosticsSink:
    def __init__(self) -> None:
        self.events = []

    def emit(self, event) -> None:
        self.events.append(event)


class FailingStream:
    """Accepts ``limit`` writes, then fails like a full disk."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.lines = []

    def write(self, text: str) -> int:
        if len(self.lines) >= self.limit:
            raise OSError("disk full")
        self.lines.append(text)
        return len(text)


def _plan(name: str = "t.mcfunction", subdir: str = "") -> BuildPlan:
    plan = BuildPlan(function_name=name, subdir=subdir)
    plan.add(Box(Point(1, 2, 3), Point(4, 5, 6), material="testsurface"))
    plan.add(Box(Point(0, 0, 0), Point(0, 0, 0), material="minecraft:air"))
    return plan


def test_write_shapes_in_order() -> None:
    buf = io.StringIO()
    sphere = Sphere(radius=0, center=Point(7, 0, 7), exterior_material="minecraft:glass")
    count = write_shapes(buf, _plan().shapes + [sphere])
    assert count == 3
    assert buf.getvalue() == (
        "fill ~1 ~2 ~3 ~4 ~5 ~6 testsurface\n"
        "fill ~0 ~0 ~0 ~0 ~0 ~0 minecraft:air\n"
        "fill ~7 ~0 ~7 ~7 ~0 ~7 minecraft:glass\n"
    )


def test_write_failure_stops_immediately() -> None:
    stream = FailingStream(limit=1)
    with pytest.raises(OSError, match="disk full"):
        write_shapes(stream, _plan().shapes)
    assert stream.lines == ["fill ~1 ~2 ~3 ~4 ~5 ~6 testsurface\n"]


def test_function_path_uses_subdir(tmp_path) -> None:
    assert function_path(tmp_path, _plan("a.mcfunction", "MWall")) == tmp_path / "MWall" / "a.mcfunction"
    assert function_path(tmp_path, _plan("b.mcfunction")) == tmp_path / "b.mcfunction"


def test_write_plan_creates_directories_and_reports(tmp_path) -> None:
    sink = ListDiagnosticsSink()
    ctx = BuildContext(run_id="r1", diag=sink)
    path = write_plan(_plan("a.mcfunction", "Sign7"), tmp_path, ctx)

    assert path == tmp_path / "Sign7" / "a.mcfunction"
    assert path.read_text(encoding="utf-8").count("\n") == 2
    event = sink.events[-1]
    assert event.code == "FUNCTION_WRITTEN"
    assert event.component == "writer"
    assert event.stage == "emit"
    assert event.meta["payload"]["lines"] == 2


def test_write_plans_keeps_files_written_before_a_failure(tmp_path) -> None:
    (tmp_path / "Blocked").write_text("not a directory", encoding="utf-8")
    plans = [_plan("first.mcfunction"), _plan("second.mcfunction", "Blocked"), _plan("third.mcfunction")]
    with pytest.raises(OSError):
        write_plans(plans, tmp_path)
    assert (tmp_path / "first.mcfunction").exists()
    assert not (tmp_path / "third.mcfunction").exists()


def test_basepath_precedence(monkeypatch, tmp_path) -> None:
    init = tmp_path / "init.toml"
    init.write_text('mc_saves_dir = "/saves"\nmc_world_functions_dir = "World"\n', encoding="utf-8")

    monkeypatch.setenv(FUNCTIONS_DIR_ENV, "/from/env")
    assert resolve_basepath("/from/flag", str(init)) == Path("/from/flag")
    assert resolve_basepath(None, str(init)) == Path("/from/env")

    monkeypatch.delenv(FUNCTIONS_DIR_ENV)
    assert resolve_basepath(None, str(init)) == Path("/saves/World")
    assert resolve_basepath(None, None) == Path(".")


def test_cli_writes_function_files(tmp_path, capsys) -> None:
    code = main([str(SMALL_INPUT), "--out", str(tmp_path)])
    assert code == 0

    north = tmp_path / "ClearVol" / "cv_N_3_2_2.mcfunction"
    assert north.read_text(encoding="utf-8") == (
        "fill ~-1 ~0 ~-2 ~1 ~0 ~-3 minecraft:air\n"
        "fill ~-1 ~1 ~-2 ~1 ~1 ~-3 minecraft:air\n"
    )
    west = tmp_path / "ClearVol" / "cv_W_3_2_2.mcfunction"
    assert west.read_text(encoding="utf-8").splitlines()[0] == "fill ~-2 ~0 ~-1 ~-3 ~0 ~1 minecraft:air"
    assert len(list((tmp_path / "ClearVol").iterdir())) == 4

    out = capsys.readouterr().out
    assert "4 functions written" in out


def test_cli_dry_run_writes_nothing(tmp_path, capsys) -> None:
    code = main([str(FULL_INPUT), "--out", str(tmp_path), "--dry-run"])
    assert code == 0
    assert list(tmp_path.iterdir()) == []

    out = capsys.readouterr().out
    assert str(tmp_path / "MWall" / "mw_NWE_12_20.mcfunction") in out
    assert "87 functions (dry run, nothing written)" in out


def test_cli_reports_invalid_family(tmp_path, capsys) -> None:
    request = tmp_path / "req.toml"
    request.write_text(
        "MWallHeight = [12, 14]\n"
        "MWallWidth = [20]\n"
        "MWallDepth = [4]\n"
        'MWallWoodBlockType = ["planks"]\n'
        'MWallBrickBlockType = ["stonebrick"]\n'
        "WalkwayLength = [10]\n",
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"
    code = main([str(request), "--out", str(out_dir)])
    assert code == 1
    assert (out_dir / "Walkway_north_10.mcfunction").exists()
    assert not (out_dir / "MWall").exists()

    err = capsys.readouterr().err
    assert "mwall input rejected" in err


def test_cli_unreadable_input(tmp_path, capsys) -> None:
    code = main([str(tmp_path / "missing.toml"), "--out", str(tmp_path)])
    assert code == 2
    assert "cannot read input" in capsys.readouterr().err


def test_cli_verbose_logs_events_to_stderr(tmp_path, capsys) -> None:
    code = main([str(SMALL_INPUT), "--out", str(tmp_path), "--verbose"])
    assert code == 0

    err = capsys.readouterr().err
    assert "[info] builder: BUILD_START" in err
    assert "CLEAR_VOLUME_BUILD" in err
    assert "FUNCTION_WRITTEN" in err
