# tests/test_commands.py

from __future__ import annotations

import json

from task_analyzer.cli.commands import CommandRegistry, registry
from task_analyzer.tasks.task_models import OverlapMode, Task


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [["x", "y"], []]
    assert reg.has("Alpha")
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_overlaps_command_uses_session_mode(state) -> None:
    state.tasks = (
        Task("T1", 900, 1100, "High"),
        Task("T2", 1000, 1020, "Medium"),
        Task("T3", 1050, 1200, "Low"),
    )

    adjacent = registry.handle(state, "/overlaps") or ""
    assert "T1 / T2" in adjacent
    assert "T1 / T3" not in adjacent

    assert "sweep" in (registry.handle(state, "/mode sweep") or "")
    assert state.overlap_mode is OverlapMode.SWEEP
    assert "T1 / T3 (1050 - 1100)" in (registry.handle(state, "/overlaps") or "")

    # explicit argument overrides the session mode
    assert "T1 / T3" not in (registry.handle(state, "/conflicts adjacent") or "")


def test_mode_command_rejects_unknown_mode(state) -> None:
    assert "must be one of" in (registry.handle(state, "/mode diagonal") or "")
    assert state.overlap_mode is OverlapMode.ADJACENT
    assert "Usage: /overlaps" in (registry.handle(state, "/overlaps diagonal") or "")
    assert "Overlap mode is adjacent" in (registry.handle(state, "/mode") or "")


def test_report_sections(state) -> None:
    text = registry.handle(state, "/report") or ""
    for header in ("Initial Task List", "Sorted Tasks", "Grouped by Priority", "Overlap Detection"):
        assert f"--- {header} ---" in text
    assert "Conflict: Lunch / Project Sync (1230 - 1300)" in text
    assert "Approximate Memory Usage:" in text


def test_simple_views(state) -> None:
    assert (registry.handle(state, "/sort") or "").splitlines()[-1] == "1400: Documentation"
    assert "Low (1):" in (registry.handle(state, "/groups") or "")
    assert (registry.handle(state, "/memory") or "").startswith("Approximate Memory Usage: ")
    assert (registry.handle(state, "/tasks") or "").startswith("Source: fake")
    assert "/overlaps" in (registry.handle(state, "/help") or "")


def test_json_command(state) -> None:
    data = json.loads(registry.handle(state, "/json sweep") or "{}")
    assert data["mode"] == "sweep"
    assert len(data["conflicts"]) == 2
