"""Unit tests for AuditSink interface."""

import io
import json
from datetime import datetime
from pathlib import Path

import pytest

from skill_loader.models import AuditEvent
from skill_loader.observability.audit import AuditSink, JSONLAuditSink, StderrAuditSink


class ConcreteAuditSink(AuditSink):
    """Concrete implementation of AuditSink for testing."""

    def __init__(self):
        self.events = []

    def log(self, event: AuditEvent) -> None:
        """Record event in memory."""
        self.events.append(event)


def make_event(kind: str = "read", **kwargs) -> AuditEvent:
    return AuditEvent(
        ts=datetime(2024, 1, 1, 12, 0, 0),
        kind=kind,
        skill=kwargs.get("skill", "pdf-tools"),
        path=kwargs.get("path", "/skills/pdf-tools/SKILL.md"),
        detail=kwargs.get("detail", {"chars": 120}),
    )


class TestAuditSink:
    """Tests for AuditSink abstract interface."""

    def test_abstract_interface(self):
        """Test that AuditSink cannot be instantiated directly."""
        with pytest.raises(TypeError):
            AuditSink()

    def test_log_method_required(self):
        """Test that log method must be implemented."""
        with pytest.raises(TypeError):
            class IncompleteAuditSink(AuditSink):
                pass
            IncompleteAuditSink()

    def test_concrete_sink_records(self):
        sink = ConcreteAuditSink()

        sink.log(make_event("scan", skill=None, path=None, detail={"skills_found": 5}))

        assert [e.kind for e in sink.events] == ["scan"]


class TestJSONLAuditSink:
    """Tests for JSONLAuditSink."""

    def test_creates_parent_directories(self, temp_dir: Path):
        log_path = temp_dir / "nested" / "dir" / "audit.jsonl"

        JSONLAuditSink(log_path).log(make_event())

        assert log_path.exists()

    def test_appends_one_line_per_event(self, temp_dir: Path):
        log_path = temp_dir / "audit.jsonl"
        log_path.write_text('{"existing":true}\n')
        sink = JSONLAuditSink(log_path)

        sink.log(make_event("read"))
        sink.log(make_event("install", path="/ws/.agent/skills/pdf-tools"))

        lines = log_path.read_text().splitlines()
        assert len(lines) == 3
        assert json.loads(lines[0]) == {"existing": True}
        assert json.loads(lines[2])["kind"] == "install"

    def test_compact_json_format(self, temp_dir: Path):
        log_path = temp_dir / "audit.jsonl"

        JSONLAuditSink(log_path).log(make_event())

        line = log_path.read_text().strip()
        assert ", " not in line
        assert ": " not in line
        assert json.loads(line) == {
            "ts": "2024-01-01T12:00:00",
            "kind": "read",
            "skill": "pdf-tools",
            "path": "/skills/pdf-tools/SKILL.md",
            "detail": {"chars": 120},
        }

    def test_round_trip_through_from_dict(self, temp_dir: Path):
        log_path = temp_dir / "audit.jsonl"
        event = make_event("paths", skill=None, detail={"operation": "add", "changed": True})

        JSONLAuditSink(log_path).log(event)

        assert AuditEvent.from_dict(json.loads(log_path.read_text())) == event


class TestStderrAuditSink:
    """Tests for StderrAuditSink."""

    def test_writes_to_given_stream(self):
        stream = io.StringIO()

        StderrAuditSink(stream).log(make_event("error", detail={"error": "boom"}))

        payload = json.loads(stream.getvalue())
        assert payload["kind"] == "error"
        assert payload["detail"] == {"error": "boom"}

    def test_defaults_to_stderr(self, capsys):
        StderrAuditSink().log(make_event())

        captured = capsys.readouterr()
        assert captured.out == ""
        assert json.loads(captured.err)["kind"] == "read"
