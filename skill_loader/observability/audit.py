"""Audit logging interfaces and implementations for the skill loader.

Events are serialized as single JSON lines. Nothing here writes to stdout,
which carries the MCP protocol when the server runs over stdio.
"""

import json
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from skill_loader.models import AuditEvent


class AuditSink(ABC):
    """Abstract interface for audit logging.

    The repository reports scans, skill reads, installs, search path changes
    and configuration errors through an AuditSink.
    """

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: The AuditEvent to record
        """
        pass


def _to_line(event: AuditEvent) -> str:
    return json.dumps(event.to_dict(), separators=(',', ':'))


class JSONLAuditSink(AuditSink):
    """Appends audit events to a JSONL (JSON Lines) file.

    Example log file content:
        {"ts":"2024-01-01T12:00:00","kind":"scan","skill":null,"path":null,"detail":{"roots":2,...}}
        {"ts":"2024-01-01T12:00:01","kind":"read","skill":"pdf","path":"/skills/pdf/SKILL.md",...}
    """

    def __init__(self, log_path: Path):
        """Initialize with log file path.

        Args:
            log_path: Path to the JSONL log file. Parent directories are
                     created if missing; the file is appended to.
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: AuditEvent) -> None:
        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(_to_line(event) + '\n')


class StderrAuditSink(AuditSink):
    """Writes audit events to stderr (or another text stream).

    Useful when the loader runs as an MCP server under a client that
    captures stderr as its server log.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def log(self, event: AuditEvent) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(_to_line(event), file=stream, flush=True)
