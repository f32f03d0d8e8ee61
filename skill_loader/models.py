"""Data models for the skill loader."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class SkillInfo:
    """One discovered skill.

    ``path`` is the directory holding SKILL.md, ``source`` the search root it
    was found under. Both are snapshots taken at scan time.
    """
    name: str
    description: str
    path: Path
    source: Path

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "name": self.name,
            "description": self.description,
            "path": str(self.path),
            "source": str(self.source),
        }

    def to_listing(self) -> dict:
        """Public view used by skill listings (no filesystem location)."""
        return {
            "name": self.name,
            "description": self.description,
            "source_root": str(self.source),
        }


@dataclass(frozen=True)
class ScanWarning:
    """A recoverable problem met while scanning.

    ``path`` is the search root as configured for a missing root, otherwise
    the directory or file that failed.
    """
    path: Path | str
    reason: str

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {"path": str(self.path), "reason": self.reason}


@dataclass
class ScanResult:
    """Skills and warnings produced by a single scan."""
    skills: list[SkillInfo] = field(default_factory=list)
    warnings: list[ScanWarning] = field(default_factory=list)

    def extend(self, other: "ScanResult") -> None:
        """Append another result, keeping its internal order."""
        self.skills.extend(other.skills)
        self.warnings.extend(other.warnings)

    def find(self, name: str) -> SkillInfo | None:
        """Return the first skill named exactly ``name``."""
        for skill in self.skills:
            if skill.name == name:
                return skill
        return None

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "skills": [skill.to_dict() for skill in self.skills],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


@dataclass(frozen=True)
class PathStatus:
    """Existence and read permission of a search path."""
    path: str
    exists: bool
    readable: bool

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "path": self.path,
            "exists": self.exists,
            "readable": self.readable,
        }


@dataclass
class AuditEvent:
    """Record of a loader operation."""
    ts: datetime
    kind: str  # "scan", "read", "install", "paths", "error"
    skill: str | None = None
    path: str | None = None
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ts": self.ts.isoformat(),
            "kind": self.kind,
            "skill": self.skill,
            "path": self.path,
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AuditEvent":
        """Deserialize from dict."""
        return cls(
            ts=datetime.fromisoformat(data["ts"]),
            kind=data["kind"],
            skill=data.get("skill"),
            path=data.get("path"),
            detail=data.get("detail", {}),
        )


@dataclass
class ToolResponse:
    """Unified response format for all request handlers."""
    ok: bool
    type: str  # "skills", "instructions", "install", "search_paths", "debug", "error"
    skill: str
    path: str | None = None
    content: str | list | dict | None = None
    bytes: int | None = None
    sha256: str | None = None
    meta: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ok": self.ok,
            "type": self.type,
            "skill": self.skill,
            "path": self.path,
            "content": self.content,
            "bytes": self.bytes,
            "sha256": self.sha256,
            "meta": self.meta,
        }
