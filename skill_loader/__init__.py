"""Agent Skill Loader - discover, read and install agent skills.

A skill is a directory containing a SKILL.md instruction file. This library
scans configured search roots for skills, collects structured warnings for
anything it cannot read, and serves list/read/install operations to agents
through an MCP server, LangChain tools or the command line.
"""

from skill_loader.exceptions import (
    ConfigError,
    InstallError,
    InvalidArgumentError,
    PathTraversalError,
    PolicyViolationError,
    SkillLoaderError,
    SkillNotFoundError,
    SkillReadError,
)

from skill_loader.models import (
    AuditEvent,
    PathStatus,
    ScanResult,
    ScanWarning,
    SkillInfo,
    ToolResponse,
)

from skill_loader.config import LoaderConfig, SearchPathStore, load_roots
from skill_loader.discovery import DirectoryScanner, probe_paths, scan, scan_all
from skill_loader.parsing import extract_description
from skill_loader.observability import AuditSink, JSONLAuditSink, StderrAuditSink
from skill_loader.runtime import SkillsRepository
from skill_loader.adapters import SkillToolHandlers

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "ConfigError",
    "InstallError",
    "InvalidArgumentError",
    "PathTraversalError",
    "PolicyViolationError",
    "SkillLoaderError",
    "SkillNotFoundError",
    "SkillReadError",
    # Models
    "AuditEvent",
    "PathStatus",
    "ScanResult",
    "ScanWarning",
    "SkillInfo",
    "ToolResponse",
    # Discovery
    "DirectoryScanner",
    "extract_description",
    "probe_paths",
    "scan",
    "scan_all",
    # Configuration
    "LoaderConfig",
    "SearchPathStore",
    "load_roots",
    # Runtime
    "SkillsRepository",
    "SkillToolHandlers",
    # Observability
    "AuditSink",
    "JSONLAuditSink",
    "StderrAuditSink",
]
