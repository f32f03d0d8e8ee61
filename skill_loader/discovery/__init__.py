"""Discovery module for skill scanning and path probing."""

from skill_loader.discovery.probe import probe_path, probe_paths
from skill_loader.discovery.scanner import (
    DO_NOT_SCAN,
    SKILL_FILENAME,
    DirectoryScanner,
    scan,
    scan_all,
)

__all__ = [
    "DO_NOT_SCAN",
    "SKILL_FILENAME",
    "DirectoryScanner",
    "probe_path",
    "probe_paths",
    "scan",
    "scan_all",
]
