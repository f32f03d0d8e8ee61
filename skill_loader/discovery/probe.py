"""Existence and permission checks for search paths."""

import os
from collections.abc import Iterable
from pathlib import Path

from skill_loader.models import PathStatus


def probe_path(path: str | Path) -> PathStatus:
    """Report whether ``path`` exists and is readable by this process."""
    exists = os.path.exists(path)
    readable = exists and os.access(path, os.R_OK)
    return PathStatus(path=str(path), exists=exists, readable=readable)


def probe_paths(paths: Iterable[str | Path]) -> list[PathStatus]:
    """Probe each path, one PathStatus per input in input order.

    Example:
        >>> for status in probe_paths(["/tmp", "/missing"]):
        ...     print(status.path, status.exists, status.readable)
        /tmp True True
        /missing False False
    """
    return [probe_path(path) for path in paths]
