"""Filesystem scanning for skill discovery."""

import errno
import os
from collections.abc import Iterable
from pathlib import Path

from skill_loader.models import ScanResult, ScanWarning, SkillInfo
from skill_loader.parsing.description import extract_description

SKILL_FILENAME = "SKILL.md"

# Directory names never descended into
DO_NOT_SCAN = frozenset({"node_modules", ".git", "dist", "build"})


def describe_error(error: Exception) -> str:
    """Render an exception as ``<ERRNO NAME>: <message>`` where possible."""
    if isinstance(error, OSError) and error.errno in errno.errorcode:
        return f"{errno.errorcode[error.errno]}: {error.strerror}"
    return str(error) or type(error).__name__


class DirectoryScanner:
    """Scans filesystem for skills.

    A skill is a directory containing a SKILL.md file. Once a directory is
    identified as a skill it is treated as a leaf: its subdirectories are
    supporting assets and are never searched for further skills.

    The scanner never raises for filesystem problems. Every missing root,
    unreadable directory, unreadable or empty SKILL.md becomes exactly one
    ScanWarning and scanning continues with the rest of the tree.
    """

    def __init__(
        self,
        skill_filename: str = SKILL_FILENAME,
        excluded: Iterable[str] = DO_NOT_SCAN,
        follow_symlinks: bool = False,
    ):
        """Initialize the scanner.

        Args:
            skill_filename: Name of the file that marks a skill directory
            excluded: Directory names that are never descended into
            follow_symlinks: Whether symlinked directories and files count.
                             When enabled, directories are visited at most
                             once per real path so link cycles terminate.
        """
        self.skill_filename = skill_filename
        self.excluded = frozenset(excluded)
        self.follow_symlinks = follow_symlinks

    def scan(self, root: str | Path) -> ScanResult:
        """Find all skills below a single search root.

        Args:
            root: Search root to walk. A missing root is reported in the
                  warning exactly as passed in; "~" is expanded for the walk.

        Returns:
            ScanResult with skills in depth-first, name-sorted order and the
            warnings collected along the way

        Example:
            >>> scanner = DirectoryScanner()
            >>> result = scanner.scan("~/.claude/plugins/cache")
            >>> print(f"Found {len(result.skills)} skills")
        """
        result = ScanResult()

        # "" must not fall through to Path(""), which is the current directory
        if not root or not os.path.exists(os.path.expanduser(root)):
            result.warnings.append(ScanWarning(root, "Directory does not exist"))
            return result

        source = Path(root).expanduser()

        visited: set[str] = set()
        stack = [Path(os.path.abspath(source))]

        while stack:
            current = stack.pop()

            if self.follow_symlinks:
                real = os.path.realpath(current)
                if real in visited:
                    continue
                visited.add(real)

            try:
                entries = self._list_entries(current)
            except OSError as e:
                result.warnings.append(
                    ScanWarning(current, f"Cannot read directory: {describe_error(e)}")
                )
                continue

            if any(name == self.skill_filename and is_file for name, is_file, _ in entries):
                skill = self._read_skill(current, source, result.warnings)
                if skill is not None:
                    result.skills.append(skill)
                continue

            # Reversed so the lexically first subdirectory is visited first
            for name, _, is_dir in reversed(entries):
                if is_dir and name not in self.excluded:
                    stack.append(current / name)

        return result

    def scan_all(self, roots: Iterable[str | Path]) -> ScanResult:
        """Scan every root in order and concatenate the results.

        Skills with the same name under different roots are all kept.
        """
        merged = ScanResult()
        for root in roots:
            merged.extend(self.scan(root))
        return merged

    def _list_entries(self, directory: Path) -> list[tuple[str, bool, bool]]:
        """List ``(name, is_file, is_dir)`` for a directory, sorted by name."""
        with os.scandir(directory) as it:
            entries = [
                (
                    entry.name,
                    entry.is_file(follow_symlinks=self.follow_symlinks),
                    entry.is_dir(follow_symlinks=self.follow_symlinks),
                )
                for entry in it
            ]
        entries.sort(key=lambda entry: entry[0])
        return entries

    def _read_skill(
        self,
        skill_dir: Path,
        source: Path,
        warnings: list[ScanWarning],
    ) -> SkillInfo | None:
        skill_md = skill_dir / self.skill_filename

        try:
            content = skill_md.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            warnings.append(
                ScanWarning(skill_md, f"Cannot read {self.skill_filename}: {describe_error(e)}")
            )
            return None

        if not content.strip():
            warnings.append(ScanWarning(skill_md, f"{self.skill_filename} is empty"))
            return None

        return SkillInfo(
            name=skill_dir.name,
            description=extract_description(content),
            path=skill_dir,
            source=source,
        )


def scan(root: str | Path) -> ScanResult:
    """Scan a single root with the default scanner settings."""
    return DirectoryScanner().scan(root)


def scan_all(roots: Iterable[str | Path]) -> ScanResult:
    """Scan several roots with the default scanner settings."""
    return DirectoryScanner().scan_all(roots)
