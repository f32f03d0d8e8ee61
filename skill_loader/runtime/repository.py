"""Central access point for skill discovery, reading and installation.

This module provides the SkillsRepository class, which ties the resolved
configuration, the persisted search path list, the directory scanner, the
path prober and the installer together.

The repository keeps no scan state: every call that needs skills walks the
configured roots again, so results always reflect the filesystem as it is.
"""

from datetime import datetime
from pathlib import Path

from skill_loader.config.settings import LoaderConfig, dedupe
from skill_loader.config.store import SearchPathStore
from skill_loader.discovery.probe import probe_paths
from skill_loader.discovery.scanner import DirectoryScanner
from skill_loader.exceptions import (
    ConfigError,
    InvalidArgumentError,
    SkillNotFoundError,
    SkillReadError,
)
from skill_loader.models import (
    AuditEvent,
    ScanResult,
    ScanWarning,
    SkillInfo,
)
from skill_loader.observability.audit import AuditSink
from skill_loader.runtime.installer import install_skill, resolve_install_target

PATH_OPERATIONS = ("add", "remove", "list")


class SkillsRepository:
    """Skill discovery and access over a set of search roots.

    Example:
        >>> from skill_loader.config import LoaderConfig
        >>> repo = SkillsRepository(LoaderConfig.from_environ())
        >>> for skill in repo.list_skills():
        ...     print(f"- {skill.name}: {skill.description}")
        >>> content = repo.read("writing-dax-measures")
        >>> repo.install("writing-dax-measures")
        PosixPath('/workspace/.agent/skills/writing-dax-measures')
    """

    def __init__(
        self,
        config: LoaderConfig,
        scanner: DirectoryScanner | None = None,
        audit_sink: AuditSink | None = None,
    ):
        """Initialize repository with configuration.

        Args:
            config: Resolved loader configuration
            scanner: Optional DirectoryScanner. If None, the default scanner
                     (SKILL.md, default exclusions, no symlink following) is used.
            audit_sink: Optional AuditSink for logging operations.
                       If None, audit logging is disabled.
        """
        self._config = config
        self._scanner = scanner or DirectoryScanner()
        self._audit_sink = audit_sink
        self._store = SearchPathStore(
            config.search_paths_file,
            base_dir=config.workspace_root,
        )

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def workspace_root(self) -> Path:
        return self._config.workspace_root

    @property
    def store(self) -> SearchPathStore:
        return self._store

    @property
    def skill_filename(self) -> str:
        return self._scanner.skill_filename

    # --- Search paths ---

    def base_paths(self) -> list[str]:
        """Default root plus roots from MCP_SKILL_PATHS."""
        return self._config.base_paths()

    def dynamic_paths(self) -> list[str]:
        """Roots persisted in skill-paths.json.

        Raises:
            ConfigError: If the file exists but is unreadable or invalid
        """
        return self._store.load()

    def effective_paths(self) -> list[str]:
        """Base roots then dynamic roots, de-duplicated.

        An invalid skill-paths.json contributes no roots here; scan() reports
        it as a warning.
        """
        paths, _ = self._resolve_paths()
        return paths

    def search_paths(self) -> dict[str, list[str]]:
        """Return the ``dynamic``, ``global`` and ``effective`` path lists."""
        dynamic = self.dynamic_paths()
        base = self.base_paths()
        return {
            "dynamic": dynamic,
            "global": base,
            "effective": dedupe([*base, *dynamic]),
        }

    def add_search_path(self, raw_path: str) -> tuple[bool, str]:
        """Persist a new search root.

        Returns:
            Tuple of (whether it was added, normalized absolute path)
        """
        added, normalized = self._store.add(raw_path)
        self._audit("paths", path=normalized, detail={"operation": "add", "changed": added})
        return added, normalized

    def remove_search_path(self, raw_path: str) -> tuple[bool, str]:
        """Remove a persisted search root.

        Returns:
            Tuple of (whether it was removed, normalized absolute path)
        """
        removed, normalized = self._store.remove(raw_path)
        self._audit("paths", path=normalized, detail={"operation": "remove", "changed": removed})
        return removed, normalized

    # --- Discovery ---

    def scan(self) -> ScanResult:
        """Walk every effective root and collect skills and warnings.

        A broken skill-paths.json becomes the first warning of the result.
        """
        paths, config_warning = self._resolve_paths()

        result = ScanResult()
        if config_warning is not None:
            result.warnings.append(config_warning)
        result.extend(self._scanner.scan_all(paths))

        self._audit(
            "scan",
            detail={
                "roots": len(paths),
                "skills_found": len(result.skills),
                "warnings": len(result.warnings),
            },
        )
        return result

    def list_skills(self) -> list[SkillInfo]:
        """Return all skills currently on disk, in scan order."""
        return self.scan().skills

    def find(self, name: str) -> SkillInfo:
        """Return the first skill whose name is exactly ``name``.

        Raises:
            SkillNotFoundError: If no skill has that name
        """
        skill = self.scan().find(name)
        if skill is None:
            raise SkillNotFoundError(f"Skill '{name}' not found.")
        return skill

    # --- Skill operations ---

    def read(self, name: str) -> tuple[SkillInfo, str]:
        """Load the full SKILL.md text of a skill.

        Returns:
            Tuple of (SkillInfo, SKILL.md content)

        Raises:
            SkillNotFoundError: If no skill has that name
            SkillReadError: If SKILL.md cannot be read
        """
        skill = self.find(name)
        skill_md = skill.path / self.skill_filename
        try:
            content = skill_md.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self._audit("error", skill=name, path=str(skill_md), detail={"error": str(e)})
            raise SkillReadError(f"Failed to read skill: {e}") from e

        self._audit("read", skill=name, path=str(skill_md), detail={"chars": len(content)})
        return skill, content

    def install(self, name: str, target_path: str | None = None) -> Path:
        """Copy a skill into the workspace.

        Args:
            name: Skill name
            target_path: Destination relative to (and within) the workspace
                         root. Defaults to ``.agent/skills/<name>``.

        Returns:
            The destination directory

        Raises:
            SkillNotFoundError: If no skill has that name
            PathTraversalError: If the target escapes the workspace root
            InstallError: If copying fails
        """
        skill = self.find(name)
        dest = resolve_install_target(self.workspace_root, skill.name, target_path)
        install_skill(skill, dest)
        self._audit(
            "install",
            skill=name,
            path=str(dest),
            detail={"source": str(skill.path)},
        )
        return dest

    def debug_info(self) -> dict:
        """Collect configuration, path status and scan warnings for diagnostics."""
        base = self.base_paths()
        try:
            dynamic = self.dynamic_paths()
        except ConfigError:
            dynamic = []
        effective = dedupe([*base, *dynamic])
        result = self.scan()

        return {
            "workspace_root": str(self.workspace_root),
            "search_paths": {
                "base": base,
                "dynamic": dynamic,
                "effective": effective,
            },
            "path_status": [status.to_dict() for status in probe_paths(effective)],
            "env": self._config.env_summary(),
            "skills_found": len(result.skills),
            "warnings": [warning.to_dict() for warning in result.warnings],
        }

    # --- Internals ---

    def _resolve_paths(self) -> tuple[list[str], ScanWarning | None]:
        base = self.base_paths()
        try:
            dynamic = self._store.load()
        except ConfigError as e:
            self._audit("error", path=str(self._store.path), detail={"error": str(e)})
            return base, ScanWarning(self._store.path, f"Invalid search path config: {e}")
        return dedupe([*base, *dynamic]), None

    def _audit(
        self,
        kind: str,
        skill: str | None = None,
        path: str | None = None,
        detail: dict | None = None,
    ) -> None:
        if self._audit_sink is None:
            return
        self._audit_sink.log(
            AuditEvent(
                ts=datetime.now(),
                kind=kind,
                skill=skill,
                path=path,
                detail=detail or {},
            )
        )


def validate_path_operation(operation: str, path: str | None) -> None:
    """Check a manage-search-paths request before it touches the store.

    Raises:
        InvalidArgumentError: For an unknown operation, or add/remove without a path
    """
    if operation not in PATH_OPERATIONS:
        raise InvalidArgumentError(f"Invalid operation: {operation}")
    if operation != "list" and not path:
        raise InvalidArgumentError("Path argument is required for add/remove operations.")
