"""Tests for SkillsRepository."""

from pathlib import Path

import pytest

from skill_loader.config.settings import LoaderConfig
from skill_loader.discovery.scanner import DirectoryScanner
from skill_loader.exceptions import (
    ConfigError,
    InvalidArgumentError,
    PathTraversalError,
    SkillNotFoundError,
    SkillReadError,
)
from skill_loader.models import AuditEvent
from skill_loader.observability.audit import AuditSink
from skill_loader.runtime.repository import SkillsRepository, validate_path_operation


class RecordingSink(AuditSink):
    def __init__(self):
        self.events: list[AuditEvent] = []

    def log(self, event: AuditEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[str]:
        return [event.kind for event in self.events]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def repo(config: LoaderConfig, sink: RecordingSink) -> SkillsRepository:
    return SkillsRepository(config, audit_sink=sink)


def test_repository_initialization(config: LoaderConfig):
    """Test that repository can be initialized with basic configuration."""
    repo = SkillsRepository(config)

    assert repo.workspace_root == config.workspace_root
    assert repo.store.path == config.workspace_root / "skill-paths.json"
    assert repo.skill_filename == "SKILL.md"


def test_list_skills(repo: SkillsRepository, skills_root: Path):
    """Test that skills under MCP_SKILL_PATHS are discovered in walk order."""
    skills = repo.list_skills()

    assert [s.name for s in skills] == ["writing-dax-measures", "pdf-tools"]
    assert all(s.source == skills_root for s in skills)
    assert skills[1].description == "Work with PDF files"


def test_scan_reflects_filesystem_changes(repo: SkillsRepository, skills_root: Path, make_skill):
    """Test that every call re-scans the roots."""
    assert len(repo.list_skills()) == 2

    make_skill(skills_root, "new-skill")

    assert "new-skill" in [s.name for s in repo.list_skills()]


def test_missing_default_root_warns(repo: SkillsRepository, config: LoaderConfig):
    """Test that the absent plugin cache is reported, not fatal."""
    result = repo.scan()

    assert result.warnings[0].path == str(config.home / ".claude" / "plugins" / "cache")
    assert result.warnings[0].reason == "Directory does not exist"


def test_scan_audited(repo: SkillsRepository, sink: RecordingSink):
    repo.scan()

    assert sink.kinds() == ["scan"]
    assert sink.events[0].detail["skills_found"] == 2
    assert sink.events[0].detail["roots"] == 2


def test_find_first_match_wins(repo: SkillsRepository, temp_dir: Path, make_skill):
    """Test that the earlier root wins for duplicate names."""
    second_root = temp_dir / "second"
    make_skill(second_root, "pdf-tools", "Shadowed")
    repo.add_search_path(str(second_root))

    skill = repo.find("pdf-tools")

    assert skill.description == "Work with PDF files"
    assert [s.name for s in repo.list_skills()].count("pdf-tools") == 2


def test_find_unknown_skill(repo: SkillsRepository):
    with pytest.raises(SkillNotFoundError, match="Skill 'nope' not found."):
        repo.find("nope")


def test_find_is_case_sensitive(repo: SkillsRepository):
    with pytest.raises(SkillNotFoundError):
        repo.find("PDF-TOOLS")


class TestRead:
    """Tests for reading SKILL.md content."""

    def test_read_returns_full_content(self, repo: SkillsRepository, skills_root: Path, sink):
        skill, content = repo.read("pdf-tools")

        assert skill.path == skills_root / "pdf-tools"
        assert content == (skills_root / "pdf-tools" / "SKILL.md").read_text()
        assert sink.kinds()[-1] == "read"
        assert sink.events[-1].skill == "pdf-tools"

    def test_read_failure(self, repo: SkillsRepository, monkeypatch, sink):
        real_read_text = Path.read_text
        reads = {"count": 0}

        def read_text(self, *args, **kwargs):
            # first read is the scan, second is the actual load
            if self.name == "SKILL.md" and self.parent.name == "pdf-tools":
                reads["count"] += 1
                if reads["count"] > 1:
                    raise PermissionError(13, "Permission denied")
            return real_read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", read_text)

        with pytest.raises(SkillReadError) as exc_info:
            repo.read("pdf-tools")

        assert str(exc_info.value).startswith("Failed to read skill:")
        assert sink.kinds()[-1] == "error"


class TestInstall:
    """Tests for installing skills into the workspace."""

    def test_install_default_location(self, repo: SkillsRepository, workspace: Path, sink):
        dest = repo.install("pdf-tools")

        assert dest == workspace / ".agent" / "skills" / "pdf-tools"
        assert (dest / "scripts" / "extract.py").exists()
        assert sink.kinds()[-1] == "install"

    def test_install_custom_target(self, repo: SkillsRepository, workspace: Path):
        dest = repo.install("writing-dax-measures", "custom/dax")

        assert dest == workspace / "custom" / "dax"
        assert (dest / "SKILL.md").exists()

    def test_install_outside_workspace(self, repo: SkillsRepository, workspace: Path):
        with pytest.raises(PathTraversalError):
            repo.install("pdf-tools", "../escape")

        assert not (workspace.parent / "escape").exists()

    def test_install_unknown_skill(self, repo: SkillsRepository):
        with pytest.raises(SkillNotFoundError):
            repo.install("nope")


class TestSearchPaths:
    """Tests for persisted search root management."""

    def test_add_and_list(self, repo: SkillsRepository, config: LoaderConfig, skills_root: Path, temp_dir):
        extra = str(temp_dir / "extra")

        added, normalized = repo.add_search_path(extra)
        paths = repo.search_paths()

        assert (added, normalized) == (True, extra)
        assert paths["dynamic"] == [extra]
        assert paths["global"] == config.base_paths()
        assert paths["effective"] == [*config.base_paths(), extra]

    def test_added_root_is_scanned(self, repo: SkillsRepository, temp_dir: Path, make_skill):
        extra = temp_dir / "extra"
        make_skill(extra, "extra-skill")

        repo.add_search_path(str(extra))

        assert repo.find("extra-skill").source == extra

    def test_relative_path_anchored_at_workspace(self, repo: SkillsRepository, workspace: Path):
        _, normalized = repo.add_search_path("local-skills")

        assert normalized == str(workspace / "local-skills")

    def test_remove(self, repo: SkillsRepository, sink):
        repo.add_search_path("/opt/skills")

        removed, _ = repo.remove_search_path("/opt/skills")
        removed_again, _ = repo.remove_search_path("/opt/skills")

        assert removed is True
        assert removed_again is False
        assert repo.dynamic_paths() == []
        assert [e.detail["operation"] for e in sink.events if e.kind == "paths"] == [
            "add", "remove", "remove"
        ]

    def test_duplicate_of_base_path_not_repeated(self, repo: SkillsRepository, skills_root: Path):
        repo.add_search_path(str(skills_root))

        assert repo.effective_paths().count(str(skills_root)) == 1

    def test_blank_persisted_path_is_reported_missing(self, repo: SkillsRepository,
                                                      config: LoaderConfig, make_skill,
                                                      monkeypatch):
        make_skill(config.workspace_root, "cwd-skill")
        monkeypatch.chdir(config.workspace_root)
        config.search_paths_file.write_text('[""]')

        info = repo.debug_info()

        assert info["skills_found"] == 2
        assert {"path": "", "exists": False, "readable": False} in info["path_status"]
        assert {"path": "", "reason": "Directory does not exist"} in info["warnings"]


class TestCorruptConfig:
    """Tests for an invalid skill-paths.json."""

    @pytest.fixture(autouse=True)
    def corrupt(self, config: LoaderConfig):
        config.search_paths_file.write_text("{not json")

    def test_scan_reports_first_warning(self, repo: SkillsRepository, config: LoaderConfig):
        result = repo.scan()

        assert result.warnings[0].path == config.search_paths_file
        assert result.warnings[0].reason.startswith("Invalid search path config:")
        assert len(result.skills) == 2

    def test_effective_paths_fall_back_to_base(self, repo: SkillsRepository, config: LoaderConfig):
        assert repo.effective_paths() == config.base_paths()

    def test_management_raises(self, repo: SkillsRepository, config: LoaderConfig):
        with pytest.raises(ConfigError):
            repo.search_paths()
        with pytest.raises(ConfigError):
            repo.add_search_path("/x")

        assert config.search_paths_file.read_text() == "{not json"

    def test_error_audited(self, repo: SkillsRepository, sink):
        repo.scan()

        assert sink.kinds() == ["error", "scan"]

    def test_debug_info_still_works(self, repo: SkillsRepository):
        info = repo.debug_info()

        assert info["search_paths"]["dynamic"] == []
        assert info["warnings"][0]["reason"].startswith("Invalid search path config:")


def test_debug_info(repo: SkillsRepository, config: LoaderConfig, skills_root: Path):
    """Test the diagnostic snapshot."""
    info = repo.debug_info()

    assert info["workspace_root"] == str(config.workspace_root)
    assert info["search_paths"]["effective"] == config.base_paths()
    assert info["path_status"] == [
        {"path": config.base_paths()[0], "exists": False, "readable": False},
        {"path": str(skills_root), "exists": True, "readable": True},
    ]
    assert info["env"] == {"MCP_SKILL_PATHS": str(skills_root), "MCP_WORKSPACE_ROOT": None}
    assert info["skills_found"] == 2
    assert info["warnings"] == [
        {"path": config.base_paths()[0], "reason": "Directory does not exist"}
    ]


def test_custom_scanner(config: LoaderConfig, skills_root: Path, make_skill):
    """Test that an injected scanner's exclusions are used."""
    make_skill(skills_root / "vendor", "vendored")
    repo = SkillsRepository(config, scanner=DirectoryScanner(excluded={"vendor"}))

    assert "vendored" not in [s.name for s in repo.list_skills()]


class TestValidatePathOperation:
    """Tests for manage-search-paths argument checks."""

    @pytest.mark.parametrize("operation,path", [("list", None), ("add", "/x"), ("remove", "/x")])
    def test_valid(self, operation, path):
        validate_path_operation(operation, path)

    def test_unknown_operation(self):
        with pytest.raises(InvalidArgumentError, match="Invalid operation: purge"):
            validate_path_operation("purge", "/x")

    @pytest.mark.parametrize("operation", ["add", "remove"])
    @pytest.mark.parametrize("path", [None, ""])
    def test_missing_path(self, operation, path):
        with pytest.raises(InvalidArgumentError, match="Path argument is required"):
            validate_path_operation(operation, path)
