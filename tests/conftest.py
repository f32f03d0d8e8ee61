"""Pytest configuration and shared fixtures."""

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest

from skill_loader.config.settings import LoaderConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_skill() -> Callable[..., Path]:
    """Factory creating a skill directory with a SKILL.md."""

    def _make_skill(parent: Path, name: str, description: str | None = "A test skill",
                    content: str | None = None) -> Path:
        skill_dir = parent / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if content is None:
            lines = ["---", f"name: {name}"]
            if description is not None:
                lines.append(f"description: {description}")
            lines += ["---", "", f"# {name}", "", "Instructions for the agent.", ""]
            content = "\n".join(lines)
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return skill_dir

    return _make_skill


@pytest.fixture
def workspace(temp_dir: Path) -> Path:
    """Create an empty workspace root."""
    root = temp_dir / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def home(temp_dir: Path) -> Path:
    """Create a fake home directory (no default plugin cache inside)."""
    home_dir = temp_dir / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def skills_root(temp_dir: Path, make_skill) -> Path:
    """Create a search root with two skills and supporting files."""
    root = temp_dir / "skills"
    pdf = make_skill(root, "pdf-tools", "Work with PDF files")
    (pdf / "scripts").mkdir()
    (pdf / "scripts" / "extract.py").write_text("print('extract')\n")
    make_skill(root / "category", "writing-dax-measures", "Write DAX measures")
    return root


@pytest.fixture
def config(workspace: Path, home: Path, skills_root: Path) -> LoaderConfig:
    """LoaderConfig pointing MCP_SKILL_PATHS at skills_root."""
    return LoaderConfig(
        workspace_root=workspace,
        env={"MCP_SKILL_PATHS": str(skills_root)},
        home=home,
    )
