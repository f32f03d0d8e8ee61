"""Copying skills into a workspace."""

import os
import shutil
from pathlib import Path

from skill_loader.exceptions import InstallError, PathTraversalError
from skill_loader.models import SkillInfo

DEFAULT_INSTALL_DIR = Path(".agent") / "skills"


def resolve_install_target(
    workspace_root: Path,
    skill_name: str,
    target_path: str | None = None,
) -> Path:
    """Work out where a skill should be copied to.

    Without ``target_path`` the skill goes to ``.agent/skills/<skill_name>``
    under the workspace root. An explicit target is resolved against the
    workspace root and must stay inside it.

    Raises:
        PathTraversalError: If the target lies outside the workspace root
    """
    root = Path(os.path.abspath(workspace_root))

    if not target_path:
        return root / DEFAULT_INSTALL_DIR / skill_name

    dest = Path(os.path.normpath(os.path.join(root, os.path.expanduser(target_path))))
    try:
        dest.relative_to(root)
    except ValueError:
        raise PathTraversalError(
            f"Security error: Target path must be within the current workspace "
            f"({root}). Received: {dest}"
        )
    return dest


def install_skill(skill: SkillInfo, dest: Path) -> Path:
    """Recursively copy a skill directory to ``dest``.

    Existing files at the destination are overwritten; other files already
    there are left alone.

    Raises:
        InstallError: If the copy fails
    """
    try:
        shutil.copytree(skill.path, dest, dirs_exist_ok=True)
    except OSError as e:
        raise InstallError(f"Failed to install skill: {e}") from e
    return dest
