"""Runtime module for skill access and installation."""

from skill_loader.runtime.installer import install_skill, resolve_install_target
from skill_loader.runtime.repository import SkillsRepository

__all__ = ["SkillsRepository", "install_skill", "resolve_install_target"]
