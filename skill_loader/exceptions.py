"""Exception classes for the skill loader."""


class SkillLoaderError(Exception):
    """Base exception for all skill loader errors."""
    pass


class SkillNotFoundError(SkillLoaderError):
    """Raised when no discovered skill has the requested name."""
    pass


class SkillReadError(SkillLoaderError):
    """Raised when a skill's SKILL.md cannot be read."""
    pass


class InstallError(SkillLoaderError):
    """Raised when copying a skill into the workspace fails."""
    pass


class PolicyViolationError(SkillLoaderError):
    """Raised when an operation violates security policy."""
    pass


class PathTraversalError(PolicyViolationError):
    """Raised when an install target escapes the workspace root."""
    pass


class ConfigError(SkillLoaderError):
    """Raised when the persisted search path list is unreadable or invalid."""
    pass


class InvalidArgumentError(SkillLoaderError):
    """Raised when a request is missing or has an invalid argument."""
    pass
