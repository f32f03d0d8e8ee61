"""Description extraction for SKILL.md files."""

import re

NO_DESCRIPTION = "No description provided."

_DESCRIPTION_LINE = re.compile(r"description:\s*(.+)$")


def extract_description(content: str) -> str:
    """Return the value of the first ``description:`` line in ``content``.

    Only a line-level match is performed, so this works for YAML frontmatter
    and for plain text alike. The key is case-sensitive and must start the
    line; surrounding whitespace of the value is trimmed. A value never
    continues onto the next line: a blank ``description:`` is skipped and
    the search goes on to the next ``description:`` line.

    Args:
        content: Raw SKILL.md text

    Returns:
        The description, or NO_DESCRIPTION when no line matches

    Example:
        >>> extract_description("---\\nname: x\\ndescription: Does things \\n---\\n")
        'Does things'
    """
    for line in content.splitlines():
        match = _DESCRIPTION_LINE.match(line)
        if match is None:
            continue
        value = match.group(1).strip()
        if value:
            return value
    return NO_DESCRIPTION
