"""JSDoc comment parsing: description text and block tags."""

import re
from typing import List, Optional, Tuple

from .entities import JsDocTagEntry

_TAG_LINE = re.compile(r"^@([A-Za-z][\w-]*)\s*(.*)$")


def clean_jsdoc(raw_jsdoc: str) -> str:
    """
    Remove comment markers and leading '*' gutters from a JSDoc comment.

    Args:
        raw_jsdoc: Raw comment text including ``/**`` and ``*/``.

    Returns:
        Comment body with leading/trailing blank lines removed.
    """
    content = raw_jsdoc
    if content.startswith("/**"):
        content = content[3:]
    if content.endswith("*/"):
        content = content[:-2]

    cleaned_lines = []
    for line in content.split("\n"):
        line = line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        cleaned_lines.append(line)

    return "\n".join(cleaned_lines).strip()


def parse_jsdoc(raw_jsdoc: Optional[str]) -> Tuple[str, Tuple[JsDocTagEntry, ...]]:
    """
    Split a JSDoc comment into its description and block tags.

    Text before the first ``@tag`` line is the description. Each tag's
    comment runs until the next tag line; continuation lines are joined
    with newlines.

    Example:
        >>> parse_jsdoc("/** Sets the phone.\\n * @deprecated Use setContact */")
        ('Sets the phone.', (JsDocTagEntry(name='deprecated', comment='Use setContact'),))
    """
    if not raw_jsdoc:
        return "", ()

    description_lines: List[str] = []
    tags: List[Tuple[str, List[str]]] = []

    for line in clean_jsdoc(raw_jsdoc).split("\n"):
        match = _TAG_LINE.match(line)
        if match:
            tags.append((match.group(1), [match.group(2)]))
        elif tags:
            tags[-1][1].append(line)
        else:
            description_lines.append(line)

    description = "\n".join(description_lines).strip()
    tag_entries = tuple(
        JsDocTagEntry(name=name, comment="\n".join(lines).strip()) for name, lines in tags
    )
    return description, tag_entries


__all__ = ["clean_jsdoc", "parse_jsdoc"]
