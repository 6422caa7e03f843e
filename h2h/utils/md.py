#!/usr/bin/env python3
"""
md.py
-------------------
Markdown front matter splitting and joining.

A post looks like:

    ---
    title: Hello
    date: 2024-01-15
    ---

    Body content here...

Only the first two delimiter lines bound the front matter. Anything after
the closing delimiter is body, including further ``---`` lines (horizontal
rules, embedded examples), and is kept byte-for-byte.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import Tuple

# --- Local imports ---
from h2h.core.exceptions import InvalidDocumentError


FRONT_MATTER_DELIMITER = "---"


def _is_opening_delimiter(line: str) -> bool:
    return line.strip() == FRONT_MATTER_DELIMITER


def _is_closing_delimiter(line: str) -> bool:
    # An indented "---" is content, e.g. inside a YAML block scalar
    return line.rstrip() == FRONT_MATTER_DELIMITER


_LINE_BREAKS = ("\n", "\r\n", "\r")


# ----- Front Matter Parsing -----
def split_frontmatter(content: str) -> Tuple[str, str]:
    """
    Split markdown content into front matter text and body.

    Blank lines before the opening delimiter are allowed, and the opening
    line may be indented. The closing line must start with the delimiter;
    an indented ``---`` belongs to the metadata. Empty lines right after
    the closing delimiter are separators, not body; from the first line
    holding any character on, the body is returned unchanged.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (front_matter_text, body)

    Raises:
        InvalidDocumentError: If the content is empty, does not open with a
            delimiter line, or never closes the front matter

    Examples:
        >>> split_frontmatter("---\\ntitle: Hi\\n---\\n\\nBody\\n")
        ('title: Hi\\n', 'Body\\n')
    """
    if not content.strip():
        raise InvalidDocumentError("empty document")

    lines = content.splitlines(keepends=True)

    start = 0
    while not lines[start].strip():
        start += 1

    if not _is_opening_delimiter(lines[start]):
        raise InvalidDocumentError(
            f"missing opening front matter delimiter '{FRONT_MATTER_DELIMITER}'"
        )

    for end in range(start + 1, len(lines)):
        if _is_closing_delimiter(lines[end]):
            break
    else:
        raise InvalidDocumentError(
            f"missing closing front matter delimiter '{FRONT_MATTER_DELIMITER}'"
        )

    body_start = end + 1
    while body_start < len(lines) and lines[body_start] in _LINE_BREAKS:
        body_start += 1

    front_matter = "".join(lines[start + 1 : end])
    body = "".join(lines[body_start:])
    return front_matter, body


def wrap_frontmatter(encoded: str) -> str:
    """
    Surround encoded front matter with delimiter lines.

    The result has no trailing newline; exactly one newline separates the
    encoded text from the closing delimiter.

    Examples:
        >>> wrap_frontmatter("title: Hi\\n")
        '---\\ntitle: Hi\\n---'
    """
    encoded = encoded.rstrip("\n")
    if encoded:
        encoded += "\n"
    return f"{FRONT_MATTER_DELIMITER}\n{encoded}{FRONT_MATTER_DELIMITER}"


def join_frontmatter(front_matter_block: str, body: str) -> str:
    """Join a wrapped front matter block and a body with one blank line."""
    return f"{front_matter_block}\n\n{body}"
