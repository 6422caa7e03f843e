"""
Utilities package for h2h.

- md: Front matter splitting and joining
- fs: File discovery, path mirroring and atomic writes

Import commonly-used utilities directly from this package:
    from h2h.utils import split_frontmatter, find_matching_files
"""

# Markdown utilities
from .md import (
    FRONT_MATTER_DELIMITER,
    split_frontmatter,
    wrap_frontmatter,
    join_frontmatter,
)

# Filesystem utilities
from .fs import (
    find_matching_files,
    mirror_path,
    write_text_atomic,
    remove_if_exists,
    read_text,
)

__all__ = [
    # Markdown
    "FRONT_MATTER_DELIMITER",
    "split_frontmatter",
    "wrap_frontmatter",
    "join_frontmatter",
    # Filesystem
    "find_matching_files",
    "mirror_path",
    "write_text_atomic",
    "remove_if_exists",
    "read_text",
]
