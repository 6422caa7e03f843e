#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for tree conversion.

Functions:
    find_matching_files: Recursively list files ending with a suffix
    mirror_path: Map a source file onto the destination tree
    write_text_atomic: Write a file via a temporary sibling and rename
    remove_if_exists: Delete a file, ignoring a missing one
    read_text: Read a file keeping its line endings as they are

Usage:
    from h2h.utils.fs import find_matching_files, mirror_path, write_text_atomic

    for src in find_matching_files(Path("source/_posts"), ".md"):
        dst = mirror_path(src, Path("source/_posts"), Path("content/posts"))
        write_text_atomic(dst, convert(src.read_text(encoding="utf-8")))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import tempfile
from pathlib import Path
from typing import List

# --- Local imports ---
from h2h.core.exceptions import WalkError


def find_matching_files(directory: Path, suffix: str) -> List[Path]:
    """
    Find every file below ``directory`` whose name ends with ``suffix``.

    The whole tree is listed before returning. Directories are never
    returned, even when their name ends with the suffix.

    Args:
        directory: Root of the tree to walk
        suffix: File name ending to match (e.g. ``.md``)

    Returns:
        Sorted list of matching file paths

    Raises:
        WalkError: If the root is missing or any directory cannot be listed
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise WalkError(f"source directory not found: {directory}")

    def _raise(error: OSError) -> None:
        raise WalkError(f"walking source directory {directory}: {error}") from error

    matches: List[Path] = []
    for root, _dirs, files in os.walk(directory, onerror=_raise):
        for name in files:
            if name.endswith(suffix):
                matches.append(Path(root) / name)
    return sorted(matches)


def mirror_path(source: Path, source_root: Path, destination_root: Path) -> Path:
    """
    Return the destination path mirroring ``source`` under ``destination_root``.

    Examples:
        >>> mirror_path(Path("src/nested/post.md"), Path("src"), Path("dst"))
        PosixPath('dst/nested/post.md')
    """
    return Path(destination_root) / Path(source).relative_to(source_root)


def write_text_atomic(
    path: Path, text: str, encoding: str = "utf-8", mode: int = 0o644
) -> None:
    """
    Write ``text`` to ``path`` without ever leaving a half-written file.

    Data goes to a temporary file in the same directory, which then
    replaces ``path``. On failure the temporary file is removed and the
    error propagates.

    Raises:
        OSError: If the temporary file cannot be created, written or renamed
    """
    path = Path(path)
    fd, temp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
        os.chmod(temp_path, mode)
        os.replace(temp_path, path)
    except BaseException:
        remove_if_exists(temp_path)
        raise


def remove_if_exists(path: Path) -> bool:
    """
    Delete ``path`` if it is a file.

    Returns:
        True if a file was removed
    """
    if Path(path).is_dir():
        return False
    try:
        Path(path).unlink()
    except FileNotFoundError:
        return False
    return True


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file without translating line endings."""
    with open(path, "r", encoding=encoding, newline="") as handle:
        return handle.read()
