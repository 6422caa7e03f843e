#!/usr/bin/env python3
"""
converter.py
-------------------
Convert whole Markdown documents.

Splits a post into front matter and body, transcodes the front matter and
writes it back in front of the untouched body, one blank line apart.

Programmatic API:
    from h2h.pipeline.converter import MarkdownConverter

    mc = MarkdownConverter.from_config(config)
    text = mc.convert(source_text)
    mc.convert_file(Path("hexo/_posts/a.md"), Path("hugo/posts/a.md"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Local imports ---
from h2h.core.config import Config
from h2h.pipeline.frontmatter import FrontMatterConverter
from h2h.utils.fs import read_text, remove_if_exists, write_text_atomic
from h2h.utils.md import join_frontmatter, split_frontmatter


class MarkdownConverter:
    """Rewrites the front matter of Markdown documents, leaving bodies intact."""

    def __init__(self, front_matter_converter: FrontMatterConverter) -> None:
        self.front_matter_converter = front_matter_converter

    @classmethod
    def from_config(cls, config: Config) -> "MarkdownConverter":
        """
        Raises:
            ConfigurationError: If the config names an unsupported format
        """
        return cls(FrontMatterConverter.from_config(config))

    def convert(self, content: str) -> str:
        """
        Convert one document.

        Args:
            content: Full document text

        Returns:
            Converted front matter, a blank line, then the original body

        Raises:
            InvalidDocumentError: If the front matter delimiters are missing
            DecodeError: If the front matter cannot be parsed
            EncodeError: If the front matter cannot be re-encoded
        """
        front_matter, body = split_frontmatter(content)
        block = self.front_matter_converter.convert(front_matter)
        return join_frontmatter(block, body)

    def convert_file(self, source: Path, destination: Path) -> None:
        """
        Convert ``source`` and write the result to ``destination``.

        The destination's parent must exist. If anything fails, no
        destination file is left behind and the error propagates.

        Raises:
            OSError: On read or write failure
            InvalidDocumentError, DecodeError, EncodeError: As ``convert``
        """
        try:
            converted = self.convert(read_text(source))
            write_text_atomic(destination, converted)
        except BaseException:
            remove_if_exists(destination)
            raise
