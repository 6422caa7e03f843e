#!/usr/bin/env python3
"""
frontmatter.py
-------------------
Transcode a single front matter block.

Decodes the block under the source format, renames keys through the
direction's table, encodes under the target format and wraps the result
in delimiter lines:

    title: Hello          ---
    permalink: /x    ->   slug: /x
                          title: Hello
                          ---

Programmatic API:
    from h2h.pipeline.frontmatter import FrontMatterConverter

    fmc = FrontMatterConverter.from_config(config)
    block = fmc.convert("title: Hello\\npermalink: /x\\n")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

# --- Local imports ---
from h2h.core.config import Config
from h2h.pipeline import codecs
from h2h.pipeline.codecs import Format
from h2h.pipeline.keymaps import remap_keys
from h2h.utils.md import wrap_frontmatter


class FrontMatterConverter:
    """
    Converts front matter text from one format and schema to another.

    Holds no mutable state, so one instance can be shared by every worker
    of a run.

    Attributes:
        source_format: Format the block is decoded with
        target_format: Format the block is encoded with
        key_map: Source key -> target key renames
    """

    def __init__(
        self,
        source_format: Format | str,
        target_format: Format | str,
        key_map: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Raises:
            ConfigurationError: If either format is unsupported
        """
        self.source_format = Format.parse(source_format)
        self.target_format = Format.parse(target_format)
        self.key_map: Mapping[str, str] = MappingProxyType(dict(key_map or {}))

    @classmethod
    def from_config(cls, config: Config) -> "FrontMatterConverter":
        return cls(config.source_format, config.target_format, config.key_map)

    def transform(self, metadata: Mapping[str, Any]) -> Dict[str, Any]:
        """Rename keys of already-decoded metadata."""
        return remap_keys(metadata, self.key_map)

    def convert(self, front_matter: str) -> str:
        """
        Convert front matter text into a delimited block in the target format.

        Args:
            front_matter: Text between the delimiters, without them

        Returns:
            ``---\\n<encoded>---``, with no trailing newline

        Raises:
            DecodeError: If the text does not parse under the source format
            EncodeError: If the result cannot be written in the target format
        """
        metadata = codecs.decode(self.source_format, front_matter)
        encoded = codecs.encode(self.target_format, self.transform(metadata))
        return wrap_frontmatter(encoded)

    def __repr__(self) -> str:
        return (
            f"FrontMatterConverter({self.source_format.value!r} -> "
            f"{self.target_format.value!r}, {len(self.key_map)} renames)"
        )
