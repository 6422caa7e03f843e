"""
h2h
===============================

Convert static-site post front matter between Hexo and Hugo.

Reads every post of a source tree, rewrites its front matter (YAML or
TOML, Hexo or Hugo key names) and writes it into a mirrored destination
tree with the body left untouched. Files are converted concurrently; a
file that fails is reported without stopping the others.

Main Components:
    - pipeline: codecs, key tables, front matter/document converters,
      tree conversion engine, CLI
    - core: configuration, exceptions, logging, run statistics
    - utils: front matter splitting and filesystem helpers

Primary Interfaces:
    - h2h.pipeline.cli: ``h2h`` command-line entry point
    - h2h.pipeline.engine.convert_posts: tree conversion
    - h2h.pipeline.converter.MarkdownConverter: single document conversion

Example Usage:
    >>> from pathlib import Path
    >>> from h2h import Config, convert_posts
    >>> stats = convert_posts(Path("source/_posts"), Path("content/posts"),
    ...                       Config(target_format="toml"))
    >>> stats.files_converted
    42
"""

__version__ = "1.0.0"
__author__ = "h2h contributors"

from h2h.core.config import Config, default_config, load_config
from h2h.pipeline.codecs import Format
from h2h.pipeline.converter import MarkdownConverter
from h2h.pipeline.engine import convert_posts
from h2h.pipeline.frontmatter import FrontMatterConverter
from h2h.pipeline.keymaps import Direction

__all__ = [
    "Config",
    "Direction",
    "Format",
    "FrontMatterConverter",
    "MarkdownConverter",
    "convert_posts",
    "default_config",
    "load_config",
]
