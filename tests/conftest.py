"""
conftest.py
-----------
Shared pytest fixtures for h2h tests.

Provides fixtures for:
- Temporary source/destination trees
- Sample Hexo and Hugo posts
- A post-writing helper
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from h2h.core.config import Config


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def src_dir(tmp_dir):
    """Empty source tree."""
    path = tmp_dir / "src"
    path.mkdir()
    return path


@pytest.fixture
def dst_dir(tmp_dir):
    """Destination tree root (not created)."""
    return tmp_dir / "dst"


@pytest.fixture
def write_post():
    """Write a post below a root directory, creating parents."""
    def _write(root: Path, relative: str, content: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def serial_config():
    """YAML to YAML, Hexo to Hugo, one worker."""
    return Config(max_concurrency=1)


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def hexo_post():
    """Hexo post using keys that Hugo names differently."""
    return """---
title: Hello
permalink: /x
---

# Hello

First paragraph.
"""


@pytest.fixture
def hugo_post():
    """Hugo post with TOML-friendly metadata."""
    return """---
title: Release Notes
slug: release-notes
draft: false
weight: 3
tags:
  - release
  - changelog
---

# Release Notes

Nothing to see yet.
"""


@pytest.fixture
def rich_post():
    """Post with nested metadata and a body containing delimiter lines."""
    return """---
title: "Deep Dive: Front Matter"
date: 2023-05-01
updated: 2023-05-03
sticky: 10
tags: [hexo, hugo]
categories:
  - blogging
params:
  author: Ada
  toc: true
---

Intro paragraph.

---

A horizontal rule above is body, not front matter.
---
"""
