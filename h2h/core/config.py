#!/usr/bin/env python3
"""
config.py
-------------------
Conversion settings and default paths.

A ``Config`` is built once per run and never modified. It is validated at
construction, so an unsupported format, direction or concurrency limit is
reported before any file is read.

Settings can come from keyword arguments, a plain dict, or a YAML file:

    # h2h.yaml
    source_format: yaml
    target_format: toml
    direction: hexo2hugo
    file_extension: .md
    max_concurrency: 8
    key_overrides:
      excerpt: summary

Usage:
    from h2h.core.config import Config, load_config

    cfg = Config(target_format="toml")
    cfg = load_config(Path("h2h.yaml"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

# --- Third party imports ---
import yaml

# --- Local imports ---
from h2h.core.exceptions import ConfigurationError
from h2h.pipeline.codecs import Format
from h2h.pipeline.keymaps import Direction, key_mapping


# ----- Defaults -----
DEFAULT_FILE_EXTENSION = ".md"
LOG_DIR = Path(os.environ.get("H2H_LOG_DIR", Path.home() / ".h2h" / "logs"))


def default_concurrency() -> int:
    """Number of available processing units, at least 1."""
    return os.cpu_count() or 1


@dataclass(frozen=True)
class Config:
    """
    Immutable settings for a conversion run.

    Attributes:
        source_format: Format the front matter is read in
        target_format: Format the front matter is written in
        direction: Which platform's key names are produced
        file_extension: Suffix a file name must end with to be converted
        max_concurrency: Upper bound on files converted at the same time
        key_overrides: Extra renames merged over the direction's table
    """

    source_format: Format = Format.YAML
    target_format: Format = Format.YAML
    direction: Direction = Direction.HEXO_TO_HUGO
    file_extension: str = DEFAULT_FILE_EXTENSION
    max_concurrency: int = field(default_factory=default_concurrency)
    key_overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "source_format", Format.parse(self.source_format))
        object.__setattr__(self, "target_format", Format.parse(self.target_format))
        object.__setattr__(self, "direction", Direction.parse(self.direction))

        if not isinstance(self.file_extension, str) or not self.file_extension:
            raise ConfigurationError(
                f"file_extension must be a non-empty string, got {self.file_extension!r}"
            )

        if isinstance(self.max_concurrency, bool) or not isinstance(self.max_concurrency, int):
            raise ConfigurationError(
                f"max_concurrency must be an integer, got {self.max_concurrency!r}"
            )
        if self.max_concurrency < 1:
            raise ConfigurationError(
                f"max_concurrency must be >= 1, got {self.max_concurrency}"
            )

        if self.key_overrides is None:
            object.__setattr__(self, "key_overrides", {})
        if not isinstance(self.key_overrides, Mapping):
            raise ConfigurationError(
                f"key_overrides must be a mapping, got {type(self.key_overrides).__name__}"
            )
        # Validates the overrides as a side effect
        key_mapping(self.direction, self.key_overrides)
        object.__setattr__(
            self, "key_overrides", MappingProxyType(dict(self.key_overrides))
        )

    @property
    def key_map(self) -> Mapping[str, str]:
        """Key table for this run's direction, overrides applied."""
        return key_mapping(self.direction, self.key_overrides)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """
        Build a Config from plain data (e.g. a parsed YAML file).

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def with_changes(self, **changes: Any) -> "Config":
        """Copy with some settings replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_format": self.source_format.value,
            "target_format": self.target_format.value,
            "direction": self.direction.value,
            "file_extension": self.file_extension,
            "max_concurrency": self.max_concurrency,
            "key_overrides": dict(self.key_overrides),
        }


def default_config() -> Config:
    """YAML to YAML, Hexo to Hugo, ``.md`` files, one worker per CPU."""
    return Config()


def load_config(path: Path) -> Config:
    """
    Load settings from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or holds
            invalid settings
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"cannot read configuration file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid configuration file {path}: {e}") from e

    if data is None:
        return default_config()
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"configuration file {path} must contain a mapping, got {type(data).__name__}"
        )
    return Config.from_dict(data)
