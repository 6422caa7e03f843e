#!/usr/bin/env python3
"""
codecs.py
-------------------
Decode and encode front matter blocks as YAML or TOML.

The supported formats form a closed set (``Format``). Each format has one
decode/encode pair in ``_CODECS``; ``decode`` and ``encode`` pick the pair
from the configured format, never from the content.

Output is deterministic: mapping keys are sorted before serialization, so
the same metadata always produces the same bytes regardless of the order
the source document used.

Usage:
    from h2h.pipeline.codecs import Format, decode, encode

    metadata = decode(Format.YAML, "title: Hello\\ntags: [a, b]\\n")
    text = encode(Format.TOML, metadata)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, NamedTuple

# --- Third party imports ---
import toml
import yaml

# --- Local imports ---
from h2h.core.exceptions import ConfigurationError, DecodeError, EncodeError


class Format(str, Enum):
    """
    Structured formats a front matter block can be written in.
    - YAML: Hexo's default, also accepted by Hugo
    - TOML: Hugo's typed-table format
    """

    YAML = "yaml"
    TOML = "toml"

    @classmethod
    def choices(cls) -> List[str]:
        return [fmt.value for fmt in cls]

    @classmethod
    def parse(cls, value: Any) -> "Format":
        """
        Coerce a name or Format into a Format.

        Raises:
            ConfigurationError: If the value names no supported format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"unsupported format: {value!r} (expected one of {', '.join(cls.choices())})"
            ) from None


# ----- YAML -----
def _yaml_decode(text: str) -> Any:
    return yaml.safe_load(text)


def _yaml_encode(metadata: Mapping[str, Any]) -> str:
    return yaml.safe_dump(
        dict(metadata),
        sort_keys=True,
        allow_unicode=True,
        default_flow_style=False,
        indent=4,
    )


# ----- TOML -----
def _sorted_tables(value: Any) -> Any:
    """Recursively sort mapping keys so toml.dumps output is stable."""
    if isinstance(value, Mapping):
        return {str(k): _sorted_tables(value[k]) for k in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_sorted_tables(item) for item in value]
    return value


def _plain(value: Any) -> Any:
    """Rebuild toml's dict and list subclasses as plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def _toml_decode(text: str) -> Any:
    # Inline tables load as a dict subclass that yaml.safe_dump rejects
    return _plain(toml.loads(text))


def _toml_encode(metadata: Mapping[str, Any]) -> str:
    return toml.dumps(_sorted_tables(metadata))


class _Codec(NamedTuple):
    decode: Callable[[str], Any]
    encode: Callable[[Mapping[str, Any]], str]


_CODECS: Dict[Format, _Codec] = {
    Format.YAML: _Codec(_yaml_decode, _yaml_encode),
    Format.TOML: _Codec(_toml_decode, _toml_encode),
}


# ----- Public API -----
def decode(fmt: Format | str, text: str) -> Dict[str, Any]:
    """
    Parse a front matter block into a metadata mapping.

    An empty (or whitespace-only) block decodes to ``{}``.

    Args:
        fmt: Source format
        text: Front matter text, without delimiters

    Returns:
        New dict of metadata

    Raises:
        ConfigurationError: If ``fmt`` is not a supported format
        DecodeError: If the text is malformed or not a key/value mapping
    """
    fmt = Format.parse(fmt)
    try:
        data = _CODECS[fmt].decode(text)
    except (yaml.YAMLError, toml.TomlDecodeError, ValueError, TypeError) as e:
        raise DecodeError(fmt.value, e) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise DecodeError(
            fmt.value,
            TypeError(f"expected a key/value mapping, got {type(data).__name__}"),
        )
    return dict(data)


def encode(fmt: Format | str, metadata: Mapping[str, Any]) -> str:
    """
    Serialize a metadata mapping; the result always ends with a newline
    unless the mapping encodes to nothing (an empty TOML document).

    Raises:
        ConfigurationError: If ``fmt`` is not a supported format
        EncodeError: If a value cannot be represented in ``fmt``
    """
    fmt = Format.parse(fmt)
    try:
        text = _CODECS[fmt].encode(metadata)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        raise EncodeError(fmt.value, e) from e

    if text and not text.endswith("\n"):
        text += "\n"
    return text
