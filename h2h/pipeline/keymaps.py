#!/usr/bin/env python3
"""
keymaps.py
-------------------
Front matter key renaming between Hexo and Hugo.

Each conversion direction has its own table, listing only the keys that
change name. Any key not in the table keeps its name. The two tables are
declared separately and are not derived from each other; a key may be
renamed in one direction and left alone in the other.

    hexo2hugo:  permalink -> slug,  updated -> lastmod,  sticky -> weight
    hugo2hexo:  slug -> permalink,  lastmod -> updated,  weight -> sticky
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

# --- Local imports ---
from h2h.core.exceptions import ConfigurationError


class Direction(str, Enum):
    """
    Conversion directions.
    - HEXO_TO_HUGO: Hexo posts rewritten for Hugo
    - HUGO_TO_HEXO: Hugo posts rewritten for Hexo
    """

    HEXO_TO_HUGO = "hexo2hugo"
    HUGO_TO_HEXO = "hugo2hexo"

    @classmethod
    def choices(cls) -> List[str]:
        return [direction.value for direction in cls]

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        """
        Coerce a name or Direction into a Direction.

        Raises:
            ConfigurationError: If the value names no supported direction
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"unsupported direction: {value!r} "
                f"(expected one of {', '.join(cls.choices())})"
            ) from None


KEY_MAPPINGS: Mapping[Direction, Mapping[str, str]] = MappingProxyType({
    Direction.HEXO_TO_HUGO: MappingProxyType({
        "permalink": "slug",
        "updated": "lastmod",
        "sticky": "weight",
    }),
    Direction.HUGO_TO_HEXO: MappingProxyType({
        "slug": "permalink",
        "lastmod": "updated",
        "weight": "sticky",
    }),
})


def key_mapping(
    direction: Direction | str,
    overrides: Optional[Mapping[str, str]] = None,
) -> Mapping[str, str]:
    """
    Build the read-only key table for a direction.

    Args:
        direction: Conversion direction
        overrides: Extra or replacement renames; these win over the
            built-in table for the same source key

    Returns:
        Read-only mapping of source key -> target key

    Raises:
        ConfigurationError: If the direction is unknown or an override is
            not a pair of non-empty strings
    """
    table: Dict[str, str] = dict(KEY_MAPPINGS[Direction.parse(direction)])
    for source, target in (overrides or {}).items():
        if not isinstance(source, str) or not isinstance(target, str):
            raise ConfigurationError(
                f"key override must map a string to a string: {source!r} -> {target!r}"
            )
        if not source or not target:
            raise ConfigurationError(f"empty key in override: {source!r} -> {target!r}")
        table[source] = target
    return MappingProxyType(table)


def invert_mapping(table: Mapping[str, str]) -> Mapping[str, str]:
    """
    Swap the declared pairs of a key table.

    Only the listed renames are inverted; pass-through keys stay implicit.

    Raises:
        ConfigurationError: If two source keys rename to the same target,
            since the inverse would be ambiguous
    """
    inverted: Dict[str, str] = {}
    for source, target in table.items():
        if target in inverted:
            raise ConfigurationError(
                f"cannot invert key table: {inverted[target]!r} and {source!r} "
                f"both map to {target!r}"
            )
        inverted[target] = source
    return MappingProxyType(inverted)


def remap_keys(metadata: Mapping[str, Any], table: Mapping[str, str]) -> Dict[str, Any]:
    """
    Copy metadata into a new dict under renamed keys.

    Keys missing from ``table`` keep their name. When a renamed key lands
    on a key already written, the later one in ``metadata`` order wins.

    Examples:
        >>> remap_keys({"title": "Hi", "permalink": "/x"}, {"permalink": "slug"})
        {'title': 'Hi', 'slug': '/x'}
    """
    remapped: Dict[str, Any] = {}
    for key, value in metadata.items():
        remapped[table.get(key, key)] = value
    return remapped
