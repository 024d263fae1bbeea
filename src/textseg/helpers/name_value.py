# src/textseg/helpers/name_value.py
"""
name_value.py.

Does: Key lookup over name/value pairs where bare keys (no "=value") are
      stored under a None name as a comma-separated value, as produced by
      query-string style parsers ("?verbose&debug&level=2").
Returns: key_exists(pairs, key) -> bool
Used by: pipeline callers checking for flag-style arguments.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

__all__ = ["key_exists"]


def key_exists(pairs: Mapping[str | None, str] | Iterable[tuple[str | None, str]], key: str) -> bool:
    """
    Does: Check named entries for `key`, then the comma-separated bare keys
          held under the None name (each stripped before comparing).
    Returns: True when found.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    for name, value in items:
        if name is None:
            if value is not None and any(part.strip() == key for part in value.split(",")):
                return True
        elif name == key:
            return True
    return False
