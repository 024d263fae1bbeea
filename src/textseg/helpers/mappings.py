# src/textseg/helpers/mappings.py
"""
mappings.py.

Does: Merge helpers for mutable mappings (dict, os.environ-like stores).
Returns: None; the target mapping is updated in place.
Used by: Profile building, callers collecting parsed arguments into dicts.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from textseg.errors import DuplicateKeyError, require

__all__ = ["add_distinct", "add_range", "add_range_distinct"]

K = TypeVar("K")
V = TypeVar("V")


def add_distinct(target: MutableMapping[K, V], key: K, value: V) -> bool:
    """Does: Insert key/value unless the key exists. Returns True if inserted."""
    if key in target:
        return False
    target[key] = value
    return True


def add_range(target: MutableMapping[K, V], source: Mapping[K, V] | None) -> None:
    """
    Does: Copy every entry of `source` into `target`.
    Raises: PreconditionViolation for a None source; DuplicateKeyError on the
            first key already present (entries before it stay copied).
    """
    require(source, "source")
    for key, value in source.items():
        if key in target:
            raise DuplicateKeyError(key)
        target[key] = value


def add_range_distinct(target: MutableMapping[K, V], source: Mapping[K, V] | None) -> None:
    """Does: Copy entries of `source` whose keys are missing; existing values are kept."""
    require(source, "source")
    for key, value in source.items():
        target.setdefault(key, value)
