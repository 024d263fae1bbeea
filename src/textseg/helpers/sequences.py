# src/textseg/helpers/sequences.py
"""
sequences.py.

Does: Formatting and cleanup helpers for sequences of strings (token lists,
      split results): join with quotation, purge blanks, mode-aware membership,
      per-item trimming, and in-place element moves.
Returns: New lists/strings; only move_element mutates its argument.
Used by: CLI output, pipeline callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Literal, TypeVar

from textseg.errors import InvalidOption, require
from textseg.segmentation.compare import ComparisonMode, resolve_mode, starts_with
from textseg.segmentation.trimmer import Patterns, trim, trim_end, trim_start

__all__ = [
    "join_items",
    "purge",
    "contains_item",
    "strip_items",
    "trim_items",
    "move_element",
]

log = logging.getLogger(__name__)

T = TypeVar("T")
Side = Literal["start", "end", "both"]


def join_items(
    items: Sequence[str],
    delimiter: str = " ",
    start_index: int = 0,
    count: int = -1,
    quotation: str | None = None,
) -> str:
    """
    Does: Join `count` items from `start_index` (-1: through the end), wrapping
          each one in `quotation` when given.
    Returns: Joined string; "" for an empty sequence.
    Raises: InvalidOption when start_index is outside the sequence, count < -1,
            or start_index + count runs past the end.
    """
    require(items, "items")
    if not items:
        return ""
    if not 0 <= start_index < len(items):
        raise InvalidOption(
            "start_index", start_index, f"start_index must be between 0 and {len(items) - 1}"
        )
    if count < -1:
        raise InvalidOption("count", count, "count must be -1 or greater")

    stop = len(items) if count == -1 else start_index + count
    if stop > len(items):
        raise InvalidOption(
            "count", count, f"count {count} from index {start_index} exceeds {len(items)} items"
        )

    selected = items[start_index:stop]
    if quotation:
        selected = [f"{quotation}{item}{quotation}" for item in selected]
    return delimiter.join(selected)


def purge(items: Iterable[str | None]) -> list[str]:
    """Does: Strip every item and drop the ones that are None or blank."""
    return [item.strip() for item in items if item is not None and item.strip()]


def contains_item(
    items: Iterable[str], value: str | None, mode: ComparisonMode | str = "ordinal"
) -> bool:
    """Does: Membership test where items are compared to `value` under `mode`."""
    if value is None:
        return any(item is None for item in items)
    cmp_mode = resolve_mode(mode)
    for item in items:
        if item is None or len(item) != len(value):
            continue
        # same length + anchored prefix match == whole-string equality under mode
        if starts_with(item, value, cmp_mode):
            return True
    return False


def strip_items(items: Iterable[str], chars: Iterable[str] | None = None) -> list[str]:
    """Does: str.strip each item with `chars` (whitespace when None)."""
    char_set = None if chars is None else "".join(chars)
    return [item.strip(char_set) for item in items]


def trim_items(
    items: Iterable[str],
    patterns: Patterns,
    mode: ComparisonMode | str = "ordinal",
    side: Side = "both",
) -> list[str]:
    """Does: Apply the pattern trimmer to every item on the given side."""
    trimmers = {"start": trim_start, "end": trim_end, "both": trim}
    if side not in trimmers:
        raise InvalidOption("side", side, choices=trimmers)
    fn = trimmers[side]
    cmp_mode = resolve_mode(mode)
    return [fn(item, patterns, cmp_mode) for item in items]


def move_element(lst: list[T], src: int, dst: int) -> None:
    """
    Does: Move the element at `src` so it ends up before the element that sat
          at `dst`; moving forward therefore lands at dst - 1.
    Raises: InvalidOption when either index is outside the list.
    """
    for name, idx in (("src", src), ("dst", dst)):
        if not 0 <= idx < len(lst):
            raise InvalidOption(name, idx, f"{name} must be between 0 and {len(lst) - 1}")
    if src == dst:
        return
    item = lst.pop(src)
    lst.insert(dst - 1 if dst > src else dst, item)
    log.debug("move_element: %d -> %d", src, dst)
