# src/textseg/helpers/strings.py
"""
strings.py.

Does: Mode-aware single-pass string helpers built on the comparison module
      (search, prefix test, replace) plus a few formatting one-liners.
Returns: index_of_any, starts_with_any, contains, replace, replace_many,
         content_equals, is_numeric, capitalize, decapitalize.
Used by: helpers.sequences, CLI, callers that need case-insensitive search.
"""

from __future__ import annotations

from collections.abc import Iterable

from textseg.segmentation.compare import ComparisonMode, index_of, resolve_mode, starts_with

__all__ = [
    "index_of_any",
    "starts_with_any",
    "contains",
    "replace",
    "replace_many",
    "content_equals",
    "is_numeric",
    "capitalize",
    "decapitalize",
]


def index_of_any(
    text: str | None, values: Iterable[str] | None, mode: ComparisonMode | str = "ordinal"
) -> int:
    """
    Does: Search `text` for each value in order (a string of chars works too).
    Returns: Index found for the first value that occurs, else -1.
    """
    if not text or values is None:
        return -1
    cmp_mode = resolve_mode(mode)
    for value in values:
        pos = index_of(text, value, cmp_mode)
        if pos >= 0:
            return pos
    return -1


def starts_with_any(
    text: str, values: Iterable[str] | None, mode: ComparisonMode | str = "ordinal"
) -> bool:
    if values is None:
        return False
    cmp_mode = resolve_mode(mode)
    return any(starts_with(text, v, cmp_mode) for v in values)


def contains(text: str, value: str, mode: ComparisonMode | str = "ordinal") -> bool:
    return index_of(text, value, resolve_mode(mode)) >= 0


def replace(
    text: str, old: str | None, new: str | None, mode: ComparisonMode | str = "ordinal"
) -> str:
    """
    Does: Replace every occurrence of `old` under `mode`, scanning left to right.
          Replacements are never re-scanned, so `new` may contain `old`.
    Returns: New string; unchanged when `old` is empty/None. None `new` deletes.
    """
    if not old:
        return text
    new = new or ""
    cmp_mode = resolve_mode(mode)

    parts: list[str] = []
    pos = 0
    while (hit := index_of(text, old, cmp_mode, pos)) >= 0:
        parts.append(text[pos:hit])
        parts.append(new)
        pos = hit + len(old)
    parts.append(text[pos:])
    return "".join(parts)


def replace_many(
    text: str,
    olds: Iterable[str] | None,
    new: str | None,
    mode: ComparisonMode | str = "ordinal",
) -> str:
    """Does: Apply replace() for each value of `olds` in order."""
    if olds is None:
        return text
    for old in olds:
        text = replace(text, old, new, mode)
    return text


def content_equals(a: str, b: str | None) -> bool:
    """Does: Ordinal equality treating CRLF and LF line breaks as the same."""
    if b is None:
        return False
    return a.replace("\r\n", "\n") == b.replace("\r\n", "\n")


def is_numeric(text: str | None) -> bool:
    """Does: Tell whether `text` parses as a float (surrounding whitespace allowed)."""
    if text is None:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def capitalize(text: str) -> str:
    # Only the first character changes; str.capitalize would lowercase the rest
    if not text or not text.strip():
        return text
    return text[0].upper() + text[1:]


def decapitalize(text: str) -> str:
    if not text or not text.strip():
        return text
    return text[0].lower() + text[1:]
