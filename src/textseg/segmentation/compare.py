# src/textseg/segmentation/compare.py
"""
compare.py.

Does: Resolve comparison modes and answer anchored / indexed matching questions
      ("does text start with P under mode M?") one character at a time.
Returns: resolve_mode, chars_equal, starts_with, ends_with, index_of.
Used by: Splitter, Trimmer, and the string/sequence helpers.

Modes:
- "ordinal"             exact code-point equality
- "ordinal_ignore_case" equality after str.casefold
- "culture"             equality after NFKC normalization
- "culture_ignore_case" NFKC normalization, then casefold

Every comparison is per character, so a pattern always covers exactly
len(pattern) characters of the text it is matched against.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Literal, cast, get_args

from rapidfuzz import fuzz, process

from textseg.errors import InvalidOption

__all__ = [
    "ComparisonMode",
    "MODES",
    "DEFAULT_MODE",
    "resolve_mode",
    "chars_equal",
    "starts_with",
    "ends_with",
    "index_of",
]

ComparisonMode = Literal["ordinal", "ordinal_ignore_case", "culture", "culture_ignore_case"]
MODES: tuple[str, ...] = get_args(ComparisonMode)
DEFAULT_MODE: ComparisonMode = "ordinal"

_ALIASES = {
    "ignore_case": "ordinal_ignore_case",
    "ordinalignorecase": "ordinal_ignore_case",
    "invariant": "culture",
    "invariant_ignore_case": "culture_ignore_case",
}

# Suggestion threshold for unknown mode names (rapidfuzz ratio, 0..100)
SUGGEST_MIN_SCORE = 60


def resolve_mode(value: str | None) -> ComparisonMode:
    """
    Does: Canonicalize a mode name (case-insensitive, '-' and ' ' read as '_').
          None selects the default "ordinal" mode.
    Returns: One of MODES.
    Raises: InvalidOption with a fuzzy "did you mean" hint for unknown names.
    """
    if value is None:
        return DEFAULT_MODE
    if not isinstance(value, str):
        raise InvalidOption("mode", value, choices=MODES)
    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    key = _ALIASES.get(key, key)
    if key in MODES:
        return cast(ComparisonMode, key)

    match = process.extractOne(key, MODES, scorer=fuzz.ratio, score_cutoff=SUGGEST_MIN_SCORE)
    raise InvalidOption("mode", value, choices=MODES, suggestion=match[0] if match else None)


@lru_cache(maxsize=4096)
def _fold(ch: str, mode: str) -> str:
    if mode.startswith("culture"):
        ch = unicodedata.normalize("NFKC", ch)
    if mode.endswith("ignore_case"):
        ch = ch.casefold()
    return ch


def chars_equal(a: str, b: str, mode: ComparisonMode = DEFAULT_MODE) -> bool:
    """Does: Compare two characters under `mode`."""
    if a == b:
        return True
    if mode == "ordinal":
        return False
    return _fold(a, mode) == _fold(b, mode)


def _matches_at(text: str, pattern: str, pos: int, mode: ComparisonMode) -> bool:
    if pos < 0 or pos + len(pattern) > len(text):
        return False
    for offset, ch in enumerate(pattern):
        if not chars_equal(text[pos + offset], ch, mode):
            return False
    return True


def starts_with(text: str, pattern: str, mode: ComparisonMode = DEFAULT_MODE) -> bool:
    """Does: Anchored prefix test under `mode`; an empty pattern always matches."""
    if mode == "ordinal":
        return text.startswith(pattern)
    return _matches_at(text, pattern, 0, mode)


def ends_with(text: str, pattern: str, mode: ComparisonMode = DEFAULT_MODE) -> bool:
    """Does: Anchored suffix test under `mode`; an empty pattern always matches."""
    if mode == "ordinal":
        return text.endswith(pattern)
    return _matches_at(text, pattern, len(text) - len(pattern), mode)


def index_of(text: str, value: str, mode: ComparisonMode = DEFAULT_MODE, start: int = 0) -> int:
    """
    Does: Find the first position >= start where `value` occurs under `mode`.
    Returns: Index, or -1 when absent (an empty value is found at `start`).
    """
    if mode == "ordinal":
        return text.find(value, start)
    for pos in range(max(start, 0), len(text) - len(value) + 1):
        if _matches_at(text, value, pos, mode):
            return pos
    return -1
