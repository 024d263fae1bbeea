# src/textseg/segmentation/trimmer.py
"""
trimmer.py.

Does: Remove boundary patterns from the start and/or end of a text until a
      full ordered pass over the pattern set finds nothing left to remove.
      Matching is anchored at the boundary; a pattern occurring only inside
      the text never cuts it.
Returns: trim_start / trim_end / trim for a pattern or an ordered pattern set,
         trim_chars_start / trim_chars_end / trim_chars for a character set.
Used by: pipeline.parse_arguments (decoration removal), helpers.sequences, CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from textseg.errors import require
from textseg.segmentation.compare import (
    ComparisonMode,
    ends_with,
    resolve_mode,
    starts_with,
)

__all__ = [
    "Patterns",
    "trim_start",
    "trim_end",
    "trim",
    "trim_chars_start",
    "trim_chars_end",
    "trim_chars",
]

log = logging.getLogger(__name__)

# A single pattern, an ordered pattern set, or None (no-op)
Patterns = str | Iterable[str] | None


# ─────────────────────────────────────────────────────────────────────────────
# Pattern-set fixpoint
# ─────────────────────────────────────────────────────────────────────────────


def _pattern_set(patterns: Patterns) -> tuple[str, ...]:
    """
    Does: Normalize the pattern argument to an ordered tuple.
          Empty and whitespace-only patterns are dropped: they can never be removed.
    """
    if patterns is None:
        return ()
    if isinstance(patterns, str):
        patterns = (patterns,)
    return tuple(p for p in patterns if p is not None and p.strip())


def _first_match(
    text: str,
    patterns: tuple[str, ...],
    matches: Callable[[str, str, ComparisonMode], bool],
    mode: ComparisonMode,
) -> str | None:
    for p in patterns:
        if matches(text, p, mode):
            return p
    return None


def _fixpoint(text: str, patterns: Patterns, mode: ComparisonMode | str, *, at_start: bool) -> str:
    require(text, "text")
    cmp_mode = resolve_mode(mode)
    pset = _pattern_set(patterns)
    if not pset or not text.strip():
        return text

    matches = starts_with if at_start else ends_with
    current = text
    # Each hit restarts the scan at the first pattern against the shortened text
    while (hit := _first_match(current, pset, matches, cmp_mode)) is not None:
        current = current[len(hit):] if at_start else current[: len(current) - len(hit)]

    if current != text:
        log.debug(
            "trim_%s: %r -> %r (patterns=%r, mode=%s)",
            "start" if at_start else "end",
            text,
            current,
            pset,
            cmp_mode,
        )
    return current


def trim_start(text: str, patterns: Patterns, mode: ComparisonMode | str = "ordinal") -> str:
    """
    Does: Repeatedly strip the first pattern (in set order) that prefixes the
          text, restarting from the first pattern after every strip.
    Returns: The text once no pattern prefixes it; blank text and a None
             pattern argument are returned unchanged.
    """
    return _fixpoint(text, patterns, mode, at_start=True)


def trim_end(text: str, patterns: Patterns, mode: ComparisonMode | str = "ordinal") -> str:
    """Does: Mirror of trim_start on suffixes."""
    return _fixpoint(text, patterns, mode, at_start=False)


def trim(text: str, patterns: Patterns, mode: ComparisonMode | str = "ordinal") -> str:
    """Does: trim_end(trim_start(text, ...), ...)."""
    return trim_end(trim_start(text, patterns, mode), patterns, mode)


# ─────────────────────────────────────────────────────────────────────────────
# Character-set variant (every pattern has length 1)
# ─────────────────────────────────────────────────────────────────────────────


def _char_set(chars: Iterable[str] | None) -> str | None:
    # None trims whitespace, like str.strip()
    if chars is None:
        return None
    return "".join(chars)


def trim_chars_start(text: str, chars: Iterable[str] | None = None) -> str:
    """Does: Drop leading characters contained in `chars` (whitespace when None)."""
    require(text, "text")
    return text.lstrip(_char_set(chars))


def trim_chars_end(text: str, chars: Iterable[str] | None = None) -> str:
    """Does: Drop trailing characters contained in `chars` (whitespace when None)."""
    require(text, "text")
    return text.rstrip(_char_set(chars))


def trim_chars(text: str, chars: Iterable[str] | None = None) -> str:
    """Does: Drop leading and trailing characters contained in `chars` (whitespace when None)."""
    require(text, "text")
    return text.strip(_char_set(chars))
