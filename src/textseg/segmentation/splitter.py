# src/textseg/segmentation/splitter.py
"""
splitter.py.

Does: Split text on one fixed, multi-character delimiter with a single
      left-to-right scan and a delimiter cursor (no backtracking).
Returns: split(text, delimiter, remove_empty=False, mode="ordinal") -> list[str]
Used by: pipeline.parse_arguments (key=value tokens), the CLI, helpers.

Known limitation, kept on purpose: when a partial delimiter match fails, the
cursor resets to 0 and the failing character is not re-tried as the start of
a new match. Some occurrences are therefore missed, e.g.
split("aab", "ab") == ["aab"] rather than ["a", ""].
"""

from __future__ import annotations

import logging

from textseg.errors import InvalidOption, require
from textseg.segmentation.compare import ComparisonMode, chars_equal, resolve_mode

__all__ = ["split", "SPLIT_OPTIONS"]

log = logging.getLogger(__name__)

SPLIT_OPTIONS: dict[str, bool] = {
    "none": False,
    "remove_empty_entries": True,
}


def _resolve_remove_empty(value: bool | str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_")
        if key in SPLIT_OPTIONS:
            return SPLIT_OPTIONS[key]
    raise InvalidOption("remove_empty", value, choices=SPLIT_OPTIONS)


def split(
    text: str,
    delimiter: str | None,
    remove_empty: bool | str = False,
    mode: ComparisonMode | str = "ordinal",
) -> list[str]:
    """
    Does: Emit the characters between delimiter occurrences as segments.
          A delimiter ending the text yields one trailing "" segment.
          An empty/None delimiter falls back to whitespace-run splitting.
    Returns: Segments in order; zero-length ones dropped when remove_empty.
    Raises: PreconditionViolation if text is None; InvalidOption for an
            unknown remove_empty option or comparison mode.
    """
    require(text, "text")
    drop_empty = _resolve_remove_empty(remove_empty)
    cmp_mode = resolve_mode(mode)

    if not delimiter:
        return text.split()

    size = len(delimiter)
    last = len(text) - 1
    segments: list[str] = []
    buf: list[str] = []
    k = 0

    for i, ch in enumerate(text):
        buf.append(ch)
        if chars_equal(ch, delimiter[k], cmp_mode):
            k += 1
            if k == size:
                segments.append("".join(buf[:-size]))
                buf.clear()
                k = 0
                if i == last:
                    segments.append("")
        else:
            k = 0

    if buf:
        segments.append("".join(buf))

    if drop_empty:
        segments = [s for s in segments if s]

    log.debug("split: %d chars on %r -> %d segments", len(text), delimiter, len(segments))
    return segments
