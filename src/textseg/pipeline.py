# src/textseg/pipeline.py
"""
pipeline.py.
============

Does: Compose the three scanners the usual way: tokenize raw input, trim
      decoration off each token, then split each token on its value delimiter.
Returns: parse_arguments(text, profile=None) -> list[ParsedArgument]
Used by: The CLI "parse" command and callers reading option strings.

Example (profile "cli"):
    '-a:"b #1" /c --d="efg hij"'
    -> [{"raw": "-a:b #1", "name": "a", "value": "b #1"},
        {"raw": "/c", "name": "c", "value": None},
        {"raw": "--d=efg hij", "name": "d", "value": "efg hij"}]
"""

from __future__ import annotations

import logging
from typing import TypedDict

from textseg.errors import require
from textseg.helpers.sequences import trim_items
from textseg.profiles import SegmentationProfile, default_profile
from textseg.segmentation.compare import ComparisonMode, index_of
from textseg.segmentation.splitter import split
from textseg.segmentation.tokenizer import tokenize
from textseg.utils.log import debug

__all__ = ["ParsedArgument", "parse_arguments"]

logger = logging.getLogger(__name__)


class ParsedArgument(TypedDict):
    raw: str
    name: str
    value: str | None


def _first_delimiter(token: str, delimiters: list[str], mode: ComparisonMode) -> str | None:
    """Pick the delimiter occurring earliest in `token` (profile order breaks ties)."""
    best: tuple[int, str] | None = None
    for delim in delimiters:
        if not delim:
            continue
        pos = index_of(token, delim, mode)
        if pos >= 0 and (best is None or pos < best[0]):
            best = (pos, delim)
    return best[1] if best else None


def _split_name_value(token: str, delimiters: list[str], mode: ComparisonMode) -> tuple[str, str | None]:
    delim = _first_delimiter(token, delimiters, mode)
    if delim is None:
        return token, None
    pos = index_of(token, delim, mode)
    head, *rest = split(token, delim, mode=mode)
    if not rest or len(head) != pos:
        # the splitter's non-backtracking scan skipped the first occurrence
        return token[:pos], token[pos + len(delim):]
    return head, delim.join(rest)


def parse_arguments(text: str, profile: SegmentationProfile | None = None) -> list[ParsedArgument]:
    """
    Does: Tokenize `text` with the profile's quote/separator, strip the
          profile's decoration patterns on its trim side, and split each
          token into name and value at its first value delimiter.
    Returns: One ParsedArgument per token, in input order.
    Raises: PreconditionViolation if text is None.
    """
    require(text, "text")
    prof = profile if profile is not None else default_profile()
    mode = prof["comparison"]

    tokens = tokenize(text, prof["quote_char"], prof["separator"])
    names = trim_items(tokens, prof["trim_patterns"], mode, prof["trim_side"])

    parsed: list[ParsedArgument] = []
    for raw, body in zip(tokens, names):
        name, value = _split_name_value(body, prof["value_delimiters"], mode)
        parsed.append({"raw": raw, "name": name, "value": value})

    debug(f"parse_arguments: {len(parsed)} arguments from {text!r}", topic="pipeline")
    logger.debug("parse_arguments: %s", parsed)
    return parsed
