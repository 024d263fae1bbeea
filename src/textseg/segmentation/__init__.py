# src/textseg/segmentation/__init__.py
"""
segmentation.
=============

Does: Expose the three stateless scanners and their comparison modes.
Exports: tokenize, split, trim_start, trim_end, trim, trim_chars_start,
         trim_chars_end, trim_chars, resolve_mode, ComparisonMode
Used by: textseg top-level API, pipeline, CLI and helpers.
"""

from __future__ import annotations

from .compare import MODES, ComparisonMode, resolve_mode
from .splitter import split
from .tokenizer import tokenize
from .trimmer import (
    trim,
    trim_chars,
    trim_chars_end,
    trim_chars_start,
    trim_end,
    trim_start,
)

__all__ = [
    # tokenizer
    "tokenize",
    # splitter
    "split",
    # trimmer
    "trim_start",
    "trim_end",
    "trim",
    "trim_chars_start",
    "trim_chars_end",
    "trim_chars",
    # comparison
    "ComparisonMode",
    "MODES",
    "resolve_mode",
]
