"""
textseg
=======

Does: Root package for the text-segmentation toolkit: quote-aware tokenizing,
      multi-character delimiter splitting, and fixpoint boundary trimming.
Returns: Re-exports the segmentation functions, their comparison modes, and errors.
Used by: Library callers (`from textseg import tokenize, split, trim`).
"""

from .errors import DuplicateKeyError, InvalidOption, PreconditionViolation
from .segmentation import (
    MODES,
    ComparisonMode,
    resolve_mode,
    split,
    tokenize,
    trim,
    trim_chars,
    trim_chars_end,
    trim_chars_start,
    trim_end,
    trim_start,
)

__all__: list[str] = [
    "tokenize",
    "split",
    "trim_start",
    "trim_end",
    "trim",
    "trim_chars_start",
    "trim_chars_end",
    "trim_chars",
    "ComparisonMode",
    "MODES",
    "resolve_mode",
    "PreconditionViolation",
    "InvalidOption",
    "DuplicateKeyError",
]
__version__ = "0.1.0"
__docformat__ = "google"
