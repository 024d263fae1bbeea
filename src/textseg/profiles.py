# src/textseg/profiles.py
"""
profiles.py.

Does: Load named segmentation profiles (tokenizer quote/separator, comparison
      mode, decoration patterns, value delimiters) from <data>/profiles.json.
      Every profile is layered on the built-in defaults and returned as a
      fresh dict, so callers pass configuration explicitly per call.
Returns: default_profile(), load_profile(name), list_profiles().
Used by: pipeline.parse_arguments and the CLI --profile option.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, TypedDict

from rapidfuzz import fuzz, process

from textseg.errors import InvalidOption
from textseg.segmentation.compare import ComparisonMode, resolve_mode
from textseg.utils.load_config import ConfigTypeError, load_config
from textseg.utils.log import debug

__all__ = [
    "SegmentationProfile",
    "DEFAULT_PROFILE_NAME",
    "default_profile",
    "load_profile",
    "list_profiles",
]

log = logging.getLogger(__name__)

PROFILES_FILE = "profiles"
DEFAULT_PROFILE_NAME = "default"
TRIM_SIDES = ("start", "end", "both")


# ── Types ────────────────────────────────────────────────────────────────────
class SegmentationProfile(TypedDict):
    quote_char: str
    separator: str
    comparison: ComparisonMode
    trim_patterns: list[str]
    trim_side: Literal["start", "end", "both"]
    value_delimiters: list[str]


def default_profile() -> SegmentationProfile:
    """Does: Build the built-in profile (same values as the shipped "default" entry)."""
    return {
        "quote_char": '"',
        "separator": " ",
        "comparison": "ordinal",
        "trim_patterns": [],
        "trim_side": "start",
        "value_delimiters": ["="],
    }


# ── Validation ───────────────────────────────────────────────────────────────
def _char(name: str, field: str, value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigTypeError(f"profile {name!r}: '{field}' must be a single character")
    return value


def _str_list(name: str, field: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigTypeError(f"profile {name!r}: '{field}' must be a list of strings")
    return list(value)


def _build_profile(name: str, raw: Any) -> SegmentationProfile:
    if not isinstance(raw, dict):
        raise ConfigTypeError(f"profile {name!r}: expected object, got {type(raw).__name__}")

    profile = default_profile()
    unknown = sorted(set(raw) - set(profile))
    if unknown:
        log.warning("profile %r: ignoring unknown keys %s", name, unknown)

    if "quote_char" in raw:
        profile["quote_char"] = _char(name, "quote_char", raw["quote_char"])
    if "separator" in raw:
        profile["separator"] = _char(name, "separator", raw["separator"])
    if "comparison" in raw:
        profile["comparison"] = resolve_mode(raw["comparison"])
    if "trim_patterns" in raw:
        profile["trim_patterns"] = _str_list(name, "trim_patterns", raw["trim_patterns"])
    if "trim_side" in raw:
        if raw["trim_side"] not in TRIM_SIDES:
            raise InvalidOption("trim_side", raw["trim_side"], choices=TRIM_SIDES)
        profile["trim_side"] = raw["trim_side"]
    if "value_delimiters" in raw:
        profile["value_delimiters"] = _str_list(name, "value_delimiters", raw["value_delimiters"])
    return profile


def _validate_profiles(data: dict[str, Any]) -> dict[str, SegmentationProfile]:
    return {str(name): _build_profile(str(name), raw) for name, raw in data.items()}


def _load_all(base_dir: Path | None) -> dict[str, SegmentationProfile]:
    return load_config(
        PROFILES_FILE,
        mode="validated_dict",
        base_dir=base_dir,
        validator=_validate_profiles,
    )


# ── Public API ────────────────────────────────────────────────────────────────
def list_profiles(*, base_dir: Path | None = None) -> list[str]:
    """Does: Names of the profiles defined in profiles.json, in file order."""
    return list(_load_all(base_dir))


def load_profile(
    name: str = DEFAULT_PROFILE_NAME, *, base_dir: Path | None = None
) -> SegmentationProfile:
    """
    Does: Read profiles.json (data dir discovery as in load_config) and return
          the named profile merged over the built-in defaults.
    Raises: InvalidOption for an unknown name (with a fuzzy suggestion);
            ConfigFileNotFound / ConfigParseError / ConfigTypeError from loading.
    """
    profiles = _load_all(base_dir)
    if name not in profiles:
        match = process.extractOne(name, list(profiles), scorer=fuzz.ratio, score_cutoff=60)
        raise InvalidOption(
            "profile", name, choices=profiles, suggestion=match[0] if match else None
        )
    debug(f"loaded profile {name!r}: {profiles[name]}", topic="profiles")
    return profiles[name]
