# tests/test_segmentation_splitter.py
from __future__ import annotations

import pytest

from textseg.errors import InvalidOption, PreconditionViolation
from textseg.segmentation import splitter as S


# ─────────────────────────────────────────────────────────────────────────────
# Basic splitting
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,delimiter,expected",
    [
        ("a,b,", ",", ["a", "b", ""]),       # trailing delimiter → final empty field
        ("a,b", ",", ["a", "b"]),
        (",a", ",", ["", "a"]),
        ("a,,b", ",", ["a", "", "b"]),
        (",", ",", ["", ""]),
        ("abc", ",", ["abc"]),
        ("", ",", []),
        ("a::b::c", "::", ["a", "b", "c"]),
        ("x--y--", "--", ["x", "y", ""]),
        ("a-b", "--", ["a-b"]),              # partial match keeps its characters
        ("key=value", "=", ["key", "value"]),
    ],
)
def test_split_segments(text, delimiter, expected):
    assert S.split(text, delimiter) == expected


@pytest.mark.parametrize(
    "text,delimiter",
    [
        ("a,b,", ","),
        (",a,,b,", ","),
        ("x--y--z", "--"),
        ("<sep>head<sep><sep>tail", "<sep>"),
        ("", ";"),
        ("no delimiter here", "|"),
    ],
)
def test_split_join_round_trip(text, delimiter):
    assert delimiter.join(S.split(text, delimiter)) == text


def test_split_remove_empty_entries():
    assert S.split(",a,,b,", ",", True) == ["a", "b"]
    assert S.split(",a,,b,", ",", "remove_empty_entries") == ["a", "b"]
    assert S.split(",a,,b,", ",", "none") == ["", "a", "", "b", ""]


def test_split_does_not_backtrack_inside_partial_match():
    # "a" followed by "ab": the second "a" is not re-tried as a match start
    assert S.split("aab", "ab") == ["aab"]
    assert S.split("xaabx", "ab") == ["xaabx"]
    # "aa" on "aaab": the first two "a" are cut, the third starts a match that "b" breaks
    assert S.split("aaab", "aa") == ["", "ab"]


def test_split_empty_delimiter_falls_back_to_whitespace_runs():
    assert S.split("a  b\tc ", "") == ["a", "b", "c"]
    assert S.split(" a b ", None) == ["a", "b"]


def test_split_honors_comparison_mode():
    assert S.split("aXbxc", "x") == ["aXb", "c"]
    assert S.split("aXbxc", "x", mode="ordinal_ignore_case") == ["a", "b", "c"]
    assert S.split("1ＡＢ2ab3", "AB", mode="culture_ignore_case") == ["1", "2", "3"]


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────

def test_split_none_text_is_precondition_violation():
    with pytest.raises(PreconditionViolation):
        S.split(None, ",")  # type: ignore[arg-type]


@pytest.mark.parametrize("option", ["bogus", 1, None])
def test_split_rejects_unknown_options(option):
    with pytest.raises(InvalidOption) as ei:
        S.split("a,b", ",", option)  # type: ignore[arg-type]
    assert ei.value.option == "remove_empty"


def test_split_rejects_unknown_mode():
    with pytest.raises(InvalidOption):
        S.split("a,b", ",", mode="loose")
