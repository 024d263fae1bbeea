# tests/test_helpers.py
"""Tests for the helper utilities (strings, sequences, mappings, exceptions, name/value)."""

from __future__ import annotations

import pytest

from textseg.errors import DuplicateKeyError, InvalidOption, PreconditionViolation
from textseg.helpers import exceptions as EX
from textseg.helpers import mappings as M
from textseg.helpers import name_value as NV
from textseg.helpers import sequences as SEQ
from textseg.helpers import strings as STR


# ─────────────────────────────────────────────────────────────────────────────
# strings
# ─────────────────────────────────────────────────────────────────────────────

def test_index_of_any_returns_first_value_found():
    assert STR.index_of_any("hello world", ["z", "o"]) == 4
    assert STR.index_of_any("hello", "lz") == 2
    assert STR.index_of_any("HELLO", ["l"], "ordinal_ignore_case") == 2
    assert STR.index_of_any("", ["a"]) == -1
    assert STR.index_of_any("abc", None) == -1


def test_starts_with_any_and_contains():
    assert STR.starts_with_any("--flag", ["/", "--"])
    assert not STR.starts_with_any("flag", ["/", "--"])
    assert STR.starts_with_any("ABC", ["ab"], "ordinal_ignore_case")
    assert not STR.starts_with_any("ABC", None)
    assert STR.contains("Hello", "ELL", "ordinal_ignore_case")
    assert not STR.contains("Hello", "ELL")


def test_replace_is_single_pass_and_mode_aware():
    assert STR.replace("Hello hello", "HELLO", "bye", "ordinal_ignore_case") == "bye bye"
    assert STR.replace("aaa", "a", "aa") == "aaaaaa"
    assert STR.replace("abc", "", "x") == "abc"
    assert STR.replace("abc", "b", None) == "ac"
    assert STR.replace_many("a-b_c", ["-", "_"], " ") == "a b c"
    assert STR.replace_many("abc", None, "x") == "abc"


def test_content_equals_normalizes_line_breaks():
    assert STR.content_equals("a\r\nb", "a\nb")
    assert not STR.content_equals("a\nb", "a\rb")
    assert not STR.content_equals("a", None)


@pytest.mark.parametrize(
    "text,expected",
    [("3.14", True), (" 2 ", True), ("1e3", True), ("-7", True), ("abc", False), ("", False), (None, False)],
)
def test_is_numeric(text, expected):
    assert STR.is_numeric(text) is expected


def test_capitalize_and_decapitalize_touch_first_char_only():
    assert STR.capitalize("hello World") == "Hello World"
    assert STR.decapitalize("Hello World") == "hello World"
    assert STR.capitalize("") == ""
    assert STR.capitalize("  ") == "  "


# ─────────────────────────────────────────────────────────────────────────────
# sequences
# ─────────────────────────────────────────────────────────────────────────────

def test_join_items():
    items = ["a", "b", "c"]
    assert SEQ.join_items(items) == "a b c"
    assert SEQ.join_items(items, ",", 1) == "b,c"
    assert SEQ.join_items(items, ",", 0, 2, "'") == "'a','b'"
    assert SEQ.join_items(items, ",", 1, 0) == ""
    assert SEQ.join_items([]) == ""


@pytest.mark.parametrize(
    "kwargs,option",
    [
        ({"start_index": 3}, "start_index"),
        ({"start_index": -1}, "start_index"),
        ({"count": -2}, "count"),
        ({"start_index": 1, "count": 5}, "count"),
    ],
)
def test_join_items_rejects_out_of_range(kwargs, option):
    with pytest.raises(InvalidOption) as ei:
        SEQ.join_items(["a", "b", "c"], **kwargs)
    assert ei.value.option == option


def test_join_items_requires_items():
    with pytest.raises(PreconditionViolation):
        SEQ.join_items(None)  # type: ignore[arg-type]


def test_purge_and_strip_items():
    assert SEQ.purge([" a ", "", None, "  ", "b"]) == ["a", "b"]
    assert SEQ.strip_items([" a ", "..b.."]) == ["a", "..b.."]
    assert SEQ.strip_items(["..b..", "*c"], {".", "*"}) == ["b", "c"]


def test_contains_item():
    assert SEQ.contains_item(["Alpha", "beta"], "ALPHA", "ordinal_ignore_case")
    assert not SEQ.contains_item(["Alpha", "beta"], "ALPHA")
    assert not SEQ.contains_item(["ab"], "a")
    assert SEQ.contains_item(["a", None], None)


def test_trim_items_by_side():
    items = ["--a--", "/b"]
    assert SEQ.trim_items(items, ["--", "/"], side="start") == ["a--", "b"]
    assert SEQ.trim_items(items, ["--", "/"], side="end") == ["--a", "/b"]
    assert SEQ.trim_items(items, ["--", "/"]) == ["a", "b"]
    with pytest.raises(InvalidOption):
        SEQ.trim_items(items, "-", side="middle")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "src,dst,expected",
    [
        (0, 2, ["b", "a", "c", "d"]),
        (3, 0, ["d", "a", "b", "c"]),
        (1, 1, ["a", "b", "c", "d"]),
    ],
)
def test_move_element(src, dst, expected):
    lst = ["a", "b", "c", "d"]
    SEQ.move_element(lst, src, dst)
    assert lst == expected


def test_move_element_rejects_out_of_range():
    with pytest.raises(InvalidOption):
        SEQ.move_element(["a"], 0, 1)


# ─────────────────────────────────────────────────────────────────────────────
# mappings
# ─────────────────────────────────────────────────────────────────────────────

def test_mapping_merges():
    d = {"a": 1}
    assert M.add_distinct(d, "a", 2) is False
    assert M.add_distinct(d, "b", 2) is True
    M.add_range(d, {"c": 3})
    assert d == {"a": 1, "b": 2, "c": 3}

    M.add_range_distinct(d, {"a": 9, "z": 0})
    assert d["a"] == 1 and d["z"] == 0


def test_add_range_errors():
    d = {"a": 1}
    with pytest.raises(DuplicateKeyError) as ei:
        M.add_range(d, {"a": 9})
    assert str(ei.value) == "key 'a' already exists"
    with pytest.raises(PreconditionViolation):
        M.add_range(d, None)
    with pytest.raises(PreconditionViolation):
        M.add_range_distinct(d, None)


# ─────────────────────────────────────────────────────────────────────────────
# exceptions
# ─────────────────────────────────────────────────────────────────────────────

def _chained() -> BaseException:
    try:
        try:
            raise ValueError("inner")
        except ValueError as e:
            raise RuntimeError("outer") from e
    except RuntimeError as exc:
        return exc
    raise AssertionError("unreachable")


def test_message_stack_follows_cause_chain():
    exc = _chained()
    assert EX.message_stack_list(exc) == ["outer", "inner"]
    assert EX.message_stack(exc) == "outer\ninner"
    assert EX.message_stack(exc, delimiter=" | ") == "outer | inner"


def test_message_stack_follows_implicit_context_unless_suppressed():
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise TypeError("while handling")
    except TypeError as exc:
        assert EX.message_stack_list(exc) == ["while handling", "'k'"]

    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise TypeError("clean") from None
    except TypeError as exc:
        assert EX.message_stack_list(exc) == ["clean"]


def test_message_stack_flattens_exception_groups():
    group = ExceptionGroup("many", [ValueError("a"), TypeError("b")])
    assert EX.message_stack_list(group) == ["a", "b"]
    assert EX.message_stack_list(ValueError()) == ["ValueError"]


def test_message_stack_with_traceback():
    exc = _chained()
    items = EX.message_stack_list(exc, include_traceback=True)
    assert items[:2] == ["outer", "inner"]
    assert "File" in items[-1]
    assert EX.message_stack(exc, include_traceback=True).startswith("outer\ninner\n\n")


# ─────────────────────────────────────────────────────────────────────────────
# name/value
# ─────────────────────────────────────────────────────────────────────────────

def test_key_exists_checks_named_and_bare_keys():
    pairs = {"level": "2", None: "verbose, debug"}
    assert NV.key_exists(pairs, "level")
    assert NV.key_exists(pairs, "debug")
    assert not NV.key_exists(pairs, "quiet")
    assert NV.key_exists([("a", "1"), (None, "x")], "x")
    assert not NV.key_exists([("a", "1")], "b")
