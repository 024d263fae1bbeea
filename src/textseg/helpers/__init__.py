# src/textseg/helpers/__init__.py
"""
helpers.

Does: Single-pass utilities around the segmentation core (string search and
      replace, sequence formatting, mapping merges, exception flattening,
      name/value lookup).
Used by: Pipeline, CLI, and library callers.
"""

from __future__ import annotations

from .exceptions import message_stack, message_stack_list
from .mappings import add_distinct, add_range, add_range_distinct
from .name_value import key_exists
from .sequences import (
    contains_item,
    join_items,
    move_element,
    purge,
    strip_items,
    trim_items,
)
from .strings import (
    capitalize,
    contains,
    content_equals,
    decapitalize,
    index_of_any,
    is_numeric,
    replace,
    replace_many,
    starts_with_any,
)

__all__ = [
    # strings
    "index_of_any",
    "starts_with_any",
    "contains",
    "replace",
    "replace_many",
    "content_equals",
    "is_numeric",
    "capitalize",
    "decapitalize",
    # sequences
    "join_items",
    "purge",
    "contains_item",
    "strip_items",
    "trim_items",
    "move_element",
    # mappings
    "add_distinct",
    "add_range",
    "add_range_distinct",
    # exceptions
    "message_stack",
    "message_stack_list",
    # name/value
    "key_exists",
]
