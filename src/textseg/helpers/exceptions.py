# src/textseg/helpers/exceptions.py
"""
exceptions.py.

Does: Flatten an exception chain (__cause__ / __context__) into its messages,
      outermost first. Exception groups contribute their members' messages,
      not their own summary.
Returns: message_stack() -> str, message_stack_list() -> list[str].
Used by: The CLI error path, callers logging library failures on one line.
"""

from __future__ import annotations

import traceback

__all__ = ["message_stack", "message_stack_list"]


def _next_in_chain(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _walk(exc: BaseException | None, out: list[str], seen: set[int]) -> None:
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        if isinstance(exc, BaseExceptionGroup):
            for member in exc.exceptions:
                _walk(member, out, seen)
        else:
            out.append(_message(exc))
        exc = _next_in_chain(exc)


def _traceback_text(exc: BaseException) -> str:
    return "".join(traceback.format_tb(exc.__traceback__)).rstrip("\n")


def message_stack_list(exc: BaseException, include_traceback: bool = False) -> list[str]:
    """
    Does: Collect one message per exception of the chain.
    Returns: Messages outermost first; the top exception's traceback is
             appended as a last item when include_traceback is set.
    """
    messages: list[str] = []
    _walk(exc, messages, set())
    if include_traceback:
        messages.append(_traceback_text(exc))
    return messages


def message_stack(exc: BaseException, include_traceback: bool = False, delimiter: str = "\n") -> str:
    """Does: Join the chain messages with `delimiter` (no doubled delimiter when a message already ends with it)."""
    out = ""
    for msg in message_stack_list(exc):
        if out and not out.endswith(delimiter):
            out += delimiter
        out += msg
    if include_traceback:
        out += "\n\n" + _traceback_text(exc)
    return out
