# src/textseg/segmentation/tokenizer.py
"""
tokenizer.py.

Does: Split raw text into shell-argument-like tokens. Space, tab and one extra
      separator delimit tokens; a quote character toggles a region in which
      separators are ordinary content.
Returns: tokenize(text, quote_char='"', separator=' ') -> list[str]
Used by: pipeline.parse_arguments, the CLI, and callers parsing option strings.

Not a shell grammar: no escapes, one quote character, quotes never nest.
"""

from __future__ import annotations

import logging

from textseg.errors import InvalidOption, require

__all__ = ["tokenize", "DEFAULT_QUOTE_CHAR", "DEFAULT_SEPARATOR"]

log = logging.getLogger(__name__)

DEFAULT_QUOTE_CHAR = '"'
DEFAULT_SEPARATOR = " "
_FIXED_SEPARATORS = frozenset(" \t")


def _single_char(value: str, option: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidOption(option, value, f"'{option}' must be a single character, got {value!r}")
    return value


def tokenize(
    text: str,
    quote_char: str = DEFAULT_QUOTE_CHAR,
    separator: str = DEFAULT_SEPARATOR,
) -> list[str]:
    """
    Does: Scan `text` once, collecting characters into a buffer that is flushed
          as a token on every unquoted separator. Empty buffers are never
          emitted, so runs of separators collapse and "" quotes vanish.
          An unterminated quote runs to the end of the text.
    Returns: Tokens in input order, quote characters removed.
    Raises: PreconditionViolation if text is None; InvalidOption if quote_char
            or separator is not a single character.
    """
    require(text, "text")
    _single_char(quote_char, "quote_char")
    separators = _FIXED_SEPARATORS | {_single_char(separator, "separator")}

    tokens: list[str] = []
    buf: list[str] = []
    in_quote = False

    for ch in text:
        if ch in separators:
            if in_quote:
                buf.append(ch)
            elif buf:
                tokens.append("".join(buf))
                buf.clear()
        elif ch == quote_char:
            in_quote = not in_quote
        else:
            buf.append(ch)

    if buf:
        tokens.append("".join(buf))

    if in_quote:
        log.debug("tokenize: unterminated %r quote closed at end of input", quote_char)
    log.debug("tokenize: %d chars -> %d tokens", len(text), len(tokens))
    return tokens
