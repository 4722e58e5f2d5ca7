"""Lexical scanner for Content-Disposition header values."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple

from ._errors import LexicalError
from ._grammar import LEXEME


class TokenKind(str, Enum):
    """Kinds of lexemes produced by :func:`next_token`."""

    END = "End"
    SEPARATOR = "Separator"
    QUOTED_STRING = "QuotedString"
    WORD = "Word"


class Token(NamedTuple):
    """A lexeme and its position in the scanned text.

    ``start`` points at the lexeme itself (after any folding whitespace) and
    ``end`` is where scanning resumes. ``value`` is the matched text, including
    the surrounding quotes for quoted strings.
    """

    kind: TokenKind
    start: int
    end: int
    value: str


_GROUP_KINDS = {
    "end": TokenKind.END,
    "separator": TokenKind.SEPARATOR,
    "quoted": TokenKind.QUOTED_STRING,
    "word": TokenKind.WORD,
}


def next_token(text: str, pos: int) -> Token:
    """Scan the token starting at ``pos``.

    Args:
        text: The whole header value.
        pos: Offset to resume scanning from.

    Returns:
        The next :class:`Token`. At the end of input a ``TokenKind.END`` token
        is returned, with ``end == len(text)``.

    Raises:
        LexicalError: If nothing recognizable starts at ``pos``.
    """
    match = LEXEME.match(text, pos)
    if match is None:
        raise LexicalError("unrecognized token", pos)
    group = match.lastgroup
    return Token(_GROUP_KINDS[group], match.start(group), match.end(), match.group(group))


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of ``text``, ending with a ``TokenKind.END`` token."""
    pos = 0
    while True:
        token = next_token(text, pos)
        yield token
        if token.kind is TokenKind.END:
            return
        pos = token.end
