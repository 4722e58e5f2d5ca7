"""State machine turning header tokens into a disposition type and parameters."""

from __future__ import annotations

from enum import Enum

from ._errors import GrammarError
from ._ext_value import decode_ext_value
from ._grammar import EXT_VALUE
from ._quoted import unquote
from ._tokenizer import Token, TokenKind, next_token


class State(Enum):
    EXPECT_TYPE = 0
    EXPECT_SEMICOLON_OR_END = 1
    EXPECT_PARAM_KEY = 2
    EXPECT_EQUALS = 3
    EXPECT_PARAM_VALUE = 4
    END = -1


class _Context:
    """What the parser has collected so far."""

    def __init__(self) -> None:
        self.type = ""
        self.key = ""
        self.parameters: dict[str, str] = {}

    def step(self, state: State, token: Token) -> State:
        if state is State.EXPECT_TYPE:
            if token.kind is not TokenKind.WORD:
                raise GrammarError("disposition type expected", token.start)
            self.type = token.value.lower()
            return State.EXPECT_SEMICOLON_OR_END

        if state is State.EXPECT_SEMICOLON_OR_END:
            if token.kind is TokenKind.END:
                return State.END
            if token.kind is not TokenKind.SEPARATOR or token.value != ";":
                raise GrammarError("semicolon expected", token.start)
            return State.EXPECT_PARAM_KEY

        if state is State.EXPECT_PARAM_KEY:
            if token.kind is not TokenKind.WORD:
                raise GrammarError("parameter expected", token.start)
            self.key = token.value.lower()
            return State.EXPECT_EQUALS

        if state is State.EXPECT_EQUALS:
            if token.kind is not TokenKind.SEPARATOR or token.value != "=":
                raise GrammarError("equals sign expected", token.start)
            return State.EXPECT_PARAM_VALUE

        if state is State.EXPECT_PARAM_VALUE:
            # First occurrence wins; later duplicates are still validated.
            self.parameters.setdefault(self.key, self._value(token))
            return State.EXPECT_SEMICOLON_OR_END

        raise AssertionError(f"unreachable parser state: {state}")

    def _value(self, token: Token) -> str:
        if self.key.endswith("*"):
            match = EXT_VALUE.fullmatch(token.value) if token.kind is TokenKind.WORD else None
            if match is None:
                raise GrammarError("extended parameter value expected", token.start)
            return decode_ext_value(match.group("charset"), match.group("chars"))
        if token.kind is TokenKind.WORD:
            return token.value
        if token.kind is TokenKind.QUOTED_STRING:
            return unquote(token.value)
        raise GrammarError("parameter value expected", token.start)


def parse_header(text: str) -> tuple[str, dict[str, str]]:
    """Parse a Content-Disposition header value.

    Args:
        text: The header value, with characters 0x00-0xFF standing for bytes.

    Returns:
        The lowercased disposition type and the parameters in order of first
        appearance, keyed by lowercased name.

    Raises:
        LexicalError: If the value contains something that is not a token.
        GrammarError: If the tokens are out of order.
        DecodeError: If an extended value names an unknown charset.
    """
    context = _Context()
    state = State.EXPECT_TYPE
    pos = 0
    while state is not State.END:
        token = next_token(text, pos)
        pos = token.end
        state = context.step(state, token)
    return context.type, context.parameters
