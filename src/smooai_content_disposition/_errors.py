"""Exception hierarchy for Content-Disposition parsing and building."""

from __future__ import annotations


class ContentDispositionError(ValueError):
    """Base class for every Content-Disposition failure.

    Attributes:
        offset: Index into the header value where the problem was found, or
            ``None`` when the error is not tied to a position.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} at index {offset}"
        super().__init__(message)
        self.offset = offset


class LexicalError(ContentDispositionError):
    """No token could be recognized at the current position."""


class GrammarError(ContentDispositionError):
    """A token of the wrong kind appeared where another was expected."""


class DecodeError(ContentDispositionError):
    """An extended value names a charset with no text codec."""


class BuilderValidationError(ContentDispositionError):
    """A builder was given a value that cannot be written as a header."""
