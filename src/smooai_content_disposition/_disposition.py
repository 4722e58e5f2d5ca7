"""The immutable Content-Disposition value and its builder."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import PurePath
from types import MappingProxyType
from typing import Union

from ._errors import BuilderValidationError
from ._filename import resolve_filename
from ._grammar import NON_TEXT, TEXT, TOKEN
from ._parser import parse_header
from ._serializer import serialize

logger = logging.getLogger("smooai_content_disposition")

INLINE_TYPE = "inline"
ATTACHMENT_TYPE = "attachment"

PathLike = Union[str, "os.PathLike[str]"]


def _last_segment(path: PathLike) -> str:
    return PurePath(os.fspath(path)).name


class ContentDisposition:
    """A parsed or built ``Content-Disposition`` header value.

    Instances are immutable. Use one of the class methods to create one.

    Examples:
        Parse a header::

            cd = ContentDisposition.parse("attachment; filename*=UTF-8''foo-%c3%a4.html")
            cd.filename  # "foo-ä.html"

        Build one for a file::

            str(ContentDisposition.attachment("reports/q3-€.pdf"))
            # 'attachment; filename="q3-?.pdf"; filename*=UTF-8\\'\\'q3-%e2%82%ac.pdf'

        Build one by hand::

            ContentDisposition.builder("inline").parameter("size", "1024").build()
    """

    __slots__ = ("_type", "_parameters")

    _type: str
    _parameters: Mapping[str, str]

    def __init__(self, disposition_type: str, parameters: Mapping[str, str]) -> None:
        self._type = disposition_type
        self._parameters = MappingProxyType(dict(parameters))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, value: str) -> ContentDisposition:
        """Parse a header value.

        Type and parameter names are lowercased. When a parameter appears
        more than once the first occurrence is kept.

        Raises:
            ContentDispositionError: If the value is malformed. The concrete
                class is one of ``LexicalError``, ``GrammarError`` or
                ``DecodeError``.
        """
        disposition_type, parameters = parse_header(value)
        logger.debug("Parsed content disposition: type=%s parameters=%s", disposition_type, parameters)
        return cls(disposition_type, parameters)

    @classmethod
    def builder(cls, disposition_type: str) -> Builder:
        return Builder(disposition_type)

    @classmethod
    def inline(cls, path: PathLike | None = None) -> ContentDisposition:
        """An ``inline`` value, with the filename taken from the last segment of ``path``."""
        builder = Builder(INLINE_TYPE)
        if path is not None:
            builder.filename(_last_segment(path))
        return builder.build()

    @classmethod
    def attachment(cls, path: PathLike | None = None) -> ContentDisposition:
        """An ``attachment`` value, with the filename taken from the last segment of ``path``."""
        builder = Builder(ATTACHMENT_TYPE)
        if path is not None:
            builder.filename(_last_segment(path))
        return builder.build()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def type(self) -> str:
        return self._type

    @property
    def parameters(self) -> Mapping[str, str]:
        return self._parameters

    @property
    def is_inline(self) -> bool:
        return self._type == INLINE_TYPE

    @property
    def is_attachment(self) -> bool:
        return self._type == ATTACHMENT_TYPE

    @property
    def filename(self) -> str | None:
        """The filename, assembled from continuations or extended values when present."""
        return resolve_filename(self._parameters)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def equals(self, other: ContentDisposition, strict: bool = False) -> bool:
        """Compare with ``other``; ``strict`` also requires the same parameter order.

        Examples:
            >>> a = ContentDisposition.parse("inline; a=foo; b=bar")
            >>> b = ContentDisposition.parse("inline; b=bar; a=foo")
            >>> a.equals(b)
            True
            >>> a.equals(b, strict=True)
            False
        """
        if self._type != other._type:
            return False
        if strict:
            return list(self._parameters.items()) == list(other._parameters.items())
        return dict(self._parameters) == dict(other._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentDisposition):
            return NotImplemented
        return self is other or self.equals(other)

    def __hash__(self) -> int:
        return hash((self._type, frozenset(self._parameters.items())))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return serialize(self._type, self._parameters)

    def __repr__(self) -> str:
        return f"ContentDisposition({str(self)!r})"


class Builder:
    """Collects a disposition type and parameters for a :class:`ContentDisposition`.

    Unlike parsing, adding a parameter name twice is an error. A builder is
    meant to be used once, by one caller.
    """

    def __init__(self, disposition_type: str) -> None:
        if not TOKEN.fullmatch(disposition_type):
            raise BuilderValidationError(f"not a token: {disposition_type!r}")
        self._type = disposition_type.lower()
        self._parameters: dict[str, str] = {}

    def parameter(self, key: str, value: str) -> Builder:
        """Add a parameter.

        Keys ending in ``*`` accept any text; other values must fit in a
        quoted string (printable ASCII and 0x80-0xFF).

        Raises:
            BuilderValidationError: If the key is not a token, the value cannot
                be encoded, or the key was already added.
        """
        if not TOKEN.fullmatch(key):
            raise BuilderValidationError(f"not a token: {key!r}")
        if not key.endswith("*") and not TEXT.fullmatch(value):
            raise BuilderValidationError(f"cannot encode parameter: {key}={value!r}")
        key = key.lower()
        if key in self._parameters:
            raise BuilderValidationError(f"parameter key exists: {key}")
        self._parameters[key] = value
        return self

    def filename(self, filename: str) -> Builder:
        """Set both ``filename`` and ``filename*``.

        ``filename`` gets a fallback in which every character that cannot be
        quoted is replaced by ``?``; ``filename*`` keeps the name as given.

        Raises:
            BuilderValidationError: If either parameter is already set.
        """
        for key in ("filename", "filename*"):
            if key in self._parameters:
                raise BuilderValidationError(f"parameter key exists: {key}")
        self._parameters["filename"] = NON_TEXT.sub("?", filename)
        self._parameters["filename*"] = filename
        return self

    def build(self) -> ContentDisposition:
        disposition = ContentDisposition(self._type, self._parameters)
        logger.debug("Built content disposition: %s", disposition)
        return disposition
