"""Smoo AI Content-Disposition Library - Python SDK.

Parse and build HTTP ``Content-Disposition`` header values (RFC 6266),
including RFC 2231 extended and continuation parameters.
"""

__version__ = "1.0.0"

from ._disposition import ATTACHMENT_TYPE, INLINE_TYPE, Builder, ContentDisposition
from ._errors import (
    BuilderValidationError,
    ContentDispositionError,
    DecodeError,
    GrammarError,
    LexicalError,
)
from ._http import (
    HEADER_NAME,
    fetch_content_disposition,
    from_headers,
    from_response,
    parse_content_disposition,
)

parse = ContentDisposition.parse
inline = ContentDisposition.inline
attachment = ContentDisposition.attachment

__all__ = [
    "ATTACHMENT_TYPE",
    "HEADER_NAME",
    "INLINE_TYPE",
    "Builder",
    "BuilderValidationError",
    "ContentDisposition",
    "ContentDispositionError",
    "DecodeError",
    "GrammarError",
    "LexicalError",
    "attachment",
    "fetch_content_disposition",
    "from_headers",
    "from_response",
    "inline",
    "parse",
    "parse_content_disposition",
]
