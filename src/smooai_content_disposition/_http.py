"""Helpers for reading Content-Disposition from ``httpx`` headers and responses."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

import httpx

from ._disposition import ContentDisposition
from ._errors import ContentDispositionError

logger = logging.getLogger("smooai_content_disposition")

HEADER_NAME = "Content-Disposition"


def _header_value(headers: httpx.Headers | Mapping[str, str]) -> str | None:
    if isinstance(headers, httpx.Headers):
        # Header bytes map one-to-one onto characters 0x00-0xFF.
        target = HEADER_NAME.lower().encode("ascii")
        for name, value in headers.raw:
            if name.lower() == target:
                return value.decode("iso-8859-1")
        return None
    for name, value in headers.items():
        if name.lower() == HEADER_NAME.lower():
            return value
    return None


def from_headers(headers: httpx.Headers | Mapping[str, str]) -> ContentDisposition | None:
    """Parse the Content-Disposition header out of ``headers``.

    Args:
        headers: ``httpx.Headers`` or any mapping of header names to values.
            Names are matched case-insensitively; the first match is used.

    Returns:
        The parsed value, or ``None`` if the header is absent.

    Raises:
        ContentDispositionError: If the header is present but malformed.
    """
    value = _header_value(headers)
    if value is None:
        logger.debug("No %s header", HEADER_NAME)
        return None
    return ContentDisposition.parse(value)


def from_response(response: httpx.Response) -> ContentDisposition | None:
    """Parse the Content-Disposition header of an ``httpx`` response."""
    return from_headers(response.headers)


async def fetch_content_disposition(
    url: str,
    client: httpx.AsyncClient | None = None,
) -> ContentDisposition | None:
    """Send a ``HEAD`` request to ``url`` and parse its Content-Disposition header.

    Redirects are followed.

    Args:
        url: The URL to probe.
        client: An existing client to reuse. When omitted a client is created
            for this request and closed afterwards.

    Returns:
        The parsed value, or ``None`` if the response has no such header.

    Raises:
        httpx.HTTPStatusError: If the response status is 4xx or 5xx.
        ContentDispositionError: If the header is malformed.
    """
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            response = await own_client.head(url)
    else:
        response = await client.head(url, follow_redirects=True)
    response.raise_for_status()
    logger.debug("HEAD %s -> %s", url, response.status_code)
    return from_response(response)


def parse_content_disposition(header_value: str | None) -> tuple[str | None, str | None]:
    """Extract the filename and its extension from a Content-Disposition header.

    This is the lenient entry point: an empty or malformed header gives
    ``(None, None)`` rather than an exception.

    Args:
        header_value: The raw Content-Disposition header string.

    Returns:
        A tuple of (filename, extension). Either or both may be ``None`` if they
        cannot be determined from the header. The extension keeps its leading dot.

    Examples:
        >>> parse_content_disposition('attachment; filename="report.pdf"')
        ('report.pdf', '.pdf')
        >>> parse_content_disposition("attachment; filename*=UTF-8''my%20file.txt")
        ('my file.txt', '.txt')
    """
    if not header_value:
        return None, None

    try:
        filename = ContentDisposition.parse(header_value).filename
    except ContentDispositionError as e:
        logger.debug("Ignoring malformed %s header %r: %s", HEADER_NAME, header_value, e)
        return None, None

    if filename is None:
        return None, None

    _, ext = os.path.splitext(filename)
    return filename, ext if ext else None
