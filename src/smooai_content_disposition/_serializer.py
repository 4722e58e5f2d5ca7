"""Render a disposition type and parameters back to header syntax."""

from __future__ import annotations

from collections.abc import Mapping

from ._ext_value import encode_ext_value
from ._quoted import quote


def serialize(disposition_type: str, parameters: Mapping[str, str]) -> str:
    """Return the header value for ``disposition_type`` and ``parameters``.

    Parameters whose name ends in ``*`` are written as UTF-8 extended values,
    all others as quoted strings.

    Examples:
        >>> serialize("attachment", {"filename": "a.txt", "filename*": "ä.txt"})
        'attachment; filename="a.txt"; filename*=UTF-8\\'\\'%c3%a4.txt'
    """
    parts = [disposition_type]
    for key, value in parameters.items():
        encoded = encode_ext_value(value) if key.endswith("*") else quote(value)
        parts.append(f"; {key}={encoded}")
    return "".join(parts)
