"""Filename resolution over parsed parameters (RFC 6266 section 4.3)."""

from __future__ import annotations

from collections.abc import Mapping


def lookup(parameters: Mapping[str, str], name: str) -> str | None:
    """Return ``name*`` if present, else ``name``, else ``None``."""
    value = parameters.get(name + "*")
    if value is None:
        value = parameters.get(name)
    return value


def resolve_filename(parameters: Mapping[str, str]) -> str | None:
    """Return the best filename the parameters describe.

    RFC 2231 continuations ``filename*0``, ``filename*1``, ... win when index
    0 exists; they are joined in index order up to the first missing index.
    Otherwise ``filename*`` is preferred over ``filename``.

    Examples:
        >>> resolve_filename({"filename*0": "foo", "filename*2": "bar"})
        'foo'
        >>> resolve_filename({"filename": "foo-ae.html", "filename*": "foo-ä.html"})
        'foo-ä.html'
    """
    part = lookup(parameters, "filename*0")
    if part is None:
        return lookup(parameters, "filename")
    parts = []
    index = 0
    while part is not None:
        parts.append(part)
        index += 1
        part = lookup(parameters, f"filename*{index}")
    return "".join(parts)
