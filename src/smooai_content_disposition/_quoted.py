"""Quoted-string handling (RFC 7230 section 3.2.6)."""

from __future__ import annotations


def unquote(quoted: str) -> str:
    """Return the logical value of a quoted-string lexeme.

    The surrounding quotes are stripped, each backslash escape yields the
    escaped character, and a CRLF followed by spaces or tabs folds into a
    single space.
    """
    chars: list[str] = []
    i, stop = 1, len(quoted) - 1
    while i < stop:
        char = quoted[i]
        if char == "\r" and quoted.startswith("\n", i + 1):
            i += 2
            while i < stop and quoted[i] in " \t":
                i += 1
            chars.append(" ")
            continue
        if char == "\\":
            i += 1
            char = quoted[i]
        chars.append(char)
        i += 1
    return "".join(chars)


def quote(value: str) -> str:
    """Wrap ``value`` in quotes, escaping ``"`` and ``\\`` with a backslash."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
