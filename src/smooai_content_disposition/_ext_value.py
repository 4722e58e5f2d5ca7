"""RFC 2231 / RFC 5987 extended parameter values.

An extended value looks like ``charset'language'percent-encoded-chars``. The
language tag is accepted by the grammar but plays no part in decoding.
"""

from __future__ import annotations

import codecs

from ._errors import DecodeError

DEFAULT_CHARSET = "iso-8859-1"

_LATIN_1 = codecs.lookup(DEFAULT_CHARSET).name

# Python codecs that are not charsets: they transform text rather than map
# bytes to characters, or do not support replacement of bad input.
_NOT_CHARSETS = frozenset(
    codecs.lookup(name).name
    for name in ("idna", "punycode", "unicode_escape", "raw_unicode_escape", "undefined", "charmap")
)

# Only attr-char bytes go out literally. Writing every visible ASCII byte as is
# would leave "%", " ", ";" and quotes bare, and the value would no longer
# parse back to itself.
_ATTR_CHAR_BYTES = frozenset(
    b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!#$&+-.^_`|~"
)


def _is_iso_control(byte: int) -> bool:
    return byte < 0x20 or 0x7F <= byte <= 0x9F


def resolve_charset(label: str) -> str:
    """Return the codec name for a charset label.

    An empty label means ISO-8859-1.

    Raises:
        DecodeError: If the label names no codec, or a codec that does not
            decode bytes to text (``base64``, ``rot13`` and the like), or a
            Python-only text codec such as ``idna`` or ``unicode_escape``.
    """
    try:
        name = codecs.lookup(label or DEFAULT_CHARSET).name
        b"".decode(name)
    except LookupError:
        raise DecodeError(f"unsupported charset: {label!r}") from None
    if name in _NOT_CHARSETS:
        raise DecodeError(f"unsupported charset: {label!r}")
    return name


def _flush(buffer: bytearray, name: str) -> str:
    try:
        return buffer.decode(name, "replace")
    except UnicodeError as e:
        raise DecodeError(f"cannot decode with charset {name}: {e}") from e


def decode_ext_value(charset: str, chars: str) -> str:
    """Decode the percent-encoded part of an extended value.

    Bytes are collected in a buffer and decoded with the resolved charset.
    Malformed byte sequences come out as U+FFFD. Under ISO-8859-1 the control
    bytes 0x00-0x1F and 0x7F-0x9F are not allowed: each one flushes the buffer
    and is itself replaced by U+FFFD.

    Args:
        charset: The charset label, possibly empty.
        chars: Literal characters and ``%XX`` triplets, already validated
            against the extended-value grammar.

    Returns:
        The decoded text.

    Raises:
        DecodeError: If ``charset`` cannot be resolved.
    """
    name = resolve_charset(charset)
    reject_controls = name == _LATIN_1
    pieces: list[str] = []
    buffer = bytearray()
    i = 0
    while i < len(chars):
        if chars[i] == "%":
            byte = int(chars[i + 1 : i + 3], 16)
            i += 3
        else:
            byte = ord(chars[i])
            i += 1
        if reject_controls and _is_iso_control(byte):
            pieces.append(_flush(buffer, name))
            pieces.append("\ufffd")
            buffer.clear()
            continue
        buffer.append(byte)
    pieces.append(_flush(buffer, name))
    return "".join(pieces)


def encode_ext_value(value: str) -> str:
    """Encode ``value`` as a ``UTF-8''...`` extended value.

    Bytes outside the attr-char set are written as ``%`` and two lowercase
    hex digits. Characters UTF-8 cannot encode (lone surrogates) become ``?``.

    Examples:
        >>> encode_ext_value("bar-ä")
        "UTF-8''bar-%c3%a4"
    """
    encoded = value.encode("utf-8", "replace")
    return "UTF-8''" + "".join(chr(byte) if byte in _ATTR_CHAR_BYTES else f"%{byte:02x}" for byte in encoded)
