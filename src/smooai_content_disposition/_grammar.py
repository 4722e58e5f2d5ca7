"""Compiled grammar patterns shared by the tokenizer, parser and builder."""

from __future__ import annotations

import re

# RFC 2616 token characters.
TOKEN_CHARS = r"0-9A-Za-z!#$%&'*+\-.^_`|~"

# RFC 5987 attr-char: token characters minus "*", "'" and "%".
ATTR_CHARS = r"0-9A-Za-z!#$&+\-.^_`|~"

TOKEN = re.compile(rf"[{TOKEN_CHARS}]+")

TEXT = re.compile(r"[\x20-\x7e\x80-\xff]*")
NON_TEXT = re.compile(r"[^\x20-\x7e\x80-\xff]")

# Optional folding whitespace, then exactly one lexeme. Inside quoted strings
# each space/tab is consumed on its own so that runs of blanks cannot be split
# in more than one way.
LEXEME = re.compile(
    r"(?:(?:\r\n)?[ \t]+)?"
    r"(?:"
    r"(?P<end>\Z)"
    r"|(?P<separator>[;=])"
    r'|(?P<quoted>"(?:[\x21\x23-\x5b\x5d-\x7e\x80-\xff]|\\[\x20-\x7e]|\r\n[ \t]|[ \t])*")'
    rf"|(?P<word>[{TOKEN_CHARS}]+)"
    r")"
)

EXT_VALUE = re.compile(
    r"(?P<charset>[0-9A-Za-z!#$%&+\-^_`{}~]*)"
    r"'(?P<language>[A-Za-z]{2,8}(?:-[0-9A-Za-z]{1,8})*)?'"
    rf"(?P<chars>(?:[{ATTR_CHARS}]|%[0-9A-Fa-f]{{2}})+)"
)
