"""Shared fixtures for smooai-content-disposition tests."""

from __future__ import annotations

import pytest

# ---------------------------------------------------------------------------
# Header fixtures
# ---------------------------------------------------------------------------

# Header values that parse successfully, covering quoted strings, tokens,
# extended values, continuations and line folding.
VALID_HEADERS = [
    "inline",
    "ATTACHMENT",
    'attachment; filename="foo.html"',
    "attachment; filename=foo.html",
    'attachment; foo="\\"\\\\";filename="foo.html"',
    'attachment; filename="foo-\xe4.html"',
    'attachment; filename="=?ISO-8859-1?Q?foo-=E4.html?="',
    'attachment; creation-date="Wed, 12 Feb 1997 16:29:51 -0500"',
    "attachment; filename*=UTF-8''foo-%c3%a4-%e2%82%ac.html",
    "attachment; filename*=''foo-%c3%a4-%e2%82%ac.html",
    "attachment; filename*=UTF-8''A-%2541.html",
    "attachment; filename*=UTF-8''%5cfoo.html",
    'attachment; filename*0*=UTF-8\'\'foo-%c3%a4; filename*1=".html"',
    'attachment; filename*1="bar"; filename*0="foo"',
    'attachment;\r\n\tfoo="bar\r\n baz\r\n \t \t \t foo"',
    'attachment; foo="tab\there"',
]

# Header values that must be rejected.
INVALID_HEADERS = [
    "",
    '"inline"',
    "attachment filename=bar",
    "inline; attachment",
    'attachment; filename="bar',
    "attachment; filename*=\"UTF-8''foo.html\"",
    "attachment; filename=foo,bar.html",
    "attachment; filename=foo.html ;",
    "attachment; ;filename=foo",
    "attachment; filename=foo bar.html",
    "attachment; filename=foo[1](2).html",
    "attachment; filename=foo-\xe4.html",
    "filename=foo.html",
    "x=y; filename=foo.html",
    '"foo; filename=bar;baz"; filename=qux',
    "filename=foo.html, filename=bar.html",
    "; filename=foo.html",
    ": inline; attachment; filename=foo.html",
    "attachment; inline; filename=foo.html",
    'attachment; filename="foo.html".txt',
    'attachment; filename=foo"bar;baz"qux',
    "attachment; filename=foo.html, attachment; filename=bar.html",
    "attachment; foo=foo filename=bar",
    "attachment; filename=bar foo=foo",
    "filename=foo.html; attachment",
    "attachment; filename *=UTF-8''foo-%c3%a4.html",
    'attachment; filename*="foo%20bar.html"',
    "attachment; filename*=UTF-8'foo-%c3%a4.html",
    "attachment; filename*=UTF-8''foo%",
    "attachment; filename*=UTF-8''f%oo.html",
    "attachment; foo=bar\r\nbaz",
    "attachment; foo=bar\r\n\tbaz",
]


@pytest.fixture(params=VALID_HEADERS)
def valid_header(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture(params=INVALID_HEADERS)
def invalid_header(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture()
def download_url() -> str:
    return "https://example.com/files/download"
