"""Tests for the httpx helpers -- headers, responses, HEAD requests (using respx)."""

from __future__ import annotations

import httpx
import pytest
import respx

from smooai_content_disposition import (
    ContentDisposition,
    GrammarError,
    fetch_content_disposition,
    from_headers,
    from_response,
    parse_content_disposition,
)


# ---------------------------------------------------------------------------
# from_headers / from_response
# ---------------------------------------------------------------------------


class TestFromHeaders:
    def test_httpx_headers(self) -> None:
        headers = httpx.Headers({"Content-Disposition": 'attachment; filename="hello.txt"'})
        cd = from_headers(headers)
        assert cd is not None
        assert cd.filename == "hello.txt"

    def test_raw_latin1_bytes(self) -> None:
        headers = httpx.Headers([(b"content-disposition", b'attachment; filename="foo-\xe4.html"')])
        cd = from_headers(headers)
        assert cd is not None
        assert cd.filename == "foo-ä.html"

    def test_plain_mapping(self) -> None:
        assert from_headers({"content-disposition": "inline"}) == ContentDisposition.inline()
        assert from_headers({"CONTENT-DISPOSITION": "inline"}) == ContentDisposition.inline()

    def test_missing(self) -> None:
        assert from_headers(httpx.Headers({"content-type": "text/plain"})) is None
        assert from_headers({}) is None

    def test_malformed(self) -> None:
        with pytest.raises(GrammarError):
            from_headers({"content-disposition": "attachment filename=bar"})

    def test_from_response(self) -> None:
        response = httpx.Response(
            200,
            headers={"content-disposition": "attachment; filename*=UTF-8''%E6%8A%A5%E5%91%8A.pdf"},
        )
        cd = from_response(response)
        assert cd is not None
        assert cd.is_attachment
        assert cd.filename == "报告.pdf"

    def test_from_response_without_header(self) -> None:
        assert from_response(httpx.Response(200)) is None


# ---------------------------------------------------------------------------
# fetch_content_disposition (using respx)
# ---------------------------------------------------------------------------


class TestFetchContentDisposition:
    @respx.mock
    async def test_head_request(self, download_url: str) -> None:
        route = respx.head(download_url).mock(
            return_value=httpx.Response(
                200,
                headers={"content-disposition": 'attachment; filename="report.pdf"'},
            )
        )

        cd = await fetch_content_disposition(download_url)
        assert route.called
        assert cd is not None
        assert cd.filename == "report.pdf"

    @respx.mock
    async def test_follows_redirects(self, download_url: str) -> None:
        target = "https://cdn.example.com/report.pdf"
        respx.head(download_url).mock(return_value=httpx.Response(302, headers={"location": target}))
        respx.head(target).mock(
            return_value=httpx.Response(200, headers={"content-disposition": "inline; filename=report.pdf"})
        )

        cd = await fetch_content_disposition(download_url)
        assert cd is not None
        assert cd.is_inline
        assert cd.filename == "report.pdf"

    @respx.mock
    async def test_with_client(self, download_url: str) -> None:
        respx.head(download_url).mock(return_value=httpx.Response(200))

        async with httpx.AsyncClient() as client:
            assert await fetch_content_disposition(download_url, client=client) is None

    @respx.mock
    async def test_http_error(self, download_url: str) -> None:
        respx.head(download_url).mock(return_value=httpx.Response(404))

        with pytest.raises(httpx.HTTPStatusError):
            await fetch_content_disposition(download_url)


# ---------------------------------------------------------------------------
# parse_content_disposition
# ---------------------------------------------------------------------------


class TestParseContentDisposition:
    def test_quoted_filename(self) -> None:
        assert parse_content_disposition('attachment; filename="report.pdf"') == ("report.pdf", ".pdf")

    def test_extended_filename(self) -> None:
        assert parse_content_disposition("attachment; filename*=UTF-8''my%20file.txt") == ("my file.txt", ".txt")

    def test_continuations(self) -> None:
        assert parse_content_disposition('attachment; filename*0="my."; filename*1="tar.gz"') == ("my.tar.gz", ".gz")

    def test_no_extension(self) -> None:
        assert parse_content_disposition("attachment; filename=Makefile") == ("Makefile", None)

    def test_no_filename(self) -> None:
        assert parse_content_disposition("inline") == (None, None)

    def test_empty(self) -> None:
        assert parse_content_disposition("") == (None, None)
        assert parse_content_disposition(None) == (None, None)

    def test_malformed(self) -> None:
        assert parse_content_disposition("attachment; filename=foo bar.txt") == (None, None)

    @pytest.mark.parametrize("charset", ["idna", "unicode_escape"])
    def test_python_only_codec(self, charset: str) -> None:
        assert parse_content_disposition(f"attachment; filename*={charset}''%5cud800%ff") == (None, None)
