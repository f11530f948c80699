# ABOUTME: Integration tests for the full cover pipeline over a mocked HTTP transport.
# ABOUTME: Tests config -> HTTP client -> Books API source -> Covers API fallback -> placeholder.

import httpx

from booklog.config import BooklogConfig
from booklog.covers.resolver import CoverTarget, create_resolver
from tests.fixtures.openlibrary_responses import (
    BOOKS_API_ALL_SIZES,
    BOOKS_API_MEDIUM_ONLY,
    BOOKS_API_NO_COVER,
    SIGNET_ISBN,
)

CONFIG = BooklogConfig(
    openlibrary_url="https://ol.test",
    covers_url="https://covers.test",
    placeholder="/images/no-cover.svg",
)


def _transport(handler) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.MockTransport(_record), seen


class TestCoverPipeline:
    def test_books_api_request_shape(self) -> None:
        transport, seen = _transport(lambda r: httpx.Response(200, json=BOOKS_API_ALL_SIZES))
        create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)

        assert len(seen) == 1
        request = seen[0]
        assert request.url.host == "ol.test"
        assert request.url.path == "/api/books"
        assert request.url.params["bibkeys"] == f"ISBN:{SIGNET_ISBN}"
        assert request.url.params["format"] == "json"
        assert request.url.params["jscmd"] == "data"

    def test_medium_cover(self) -> None:
        transport, _ = _transport(lambda r: httpx.Response(200, json=BOOKS_API_MEDIUM_ONLY))
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)
        assert target == CoverTarget(url="http://X", source="openlibrary-books")

    def test_no_cover_uses_covers_api(self) -> None:
        transport, seen = _transport(lambda r: httpx.Response(200, json=BOOKS_API_NO_COVER))
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)

        assert target.url == f"https://covers.test/b/isbn/{SIGNET_ISBN}-L.jpg"
        # The fallback URL is never fetched.
        assert len(seen) == 1

    def test_timeout_gives_placeholder(self) -> None:
        def hang(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        transport, _ = _transport(hang)
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)
        assert target == CoverTarget(url="/images/no-cover.svg")

    def test_network_error_gives_placeholder(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport, _ = _transport(refuse)
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)
        assert target.is_placeholder

    def test_server_error_gives_placeholder(self) -> None:
        transport, seen = _transport(lambda r: httpx.Response(500, text="oops"))
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)
        assert target.is_placeholder
        assert len(seen) == 1

    def test_non_json_gives_placeholder(self) -> None:
        transport, _ = _transport(lambda r: httpx.Response(200, text="<html></html>"))
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)
        assert target.is_placeholder

    def test_none_makes_no_request(self) -> None:
        transport, seen = _transport(lambda r: httpx.Response(200, json=BOOKS_API_ALL_SIZES))
        target = create_resolver(CONFIG, transport=transport).resolve("none")
        assert target.is_placeholder
        assert seen == []

    def test_timeout_comes_from_config(self) -> None:
        transport, seen = _transport(lambda r: httpx.Response(200, json={}))
        config = BooklogConfig(lookup_timeout=2.0)
        create_resolver(config, transport=transport).resolve(SIGNET_ISBN)
        assert seen[0].extensions["timeout"]["read"] == 2.0

    def test_oversized_identifier_gives_placeholder(self) -> None:
        """A query too long for httpx to build still ends at the placeholder."""
        transport, seen = _transport(lambda r: httpx.Response(200, json={}))
        target = create_resolver(CONFIG, transport=transport).resolve("9" * 70000)
        assert target == CoverTarget(url="/images/no-cover.svg")
        assert seen == []

    def test_other_2xx_is_accepted(self) -> None:
        transport, _ = _transport(lambda r: httpx.Response(203, json=BOOKS_API_MEDIUM_ONLY))
        target = create_resolver(CONFIG, transport=transport).resolve(SIGNET_ISBN)
        assert target.url == "http://X"
