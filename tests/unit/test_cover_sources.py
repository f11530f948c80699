# ABOUTME: Unit tests for the Open Library cover sources.
# ABOUTME: Validates Books API cover parsing, size preference, and Covers API URLs.

import pytest

from booklog.covers.openlibrary import (
    BooksApiCoverSource,
    CoverSource,
    CoversApiCoverSource,
    parse_books_api_cover,
)
from booklog.errors import ExternalServiceError
from tests.fixtures.fakes import FakeHttpClient
from tests.fixtures.openlibrary_responses import (
    BOOKS_API_ALL_SIZES,
    BOOKS_API_EMPTY_COVER,
    BOOKS_API_MEDIUM_ONLY,
    BOOKS_API_NO_COVER,
    BOOKS_API_SMALL_ONLY,
    BOOKS_API_UNKNOWN,
    SIGNET_ISBN,
)


class TestParseBooksApiCover:
    def test_prefers_large(self) -> None:
        url = parse_books_api_cover(BOOKS_API_ALL_SIZES, SIGNET_ISBN)
        assert url == "https://covers.openlibrary.org/b/id/295577-L.jpg"

    def test_medium_when_no_large(self) -> None:
        assert parse_books_api_cover(BOOKS_API_MEDIUM_ONLY, SIGNET_ISBN) == "http://X"

    def test_small_as_last_resort(self) -> None:
        url = parse_books_api_cover(BOOKS_API_SMALL_ONLY, SIGNET_ISBN)
        assert url == "https://covers.openlibrary.org/b/id/295577-S.jpg"

    def test_empty_size_strings_are_skipped(self) -> None:
        data = {f"ISBN:{SIGNET_ISBN}": {"cover": {"large": "", "medium": "http://M"}}}
        assert parse_books_api_cover(data, SIGNET_ISBN) == "http://M"

    @pytest.mark.parametrize(
        "data", [BOOKS_API_NO_COVER, BOOKS_API_EMPTY_COVER, BOOKS_API_UNKNOWN]
    )
    def test_no_cover_returns_none(self, data) -> None:
        assert parse_books_api_cover(data, SIGNET_ISBN) is None

    def test_entry_for_other_isbn_is_ignored(self) -> None:
        assert parse_books_api_cover(BOOKS_API_ALL_SIZES, "0000000000") is None

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "nope",
            {f"ISBN:{SIGNET_ISBN}": "not an object"},
            {f"ISBN:{SIGNET_ISBN}": {"cover": ["http://X"]}},
        ],
    )
    def test_malformed_shapes_raise(self, data) -> None:
        with pytest.raises(ExternalServiceError):
            parse_books_api_cover(data, SIGNET_ISBN)


class TestBooksApiCoverSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(BooksApiCoverSource(FakeHttpClient()), CoverSource)

    def test_queries_books_api(self) -> None:
        client = FakeHttpClient({"/api/books": BOOKS_API_MEDIUM_ONLY})
        source = BooksApiCoverSource(client, base_url="https://openlibrary.org/")

        assert source.lookup(SIGNET_ISBN) == "http://X"
        url, params = client.request_log[0]
        assert url == "https://openlibrary.org/api/books"
        assert params == {"bibkeys": f"ISBN:{SIGNET_ISBN}", "format": "json", "jscmd": "data"}

    def test_propagates_fetch_errors(self) -> None:
        client = FakeHttpClient({"/api/books": ExternalServiceError("HTTP 500")})
        with pytest.raises(ExternalServiceError):
            BooksApiCoverSource(client).lookup(SIGNET_ISBN)


class TestCoversApiCoverSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(CoversApiCoverSource(), CoverSource)

    def test_builds_large_isbn_url(self) -> None:
        url = CoversApiCoverSource().lookup(SIGNET_ISBN)
        assert url == "https://covers.openlibrary.org/b/isbn/0451526538-L.jpg"

    def test_escapes_identifier(self) -> None:
        url = CoversApiCoverSource(base_url="http://covers.test").lookup("12/34 5")
        assert url == "http://covers.test/b/isbn/12%2F34%205-L.jpg"
