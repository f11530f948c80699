# ABOUTME: Open Library cover sources: the Books API lookup and the Covers API fallback.
# ABOUTME: Each source turns an ISBN-like identifier into an image URL or passes (None).

from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

from booklog.config import DEFAULT_COVERS_URL, DEFAULT_OPENLIBRARY_URL
from booklog.covers.http import HttpClient
from booklog.errors import ExternalServiceError

# Books API cover sizes, best first.
COVER_SIZES = ("large", "medium", "small")


@runtime_checkable
class CoverSource(Protocol):
    """One step of the cover lookup chain.

    lookup() returns an image URL, returns None to defer to the next source,
    or raises ExternalServiceError to abandon the lookup.
    """

    @property
    def name(self) -> str: ...

    def lookup(self, identifier: str) -> str | None: ...


def parse_books_api_cover(data: Any, identifier: str) -> str | None:
    """Pick the best cover URL from a Books API (jscmd=data) response.

    The response is keyed by "ISBN:<identifier>". Within that entry the
    optional "cover" object holds large/medium/small URLs; the first
    non-empty one in that order wins.

    Raises:
        ExternalServiceError: If the response is not a JSON object, or the
            entry or its cover has an unexpected shape.
    """
    if not isinstance(data, dict):
        raise ExternalServiceError(f"Unexpected Books API response type: {type(data).__name__}")

    entry = data.get(f"ISBN:{identifier}")
    if entry is None:
        return None
    if not isinstance(entry, dict):
        raise ExternalServiceError(f"Unexpected Books API entry for ISBN:{identifier}")

    cover = entry.get("cover")
    if cover is None:
        return None
    if not isinstance(cover, dict):
        raise ExternalServiceError(f"Unexpected cover object for ISBN:{identifier}")

    for size in COVER_SIZES:
        url = cover.get(size)
        if isinstance(url, str) and url:
            return url
    return None


class BooksApiCoverSource:
    """Looks up cover URLs through the Open Library Books API."""

    def __init__(self, http_client: HttpClient, base_url: str = DEFAULT_OPENLIBRARY_URL) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "openlibrary-books"

    def lookup(self, identifier: str) -> str | None:
        data = self._http.get(
            f"{self._base_url}/api/books",
            params={"bibkeys": f"ISBN:{identifier}", "format": "json", "jscmd": "data"},
        )
        return parse_books_api_cover(data, identifier)


class CoversApiCoverSource:
    """Builds a direct Covers API image URL without checking that it exists.

    The Covers API serves its own blank image for unknown ISBNs, so the URL is
    always usable as an image source.
    """

    def __init__(self, base_url: str = DEFAULT_COVERS_URL) -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "openlibrary-covers"

    def lookup(self, identifier: str) -> str | None:
        return f"{self._base_url}/b/isbn/{quote(identifier, safe='')}-L.jpg"
