# ABOUTME: Resolves a book identifier to a displayable cover image URL.
# ABOUTME: Walks an ordered chain of cover sources and falls back to a local placeholder.

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from booklog.config import DEFAULT_PLACEHOLDER, BooklogConfig
from booklog.covers.http import BooklogHttpClient
from booklog.covers.openlibrary import BooksApiCoverSource, CoverSource, CoversApiCoverSource
from booklog.errors import ExternalServiceError

logger = logging.getLogger(__name__)

# Identifier value meaning "this book has no ISBN".
NO_IDENTIFIER = "none"


@dataclass(frozen=True)
class CoverTarget:
    """Where a cover request should be redirected."""

    url: str
    source: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.source is None


class CoverResolver:
    """Picks a cover image URL for an identifier.

    Sources are tried in order. The first URL returned wins; a source
    returning None defers to the next one. If a source raises
    ExternalServiceError the lookup stops at the placeholder, as does running
    out of sources. resolve() never raises.
    """

    def __init__(
        self,
        sources: Sequence[CoverSource],
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        self._sources = list(sources)
        self._placeholder = placeholder

    @property
    def placeholder(self) -> CoverTarget:
        return CoverTarget(url=self._placeholder)

    def resolve(self, identifier: str | None) -> CoverTarget:
        """Resolve an identifier to a cover target.

        Args:
            identifier: ISBN-like string. None, blank, or "none" skip the
                lookup entirely.

        Returns:
            An external cover URL, or the placeholder.
        """
        if identifier is None:
            return self.placeholder
        identifier = identifier.strip()
        if not identifier or identifier == NO_IDENTIFIER:
            return self.placeholder

        for source in self._sources:
            try:
                url = source.lookup(identifier)
            except ExternalServiceError as exc:
                logger.warning("Cover lookup via %s failed for %s: %s", source.name, identifier, exc)
                return self.placeholder
            if url:
                logger.debug("Cover for %s from %s: %s", identifier, source.name, url)
                return CoverTarget(url=url, source=source.name)

        return self.placeholder


def create_resolver(
    config: BooklogConfig,
    transport: httpx.BaseTransport | None = None,
) -> CoverResolver:
    """Build the default Open Library resolver: Books API, then Covers API."""
    http_client = BooklogHttpClient(timeout=config.lookup_timeout, transport=transport)
    return CoverResolver(
        sources=[
            BooksApiCoverSource(http_client, base_url=config.openlibrary_url),
            CoversApiCoverSource(base_url=config.covers_url),
        ],
        placeholder=config.placeholder,
    )
