# ABOUTME: Cover lookup package: HTTP client, Open Library sources, and the resolver.
# ABOUTME: Exports the pieces needed to turn an ISBN into a cover image URL.

from booklog.covers.http import BooklogHttpClient, HttpClient
from booklog.covers.openlibrary import BooksApiCoverSource, CoverSource, CoversApiCoverSource
from booklog.covers.resolver import CoverResolver, CoverTarget, create_resolver

__all__ = [
    "BooklogHttpClient",
    "BooksApiCoverSource",
    "CoverResolver",
    "CoverSource",
    "CoverTarget",
    "CoversApiCoverSource",
    "HttpClient",
    "create_resolver",
]
