# ABOUTME: Public API for the Booklog database layer.
# ABOUTME: Exports connection management, catalog operations, and data types.

from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog
from booklog.db.mapping import BookFields, BookRecord, normalize_fields, validate_fields
from booklog.db.ordering import SortField, SortOrder

__all__ = [
    "BookCatalog",
    "BookFields",
    "BookRecord",
    "SortField",
    "SortOrder",
    "normalize_fields",
    "open_catalog",
    "validate_fields",
]
