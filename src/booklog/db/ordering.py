# ABOUTME: Whitelisted sort fields and directions for listing books.
# ABOUTME: Maps untrusted sort/order strings onto fixed SQL ORDER BY fragments.

from enum import Enum


class SortField(Enum):
    """Columns a listing can be sorted by."""

    RATING = "rating"
    TITLE = "title"
    RECENCY = "recency"

    @classmethod
    def parse(cls, value: "str | SortField | None") -> "SortField":
        """Map user input to a SortField. Unknown values mean RECENCY."""
        if isinstance(value, cls):
            return value
        if value == "read_date":
            return cls.RECENCY
        try:
            return cls(value)
        except ValueError:
            return cls.RECENCY

    @property
    def expression(self) -> str:
        return _SORT_EXPRESSIONS[self]


class SortOrder(Enum):
    """Listing direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortOrder | None") -> "SortOrder":
        """Map user input to a SortOrder. Unknown values mean DESC."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.DESC

    @property
    def keyword(self) -> str:
        return "ASC" if self is SortOrder.ASC else "DESC"


# The only SQL text that user input can select. Never format raw input into a query.
_SORT_EXPRESSIONS: dict[SortField, str] = {
    SortField.RATING: "rating",
    SortField.TITLE: "LOWER(title)",
    SortField.RECENCY: "read_date",
}


def order_by_clause(sort_field: SortField, order: SortOrder) -> str:
    """Build the ORDER BY clause for a listing.

    Rows whose sort column is NULL always come last, in either direction.
    Ties fall back to ascending id so output is deterministic.
    """
    return f"ORDER BY {sort_field.expression} {order.keyword} NULLS LAST, id ASC"
