# ABOUTME: Shared pytest fixtures for Booklog tests.
# ABOUTME: Provides temporary catalogs and sample books.

from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest

from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog
from booklog.db.mapping import BookFields


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a throwaway booklog database."""
    return tmp_path / "books.db"


@pytest.fixture
def catalog(db_path: Path) -> Iterator[BookCatalog]:
    """A BookCatalog backed by a temporary database."""
    conn = open_catalog(db_path)
    yield BookCatalog(conn)
    conn.close()


@pytest.fixture
def rose() -> BookFields:
    """A fully-populated book."""
    return BookFields(
        title="The Name of the Rose",
        author="Umberto Eco",
        isbn="9780156001311",
        rating=4.5,
        review="A mystery in a medieval monastery.",
        read_date=date(2023, 5, 1),
    )


@pytest.fixture
def seeded_catalog(catalog: BookCatalog) -> BookCatalog:
    """A catalog with a mix of dated, undated, rated, and unrated books.

    Insert order (and so ids 1-5):
        1 zebra stripes   rating 3.0  read 2022-01-10
        2 Apple Orchards  rating None read 2023-06-01
        3 middlemarch     rating 5.0  read None
        4 Beloved         rating 3.0  read 2023-06-01
        5 Dune            rating None read None
    """
    catalog.add_book(BookFields(title="zebra stripes", rating=3.0, read_date=date(2022, 1, 10)))
    catalog.add_book(BookFields(title="Apple Orchards", read_date=date(2023, 6, 1)))
    catalog.add_book(BookFields(title="middlemarch", rating=5.0))
    catalog.add_book(BookFields(title="Beloved", rating=3.0, read_date=date(2023, 6, 1)))
    catalog.add_book(BookFields(title="Dune"))
    return catalog
