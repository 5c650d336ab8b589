"""Shared test fixtures for catalog-browser."""

import pandas as pd
import pytest

from catalog_browser.core.record import Page, Record


def make_page(ids, page_index=0, page_size=10, total_count=None):
    """Page of bare records with the given IDs."""
    records = tuple(Record(id=i, title=f"Artwork {i}") for i in ids)
    if total_count is None:
        total_count = len(records)
    return Page(
        records=records,
        total_count=total_count,
        page_index=page_index,
        page_size=page_size,
    )


@pytest.fixture
def page_factory():
    """Callable building a Page from an iterable of IDs."""
    return make_page


@pytest.fixture
def page_one():
    """Page 1 of a 20-record catalog: ids 1..10."""
    return make_page(range(1, 11), page_index=0, total_count=20)


@pytest.fixture
def page_two():
    """Page 2 of a 20-record catalog: ids 11..20."""
    return make_page(range(11, 21), page_index=1, total_count=20)


@pytest.fixture
def catalog_frame():
    """25 artworks indexed by id, with a few missing display values."""
    ids = list(range(101, 126))
    return pd.DataFrame(
        {
            "title": [f"Artwork {i}" for i in ids],
            "place_of_origin": ["France", "Japan", None, "Italy", "Chicago"] * 5,
            "artist_display": [f"Artist {i % 7}" for i in ids],
            "inscriptions": [None] * 25,
            "date_start": [1800 + i for i in range(25)],
            "date_end": [1810 + i for i in range(24)] + [None],
        },
        index=pd.Index(ids, name="id"),
    )


@pytest.fixture
def listing_payload():
    """Listing body shaped like the artworks endpoint."""
    return {
        "pagination": {
            "total": 3,
            "limit": 10,
            "offset": 0,
            "total_pages": 1,
            "current_page": 1,
        },
        "data": [
            {
                "id": 27992,
                "title": "A Sunday on La Grande Jatte — 1884",
                "place_of_origin": "France",
                "artist_display": "Georges Seurat\nFrench, 1859-1891",
                "inscriptions": None,
                "date_start": 1884,
                "date_end": 1886,
            },
            {
                "id": 28560,
                "title": "The Bedroom",
                "place_of_origin": "France",
                "artist_display": "Vincent van Gogh\nDutch, 1853-1890",
                "inscriptions": None,
                "date_start": 1889,
                "date_end": 1889,
            },
            {
                "id": 111628,
                "title": "Nighthawks",
                "place_of_origin": "United States",
                "artist_display": "Edward Hopper\nAmerican, 1882-1967",
                "inscriptions": "Signed l.r.: Edward Hopper",
                "date_start": 1942,
                "date_end": 1942,
                "thumbnail": {"width": 5376},
            },
        ],
        "info": {"version": "1.13"},
    }
