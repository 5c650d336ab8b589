"""Record and Page: the transient data shown by the browser.

A Page lives only until the next one is loaded. Records are identified
by ``id``; everything else is display data.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Hashable, Iterator

import pandas as pd


# Display columns in table order
DISPLAY_FIELDS = (
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


def _optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Record:
    """One catalog item."""

    id: Hashable
    title: str | None = None
    place_of_origin: str | None = None
    artist_display: str | None = None
    inscriptions: str | None = None
    date_start: int | None = None
    date_end: int | None = None

    @classmethod
    def from_dict(cls, payload: dict) -> Record:
        """Build a Record from one listing entry. Unknown keys are ignored."""
        if payload.get("id") is None:
            raise ValueError(f"Listing entry has no 'id': {sorted(payload)[:5]}")
        return cls(
            id=payload["id"],
            title=_optional_str(payload.get("title")),
            place_of_origin=_optional_str(payload.get("place_of_origin")),
            artist_display=_optional_str(payload.get("artist_display")),
            inscriptions=_optional_str(payload.get("inscriptions")),
            date_start=_optional_int(payload.get("date_start")),
            date_end=_optional_int(payload.get("date_end")),
        )

    def to_dict(self) -> dict:
        """Display row, keyed by field name."""
        return {name: getattr(self, name) for name in DISPLAY_FIELDS}


@dataclass(frozen=True)
class Page:
    """One fetched batch of records plus the total count across all pages."""

    records: tuple[Record, ...]
    total_count: int
    page_index: int = 0
    page_size: int = 10

    @classmethod
    def empty(cls, page_size: int = 10) -> Page:
        return cls(records=(), total_count=0, page_index=0, page_size=page_size)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def ids(self) -> tuple:
        """Record IDs in page order."""
        return tuple(r.id for r in self.records)

    @property
    def page_count(self) -> int:
        """Number of pages the total count spans (at least 1)."""
        return max(1, math.ceil(self.total_count / self.page_size))

    @property
    def first_row(self) -> int:
        """Offset of this page's first record in the whole catalog."""
        return self.page_index * self.page_size

    def to_frame(self) -> pd.DataFrame:
        """One row per record, in page order, indexed by record ID."""
        index = pd.Index(self.ids, name="id", dtype=object)
        # object dtype keeps missing dates as None rather than NaN floats
        return pd.DataFrame(
            {
                name: pd.Series(
                    [getattr(r, name) for r in self.records],
                    index=index,
                    dtype=object,
                )
                for name in DISPLAY_FIELDS
            },
            index=index,
        )
