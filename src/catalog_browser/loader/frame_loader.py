"""FramePageLoader: serves pages out of an in-memory DataFrame."""

from __future__ import annotations

import pandas as pd

from ..core.record import DISPLAY_FIELDS, Page, Record
from ..core.validation import validate_page_request


class FramePageLoader:
    """Page source backed by a DataFrame indexed by record ID.

    Columns matching the display fields are used; missing ones are None.
    Useful offline and in tests.
    """

    def __init__(self, frame: pd.DataFrame) -> None:
        if not isinstance(frame, pd.DataFrame):
            raise TypeError(
                f"Expected a pandas DataFrame, got {type(frame).__name__}."
            )
        if frame.index.has_duplicates:
            dupes = frame.index[frame.index.duplicated()].unique().tolist()
            raise ValueError(f"Record IDs must be unique. Found duplicates: {dupes[:5]}")
        self._frame = frame

    @property
    def total_count(self) -> int:
        return len(self._frame)

    def load(self, page_index: int, page_size: int) -> Page:
        page_index, page_size = validate_page_request(page_index, page_size)
        start = page_index * page_size
        chunk = self._frame.iloc[start:start + page_size]
        columns = [c for c in DISPLAY_FIELDS if c in chunk.columns]
        records = []
        rows = chunk[columns].to_dict("records")
        for record_id, row in zip(chunk.index.tolist(), rows):
            payload = {c: (None if pd.isna(v) else v) for c, v in row.items()}
            payload["id"] = record_id
            records.append(Record.from_dict(payload))
        return Page(
            records=tuple(records),
            total_count=self.total_count,
            page_index=page_index,
            page_size=page_size,
        )
