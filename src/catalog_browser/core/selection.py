"""SelectionStore: the cross-page selection set.

Only record IDs are stored, never records, so membership survives the
page that held the record being replaced. The store has no notion of
pages: every mutating call is handed the records that are eligible for
change, and records outside that list are never touched.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Iterable, Iterator, Sequence

from .record import Record

logger = logging.getLogger(__name__)


SelectionCallback = Callable[[frozenset], Any]


def clamp_count(n: Any, upper: int) -> int:
    """Clamp a free-form bulk count into [0, upper]. None counts as 0."""
    if n is None:
        return 0
    try:
        n = int(n)
    except OverflowError:
        # infinite counts clamp to the matching end
        return upper if n > 0 else 0
    except (TypeError, ValueError):
        return 0
    return max(0, min(n, upper))


class SelectionStore:
    """Holds the selected record IDs for the whole session.

    Absence from the set is the deselected state; nothing is ever stored
    with a "deselected" marker.
    """

    def __init__(self, ids: Iterable[Hashable] = ()) -> None:
        self._ids: set = set(ids)
        self._callbacks: list[SelectionCallback] = []

    @property
    def ids(self) -> frozenset:
        """Snapshot of the selected IDs."""
        return frozenset(self._ids)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator:
        return iter(self.ids)

    def reconcile(
        self,
        page_records: Sequence[Record],
        ui_selected: Iterable[Record],
    ) -> None:
        """Sync the set against the UI's checked subset of one page.

        Every record on the page is added if checked and removed if not.
        Checked records that are not on the page are ignored.
        """
        checked = {r.id for r in ui_selected}
        before = len(self._ids)
        changed = False
        for record in page_records:
            if record.id in checked:
                if record.id not in self._ids:
                    self._ids.add(record.id)
                    changed = True
            elif record.id in self._ids:
                self._ids.discard(record.id)
                changed = True
        if changed:
            logger.debug(
                "Reconciled %d page records: %d -> %d selected",
                len(page_records), before, len(self._ids),
            )
            self._notify()

    def select_first_n(self, page_records: Sequence[Record], n: Any) -> int:
        """Add the first ``n`` records of the page. Never removes anything.

        ``n`` is clamped to [0, len(page_records)]. Returns how many IDs
        were newly added.
        """
        records = list(page_records)
        k = clamp_count(n, len(records))
        added = 0
        for record in records[:k]:
            if record.id not in self._ids:
                self._ids.add(record.id)
                added += 1
        logger.info("Bulk-selected first %d of %d records (%d new)",
                    k, len(records), added)
        if added:
            self._notify()
        return added

    def displayed_selection(self, page_records: Sequence[Record]) -> list[Record]:
        """Records of the page whose ID is selected, in page order."""
        seen: set = set()
        shown = []
        for record in page_records:
            if record.id in self._ids and record.id not in seen:
                seen.add(record.id)
                shown.append(record)
        return shown

    def clear(self) -> None:
        """Drop every selected ID. Only called on explicit user request."""
        if self._ids:
            self._ids.clear()
            self._notify()

    def on_change(self, callback: SelectionCallback) -> None:
        """Register a callback: fn(selected_ids)."""
        self._callbacks.append(callback)

    def _notify(self) -> None:
        snapshot = self.ids
        for cb in self._callbacks:
            cb(snapshot)

    def __repr__(self) -> str:
        return f"SelectionStore(selected={len(self._ids)})"
