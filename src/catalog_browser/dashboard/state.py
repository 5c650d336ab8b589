"""BrowserState: centralized reactive state for the catalog browser."""

from __future__ import annotations

import logging
from typing import Iterable

import param

from ..core.bulk_dialog import BulkSelectDialog
from ..core.errors import FetchError
from ..core.record import Page, Record
from ..core.selection import SelectionStore

logger = logging.getLogger(__name__)


class BrowserState(param.Parameterized):
    """Coordinates the page loader, the current page and the selection.

    Holds exactly one page at a time; navigation replaces it wholesale.
    The SelectionStore outlives every page.
    """

    # --- Navigation ---
    page_index = param.Integer(default=0, bounds=(0, None))
    page_size = param.Integer(default=10, bounds=(1, None))
    total_count = param.Integer(default=0, bounds=(0, None))

    # --- Current page (replaced on every successful load) ---
    page = param.ClassSelector(class_=Page, allow_None=True, default=None)

    # --- Selection ---
    selected_count = param.Integer(default=0)
    displayed_positions = param.List(default=[])

    # --- Bulk-select dialog ---
    dialog_open = param.Boolean(default=False)

    # --- Status ---
    loading = param.Boolean(default=False)
    status_text = param.String(default="")

    # --- Internal: page source ---
    _loader = param.Parameter(default=None, allow_None=True)

    def __init__(self, loader=None, store: SelectionStore | None = None, **params):
        super().__init__(_loader=loader, **params)
        if self.page is None:
            self.page = Page.empty(self.page_size)
        self.store = store if store is not None else SelectionStore()
        self.dialog = BulkSelectDialog(self.store, lambda: self.page.records)
        self.store.on_change(self._on_store_change)
        self.selected_count = len(self.store)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def page_count(self) -> int:
        return Page((), self.total_count, 0, self.page_size).page_count

    def load_page(self, page_index: int) -> bool:
        """Fetch a page and make it current.

        On FetchError the previous page and the selection are left as they
        were. Returns True if the page was replaced.
        """
        if self._loader is None:
            raise RuntimeError("BrowserState has no page loader.")
        if self.total_count:
            page_index = min(page_index, self.page_count - 1)
        page_index = max(0, page_index)

        self.loading = True
        self.status_text = "Loading..."
        try:
            page = self._loader.load(page_index, self.page_size)
        except FetchError as e:
            logger.warning("Could not load page %d: %s", page_index + 1, e)
            self.status_text = f"Error: {e}"
            return False
        finally:
            self.loading = False

        # Batched so page watchers already see the new displayed positions
        self.param.update(
            page=page,
            total_count=page.total_count,
            page_index=page.page_index,
            displayed_positions=self._positions_on(page),
            status_text="",
        )
        return True

    def reload(self) -> bool:
        return self.load_page(self.page_index)

    def next_page(self) -> bool:
        if self.page_index + 1 >= self.page_count:
            return False
        return self.load_page(self.page_index + 1)

    def previous_page(self) -> bool:
        if self.page_index == 0:
            return False
        return self.load_page(self.page_index - 1)

    def first_page(self) -> bool:
        return self.load_page(0)

    def last_page(self) -> bool:
        return self.load_page(self.page_count - 1)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def displayed_selection(self) -> list[Record]:
        return self.store.displayed_selection(self.page.records)

    def update_selection(self, positions: Iterable[int]) -> None:
        """Apply the table's checked row positions on the current page."""
        records = self.page.records
        checked = [records[i] for i in positions if 0 <= i < len(records)]
        self.store.reconcile(records, checked)
        self._refresh_displayed()

    def clear_selection(self) -> None:
        self.store.clear()
        self._refresh_displayed()

    def request_bulk_select(self) -> None:
        self.dialog.request()
        self.dialog_open = self.dialog.is_open

    def confirm_bulk_select(self, n) -> int:
        added = self.dialog.confirm(n)
        self.dialog_open = self.dialog.is_open
        self._refresh_displayed()
        return added

    def cancel_bulk_select(self) -> None:
        self.dialog.cancel()
        self.dialog_open = self.dialog.is_open

    def _on_store_change(self, selected_ids: frozenset) -> None:
        self.selected_count = len(selected_ids)

    def _positions_on(self, page: Page) -> list[int]:
        return [i for i, r in enumerate(page.records) if r.id in self.store]

    def _refresh_displayed(self) -> None:
        positions = self._positions_on(self.page)
        # Skip no-op assignments so table watchers do not echo back
        if positions != self.displayed_positions:
            self.displayed_positions = positions
