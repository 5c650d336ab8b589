"""RecordTable: Tabulator showing one page of records with checkbox selection."""

from __future__ import annotations

import panel as pn

from ..core.record import DISPLAY_FIELDS
from ..display_utils import column_title
from .state import BrowserState


class RecordTable:
    """Binds a Tabulator widget to BrowserState.

    The widget's ``selection`` holds row positions on the current page.
    User edits flow into ``state.update_selection``; page loads and bulk
    selections flow back as ``state.displayed_positions``.
    """

    def __init__(self, state: BrowserState) -> None:
        self.state = state
        # True while we push state into the widget; widget events are echoes then
        self._syncing = False

        self.table = pn.widgets.Tabulator(
            state.page.to_frame(),
            selectable="checkbox",
            show_index=False,
            disabled=True,
            pagination=None,
            titles={name: column_title(name) for name in DISPLAY_FIELDS},
            sizing_mode="stretch_width",
            height=420,
        )

        self.table.param.watch(self._on_table_selection, "selection")
        state.param.watch(self._on_page_change, "page")
        state.param.watch(self._on_displayed_change, "displayed_positions")
        state.param.watch(self._on_loading_change, "loading")

    def _on_table_selection(self, event) -> None:
        if self._syncing:
            return
        self.state.update_selection(event.new)

    def _on_page_change(self, event) -> None:
        self._syncing = True
        try:
            self.table.value = event.new.to_frame()
            self.table.selection = list(self.state.displayed_positions)
        finally:
            self._syncing = False

    def _on_displayed_change(self, event) -> None:
        if list(self.table.selection) == list(event.new):
            return
        self._syncing = True
        try:
            self.table.selection = list(event.new)
        finally:
            self._syncing = False

    def _on_loading_change(self, event) -> None:
        self.table.loading = event.new
