"""Tests for the Panel wiring: table <-> state and the bulk-select panel."""

import pytest

from catalog_browser.config import BrowserConfig
from catalog_browser.dashboard.app import BrowserApp
from catalog_browser.dashboard.bulk_panel import BulkSelectPanel
from catalog_browser.dashboard.state import BrowserState
from catalog_browser.dashboard.table_pane import RecordTable
from catalog_browser.loader.frame_loader import FramePageLoader


@pytest.fixture
def wired(catalog_frame):
    state = BrowserState(loader=FramePageLoader(catalog_frame), page_size=10)
    table = RecordTable(state)
    state.load_page(0)
    return state, table


class TestRecordTable:
    def test_shows_current_page(self, wired):
        state, rt = wired
        assert list(rt.table.value.index) == list(range(101, 111))
        assert rt.table.titles["place_of_origin"] == "Origin"

    def test_user_selection_reaches_store(self, wired):
        state, rt = wired
        rt.table.selection = [0, 2]
        assert state.store.ids == {101, 103}

    def test_user_deselection_reaches_store(self, wired):
        state, rt = wired
        rt.table.selection = [0, 2]
        rt.table.selection = [2]
        assert state.store.ids == {103}

    def test_page_change_does_not_clear_selection(self, wired):
        state, rt = wired
        rt.table.selection = [0, 1]
        state.next_page()
        assert list(rt.table.value.index)[0] == 111
        assert rt.table.selection == []
        state.previous_page()
        assert rt.table.selection == [0, 1]
        assert state.store.ids == {101, 102}

    def test_bulk_select_updates_table(self, wired):
        state, rt = wired
        state.request_bulk_select()
        state.confirm_bulk_select(3)
        assert rt.table.selection == [0, 1, 2]

    def test_loading_mirrored(self, wired):
        state, rt = wired
        state.loading = True
        assert rt.table.loading
        state.loading = False
        assert not rt.table.loading


class TestBulkSelectPanel:
    def test_open_confirm(self, wired):
        state, _ = wired
        panel = BulkSelectPanel(state)
        panel.open_button.clicks += 1
        assert state.dialog_open
        panel.count_input.value = 2
        panel.confirm_button.clicks += 1
        assert not state.dialog_open
        assert state.store.ids == {101, 102}

    def test_cancel(self, wired):
        state, _ = wired
        panel = BulkSelectPanel(state)
        panel.open_button.clicks += 1
        panel.count_input.value = 5
        panel.cancel_button.clicks += 1
        assert not state.dialog_open
        assert len(state.store) == 0

    def test_reopen_after_dismiss_still_confirms(self, wired):
        state, _ = wired
        panel = BulkSelectPanel(state)
        panel.open_button.clicks += 1
        # modal closed without Cancel: dialog is still OPEN
        panel.open_button.clicks += 1
        assert state.dialog_open
        panel.count_input.value = 3
        panel.confirm_button.clicks += 1
        assert not state.dialog_open
        assert state.store.ids == {101, 102, 103}

    def test_modal_content(self, wired):
        state, _ = wired
        content = BulkSelectPanel(state).build_modal_content()
        assert len(content) == 4


class TestBrowserApp:
    def test_initial_page_loaded(self, catalog_frame):
        app = BrowserApp(
            config=BrowserConfig(page_size=5),
            loader=FramePageLoader(catalog_frame),
        )
        assert app.state.page_size == 5
        assert app.state.page.ids == (101, 102, 103, 104, 105)
        assert app.state.page_count == 5

    def test_page_label_text(self, catalog_frame):
        app = BrowserApp(loader=FramePageLoader(catalog_frame))
        assert app._page_label_text(0, 25) == "Page 1 of 3 &middot; 25 records"
        assert BrowserApp._selected_label_text(1234) == "1,234 selected"

    def test_pager_buttons(self, catalog_frame):
        app = BrowserApp(loader=FramePageLoader(catalog_frame))
        app.next_button.clicks += 1
        assert app.state.page_index == 1
        app.last_button.clicks += 1
        assert app.state.page_index == 2
        app.first_button.clicks += 1
        assert app.state.page_index == 0
