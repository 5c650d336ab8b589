"""BrowserApp: assembles the Panel template and serves the catalog browser."""

from __future__ import annotations

import logging

import panel as pn

from ..config import BrowserConfig
from .state import BrowserState
from .table_pane import RecordTable
from .bulk_panel import BulkSelectPanel

logger = logging.getLogger(__name__)

_BROWSER_CSS = """
:root, :host {
  --design-primary-color: #1a73e8;
  --panel-primary-color: #1a73e8;
  --mdc-theme-primary: #1a73e8;
}

.bk-btn-primary {
  border-radius: 24px !important;
  background-color: #1a73e8 !important;
  border-color: #1a73e8 !important;
  color: #ffffff !important;
  box-shadow: none !important;
  font-weight: 500 !important;
  text-transform: none !important;
}
.bk-btn-primary:hover {
  background-color: #1557b0 !important;
  border-color: #1557b0 !important;
}

.cb-status {
  font-size: 12px !important;
  color: #5f6368 !important;
}
.cb-status-error {
  color: #d93025 !important;
}
"""


class BrowserApp:
    """Interactive catalog browser.

    Assembles a Panel MaterialTemplate with:
    - Main area: one page of records in a checkbox table + pager
    - Toolbar: bulk select button, selected count, clear button
    - Modal: bulk-select count input
    """

    def __init__(self, config: BrowserConfig | None = None, loader=None) -> None:
        pn.extension("tabulator", sizing_mode="stretch_width")
        pn.config.raw_css.append(_BROWSER_CSS)
        pn.config.loading_color = "#1a73e8"

        self.config = config or BrowserConfig.from_env()
        self.state = BrowserState(
            loader=loader or self.config.make_loader(),
            page_size=self.config.page_size,
        )

        self.record_table = RecordTable(self.state)
        self.bulk_panel = BulkSelectPanel(self.state)
        self._build_controls()

        # Initial page
        self.state.load_page(0)

    def _build_controls(self) -> None:
        self.first_button = pn.widgets.Button(name="«", width=40)
        self.prev_button = pn.widgets.Button(name="‹", width=40)
        self.next_button = pn.widgets.Button(name="›", width=40)
        self.last_button = pn.widgets.Button(name="»", width=40)
        self.clear_button = pn.widgets.Button(
            name="Clear selection", button_type="danger", width=140,
        )

        self.first_button.on_click(lambda e: self.state.first_page())
        self.prev_button.on_click(lambda e: self.state.previous_page())
        self.next_button.on_click(lambda e: self.state.next_page())
        self.last_button.on_click(lambda e: self.state.last_page())
        self.clear_button.on_click(lambda e: self.state.clear_selection())

        s = self.state.param
        self.page_label = pn.pane.HTML(
            pn.bind(self._page_label_text, s.page_index, s.total_count),
            css_classes=["cb-status"], width=260,
        )
        self.selected_label = pn.pane.HTML(
            pn.bind(self._selected_label_text, s.selected_count),
            css_classes=["cb-status"], width=160,
        )
        self.status_label = pn.pane.HTML(
            s.status_text,
            css_classes=["cb-status", "cb-status-error"],
        )

    def _page_label_text(self, page_index: int, total_count: int) -> str:
        return (
            f"Page {page_index + 1} of {self.state.page_count} "
            f"&middot; {total_count:,} records"
        )

    @staticmethod
    def _selected_label_text(selected_count: int) -> str:
        return f"{selected_count:,} selected"

    def _build_template(self) -> pn.template.MaterialTemplate:
        """Build the Panel MaterialTemplate layout."""
        template = pn.template.MaterialTemplate(
            title="Catalog Browser",
            header_background="#fafafa",
            header_color="#202124",
        )

        # Wire bulk panel → template for modal support
        self.bulk_panel.set_template(template)
        template.modal.extend(self.bulk_panel.build_modal_content())

        toolbar = pn.Row(
            self.bulk_panel.open_button,
            self.selected_label,
            self.clear_button,
            sizing_mode="stretch_width",
        )
        pager = pn.Row(
            self.first_button,
            self.prev_button,
            self.page_label,
            self.next_button,
            self.last_button,
        )
        template.main.append(
            pn.Column(
                toolbar,
                self.record_table.table,
                pager,
                self.status_label,
                sizing_mode="stretch_width",
            )
        )
        return template

    def serve(self, port: int = 0, show: bool = True, **kwargs) -> None:
        """Start the Panel server and optionally open the browser.

        Parameters
        ----------
        port : int
            Port number. 0 = auto-assign.
        show : bool
            Whether to open the browser automatically.
        **kwargs
            Additional keyword arguments passed to pn.serve().
        """
        template = self._build_template()
        logger.info("Serving catalog browser for %s", self.config.api_url)
        pn.serve(
            template,
            port=port or 0,
            show=show,
            title="Catalog Browser",
            **kwargs,
        )
