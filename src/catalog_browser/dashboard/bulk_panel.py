"""BulkSelectPanel: modal widgets for "select the first N rows of this page"."""

from __future__ import annotations

import panel as pn

from .state import BrowserState


class BulkSelectPanel:
    """Button + modal content driving the bulk-select dialog.

    The template's modal is opened by the button and closed by watching
    ``state.dialog_open``; the state machine itself lives in
    BulkSelectDialog. Dismissing the modal with its own close control
    is not observable, so the dialog stays OPEN until the next Select or
    Cancel; the selection is unaffected either way.
    """

    def __init__(self, state: BrowserState) -> None:
        self.state = state
        self._template = None

        self.open_button = pn.widgets.Button(
            name="Select N rows (current page only)",
            button_type="primary",
            icon="checkbox",
            width=260,
        )
        self.count_input = pn.widgets.IntInput(
            name="Number of rows", value=0, start=0, step=1, width=200,
        )
        self.confirm_button = pn.widgets.Button(
            name="Select", button_type="primary", width=90,
        )
        self.cancel_button = pn.widgets.Button(name="Cancel", width=90)

        self.open_button.on_click(self._on_request)
        self.confirm_button.on_click(
            lambda e: self.state.confirm_bulk_select(self.count_input.value)
        )
        self.cancel_button.on_click(lambda e: self.state.cancel_bulk_select())
        state.param.watch(self._on_dialog_open, "dialog_open")

    def set_template(self, template) -> None:
        """Store template reference for modal open/close."""
        self._template = template

    def _on_request(self, event) -> None:
        # Requesting while already OPEN is a no-op, so the modal can be
        # shown again even if it was dismissed without Cancel.
        self.state.request_bulk_select()
        if self._template is not None:
            self._template.open_modal()

    def _on_dialog_open(self, event) -> None:
        if self._template is not None and not event.new:
            self._template.close_modal()

    def build_modal_content(self) -> list:
        """Build the content placed in the template's modal."""
        return [
            pn.pane.Markdown("### Select rows"),
            pn.pane.Markdown(
                "Selection is limited to the current page only.",
                styles={"font-size": "0.9rem", "color": "#5f6368"},
            ),
            self.count_input,
            pn.Row(self.confirm_button, self.cancel_button),
        ]
