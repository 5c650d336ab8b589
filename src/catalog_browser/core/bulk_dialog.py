"""BulkSelectDialog: open/confirm/cancel cycle for select-first-N."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Sequence

from .record import Record
from .selection import SelectionStore

logger = logging.getLogger(__name__)


class DialogState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


class BulkSelectDialog:
    """Two-state machine: CLOSED -> OPEN -> CLOSED, reusable forever.

    ``page_provider`` returns the records of the page that is current at
    confirm time, so a page change while the dialog is open is honored.
    """

    def __init__(
        self,
        store: SelectionStore,
        page_provider: Callable[[], Sequence[Record]],
    ) -> None:
        self._store = store
        self._page_provider = page_provider
        self._state = DialogState.CLOSED

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is DialogState.OPEN

    def request(self) -> None:
        """Open the dialog. No effect on the selection."""
        self._state = DialogState.OPEN

    def confirm(self, n: Any) -> int:
        """Select the first ``n`` records of the current page and close.

        Returns the number of newly selected IDs. Ignored while closed.
        """
        if not self.is_open:
            logger.debug("Ignoring confirm(%r) while dialog is closed", n)
            return 0
        try:
            return self._store.select_first_n(self._page_provider(), n)
        finally:
            self._state = DialogState.CLOSED

    def cancel(self) -> None:
        """Close without touching the selection."""
        if not self.is_open:
            logger.debug("Ignoring cancel while dialog is closed")
        self._state = DialogState.CLOSED

    def __repr__(self) -> str:
        return f"BulkSelectDialog(state={self._state.value})"
