"""Errors raised by page loaders."""

from __future__ import annotations


class FetchError(Exception):
    """A page could not be retrieved from the catalog source.

    Raised for transport failures, non-success responses and payloads
    that do not have the listing shape.
    """

    def __init__(
        self,
        message: str,
        page_index: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.page_index = page_index
        self.status_code = status_code
