"""Page loaders: fetch exactly one page of records plus the total count.

Loaders own no selection state. Each call is independent: no retries,
no caching, and no consistency guarantee between pages.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

import requests

from ..core.errors import FetchError
from ..core.record import Page, Record
from ..core.validation import validate_listing_payload, validate_page_request

logger = logging.getLogger(__name__)


DEFAULT_URL = "https://api.artic.edu/api/v1/artworks"

# Fields requested from the listing endpoint (id + display columns)
DEFAULT_FIELDS = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


class PageLoader(Protocol):
    def load(self, page_index: int, page_size: int) -> Page:
        """Return page ``page_index`` (0-based) or raise FetchError."""
        ...


def build_page(payload: object, page_index: int, page_size: int) -> Page:
    """Turn a decoded listing body into a Page. Raises ValueError on bad shape."""
    data, total = validate_listing_payload(payload)
    records = tuple(Record.from_dict(item) for item in data)
    return Page(
        records=records,
        total_count=total,
        page_index=page_index,
        page_size=page_size,
    )


class HttpPageLoader:
    """Loads pages from a JSON listing endpoint over HTTP.

    Sends ``GET url?page=<1-based>&limit=<size>&fields=<csv>`` and expects
    ``{"data": [...], "pagination": {"total": int, ...}}``.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: float = 10.0,
        fields: Sequence[str] | None = DEFAULT_FIELDS,
        session: requests.Session | None = None,
    ) -> None:
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be > 0 seconds, got {timeout}.")
        self.url = url
        self.timeout = timeout
        self.fields = tuple(fields) if fields else ()
        self._session = session or requests.Session()

    def build_params(self, page_index: int, page_size: int) -> dict:
        params = {"page": page_index + 1, "limit": page_size}
        if self.fields:
            params["fields"] = ",".join(self.fields)
        return params

    def load(self, page_index: int, page_size: int) -> Page:
        page_index, page_size = validate_page_request(page_index, page_size)
        params = self.build_params(page_index, page_size)
        logger.debug("GET %s params=%s", self.url, params)

        try:
            resp = self._session.get(self.url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(
                f"Request for page {page_index + 1} failed: {e}",
                page_index=page_index,
            ) from e

        if not resp.ok:
            raise FetchError(
                f"Listing returned HTTP {resp.status_code} for page {page_index + 1}.",
                page_index=page_index,
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise FetchError(
                f"Listing response for page {page_index + 1} is not JSON.",
                page_index=page_index,
                status_code=resp.status_code,
            ) from e

        try:
            page = build_page(payload, page_index, page_size)
        except ValueError as e:
            raise FetchError(
                f"Unexpected listing payload for page {page_index + 1}: {e}",
                page_index=page_index,
                status_code=resp.status_code,
            ) from e

        logger.debug(
            "Loaded page %d: %d records of %d",
            page_index + 1, len(page), page.total_count,
        )
        return page

    def close(self) -> None:
        self._session.close()
