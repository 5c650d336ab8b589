"""Input validation with clear error messages for listing payloads."""

from __future__ import annotations

from typing import Any


def validate_page_request(page_index: Any, page_size: Any) -> tuple[int, int]:
    """Validate a (page_index, page_size) pair before it reaches a loader.

    Returns the pair unchanged as ints.
    """
    if isinstance(page_index, bool) or not isinstance(page_index, int):
        raise TypeError(
            f"page_index must be an int, got {type(page_index).__name__}."
        )
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise TypeError(
            f"page_size must be an int, got {type(page_size).__name__}."
        )
    if page_index < 0:
        raise ValueError(f"page_index must be >= 0, got {page_index}.")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}.")
    return page_index, page_size


def validate_listing_payload(payload: Any) -> tuple[list[dict], int]:
    """Validate a decoded listing body of shape {data: [...], pagination: {total}}.

    Returns (data, total).
    """
    if not isinstance(payload, dict):
        raise ValueError(
            f"Listing payload must be a JSON object, got {type(payload).__name__}."
        )
    data = payload.get("data")
    if not isinstance(data, list):
        raise ValueError("Listing payload has no 'data' list.")
    bad = [i for i, item in enumerate(data) if not isinstance(item, dict)]
    if bad:
        raise ValueError(
            f"Listing 'data' entries must be objects. Bad positions: {bad[:5]}"
            + (f" (and {len(bad) - 5} more)" if len(bad) > 5 else "")
        )
    pagination = payload.get("pagination")
    if not isinstance(pagination, dict) or "total" not in pagination:
        raise ValueError("Listing payload has no 'pagination.total'.")
    total = pagination["total"]
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise ValueError(
            f"'pagination.total' must be a non-negative int, got {total!r}."
        )
    return data, total
