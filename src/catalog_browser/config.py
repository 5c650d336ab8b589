"""BrowserConfig: validated settings for the catalog browser."""

from __future__ import annotations

import logging
import os
from typing import Any

import param

from .loader.page_loader import DEFAULT_FIELDS, DEFAULT_URL, HttpPageLoader

ENV_PREFIX = "CATALOG_BROWSER_"

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _env_value(name: str, cast: type) -> Any:
    key = ENV_PREFIX + name
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(
            f"Environment variable {key}={raw!r} is not a valid {cast.__name__}."
        ) from None


class BrowserConfig(param.Parameterized):
    """Settings for the listing source and the table.

    ``param`` enforces types and bounds on assignment.
    """

    api_url = param.String(default=DEFAULT_URL, doc="Listing endpoint URL")
    page_size = param.Integer(default=10, bounds=(1, 100), doc="Rows per page")
    timeout = param.Number(
        default=10.0, bounds=(0, None), inclusive_bounds=(False, True),
        doc="HTTP timeout (s)",
    )
    fields = param.List(default=list(DEFAULT_FIELDS), item_type=str)
    log_level = param.Selector(default="INFO", objects=_LOG_LEVELS)

    @classmethod
    def from_env(cls, **overrides: Any) -> BrowserConfig:
        """Build a config from CATALOG_BROWSER_* variables.

        Explicit keyword overrides win over the environment; None values
        are ignored.
        """
        values = {
            "api_url": _env_value("API_URL", str),
            "page_size": _env_value("PAGE_SIZE", int),
            "timeout": _env_value("TIMEOUT", float),
            "log_level": _env_value("LOG_LEVEL", str),
        }
        if values["log_level"] is not None:
            values["log_level"] = values["log_level"].upper()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**{k: v for k, v in values.items() if v is not None})

    def make_loader(self) -> HttpPageLoader:
        return HttpPageLoader(self.api_url, timeout=self.timeout, fields=self.fields)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)
