"""catalog-browser: page through a remote catalog and keep a cross-page selection."""

import logging

from ._version import __version__
from .core import (
    BulkSelectDialog,
    DialogState,
    FetchError,
    Page,
    Record,
    SelectionStore,
)
from .loader import FramePageLoader, HttpPageLoader, PageLoader
from .config import BrowserConfig

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger (once) and set its level."""
    logger = logging.getLogger(__name__)
    if not any(getattr(h, "_catalog_browser", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._catalog_browser = True
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def explore(url=None, page_size=None, loader=None, port=0, show=True):
    """Launch the interactive browser.

    Parameters
    ----------
    url : str, optional
        Listing endpoint. Defaults to the configured/environment URL.
    page_size : int, optional
        Rows per page. Defaults to the configured/environment value.
    loader : PageLoader, optional
        Page source to use instead of the HTTP endpoint.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    """
    from .dashboard.app import BrowserApp

    config = BrowserConfig.from_env(api_url=url, page_size=page_size)
    configure_logging(config.logging_level)
    app = BrowserApp(config=config, loader=loader)
    app.serve(port=port, show=show)


__all__ = [
    "__version__",
    "BrowserConfig",
    "BulkSelectDialog",
    "DialogState",
    "FetchError",
    "FramePageLoader",
    "HttpPageLoader",
    "Page",
    "PageLoader",
    "Record",
    "SelectionStore",
    "configure_logging",
    "explore",
]
