from .page_loader import (
    DEFAULT_FIELDS,
    DEFAULT_URL,
    HttpPageLoader,
    PageLoader,
    build_page,
)
from .frame_loader import FramePageLoader

__all__ = [
    "DEFAULT_FIELDS",
    "DEFAULT_URL",
    "HttpPageLoader",
    "PageLoader",
    "FramePageLoader",
    "build_page",
]
