from .state import BrowserState

__all__ = ["BrowserState"]
