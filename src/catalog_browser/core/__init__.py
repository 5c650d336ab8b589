from .errors import FetchError
from .record import Record, Page
from .selection import SelectionStore
from .bulk_dialog import BulkSelectDialog, DialogState

__all__ = [
    "FetchError",
    "Record",
    "Page",
    "SelectionStore",
    "BulkSelectDialog",
    "DialogState",
]
