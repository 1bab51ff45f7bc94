"""Incremental page loading for infinitely scrolling lists.

- PaginationCoordinator: fetch/merge cycles for offset, page and cursor sources
- LoadMoreTrigger: turns scroll positions into single load-more events
- PaginatedListManager: ready-made state holder wiring the two together
"""

from .core import (
    AddressingMode,
    CursorRequest,
    InvalidPageRequestError,
    OffsetRequest,
    PageIndexRequest,
    PaginationError,
)
from .managers import (
    AdjustmentScrollWatcher,
    LoadMoreTrigger,
    PaginatedListManager,
    PaginationCoordinator,
    TriggerState,
)
from .models import ApiResponse, ResponseStatus

__version__ = "1.0.0"

__all__ = [
    "AddressingMode",
    "AdjustmentScrollWatcher",
    "ApiResponse",
    "CursorRequest",
    "InvalidPageRequestError",
    "LoadMoreTrigger",
    "OffsetRequest",
    "PageIndexRequest",
    "PaginatedListManager",
    "PaginationCoordinator",
    "PaginationError",
    "ResponseStatus",
    "TriggerState",
]
