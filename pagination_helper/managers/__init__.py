"""Manager classes for pagination state."""

from .load_more_trigger import LoadMoreTrigger, TriggerState
from .paginated_list_manager import PaginatedListManager
from .pagination_manager import (
    AddressingStrategy,
    PaginationCoordinator,
    cursor_strategy,
    offset_strategy,
    page_strategy,
)
from .scroll_watcher import AdjustmentScrollWatcher

__all__ = [
    "AddressingStrategy",
    "AdjustmentScrollWatcher",
    "LoadMoreTrigger",
    "PaginatedListManager",
    "PaginationCoordinator",
    "TriggerState",
    "cursor_strategy",
    "offset_strategy",
    "page_strategy",
]
