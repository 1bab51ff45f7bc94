"""Paginated list manager - holds list state and wires trigger to coordinator."""

import asyncio
import logging
from typing import Any, Callable, Generic, Optional, Sequence, Set

from pagination_helper.config.settings import PaginationSettings
from pagination_helper.core.protocols import (
    CountFn,
    CursorFn,
    ErrorObserver,
    HasMoreFn,
    MergeFn,
    TData,
)
from pagination_helper.core.requests import AddressingMode
from pagination_helper.managers.load_more_trigger import LoadMoreTrigger
from pagination_helper.managers.pagination_manager import PaginationCoordinator
from pagination_helper.models.api_response import ApiResponse

logger = logging.getLogger("PaginationHelper.ListManager")


class PaginatedListManager(Generic[TData]):
    """Caller-side state holder for one infinitely scrolling list."""

    def __init__(
        self,
        *,
        fetch: Callable,
        merge: MergeFn,
        empty_data: Callable[[], TData],
        items_of: Callable[[TData], Sequence[Any]],
        mode: AddressingMode = AddressingMode.OFFSET,
        total_count: Optional[CountFn] = None,
        next_cursor: Optional[CursorFn] = None,
        has_more: Optional[HasMoreFn] = None,
        settings: Optional[PaginationSettings] = None,
        on_changed: Optional[Callable[[], None]] = None,
        on_error: Optional[ErrorObserver] = None,
    ):
        """Initialize PaginatedListManager.

        Args:
            fetch: Fetches one page given its address and limit
            merge: Combines accumulated data with a fetched page
            empty_data: Builds the data of a list with nothing loaded
            items_of: Extracts the item sequence from the data
            mode: Addressing mode of the remote source
            total_count: Total item count extractor (offset and page modes)
            next_cursor: Next cursor extractor (cursor mode)
            has_more: Whether more pages exist (cursor mode)
            settings: Page size, threshold and loading row settings
            on_changed: Called after every state change
            on_error: Called with the raw exception of a failed fetch
        """
        if mode is AddressingMode.CURSOR:
            if next_cursor is None or has_more is None:
                raise ValueError("cursor mode needs next_cursor and has_more")
        elif total_count is None:
            raise ValueError(f"{mode.value} mode needs total_count")

        self.fetch = fetch
        self.merge = merge
        self.empty_data = empty_data
        self.items_of = items_of
        self.mode = mode
        self.total_count = total_count
        self.next_cursor = next_cursor
        self.has_more = has_more
        self.settings = settings or PaginationSettings()
        self.on_changed = on_changed
        self.on_error = on_error

        self.coordinator = PaginationCoordinator(page_size=self.settings.page_size)
        self.trigger = LoadMoreTrigger(threshold=self.settings.load_more_threshold)

        # List state
        self.data: TData = empty_data()
        self.is_loading_more = False
        self.has_loaded = False
        self.error: Optional[str] = None
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def items(self) -> Sequence[Any]:
        return self.items_of(self.data)

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def display_count(self) -> int:
        """Number of rows to render, including the trailing loading row."""
        loading_row = self.settings.show_loading_indicator and self.is_loading_more
        return len(self.items) + (1 if loading_row else 0)

    def is_loading_row(self, index: int) -> bool:
        return index >= len(self.items) and index < self.display_count

    @property
    def status(self) -> ApiResponse:
        if self.error is not None:
            return ApiResponse.error(self.error, data=self.data)
        if self.is_loading_more:
            return ApiResponse.loading(data=self.data if self.has_loaded else None)
        if not self.has_loaded:
            return ApiResponse.initial()
        return ApiResponse.success(self.data)

    async def load_more(self) -> bool:
        """Load the next page unless a load is running or the list is complete."""
        if (
            self.mode is not AddressingMode.CURSOR
            and self.has_loaded
            and self._current_count(self.data) >= self.total_count(self.data)
        ):
            logger.debug("Ignoring load: all %d items loaded", len(self.items))
            return False

        generation = self._generation

        def on_state_change(loading, data, error):
            if generation != self._generation:
                logger.debug("Dropping state change from before the last refresh")
                return
            self._apply_state(loading, data, error)

        common = dict(
            fetch=self.fetch,
            merge=self.merge,
            on_state_change=on_state_change,
            current_data=self.data,
            is_loading_more=self.is_loading_more,
            limit=self.settings.page_size,
            on_error=self.on_error,
        )
        if self.mode is AddressingMode.CURSOR:
            return await self.coordinator.load_more_by_cursor(
                next_cursor=self.next_cursor, has_more=self.has_more, **common
            )

        if self.mode is AddressingMode.PAGE:
            load = self.coordinator.load_more_by_page
        else:
            load = self.coordinator.load_more_by_offset
        return await load(
            current_count=self._current_count, total_count=self.total_count, **common
        )

    async def refresh(self) -> bool:
        """Drop everything loaded so far and load the first page again."""
        logger.info("Refreshing %s list", self.mode.value)
        self._generation += 1
        self.data = self.empty_data()
        self.is_loading_more = False
        self.has_loaded = False
        self.error = None
        self.trigger.reset()
        self._notify()
        return await self.load_more()

    def on_scroll(self, position: float, max_position: float) -> Optional[asyncio.Task]:
        """Feed a scroll position; schedules load_more() when the trigger fires.

        Must be called from a running event loop.
        """
        if not self.trigger.on_position_changed(
            position, max_position, self.is_loading_more
        ):
            return None
        task = asyncio.get_running_loop().create_task(self.load_more())
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Scheduled load failed: %s", error, exc_info=error)

    def _current_count(self, data: TData) -> int:
        return len(self.items_of(data))

    def _apply_state(self, loading: bool, data: Optional[TData], error: Optional[str]):
        self.is_loading_more = loading
        if data is not None:
            self.data = data
            self.has_loaded = True
        self.error = error
        if error is not None:
            logger.error("Error loading more items: %s", error)
        self._notify()

    def _notify(self):
        if self.on_changed is not None:
            self.on_changed()
