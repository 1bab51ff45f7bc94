"""Pagination coordinator for infinite scroll.

One fetch/merge cycle is shared by the three addressing modes. Each entry
point only builds an :class:`AddressingStrategy` that knows how to compute
the next page request and when the collection is exhausted.

The coordinator keeps no per-list state. The caller passes its accumulated
data and loading flag on every call and receives updates through the
``on_state_change`` sink::

    await coordinator.load_more_by_offset(
        fetch=api.get_products,
        merge=lambda current, new: replace(new, items=current.items + new.items),
        current_count=lambda d: len(d.items),
        total_count=lambda d: d.total,
        on_state_change=store.apply,
        current_data=store.data,
        is_loading_more=store.is_loading_more,
    )
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional

from pagination_helper.core.exceptions import InvalidPageRequestError
from pagination_helper.core.protocols import (
    CountFn,
    CursorFn,
    ErrorObserver,
    FetchByCursor,
    FetchByNumber,
    HasMoreFn,
    MergeFn,
    StateSink,
    TData,
)
from pagination_helper.core.requests import (
    AddressingMode,
    CursorRequest,
    OffsetRequest,
    PageIndexRequest,
    PageRequest,
)

logger = logging.getLogger("PaginationHelper.Coordinator")

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class AddressingStrategy(Generic[TData]):
    """How one addressing mode picks the next page and detects the end."""

    mode: AddressingMode
    compute_next_address: Callable[[TData, int], PageRequest]
    is_exhausted: Callable[[TData], bool]


def _counts_exhausted(current_count: CountFn, total_count: CountFn):
    def is_exhausted(data) -> bool:
        count = current_count(data)
        # An empty accumulation always gets its first page.
        return count > 0 and count >= total_count(data)

    return is_exhausted


def offset_strategy(
    current_count: CountFn, total_count: CountFn
) -> AddressingStrategy:
    return AddressingStrategy(
        mode=AddressingMode.OFFSET,
        compute_next_address=lambda data, limit: OffsetRequest(
            current_count(data), limit
        ),
        is_exhausted=_counts_exhausted(current_count, total_count),
    )


def page_strategy(
    current_count: CountFn, total_count: CountFn
) -> AddressingStrategy:
    return AddressingStrategy(
        mode=AddressingMode.PAGE,
        compute_next_address=lambda data, limit: PageIndexRequest(
            current_count(data) // limit + 1, limit
        ),
        is_exhausted=_counts_exhausted(current_count, total_count),
    )


def cursor_strategy(
    next_cursor: CursorFn, has_more: HasMoreFn
) -> AddressingStrategy:
    return AddressingStrategy(
        mode=AddressingMode.CURSOR,
        compute_next_address=lambda data, limit: CursorRequest(
            next_cursor(data), limit
        ),
        is_exhausted=lambda data: not has_more(data),
    )


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


class PaginationCoordinator:
    """Runs load-more cycles for offset, page and cursor addressed sources."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if isinstance(page_size, bool) or not isinstance(page_size, int):
            raise InvalidPageRequestError("page_size must be an integer")
        if page_size < 1:
            raise InvalidPageRequestError(
                f"page_size must be at least 1, got {page_size}"
            )
        self.page_size = page_size

    async def load_more_by_offset(
        self,
        *,
        fetch: FetchByNumber,
        merge: MergeFn,
        current_count: CountFn,
        total_count: CountFn,
        on_state_change: StateSink,
        current_data: Any,
        is_loading_more: bool,
        limit: Optional[int] = None,
        on_error: Optional[ErrorObserver] = None,
    ) -> bool:
        """Fetch the items starting at ``current_count(current_data)``.

        Returns:
            True if a cycle ran, False if the call was ignored because a
            load is in flight or every item is already loaded.
        """
        return await self._run_cycle(
            offset_strategy(current_count, total_count),
            fetch=fetch,
            merge=merge,
            on_state_change=on_state_change,
            current_data=current_data,
            is_loading_more=is_loading_more,
            limit=limit,
            on_error=on_error,
        )

    async def load_more_by_page(
        self,
        *,
        fetch: FetchByNumber,
        merge: MergeFn,
        current_count: CountFn,
        total_count: CountFn,
        on_state_change: StateSink,
        current_data: Any,
        is_loading_more: bool,
        limit: Optional[int] = None,
        on_error: Optional[ErrorObserver] = None,
    ) -> bool:
        """Fetch page ``current_count // limit + 1`` (pages start at 1)."""
        return await self._run_cycle(
            page_strategy(current_count, total_count),
            fetch=fetch,
            merge=merge,
            on_state_change=on_state_change,
            current_data=current_data,
            is_loading_more=is_loading_more,
            limit=limit,
            on_error=on_error,
        )

    async def load_more_by_cursor(
        self,
        *,
        fetch: FetchByCursor,
        merge: MergeFn,
        next_cursor: CursorFn,
        has_more: HasMoreFn,
        on_state_change: StateSink,
        current_data: Any,
        is_loading_more: bool,
        limit: Optional[int] = None,
        on_error: Optional[ErrorObserver] = None,
    ) -> bool:
        """Fetch the page after ``next_cursor(current_data)``.

        ``has_more`` alone decides when the collection is exhausted.
        """
        return await self._run_cycle(
            cursor_strategy(next_cursor, has_more),
            fetch=fetch,
            merge=merge,
            on_state_change=on_state_change,
            current_data=current_data,
            is_loading_more=is_loading_more,
            limit=limit,
            on_error=on_error,
        )

    async def _run_cycle(
        self,
        strategy: AddressingStrategy,
        *,
        fetch: Callable,
        merge: MergeFn,
        on_state_change: StateSink,
        current_data: Any,
        is_loading_more: bool,
        limit: Optional[int],
        on_error: Optional[ErrorObserver],
    ) -> bool:
        mode = strategy.mode.value
        if is_loading_more:
            logger.debug("Ignoring %s load: a load is already in flight", mode)
            return False
        if strategy.is_exhausted(current_data):
            logger.debug("Ignoring %s load: collection is exhausted", mode)
            return False

        request = strategy.compute_next_address(
            current_data, self.page_size if limit is None else limit
        )
        logger.debug(
            "Loading %s page %r (limit %d)", mode, request.address, request.limit
        )
        on_state_change(True, None, None)

        try:
            fetched = fetch(request.address, request.limit)
            if inspect.isawaitable(fetched):
                fetched = await fetched
            merged = merge(current_data, fetched)
        except Exception as e:
            logger.warning(
                "Failed to load %s page %r: %s", mode, request.address, e,
                exc_info=True,
            )
            on_state_change(False, None, _error_message(e))
            if on_error is not None:
                on_error(e)
            return True

        on_state_change(False, merged, None)
        return True
