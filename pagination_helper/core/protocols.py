"""Protocol definitions for the collaborators of the pagination core."""

from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar, Union

TData = TypeVar("TData")

FetchByNumber = Callable[[int, int], Union[TData, Awaitable[TData]]]
FetchByCursor = Callable[[Optional[str], int], Union[TData, Awaitable[TData]]]
MergeFn = Callable[[TData, TData], TData]
CountFn = Callable[[TData], int]
CursorFn = Callable[[TData], Optional[str]]
HasMoreFn = Callable[[TData], bool]
StateSink = Callable[[bool, Optional[TData], Optional[str]], None]
ErrorObserver = Callable[[BaseException], None]


class ScrollPosition(Protocol):
    @property
    def pixels(self) -> float: ...

    @property
    def max_scroll_extent(self) -> float: ...


class ScrollAdjustment(Protocol):
    """The subset of Gtk.Adjustment used by the scroll watcher."""

    def get_value(self) -> float: ...

    def get_upper(self) -> float: ...

    def get_page_size(self) -> float: ...

    def connect(self, signal: str, callback: Callable[..., Any]) -> int: ...

    def disconnect(self, handler_id: int) -> None: ...
