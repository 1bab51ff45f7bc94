"""Core types shared by the coordinator and the trigger."""

from .exceptions import InvalidPageRequestError, PaginationError
from .requests import (
    AddressingMode,
    CursorRequest,
    OffsetRequest,
    PageIndexRequest,
    PageRequest,
)

__all__ = [
    "AddressingMode",
    "CursorRequest",
    "InvalidPageRequestError",
    "OffsetRequest",
    "PageIndexRequest",
    "PageRequest",
    "PaginationError",
]
