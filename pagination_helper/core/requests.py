"""Page request descriptors for the three addressing modes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .exceptions import InvalidPageRequestError


class AddressingMode(Enum):
    OFFSET = "offset"
    PAGE = "page"
    CURSOR = "cursor"


def _check_int(name: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPageRequestError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < minimum:
        raise InvalidPageRequestError(
            f"{name} must be at least {minimum}, got {value}"
        )


@dataclass(frozen=True)
class OffsetRequest:
    """Request `limit` items starting at zero-based `value`."""

    value: int
    limit: int
    mode = AddressingMode.OFFSET

    def __post_init__(self):
        _check_int("offset", self.value, 0)
        _check_int("limit", self.limit, 1)

    @property
    def address(self) -> int:
        return self.value


@dataclass(frozen=True)
class PageIndexRequest:
    """Request one-based page number `value` of size `limit`."""

    value: int
    limit: int
    mode = AddressingMode.PAGE

    def __post_init__(self):
        _check_int("page", self.value, 1)
        _check_int("limit", self.limit, 1)

    @property
    def address(self) -> int:
        return self.value


@dataclass(frozen=True)
class CursorRequest:
    """Request the page after `token`; None asks for the first page."""

    token: Optional[str]
    limit: int
    mode = AddressingMode.CURSOR

    def __post_init__(self):
        _check_int("limit", self.limit, 1)

    @property
    def address(self) -> Optional[str]:
        return self.token


PageRequest = Union[OffsetRequest, PageIndexRequest, CursorRequest]
