"""Generic response envelope pairing a status with data or an error."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .response_status import ResponseStatus

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Snapshot of a load: status plus the data or error message"""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    status: ResponseStatus = Field(default=ResponseStatus.INITIAL)
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def initial(cls) -> "ApiResponse[T]":
        return cls(status=ResponseStatus.INITIAL)

    @classmethod
    def loading(cls, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(status=ResponseStatus.LOADING, data=data)

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        return cls(status=ResponseStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(status=ResponseStatus.ERROR, data=data, message=message)

    @property
    def is_loading(self) -> bool:
        return self.status is ResponseStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status is ResponseStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is ResponseStatus.ERROR
