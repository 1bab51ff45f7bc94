"""Response envelope models."""

from .api_response import ApiResponse
from .response_status import ResponseStatus

__all__ = ["ApiResponse", "ResponseStatus"]
