"""Lifecycle status of a list load."""

from enum import Enum


class ResponseStatus(str, Enum):
    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
