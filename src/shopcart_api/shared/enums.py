"""Shared enumerations used across the backend."""

from enum import StrEnum


class ResponseStatus(StrEnum):
    """Outcome reported in the ``status`` field of every response envelope."""

    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"
