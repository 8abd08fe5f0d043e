"""Response envelope shared with the surrounding application.

The copy engine never produces these; callers wrap copy results in them when
reporting to their own layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResponseResult(IntEnum):
    """Tri-state outcome of an operation."""

    ERROR = -99  # Exception or failure
    WARNING = -1  # Completed with caveats
    SUCCESS = 0


@dataclass(slots=True)
class Response(Generic[T]):
    """Result indicator plus payload.

    Attributes:
        result: Success, warning or error.
        code: Application-defined status code.
        message: Human readable detail.
        data: Payload, typically None on error.
    """

    result: ResponseResult
    code: str = ""
    message: str = ""
    data: T | None = None

    @classmethod
    def success(cls, data: T | None = None, message: str = "") -> Response[T]:
        """Create a success response."""
        return cls(result=ResponseResult.SUCCESS, message=message, data=data)

    @classmethod
    def warning(cls, message: str, data: T | None = None, code: str = "") -> Response[T]:
        """Create a warning response."""
        return cls(result=ResponseResult.WARNING, code=code, message=message, data=data)

    @classmethod
    def error(cls, message: str, code: str = "") -> Response[T]:
        """Create an error response."""
        return cls(result=ResponseResult.ERROR, code=code, message=message)

    @property
    def is_success(self) -> bool:
        return self.result is ResponseResult.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.result is ResponseResult.ERROR
