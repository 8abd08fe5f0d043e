"""Error types raised by the copy engine.

Only InstantiationError escapes the structural and shallow entry points.
FieldCopyError is absorbed per field; EncodingError and DecodingError are
absorbed by universal_copy.
"""

from __future__ import annotations

from typing import Any


class CopyError(Exception):
    """Base class for all copy engine errors."""

    pass


class InstantiationError(CopyError):
    """Raised when a destination type cannot be default-constructed."""

    def __init__(self, destination_type: Any, cause: BaseException | None = None) -> None:
        self.destination_type = destination_type
        self.cause = cause
        name = getattr(destination_type, "__qualname__", repr(destination_type))
        message = f"Cannot default-construct {name}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class FieldCopyError(CopyError):
    """Raised when a single field or element cannot be copied."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class EncodingError(CopyError):
    """Raised when an object graph cannot be encoded to the interchange format."""

    pass


class DecodingError(CopyError):
    """Raised when encoded data cannot be decoded into the destination type."""

    pass
