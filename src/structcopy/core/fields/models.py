"""Field descriptor model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A public, named field of a class.

    Attributes:
        name: Attribute name, matched case-sensitively across types.
        annotation: Declared type, typing.Any when undeclared.
        readable: Whether getattr() yields the field value.
        writable: Whether setattr() may replace the field value.
    """

    name: str
    annotation: Any = Any
    readable: bool = True
    writable: bool = True
