"""Type classification models.

A TypeDescriptor is derived from a type and never mutated. The classifier
caches one per type for the lifetime of the process.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TypeKind(Enum):
    """How the copy engine treats values of a type."""

    SIMPLE = auto()  # Atomic, copied by value
    COLLECTION = auto()  # Container, rebuilt element by element
    COMPLEX = auto()  # Record with named fields, copied field by field


class CollectionKind(Enum):
    """Shape of a collection destination."""

    FIXED_SIZE = auto()  # tuple: allocated at the source length
    GROWABLE = auto()  # list, deque, set, dict...: appended to


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Classification of a single type.

    Attributes:
        kind: Simple, Collection or Complex.
        collection_kind: Fixed-size or growable, None unless kind is COLLECTION.
        origin: Runtime class behind the annotation (list for list[int]).
        element_types: Declared type parameters, empty for bare containers.
        variadic: True for homogeneous tuple[X, ...] annotations.
    """

    kind: TypeKind
    collection_kind: CollectionKind | None = None
    origin: Any = None
    element_types: tuple[Any, ...] = ()
    variadic: bool = False

    @property
    def is_simple(self) -> bool:
        return self.kind is TypeKind.SIMPLE

    @property
    def is_collection(self) -> bool:
        return self.kind is TypeKind.COLLECTION

    @property
    def is_complex(self) -> bool:
        return self.kind is TypeKind.COMPLEX

    @property
    def arity(self) -> int:
        """Number of type parameters a growable destination is built from.

        Bare sequences and sets count as one parameter of Any, bare mappings
        as two.
        """
        if self.element_types:
            return len(self.element_types)
        if isinstance(self.origin, type) and issubclass(self.origin, Mapping):
            return 2
        return 1
