"""Type classifier with a process-wide cache.

Usage:
    descriptor = classify(list[int])
    descriptor.kind             # TypeKind.COLLECTION
    descriptor.collection_kind  # CollectionKind.GROWABLE
    descriptor.element_types    # (int,)
"""

from __future__ import annotations

import collections.abc as abc
import datetime
import enum
import fractions
import pathlib
import uuid
from decimal import Decimal
from typing import Any, Literal, get_args, get_origin

from structcopy.core.classify.models import CollectionKind, TypeDescriptor, TypeKind
from structcopy.core.classify.operations import (
    NoneType,
    is_record,
    is_undeclared,
    is_union,
    strip_annotated,
    union_members,
)

SIMPLE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    fractions.Fraction,
    datetime.date,  # also covers datetime.datetime
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    pathlib.PurePath,
    enum.Enum,
    NoneType,
)
"""Atomic by-value kinds. Subclasses (IntEnum, StrEnum, PosixPath...) count too."""

TEXT_TYPES: tuple[type, ...] = (str, bytes)
"""Iterable character-wise but never treated as collections."""

_SIMPLE = TypeDescriptor(kind=TypeKind.SIMPLE)
_COMPLEX = TypeDescriptor(kind=TypeKind.COMPLEX)


class TypeClassifier:
    """Memoizing classifier mapping annotations to TypeDescriptors.

    Entries are populated on first use and never invalidated since type
    shape is static. Concurrent population may compute a descriptor twice;
    the single dict assignment keeps one entry per type.
    """

    def __init__(self) -> None:
        """Initialize empty classification cache."""
        self._cache: dict[Any, TypeDescriptor] = {}

    def classify(self, tp: Any) -> TypeDescriptor:
        """Classify an annotation or class.

        Args:
            tp: A class or typing annotation.

        Returns:
            Cached TypeDescriptor for the annotation.
        """
        try:
            return self._cache[tp]
        except KeyError:
            pass
        except TypeError:
            # Unhashable annotation (e.g. Annotated with dict metadata)
            return _compute(tp)

        descriptor = _compute(tp)
        self._cache[tp] = descriptor
        return descriptor

    def is_cached(self, tp: Any) -> bool:
        """Check if a classification is already memoized."""
        try:
            return tp in self._cache
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._cache)


def _compute(tp: Any) -> TypeDescriptor:
    tp = strip_annotated(tp)

    if tp is None or tp is NoneType:
        return _SIMPLE
    if is_undeclared(tp):
        return _COMPLEX
    if is_union(tp):
        members = union_members(tp)
        if all(_compute(member).is_simple for member in members):
            return _SIMPLE
        if len(members) == 1:
            return _compute(members[0])
        return _COMPLEX

    origin = get_origin(tp)
    if origin is Literal:
        return _SIMPLE
    cls = origin if origin is not None else tp
    if not isinstance(cls, type):
        return _COMPLEX

    if issubclass(cls, SIMPLE_TYPES):
        return _SIMPLE
    if is_record(cls):
        return TypeDescriptor(kind=TypeKind.COMPLEX, origin=cls)
    if issubclass(cls, TEXT_TYPES) or not issubclass(cls, abc.Iterable):
        return TypeDescriptor(kind=TypeKind.COMPLEX, origin=cls)

    args = get_args(tp)
    if issubclass(cls, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return TypeDescriptor(
                kind=TypeKind.COLLECTION,
                collection_kind=CollectionKind.FIXED_SIZE,
                origin=cls,
                element_types=(args[0],),
                variadic=True,
            )
        # Bare tuple is variadic over Any; tuple[A, B] types each slot
        return TypeDescriptor(
            kind=TypeKind.COLLECTION,
            collection_kind=CollectionKind.FIXED_SIZE,
            origin=cls,
            element_types=tuple(args),
            variadic=not args,
        )

    return TypeDescriptor(
        kind=TypeKind.COLLECTION,
        collection_kind=CollectionKind.GROWABLE,
        origin=cls,
        element_types=tuple(args),
    )


# Module-level classifier instance
_classifier = TypeClassifier()


def get_classifier() -> TypeClassifier:
    """Access the global type classifier.

    Returns:
        The process-wide TypeClassifier instance.
    """
    return _classifier


def classify(tp: Any) -> TypeDescriptor:
    """Classify a type using the process-wide cache.

    Args:
        tp: A class or typing annotation.

    Returns:
        TypeDescriptor for the annotation.
    """
    return _classifier.classify(tp)


def effective_type(annotation: Any, value: Any) -> Any:
    """Type a value should be dispatched on.

    The declared annotation wins, except when it carries no usable
    information (Any, object, a type variable) or is a union mixing
    non-simple members, where the runtime type of the value is used.
    Optional[X] resolves to X.

    Args:
        annotation: Declared annotation of the field or element.
        value: The non-None value being copied.

    Returns:
        Annotation or runtime class to classify.
    """
    annotation = strip_annotated(annotation)
    if is_undeclared(annotation):
        return type(value)
    if is_union(annotation):
        members = union_members(annotation)
        if len(members) == 1:
            return effective_type(members[0], value)
        if classify(annotation).is_simple:
            return annotation
        return type(value)
    return annotation
