"""Pure helpers over annotations: unwrapping, normalization and type identity."""

from __future__ import annotations

import types
from dataclasses import is_dataclass
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

NoneType = type(None)


def strip_annotated(tp: Any) -> Any:
    """Remove Annotated metadata and NewType wrappers.

    Args:
        tp: Annotation to unwrap.

    Returns:
        The underlying annotation.
    """
    while True:
        if get_origin(tp) is Annotated:
            tp = get_args(tp)[0]
        elif callable(tp) and hasattr(tp, "__supertype__"):
            tp = tp.__supertype__
        else:
            return tp


def is_union(tp: Any) -> bool:
    """Check if an annotation is a Union (either spelling)."""
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def union_members(tp: Any) -> tuple[Any, ...]:
    """Return the non-None members of a union annotation."""
    return tuple(arg for arg in get_args(tp) if arg is not NoneType)


def is_undeclared(tp: Any) -> bool:
    """Check if an annotation says nothing about the runtime type.

    Args:
        tp: Annotation to check.

    Returns:
        True for Any, object and unbound type variables.
    """
    return tp is Any or tp is object or isinstance(tp, TypeVar)


def unwrap_optional(tp: Any) -> Any:
    """Return X for Optional[X] / X | None, the annotation unchanged otherwise."""
    tp = strip_annotated(tp)
    if is_union(tp):
        members = union_members(tp)
        if len(members) == 1:
            return strip_annotated(members[0])
    return tp


def normalize(tp: Any) -> Any:
    """Canonical form of an annotation for identity comparison.

    Optional[int], Union[int, None] and int | None all normalize to the same
    frozenset, Annotated metadata is dropped.
    """
    tp = strip_annotated(tp)
    if is_union(tp):
        return frozenset(normalize(arg) for arg in get_args(tp))
    args = get_args(tp)
    if args:
        return (get_origin(tp), tuple(normalize(arg) for arg in args))
    return tp


def same_type(a: Any, b: Any) -> bool:
    """Check whether two annotations declare exactly the same type.

    No widening is applied: int and float differ, as do two enum classes with
    identical members.
    """
    try:
        return bool(normalize(a) == normalize(b))
    except TypeError:
        return a is b


def is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in getattr(cls, "__mro__", ()):
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def is_named_tuple(cls: type) -> bool:
    """Check if class was built by typing.NamedTuple or collections.namedtuple."""
    return isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, "_fields")


def is_record(cls: Any) -> bool:
    """Check if class is a record with named fields.

    Records are Complex even when they are iterable (pydantic models iterate
    over their fields, named tuples are tuples).
    """
    if not isinstance(cls, type):
        return False
    return is_dataclass(cls) or is_pydantic(cls) or is_named_tuple(cls)


def type_name(tp: Any) -> str:
    """Readable name for log and error messages."""
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)
