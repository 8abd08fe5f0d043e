"""Instantiation and field access primitives shared by the copiers."""

from __future__ import annotations

from typing import Any

from structcopy.core.classify import (
    is_undeclared,
    same_type,
    strip_annotated,
    type_name,
    unwrap_optional,
)
from structcopy.core.errors import FieldCopyError, InstantiationError
from structcopy.core.fields import FieldDescriptor, fields_of


def instantiate[T](cls: type[T]) -> T:
    """Default-construct an instance.

    Args:
        cls: Class (or generic alias) to construct with no arguments.

    Returns:
        New instance.

    Raises:
        InstantiationError: If the constructor requires arguments or rejects
            its defaults.
    """
    try:
        return cls()
    except (TypeError, ValueError) as e:
        raise InstantiationError(cls, e) from e


def instantiate_nested[T](cls: type[T], path: str) -> T:
    """Default-construct the value of a nested field or element.

    Any constructor failure is contained to the field.

    Raises:
        FieldCopyError: If construction fails for any reason other than
            recursion depth.
    """
    try:
        return cls()
    except RecursionError:
        raise
    except Exception as e:
        raise FieldCopyError(path, f"cannot default-construct {type_name(cls)}: {e}") from e


def read_field(obj: Any, name: str) -> Any:
    """Read a field value.

    Raises:
        FieldCopyError: If the attribute is missing or its getter fails.
    """
    try:
        return getattr(obj, name)
    except RecursionError:
        raise
    except Exception as e:
        raise FieldCopyError(name, f"cannot read: {e}") from e


def assign_field(obj: Any, name: str, value: Any) -> None:
    """Write a field value.

    Raises:
        FieldCopyError: If the destination rejects the assignment (frozen
            instance, read-only attribute, validate_assignment failure, a
            raising setter).
    """
    try:
        setattr(obj, name, value)
    except RecursionError:
        raise
    except Exception as e:
        raise FieldCopyError(name, f"cannot assign: {e}") from e


def writable_fields(obj: Any) -> dict[str, FieldDescriptor]:
    """Writable fields of an instance keyed by exact name."""
    return {f.name: f for f in fields_of(obj) if f.writable}


def current_value(obj: Any, field: FieldDescriptor) -> Any:
    """Value held by an undeclared destination field, None for declared ones.

    Only undeclared fields need it: their current value is the sole evidence
    of the type they hold.
    """
    if not is_undeclared(strip_annotated(field.annotation)):
        return None
    return read_field(obj, field.name)


def declared_types_match(
    source_type: Any, destination_type: Any, value: Any, current: Any = None
) -> bool:
    """Check whether a simple value may be assigned without coercion.

    A declared source type must equal the destination type exactly. An
    undeclared source is matched by the runtime type of the value against the
    destination (or the X of an Optional[X] destination). An undeclared
    destination is matched by the runtime type of the value it currently
    holds, and accepts anything while that value is None. None itself is
    always accepted there.

    Args:
        source_type: Declared annotation of the source field or element.
        destination_type: Declared annotation of the destination.
        value: Value being copied.
        current: Value currently held by the destination field.

    Returns:
        True if the value can be assigned as is.
    """
    if is_undeclared(strip_annotated(destination_type)):
        return current is None or value is None or type(current) is type(value)
    if not is_undeclared(strip_annotated(source_type)):
        return same_type(source_type, destination_type)
    runtime = type(value)
    return same_type(runtime, destination_type) or same_type(
        runtime, unwrap_optional(destination_type)
    )
