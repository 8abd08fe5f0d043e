"""Structural deep copy: field-name-driven recursive reconstruction.

Fields are matched by name only. Simple values need the exact same declared
type on both sides; records and collections are rebuilt into whatever type
the destination declares, so DTOs and entities that share field names can be
copied into each other.

Usage:
    @dataclass
    class Address:
        city: str = ""

    @dataclass
    class Person:
        name: str = ""
        address: Address | None = None

    dto = structural_copy(person, PersonDto)

There is no cycle detection on this path: a self-referencing source recurses
until RecursionError. Use universal_copy for cyclic graphs.
"""

from __future__ import annotations

import logging
from typing import Any

from structcopy.config import CopySettings, get_settings
from structcopy.core.classify import (
    classify,
    effective_type,
    is_undeclared,
    strip_annotated,
    type_name,
)
from structcopy.core.classify.operations import is_union, union_members
from structcopy.core.copy.operations import (
    assign_field,
    current_value,
    declared_types_match,
    instantiate,
    instantiate_nested,
    read_field,
    writable_fields,
)
from structcopy.core.errors import FieldCopyError
from structcopy.core.fields import fields_of

logger = logging.getLogger(__name__)


def structural_copy[T](
    source: object, destination_type: type[T], *, settings: CopySettings | None = None
) -> T:
    """Deep-copy source into a new destination_type instance.

    Args:
        source: Object to copy from.
        destination_type: Default-constructible class to create.
        settings: Optional settings, defaults to get_settings().

    Returns:
        Fully populated destination, sharing no mutable state with source.

    Raises:
        InstantiationError: If destination_type cannot be default-constructed.
            Failures below the root are absorbed and leave fields at their
            defaults.
    """
    destination = instantiate(destination_type)
    copy_into(source, destination, settings=settings)
    return destination


def copy_into(source: object, destination: object, *, settings: CopySettings | None = None) -> None:
    """Copy every same-named field of source into an existing destination.

    Args:
        source: Object to read fields from.
        destination: Already constructed object to write fields to.
        settings: Optional settings, defaults to get_settings().
    """
    settings = settings or get_settings()
    targets = writable_fields(destination)

    for field in fields_of(source):
        target = targets.get(field.name)
        if target is None or not field.readable:
            continue
        try:
            value = read_field(source, field.name)
            if value is None:
                assign_field(destination, field.name, None)
                continue
            copied = copy_value(
                value,
                field.annotation,
                target.annotation,
                settings=settings,
                path=field.name,
                current=current_value(destination, target),
            )
            assign_field(destination, field.name, copied)
        except FieldCopyError as exc:
            logger.debug(
                "Structural copy skipped %s.%s: %s",
                type_name(type(destination)),
                field.name,
                exc.reason,
            )


def copy_value(
    value: Any,
    source_type: Any,
    destination_type: Any,
    *,
    settings: CopySettings,
    path: str,
    current: Any = None,
) -> Any:
    """Copy one value from its declared source type to a destination type.

    Dispatches on the classification of the source type: simple values are
    passed through when types are identical, collections are reconstructed,
    records are instantiated and filled recursively.

    Args:
        value: Value to copy.
        source_type: Declared annotation of the value (Any when unknown).
        destination_type: Declared annotation of the destination slot.
        settings: Active settings.
        path: Field path used in error messages.
        current: Value currently held by an undeclared destination field,
            whose type then gates simple values.

    Returns:
        The copied value.

    Raises:
        FieldCopyError: If the value cannot be copied into the destination type.
    """
    if value is None:
        return None

    resolved = effective_type(source_type, value)
    descriptor = classify(resolved)

    if descriptor.is_simple:
        if declared_types_match(source_type, destination_type, value, current):
            return value
        raise FieldCopyError(
            path, f"{type_name(resolved)} does not match {type_name(destination_type)}"
        )

    if descriptor.is_collection:
        # Late import to avoid circular dependency
        from structcopy.core.copy.collections import reconstruct_collection

        target = strip_annotated(destination_type)
        if is_undeclared(target):
            target = resolved
        elif is_union(target):
            target = _union_target(target, value, path)
        return reconstruct_collection(
            value, target, source_type=resolved, settings=settings, path=path
        )

    target = _complex_target(destination_type, value, path)
    if not classify(target).is_complex:
        raise FieldCopyError(path, f"cannot copy a record into {type_name(target)}")
    instance = instantiate_nested(target, path)
    copy_into(value, instance, settings=settings)
    return instance


def _complex_target(destination_type: Any, value: Any, path: str) -> Any:
    target = strip_annotated(destination_type)
    if is_undeclared(target):
        return type(value)
    if is_union(target):
        return _union_target(target, value, path)
    return target


def _union_target(union: Any, value: Any, path: str) -> Any:
    members = union_members(union)
    if type(value) in members:
        return type(value)
    if len(members) == 1:
        return strip_annotated(members[0])
    raise FieldCopyError(path, f"ambiguous destination {type_name(union)}")
