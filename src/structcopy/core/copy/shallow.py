"""Shallow field copy: same name and same declared type, one level deep.

Values are assigned by reference. Nested records and collections end up
shared between source and destination.

Usage:
    view = shallow_copy(entity, EntityView)
"""

from __future__ import annotations

import logging

from structcopy.core.classify import type_name
from structcopy.core.copy.operations import (
    assign_field,
    current_value,
    declared_types_match,
    instantiate,
    read_field,
    writable_fields,
)
from structcopy.core.errors import FieldCopyError
from structcopy.core.fields import fields_of

logger = logging.getLogger(__name__)


def shallow_copy[T](source: object, destination_type: type[T]) -> T:
    """Project matching fields of source onto a new destination_type instance.

    A field is copied when the destination has a writable field with the same
    name and the same declared type. Undeclared destination fields take values
    of the type they currently hold. Everything else keeps its default.

    Args:
        source: Object to read fields from.
        destination_type: Default-constructible class to create.

    Returns:
        New destination instance sharing field values with source.

    Raises:
        InstantiationError: If destination_type cannot be default-constructed.
    """
    destination = instantiate(destination_type)
    targets = writable_fields(destination)

    for field in fields_of(source):
        target = targets.get(field.name)
        if target is None or not field.readable:
            continue
        try:
            value = read_field(source, field.name)
            current = current_value(destination, target)
            if not declared_types_match(field.annotation, target.annotation, value, current):
                continue
            assign_field(destination, field.name, value)
        except FieldCopyError as exc:
            logger.debug(
                "Shallow copy skipped %s.%s: %s",
                type_name(destination_type),
                field.name,
                exc.reason,
            )

    return destination
