"""Collection reconstruction for structural copies.

Rebuilds a source iterable into a new container of the destination's declared
shape, copying every element through the same dispatch as record fields.
Any element failure fails the whole collection, so an assigned collection
always has the source's element count and order.
"""

from __future__ import annotations

import collections.abc as abc
from typing import Any

from structcopy.config import CopySettings, get_settings
from structcopy.core.classify import CollectionKind, TypeDescriptor, classify, type_name
from structcopy.core.errors import FieldCopyError

ABSTRACT_CONTAINERS: dict[type, type] = {
    abc.Iterable: list,
    abc.Collection: list,
    abc.Reversible: list,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Set: frozenset,
    abc.MutableSet: set,
    abc.Mapping: dict,
    abc.MutableMapping: dict,
}
"""Concrete containers built for abstract destination annotations."""


def reconstruct_collection(
    source: Any,
    destination_type: Any,
    *,
    source_type: Any = None,
    settings: CopySettings | None = None,
    path: str = "<collection>",
) -> Any:
    """Rebuild source into a new container of destination_type.

    Args:
        source: Iterable to copy elements from.
        destination_type: Collection annotation (tuple[int, ...], list[Dto]...).
        source_type: Declared annotation of source, used for element types.
        settings: Optional settings, defaults to get_settings().
        path: Field path used in error messages.

    Returns:
        New container with copied elements in source iteration order.

    Raises:
        FieldCopyError: If the destination is not a supported collection or an
            element cannot be copied.
    """
    settings = settings or get_settings()
    destination = classify(destination_type)
    if not destination.is_collection:
        raise FieldCopyError(path, f"{type_name(destination_type)} is not a collection")
    origin = destination.origin
    source_descriptor = classify(source_type if source_type is not None else type(source))

    if destination.collection_kind is CollectionKind.FIXED_SIZE:
        return _fixed_size(source, destination, source_descriptor, settings, path)
    if issubclass(origin, abc.Mapping):
        return _mapping(source, destination, source_descriptor, settings, path)
    if destination.arity != 1:
        raise FieldCopyError(
            path, f"{destination.arity} type parameters on {type_name(origin)} are not supported"
        )
    return _growable(source, destination, source_descriptor, settings, path)


def _element_type(descriptor: TypeDescriptor, index: int) -> Any:
    """Declared type of the index-th element, Any when not declared."""
    if not descriptor.is_collection or not descriptor.element_types:
        return Any
    if descriptor.collection_kind is CollectionKind.FIXED_SIZE and not descriptor.variadic:
        if index < len(descriptor.element_types):
            return descriptor.element_types[index]
        return Any
    if descriptor.arity != 1:
        return Any
    return descriptor.element_types[0]


def _copy_elements(
    items: list[Any],
    destination: TypeDescriptor,
    source: TypeDescriptor,
    settings: CopySettings,
    path: str,
) -> list[Any]:
    # Late import to avoid circular dependency
    from structcopy.core.copy.structural import copy_value

    return [
        copy_value(
            item,
            _element_type(source, index),
            _element_type(destination, index),
            settings=settings,
            path=f"{path}[{index}]",
        )
        for index, item in enumerate(items)
    ]


def _build(origin: type, items: Any, path: str) -> Any:
    container = ABSTRACT_CONTAINERS.get(origin, origin)
    try:
        return container(items)
    except RecursionError:
        raise
    except Exception as e:
        raise FieldCopyError(path, f"cannot build {type_name(container)}: {e}") from e


def _fixed_size(
    source: Any,
    destination: TypeDescriptor,
    source_descriptor: TypeDescriptor,
    settings: CopySettings,
    path: str,
) -> Any:
    items = list(source)
    if not destination.variadic and len(destination.element_types) != len(items):
        raise FieldCopyError(
            path,
            f"expected {len(destination.element_types)} elements, got {len(items)}",
        )
    copied = _copy_elements(items, destination, source_descriptor, settings, path)
    return _build(destination.origin, copied, path)


def _growable(
    source: Any,
    destination: TypeDescriptor,
    source_descriptor: TypeDescriptor,
    settings: CopySettings,
    path: str,
) -> Any:
    copied = _copy_elements(list(source), destination, source_descriptor, settings, path)
    if destination.origin is list:
        return copied
    return _build(destination.origin, copied, path)


def _mapping(
    source: Any,
    destination: TypeDescriptor,
    source_descriptor: TypeDescriptor,
    settings: CopySettings,
    path: str,
) -> Any:
    if not settings.reconstruct_mappings:
        raise FieldCopyError(path, "mapping destinations are not reconstructed")
    if destination.arity != 2:
        raise FieldCopyError(path, f"{destination.arity} type parameters on a mapping")
    if not isinstance(source, abc.Mapping):
        raise FieldCopyError(path, f"{type_name(type(source))} is not a mapping")

    # Late import to avoid circular dependency
    from structcopy.core.copy.structural import copy_value

    key_type, value_type = destination.element_types or (Any, Any)
    source_key_type, source_value_type = (
        source_descriptor.element_types if len(source_descriptor.element_types) == 2 else (Any, Any)
    )
    pairs = [
        (
            copy_value(key, source_key_type, key_type, settings=settings, path=f"{path}[{key!r}]"),
            copy_value(
                value, source_value_type, value_type, settings=settings, path=f"{path}[{key!r}]"
            ),
        )
        for key, value in source.items()
    ]
    return _build(destination.origin, pairs, path)
