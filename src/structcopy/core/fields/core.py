"""Field discovery over dataclasses, pydantic models and plain classes.

Descriptors are derived once per class and cached process-wide. Instance
attributes assigned in __init__ of un-annotated classes are discovered per
object by fields_of().

Usage:
    @dataclass
    class Person:
        name: str
        age: int = 0

    [f.name for f in describe(Person)]  # ["name", "age"]
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from typing import Any, ClassVar, get_origin, get_type_hints

from structcopy.core.classify.operations import is_named_tuple, is_pydantic
from structcopy.core.fields.models import FieldDescriptor


class FieldDescriber:
    """Process-local cache mapping classes to their field descriptors."""

    def __init__(self) -> None:
        """Initialize empty descriptor cache."""
        self._by_type: dict[type, tuple[FieldDescriptor, ...]] = {}

    def describe(self, cls: type) -> tuple[FieldDescriptor, ...]:
        """Get ordered field descriptors for a class.

        Args:
            cls: Class to describe.

        Returns:
            Descriptors in declaration order: model/dataclass fields first,
            then other annotations and slots, then properties.
        """
        cached = self._by_type.get(cls)
        if cached is not None:
            return cached
        descriptors = _describe(cls)
        self._by_type[cls] = descriptors
        return descriptors

    def is_described(self, cls: type) -> bool:
        """Check if a class has cached descriptors."""
        return cls in self._by_type


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _type_hints(cls: type) -> dict[str, Any]:
    """Resolved annotations, falling back to raw ones on unresolvable forward refs."""
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError):
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(getattr(klass, "__annotations__", {}))
        return hints


def _resolved(annotation: Any) -> Any:
    # Unresolved string forward references carry no usable type
    if annotation is None or isinstance(annotation, str):
        return Any
    return annotation


def _property_annotation(prop: property) -> Any:
    if prop.fget is None:
        return Any
    try:
        return _resolved(get_type_hints(prop.fget).get("return", Any))
    except (NameError, TypeError, AttributeError):
        return Any


def _describe(cls: type) -> tuple[FieldDescriptor, ...]:
    hints = _type_hints(cls)
    found: dict[str, FieldDescriptor] = {}

    if is_pydantic(cls):
        model_frozen = bool(cls.model_config.get("frozen", False))  # type: ignore[attr-defined]
        for name, info in cls.model_fields.items():  # type: ignore[attr-defined]
            found[name] = FieldDescriptor(
                name=name,
                annotation=_resolved(info.annotation),
                writable=not (model_frozen or info.frozen),
            )
    elif dataclasses.is_dataclass(cls):
        frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
        for f in dataclasses.fields(cls):
            if not _is_public(f.name):
                continue
            found[f.name] = FieldDescriptor(
                name=f.name,
                annotation=_resolved(hints.get(f.name, f.type)),
                writable=not frozen,
            )
    elif is_named_tuple(cls):
        for name in cls._fields:  # type: ignore[attr-defined]
            found[name] = FieldDescriptor(
                name=name, annotation=_resolved(hints.get(name)), writable=False
            )
    else:
        for name, hint in hints.items():
            if not _is_public(name) or hint is ClassVar or get_origin(hint) is ClassVar:
                continue
            found[name] = FieldDescriptor(name=name, annotation=_resolved(hint))

    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if _is_public(name) and name not in found:
                found[name] = FieldDescriptor(name=name)

    for klass in reversed(cls.__mro__):
        if klass is object or klass.__module__.startswith("pydantic"):
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and _is_public(name):
                found[name] = FieldDescriptor(
                    name=name,
                    annotation=_property_annotation(attr),
                    readable=attr.fget is not None,
                    writable=attr.fset is not None,
                )

    return tuple(found.values())


# Module-level describer instance
_describer = FieldDescriber()


def get_describer() -> FieldDescriber:
    """Access the global field describer.

    Returns:
        The process-local FieldDescriber instance.
    """
    return _describer


def describe(cls: type) -> tuple[FieldDescriptor, ...]:
    """Get cached field descriptors for a class."""
    return _describer.describe(cls)


def fields_of(obj: Any) -> Iterator[FieldDescriptor]:
    """Iterate the fields of an instance.

    Yields the class-level descriptors, then any public instance attribute
    not declared on the class (annotation Any).

    Args:
        obj: Instance to inspect.

    Yields:
        FieldDescriptor for each field.
    """
    declared = describe(type(obj))
    yield from declared
    try:
        attributes = vars(obj)
    except TypeError:
        return
    names = {f.name for f in declared}
    for name in list(attributes):
        if _is_public(name) and name not in names:
            yield FieldDescriptor(name=name)


def find_field(obj: Any, name: str) -> FieldDescriptor | None:
    """Find a field of an instance by exact name.

    Args:
        obj: Instance to inspect.
        name: Field name (case-sensitive).

    Returns:
        Matching descriptor, or None.
    """
    for f in fields_of(obj):
        if f.name == name:
            return f
    return None
