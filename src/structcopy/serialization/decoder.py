"""JSON decoding into arbitrary destination types through pydantic TypeAdapters.

Adapters are expensive to build, so one is cached per destination type.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from structcopy.core.classify import type_name
from structcopy.core.errors import DecodingError


class AdapterCache:
    """Process-local cache of TypeAdapters keyed by destination type."""

    def __init__(self) -> None:
        """Initialize empty adapter cache."""
        self._by_type: dict[Any, TypeAdapter[Any]] = {}

    def get(self, destination_type: Any) -> TypeAdapter[Any]:
        """Get or build the adapter for a type.

        Args:
            destination_type: Any type pydantic can build a schema for.

        Returns:
            Cached TypeAdapter.

        Raises:
            DecodingError: If pydantic cannot build a schema for the type.
        """
        try:
            cached = self._by_type.get(destination_type)
        except TypeError:
            return _build_adapter(destination_type)
        if cached is not None:
            return cached
        adapter = _build_adapter(destination_type)
        self._by_type[destination_type] = adapter
        return adapter

    def __len__(self) -> int:
        return len(self._by_type)


def _build_adapter(destination_type: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(destination_type)
    except Exception as e:
        # PydanticSchemaGenerationError, PydanticUndefinedAnnotation and the like
        raise DecodingError(f"cannot decode into {type_name(destination_type)}: {e}") from e


# Module-level adapter cache
_adapters = AdapterCache()


def get_adapters() -> AdapterCache:
    """Access the shared adapter cache.

    Returns:
        The process-wide AdapterCache instance.
    """
    return _adapters


def decode[T](data: bytes | str, destination_type: type[T], *, strict: bool = False) -> T:
    """Decode JSON text into a destination type.

    Args:
        data: JSON produced by GraphEncoder.encode().
        destination_type: Type to validate the data into.
        strict: Use pydantic strict mode (no implicit coercion).

    Returns:
        New destination instance.

    Raises:
        DecodingError: If the data does not validate against the type or
            constructing the destination raises.
    """
    adapter = _adapters.get(destination_type)
    try:
        return adapter.validate_json(data, strict=strict)
    except Exception as e:
        # ValidationError, or whatever a __post_init__ or validator raised
        raise DecodingError(f"cannot decode into {type_name(destination_type)}: {e}") from e
