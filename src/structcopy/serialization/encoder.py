"""Cycle-breaking graph encoder.

Turns an arbitrary object graph into JSON text. Records (dataclasses,
pydantic models, plain objects) become objects of their readable public
fields, mappings become objects, other iterables become arrays. Simple leaves
(datetime, UUID, Decimal, Enum...) are left to pydantic_core's serializer.

A reference to an object that is currently being encoded (an ancestor on the
path from the root) is written as null. Objects referenced twice from
different branches are encoded twice.
"""

from __future__ import annotations

import collections.abc as abc
import datetime
import enum
from typing import Any

from pydantic_core import to_json

from structcopy.core.classify import SIMPLE_TYPES, is_record
from structcopy.core.errors import EncodingError
from structcopy.core.fields import fields_of


class GraphEncoder:
    """Encodes object graphs to JSON, dropping back-references.

    Holds no per-call state, so one instance is shared by every caller.
    """

    def encode(self, obj: Any) -> bytes:
        """Encode an object graph to JSON text.

        Args:
            obj: Root of the graph.

        Returns:
            UTF-8 JSON bytes.

        Raises:
            EncodingError: If the graph is too deep, a field getter raises or
                a leaf is not supported by the serializer.
        """
        try:
            tree = self.to_tree(obj)
        except RecursionError as e:
            raise EncodingError(f"object graph too deep to encode: {e}") from e
        except Exception as e:
            # Raising property getters or iterators
            raise EncodingError(f"cannot walk object graph: {e}") from e
        try:
            return to_json(tree)
        except Exception as e:
            raise EncodingError(str(e)) from e

    def to_tree(self, obj: Any) -> Any:
        """Convert a graph to nested dicts and lists with cycles removed."""
        return self._walk(obj, set())

    def _walk(self, obj: Any, ancestors: set[int]) -> Any:
        if obj is None or isinstance(obj, SIMPLE_TYPES):
            return obj

        key = id(obj)
        if key in ancestors:
            return None
        ancestors.add(key)
        try:
            if isinstance(obj, abc.Mapping):
                return {_encode_key(k): self._walk(v, ancestors) for k, v in obj.items()}
            if isinstance(obj, abc.Iterable) and not _is_record_instance(obj):
                return [self._walk(item, ancestors) for item in obj]
            return self._record(obj, ancestors)
        finally:
            ancestors.discard(key)

    def _record(self, obj: Any, ancestors: set[int]) -> dict[str, Any]:
        encoded: dict[str, Any] = {}
        for field in fields_of(obj):
            if not field.readable:
                continue
            try:
                value = getattr(obj, field.name)
            except AttributeError:
                continue
            encoded[field.name] = self._walk(value, ancestors)
        return encoded


def _is_record_instance(obj: Any) -> bool:
    return is_record(type(obj))


def _encode_key(key: Any) -> Any:
    if isinstance(key, enum.Enum):
        return key.value
    if isinstance(key, (str, int, float, bool)) or key is None:
        return key
    if isinstance(key, (datetime.date, datetime.time)):
        return key.isoformat()
    return str(key)


# Module-level encoder instance
_encoder = GraphEncoder()


def get_encoder() -> GraphEncoder:
    """Access the shared graph encoder.

    Returns:
        The process-wide GraphEncoder instance.
    """
    return _encoder
