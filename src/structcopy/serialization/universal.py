"""Serialization fallback copy: encode to JSON, decode into the destination.

Slower than structural_copy but tolerant of shape mismatches: the decoder
coerces numbers, parses enum values and ISO timestamps, and builds types that
need constructor arguments. Cyclic back-references are dropped (null).

Usage:
    dto = universal_copy(entity, EntityDto)   # None on failure
    copy = clone(entity)                      # same type
"""

from __future__ import annotations

import logging
from typing import Any

from structcopy.config import CopySettings, get_settings
from structcopy.core.classify import type_name
from structcopy.core.copy import instantiate
from structcopy.core.errors import DecodingError, EncodingError
from structcopy.serialization.decoder import decode
from structcopy.serialization.encoder import get_encoder

logger = logging.getLogger(__name__)


def universal_copy[T](
    source: object, destination_type: type[T], *, settings: CopySettings | None = None
) -> T | None:
    """Deep-copy source into destination_type through a JSON round-trip.

    Never raises for encoding or decoding problems: failures are logged and
    None, the zero value, is returned.

    Args:
        source: Object graph to copy. Back-references to ancestors are dropped.
        destination_type: Any type pydantic can validate into.
        settings: Optional settings, defaults to get_settings().

    Returns:
        New destination instance, or None if source is None or the round-trip
        failed.
    """
    if source is None:
        return None
    settings = settings or get_settings()
    try:
        data = get_encoder().encode(source)
        return decode(data, destination_type, strict=settings.strict_decoding)
    except (EncodingError, DecodingError) as exc:
        logger.warning(
            "Universal copy of %s into %s failed: %s",
            type_name(type(source)),
            type_name(destination_type),
            exc,
        )
        return None


def clone[T](source: T | None, *, settings: CopySettings | None = None) -> T | None:
    """Deep-copy an object into a new instance of its own type.

    Args:
        source: Object to clone.
        settings: Optional settings, defaults to get_settings().

    Returns:
        Independent copy, or None if source is None or cloning failed.
    """
    if source is None:
        return None
    return universal_copy(source, type(source), settings=settings)


def clone_or_default[T](
    source: Any, destination_type: type[T], *, settings: CopySettings | None = None
) -> T:
    """Deep-copy through the fallback path, never returning None.

    Args:
        source: Object to copy, may be None.
        destination_type: Type to copy into.
        settings: Optional settings, defaults to get_settings().

    Returns:
        The copy, or a default-constructed destination_type when the copy
        yields None.

    Raises:
        InstantiationError: If the copy failed and destination_type cannot be
            default-constructed.
    """
    copied = universal_copy(source, destination_type, settings=settings)
    if copied is None:
        return instantiate(destination_type)
    return copied
