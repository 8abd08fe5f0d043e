"""Field discovery: the named, typed fields a copy walks over."""

from structcopy.core.fields.core import (
    FieldDescriber,
    describe,
    fields_of,
    find_field,
    get_describer,
)
from structcopy.core.fields.models import FieldDescriptor

__all__ = [
    "FieldDescriptor",
    "FieldDescriber",
    "describe",
    "fields_of",
    "find_field",
    "get_describer",
]
