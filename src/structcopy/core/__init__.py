"""Core functionalities: stateless classification, field discovery and copying.

Architecture Note:
    core/ contains pure functions over in-memory object graphs. The only
    process-wide state is the classifier and field-descriptor caches, which
    are populated on first use and never invalidated.
    For the serialization-based fallback, see serialization/.
"""

from structcopy.core.classify import (
    CollectionKind,
    TypeClassifier,
    TypeDescriptor,
    TypeKind,
    classify,
    get_classifier,
    same_type,
)
from structcopy.core.copy import copy_into, instantiate, shallow_copy, structural_copy
from structcopy.core.errors import (
    CopyError,
    DecodingError,
    EncodingError,
    FieldCopyError,
    InstantiationError,
)
from structcopy.core.fields import FieldDescriber, FieldDescriptor, describe, get_describer

__all__ = [
    # Classification
    "TypeKind",
    "CollectionKind",
    "TypeDescriptor",
    "TypeClassifier",
    "classify",
    "get_classifier",
    "same_type",
    # Fields
    "FieldDescriptor",
    "FieldDescriber",
    "describe",
    "get_describer",
    # Copy
    "shallow_copy",
    "structural_copy",
    "copy_into",
    "instantiate",
    # Errors
    "CopyError",
    "InstantiationError",
    "FieldCopyError",
    "EncodingError",
    "DecodingError",
]
