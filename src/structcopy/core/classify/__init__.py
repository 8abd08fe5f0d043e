"""Type classification: Simple, Collection or Complex."""

from structcopy.core.classify.core import (
    SIMPLE_TYPES,
    TypeClassifier,
    classify,
    effective_type,
    get_classifier,
)
from structcopy.core.classify.models import CollectionKind, TypeDescriptor, TypeKind
from structcopy.core.classify.operations import (
    is_record,
    is_undeclared,
    normalize,
    same_type,
    strip_annotated,
    type_name,
    unwrap_optional,
)

__all__ = [
    # Models
    "TypeKind",
    "CollectionKind",
    "TypeDescriptor",
    # Core
    "SIMPLE_TYPES",
    "TypeClassifier",
    "classify",
    "get_classifier",
    "effective_type",
    # Operations
    "is_record",
    "is_undeclared",
    "normalize",
    "same_type",
    "strip_annotated",
    "type_name",
    "unwrap_optional",
]
