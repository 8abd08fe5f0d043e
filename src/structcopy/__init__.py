"""structcopy: structural object copying between compatible types.

Usage:
    from dataclasses import dataclass
    from structcopy import structural_copy, universal_copy

    @dataclass
    class Address:
        city: str = ""

    @dataclass
    class Person:
        name: str = ""
        age: int = 0
        address: Address | None = None

    @dataclass
    class AddressDto:
        city: str = ""

    @dataclass
    class PersonDto:
        name: str = ""
        age: int = 0
        address: AddressDto | None = None

    dto = structural_copy(Person("Ann", 30, Address("X")), PersonDto)
    same = universal_copy(dto, PersonDto)
"""

__version__ = "0.1.0"

# Configuration
from structcopy.config import CopySettings, get_settings

# Core primitives
from structcopy.core import (
    CollectionKind,
    CopyError,
    DecodingError,
    EncodingError,
    FieldCopyError,
    FieldDescriptor,
    InstantiationError,
    TypeDescriptor,
    TypeKind,
    classify,
    copy_into,
    describe,
    shallow_copy,
    structural_copy,
)

# Interfaces
from structcopy.interfaces import (
    Response,
    ResponseResult,
    TemplateRenderer,
)

# Serialization fallback
from structcopy.serialization import (
    clone,
    clone_or_default,
    universal_copy,
)

__all__ = [
    # Version
    "__version__",
    # Copy
    "shallow_copy",
    "structural_copy",
    "copy_into",
    "universal_copy",
    "clone",
    "clone_or_default",
    # Classification
    "classify",
    "describe",
    "TypeKind",
    "CollectionKind",
    "TypeDescriptor",
    "FieldDescriptor",
    # Errors
    "CopyError",
    "InstantiationError",
    "FieldCopyError",
    "EncodingError",
    "DecodingError",
    # Config
    "CopySettings",
    "get_settings",
    # Interfaces
    "Response",
    "ResponseResult",
    "TemplateRenderer",
]
