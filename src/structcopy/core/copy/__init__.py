"""Copy strategies: shallow projection and structural deep copy."""

from structcopy.core.copy.operations import instantiate
from structcopy.core.copy.shallow import shallow_copy
from structcopy.core.copy.structural import copy_into, copy_value, structural_copy

__all__ = [
    "shallow_copy",
    "structural_copy",
    "copy_into",
    "copy_value",
    "instantiate",
]
