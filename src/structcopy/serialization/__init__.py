"""Serialization fallback: cycle-breaking JSON encoder and pydantic decoding."""

from structcopy.serialization.decoder import AdapterCache, decode, get_adapters
from structcopy.serialization.encoder import GraphEncoder, get_encoder
from structcopy.serialization.universal import clone, clone_or_default, universal_copy

__all__ = [
    # Encoding
    "GraphEncoder",
    "get_encoder",
    # Decoding
    "AdapterCache",
    "decode",
    "get_adapters",
    # Copy
    "universal_copy",
    "clone",
    "clone_or_default",
]
