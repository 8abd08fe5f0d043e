"""Configuration module using Pydantic Settings.

Provides typed configuration for the copy engine with environment variable
support.

Usage:
    from structcopy.config import CopySettings, get_settings

    settings = CopySettings(reconstruct_mappings=True)
"""

from structcopy.config.settings import CopySettings, get_settings

__all__ = [
    "CopySettings",
    "get_settings",
]
