"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copy
engine.

Usage:
    from structcopy.config import CopySettings, get_settings

    # Load from environment variables (STRUCTCOPY_*)
    settings = get_settings()

    # Or override with explicit values for a single call
    structural_copy(source, Target, settings=CopySettings(reconstruct_mappings=True))
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the copy engine.

    Attributes:
        reconstruct_mappings: Rebuild dict/Mapping destinations key by key
            during structural copies. When False, mapping-typed destination
            fields are left at their defaults.
        strict_decoding: Decode the fallback copy in pydantic strict mode,
            disabling implicit coercion (numeric widening, text to enum).

    Environment Variables:
        STRUCTCOPY_RECONSTRUCT_MAPPINGS
        STRUCTCOPY_STRICT_DECODING
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reconstruct_mappings: bool = False
    strict_decoding: bool = False


@lru_cache(maxsize=1)
def get_settings() -> CopySettings:
    """Process-wide settings, read from the environment on first use.

    Returns:
        Cached CopySettings instance. Call get_settings.cache_clear() to
        re-read the environment.
    """
    return CopySettings()
