"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from kbmodel.config import OrderingSettings

    # Load from environment variables (KBMODEL_*)
    settings = OrderingSettings()

    # Or override with explicit values
    settings = OrderingSettings(default_strategy="incremental")
"""

from __future__ import annotations

from typing import Literal

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install kbmodel[config]"
    ) from e


class OrderingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for property order construction.

    Attributes:
        default_strategy: Representation used when no strategy is given
            ("rebuilding" re-groups after every mutation, "incremental"
            mutates per-group lists in place).

    Environment Variables:
        KBMODEL_DEFAULT_STRATEGY
    """

    model_config = SettingsConfigDict(
        env_prefix="KBMODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_strategy: Literal["rebuilding", "incremental"] = "rebuilding"
