"""Configuration module using Pydantic Settings.

Usage:
    from kbmodel.config import OrderingSettings

    settings = OrderingSettings(default_strategy="incremental")
"""

from kbmodel.config.settings import OrderingSettings

__all__ = [
    "OrderingSettings",
]
