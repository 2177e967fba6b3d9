"""
randarray.config

Configuration management for randarray.

Exports:
- Config schema
- Loading/saving utilities
"""

from .schema import (
    RandomConfig,
    DEFAULT_SEED,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    # Schema
    "RandomConfig",
    "DEFAULT_SEED",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
]
