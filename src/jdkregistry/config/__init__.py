"""Configuration and property resolution for jdkregistry."""

from __future__ import annotations

from jdkregistry.config.loader import (
    CONFIG_FILENAMES,
    RegistryConfig,
    config_from_dict,
    find_config_file,
    load_config,
)
from jdkregistry.config.properties import PropertyResolver, parse_property_overrides

__all__ = [
    "CONFIG_FILENAMES",
    "PropertyResolver",
    "RegistryConfig",
    "config_from_dict",
    "find_config_file",
    "load_config",
    "parse_property_overrides",
]
