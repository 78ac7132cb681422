"""Named property lookup for installation hints.

A hint such as ``java7Home`` is looked up in the build-scoped properties
first (the ``properties`` section of the project config and ``-P``
overrides), then in the process environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping

from jdkregistry.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_COMPILATION_PROPERTY = "java7Home"
DEFAULT_TEST_PROPERTY = "testJavaHome"


class PropertyResolver:
    """Resolves named properties from build scope, then process scope.

    Args:
        build_properties: Build-scoped properties; consulted first.
        environment: Process-scoped properties; defaults to ``os.environ``.
    """

    def __init__(
        self,
        build_properties: Mapping[str, str] | None = None,
        environment: Mapping[str, str] | None = None,
    ) -> None:
        self._build_properties = dict(build_properties or {})
        self._environment = os.environ if environment is None else environment

    def resolve(self, name: str) -> str | None:
        """Return the first value found for *name*, or None when absent."""
        value = self._build_properties.get(name)
        if value is not None:
            logger.debug("Property %s resolved from build properties", name)
            return str(value)
        value = self._environment.get(name)
        if value is not None:
            logger.debug("Property %s resolved from the process environment", name)
            return value
        return None


def parse_property_overrides(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``name=value`` command-line overrides into a dict.

    Raises:
        ConfigError: If an entry has no ``=`` or an empty name.
    """
    overrides: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ConfigError(f"Invalid property {pair!r}, expected name=value")
        overrides[name] = value
    return overrides
