"""Project configuration loading.

The configuration lives in ``jdkregistry.yml`` at the project root::

    properties:
      java7Home: /opt/jdk7
    test_property: testJavaHome
    expected:
      compilation_property: java7Home
      compilation: Oracle JDK 7
      runtime: Oracle JDK 8
    build_cache:
      remote:
        url: https://cache.example.com/
        enabled: true

Every section is optional. Missing keys fall back to the defaults of
``ExpectedInstallations`` and an absent remote cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from jdkregistry.config.properties import DEFAULT_TEST_PROPERTY
from jdkregistry.exceptions import ConfigError
from jdkregistry.policy.models import (
    BuildCacheConfiguration,
    ExpectedInstallations,
    RemoteBuildCache,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = ("jdkregistry.yml", "jdkregistry.yaml")


@dataclass
class RegistryConfig:
    """Complete project configuration.

    Attributes:
        properties: Build-scoped properties (installation hints).
        test_property: Property naming the JDK used to run tests.
        expected: Installations required for remote cache hits.
        build_cache: Build-cache settings.
        source: File the configuration was read from, if any.
    """

    properties: dict[str, str] = field(default_factory=dict)
    test_property: str = DEFAULT_TEST_PROPERTY
    expected: ExpectedInstallations = field(default_factory=ExpectedInstallations)
    build_cache: BuildCacheConfiguration = field(default_factory=BuildCacheConfiguration)
    source: Path | None = None


def find_config_file(project_dir: Path) -> Path | None:
    """Return the first config file present in *project_dir*, or None."""
    for filename in CONFIG_FILENAMES:
        candidate = project_dir / filename
        if candidate.is_file():
            return candidate
    return None


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def _flag(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def config_from_dict(data: dict[str, Any], source: Path | None = None) -> RegistryConfig:
    """Build a ``RegistryConfig`` from parsed YAML.

    Raises:
        ConfigError: If a section has the wrong shape or a flag is not
            a boolean.
    """
    properties = {
        str(name): str(value)
        for name, value in _section(data, "properties").items()
        if value is not None
    }

    defaults = ExpectedInstallations()
    expected_data = _section(data, "expected")
    expected = ExpectedInstallations(
        compilation_property=str(
            expected_data.get("compilation_property", defaults.compilation_property)
        ),
        compilation=str(expected_data.get("compilation", defaults.compilation)),
        runtime=str(expected_data.get("runtime", defaults.runtime)),
    )

    remote: RemoteBuildCache | None = None
    cache_data = _section(data, "build_cache")
    if cache_data.get("remote") is not None:
        remote_data = _section(cache_data, "remote")
        remote = RemoteBuildCache(
            url=str(remote_data.get("url", "")),
            enabled=_flag(remote_data, "enabled", default=True),
        )

    return RegistryConfig(
        properties=properties,
        test_property=str(data.get("test_property") or DEFAULT_TEST_PROPERTY),
        expected=expected,
        build_cache=BuildCacheConfiguration(remote=remote),
        source=source,
    )


def load_config(project_dir: Path, config_file: Path | None = None) -> RegistryConfig:
    """Load the project configuration, or defaults when there is none.

    Args:
        project_dir: Directory searched for ``jdkregistry.yml``.
        config_file: Explicit config file; overrides the search.

    Raises:
        ConfigError: If the file cannot be read or is not valid YAML.
    """
    path = config_file if config_file is not None else find_config_file(project_dir)
    if path is None:
        logger.debug("No configuration file in %s, using defaults", project_dir)
        return RegistryConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    logger.debug("Loaded configuration from %s", path)
    return config_from_dict(data, source=path)
