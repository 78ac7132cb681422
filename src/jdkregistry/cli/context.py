"""Shared state for CLI commands: configuration and registry construction."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import click

from jdkregistry.config import PropertyResolver, RegistryConfig, load_config
from jdkregistry.exceptions import ConfigError, InvalidInstallationPath
from jdkregistry.installation import (
    CurrentEnvironment,
    JavaInstallationProbe,
    JavaInstallationRegistry,
    ProcessEnvironment,
    ReleaseFileProbe,
)

logger = logging.getLogger(__name__)


@dataclass
class CliContext:
    """Options collected by the top-level command group.

    Attributes:
        project_dir: Directory searched for ``jdkregistry.yml``.
        config_file: Explicit configuration file, if given.
        overrides: ``-P name=value`` build properties.
        probe: Probe used to inspect Java homes.
        environment: Source of the ambient Java home.
    """

    project_dir: Path
    config_file: Path | None = None
    overrides: dict[str, str] = field(default_factory=dict)
    probe: JavaInstallationProbe = field(default_factory=ReleaseFileProbe)
    environment: CurrentEnvironment = field(default_factory=ProcessEnvironment)

    def load_config(self) -> RegistryConfig:
        """Load the project configuration, exiting with code 2 on errors."""
        try:
            config = load_config(self.project_dir, self.config_file)
        except ConfigError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(2)
        config.properties.update(self.overrides)
        return config

    def build_registry(self, config: RegistryConfig) -> JavaInstallationRegistry:
        """Build the registry, exiting with code 2 on invalid installations."""
        try:
            return JavaInstallationRegistry.from_properties(
                PropertyResolver(config.properties),
                self.probe,
                self.environment,
                compilation_property=config.expected.compilation_property,
                test_property=config.test_property,
            )
        except InvalidInstallationPath as exc:
            logger.debug("Registry construction failed", exc_info=True)
            click.echo(f"Error: {exc}", err=True)
            sys.exit(2)
