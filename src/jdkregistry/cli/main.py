"""jdkregistry CLI — Locate, select, and validate Java installations.

Entry point for the ``jdkregistry`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list      — Show the current, compilation, and test installations.
    select    — Print the Java home used to compile for a version.
    validate  — Check the environment against the remote build cache policy.

Usage::

    jdkregistry list
    jdkregistry -P java7Home=/opt/jdk1.7.0_80 select 1.7
    jdkregistry validate --remote-cache
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from jdkregistry import __version__
from jdkregistry.cli.context import CliContext
from jdkregistry.cli.list_cmd import list_command
from jdkregistry.cli.select_cmd import select_command
from jdkregistry.cli.validate_cmd import validate_command
from jdkregistry.config import parse_property_overrides
from jdkregistry.exceptions import ConfigError


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Project directory containing jdkregistry.yml (default: cwd).",
)
@click.option(
    "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Explicit configuration file.",
)
@click.option(
    "-P", "--property", "properties",
    multiple=True,
    metavar="NAME=VALUE",
    help="Build property, e.g. -P java7Home=/opt/jdk7. Repeatable.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    project_dir: Path,
    config_file: Path | None,
    properties: tuple[str, ...],
    verbose: bool,
) -> None:
    """jdkregistry: Java installations for reproducible, cacheable builds.

    Finds the JDKs hinted through build properties or the environment,
    selects the one to compile with for a given Java version, and checks
    that the environment can produce remote build cache hits.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        overrides = parse_property_overrides(properties)
    except ConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="'-P'") from exc
    ctx.obj = CliContext(
        project_dir=project_dir,
        config_file=config_file,
        overrides=overrides,
    )


# Register all subcommands
cli.add_command(list_command)
cli.add_command(select_command)
cli.add_command(validate_command)
