"""``jdkregistry select <version>`` — Pick the JDK used to compile for a version.

Prints the Java home of the selected installation on stdout so the output
can be used directly, e.g. ``JAVA_HOME=$(jdkregistry select 1.7)``.

Exit Codes:
    0 — An installation was selected.
    1 — No known installation supports the requested version.
    2 — Invalid version, invalid hinted Java home, or malformed configuration.
"""

from __future__ import annotations

import json
import sys

import click

from jdkregistry.cli.context import CliContext
from jdkregistry.core.version import JavaVersion
from jdkregistry.exceptions import NoCompatibleInstallation


@click.command("select")
@click.argument("version")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def select_command(ctx: CliContext, version: str, output_format: str) -> None:
    """Select the installation used to compile for Java VERSION."""
    try:
        requested = JavaVersion.parse(version)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    registry = ctx.build_registry(ctx.load_config())
    try:
        installation = registry.select_for_compilation(requested)
    except NoCompatibleInstallation as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps({
            "requested": str(requested),
            "display_name": installation.display_name,
            "java_version": str(installation.java_version),
            "java_home": str(installation.java_home),
            "current": installation.current,
        }, indent=2))
    else:
        click.echo(str(installation.java_home))
