"""``jdkregistry list`` — Show every Java installation known to the build.

Exit Codes:
    0 — Registry built successfully.
    2 — A hinted Java home is invalid or the configuration is malformed.
"""

from __future__ import annotations

import json

import click

from jdkregistry.cli.context import CliContext
from jdkregistry.cli.output import print_registry, registry_to_json


@click.command("list")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def list_command(ctx: CliContext, output_format: str) -> None:
    """List the current, compilation, and test Java installations."""
    registry = ctx.build_registry(ctx.load_config())
    if output_format == "json":
        click.echo(json.dumps(registry_to_json(registry), indent=2))
    else:
        print_registry(registry)
