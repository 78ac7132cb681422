"""``jdkregistry validate`` — Check the environment against the cache policy.

Exit Codes:
    0 — No problems, or problems logged as a warning (remote cache off).
    1 — Problems found while the remote build cache is enabled.
    2 — Invalid hinted Java home or malformed configuration.
"""

from __future__ import annotations

import dataclasses
import sys

import click

from jdkregistry.cli.context import CliContext
from jdkregistry.cli.output import console
from jdkregistry.exceptions import CachePolicyViolation
from jdkregistry.policy import BuildCacheConfiguration, CachePolicyValidator, RemoteBuildCache


def _apply_remote_override(
    build_cache: BuildCacheConfiguration, remote_cache: bool | None,
) -> BuildCacheConfiguration:
    """Force the remote cache on or off, keeping any configured URL."""
    if remote_cache is None:
        return build_cache
    remote = build_cache.remote or RemoteBuildCache()
    return BuildCacheConfiguration(remote=dataclasses.replace(remote, enabled=remote_cache))


@click.command("validate")
@click.option(
    "--remote-cache/--no-remote-cache",
    default=None,
    help="Override whether the remote build cache is enabled.",
)
@click.pass_obj
def validate_command(ctx: CliContext, remote_cache: bool | None) -> None:
    """Validate that the installations produce remote build cache hits."""
    config = ctx.load_config()
    registry = ctx.build_registry(config)
    build_cache = _apply_remote_override(config.build_cache, remote_cache)
    validator = CachePolicyValidator(config.expected)

    try:
        warning = validator.validate(registry, build_cache)
    except CachePolicyViolation as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    # The report itself was already logged as a warning by the validator.
    if warning is not None:
        console.print(
            "[yellow]Remote build cache is disabled; "
            "policy problems are not fatal.[/yellow]"
        )
    else:
        console.print("[green]Environment matches the remote build cache policy.[/green]")
