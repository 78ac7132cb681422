"""Rich output formatting helpers for the jdkregistry CLI."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from jdkregistry.installation import JavaInstallation, JavaInstallationRegistry

console = Console()


def installation_roles(
    registry: JavaInstallationRegistry, installation: JavaInstallation,
) -> list[str]:
    """Return the roles an installation plays in the registry."""
    roles: list[str] = []
    if installation is registry.current:
        roles.append("current")
    if any(installation is hinted for hinted in registry.installations.values()):
        roles.append("compilation")
    if installation is registry.for_test:
        roles.append("test")
    return roles


def registry_to_json(registry: JavaInstallationRegistry) -> list[dict[str, Any]]:
    """Convert every installation in the registry to a JSON-serializable dict."""
    out: list[dict[str, Any]] = []
    for installation in registry:
        tools_jar = installation.tools_jar
        out.append({
            "display_name": installation.display_name,
            "java_version": str(installation.java_version),
            "java_home": str(installation.java_home),
            "current": installation.current,
            "roles": installation_roles(registry, installation),
            "tools_jar": str(tools_jar) if tools_jar is not None else None,
        })
    return out


def print_registry(registry: JavaInstallationRegistry) -> None:
    """Print a table of every installation known to the registry."""
    table = Table(title="Java Installations", show_header=True, header_style="bold")
    table.add_column("Installation", style="bold")
    table.add_column("Version", justify="center")
    table.add_column("Roles")
    table.add_column("Java Home", style="dim")

    for installation in registry:
        roles = installation_roles(registry, installation)
        style = "green" if installation.current else ""
        table.add_row(
            Text(installation.display_name, style=style),
            str(installation.java_version),
            ", ".join(roles),
            str(installation.java_home),
        )
    console.print(table)
