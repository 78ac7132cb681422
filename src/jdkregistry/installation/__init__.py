"""Discovery, probing, and selection of Java installations.

Public API::

    from jdkregistry.installation import (
        JavaInstallationRegistry, ProcessEnvironment, ReleaseFileProbe,
    )
    from jdkregistry.config import PropertyResolver

    registry = JavaInstallationRegistry.from_properties(
        PropertyResolver({"java7Home": "/opt/jdk7"}),
        ReleaseFileProbe(),
        ProcessEnvironment(),
    )
    jdk = registry.select_for_compilation("1.7")
"""

from __future__ import annotations

from jdkregistry.installation.environment import (
    CurrentEnvironment,
    FixedEnvironment,
    ProcessEnvironment,
)
from jdkregistry.installation.models import JavaInstallation, find_tools_jar
from jdkregistry.installation.probe import JavaInstallationProbe, ProbeResult
from jdkregistry.installation.registry import (
    JavaInstallationRegistry,
    build_registry,
)
from jdkregistry.installation.release_probe import ReleaseFileProbe

__all__ = [
    "CurrentEnvironment",
    "FixedEnvironment",
    "JavaInstallation",
    "JavaInstallationProbe",
    "JavaInstallationRegistry",
    "ProbeResult",
    "ProcessEnvironment",
    "ReleaseFileProbe",
    "build_registry",
    "find_tools_jar",
]
