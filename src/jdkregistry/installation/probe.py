"""Probe contract for inspecting Java homes.

The registry never inspects a Java home itself. It hands each candidate
to a ``JavaInstallationProbe``, which either returns the metadata to apply
to the record or raises ``InvalidInstallationPath``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from jdkregistry.core.version import JavaVersion
from jdkregistry.installation.models import JavaInstallation


@dataclass(frozen=True)
class ProbeResult:
    """Metadata a probe determined for a Java home.

    Attributes:
        java_version: Major language version of the installation.
        display_name: Vendor and version label, e.g. "Oracle JDK 7".
    """

    java_version: JavaVersion
    display_name: str

    def configure(self, installation: JavaInstallation) -> JavaInstallation:
        """Apply this metadata to *installation* and return it."""
        installation.java_version = self.java_version
        installation.display_name = self.display_name
        return installation


class JavaInstallationProbe(ABC):
    """Inspects Java homes on behalf of the registry."""

    @abstractmethod
    def describe_current(self, installation: JavaInstallation) -> None:
        """Populate the ambient installation's metadata in place."""
        ...

    @abstractmethod
    def check_jdk(self, java_home: Path) -> ProbeResult:
        """Inspect an arbitrary Java home.

        Raises:
            InvalidInstallationPath: If *java_home* is not a usable
                installation (missing, not executable, unknown vendor).
        """
        ...
