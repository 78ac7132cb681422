"""jdkregistry exception hierarchy.

All public exceptions inherit from JdkRegistryError, giving callers a single
base class to catch when they want to handle any registry-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class JdkRegistryError(Exception):
    """Base exception for all jdkregistry errors."""


class InvalidInstallationPath(JdkRegistryError):
    """Raised when a path does not point to a usable Java installation.

    Covers missing directories, missing ``bin/java`` executables, and
    distributions the probe does not recognize. Raised by probes and
    propagated unchanged through registry construction.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path} is not a valid Java installation: {reason}")


class UnsupportedMutation(JdkRegistryError):
    """Raised when an installation record is altered after it was populated.

    The Java home of a record never changes after discovery, and probed
    metadata may only be assigned once.
    """


class InstallationNotProbed(JdkRegistryError):
    """Raised when probe metadata is read before a probe populated it."""


class NoCompatibleInstallation(JdkRegistryError):
    """Raised when no known installation supports a requested Java version.

    Local to the failing request: the registry itself remains valid.
    """

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(
            f"No Java installation found which supports Java version {version}"
        )


class CachePolicyViolation(JdkRegistryError):
    """Raised when the environment cannot produce remote build cache hits.

    Only raised when a remote build cache is configured and enabled;
    otherwise the same message is logged as a warning.
    """

    def __init__(self, message: str, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        super().__init__(message)


class ConfigError(JdkRegistryError):
    """Raised for malformed configuration files or property overrides."""
