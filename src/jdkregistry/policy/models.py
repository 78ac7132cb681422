"""Policy inputs: the build-cache configuration and expected installations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RemoteBuildCache:
    """A remote build cache destination.

    Attributes:
        url: Location of the remote cache.
        enabled: Whether the build currently uses the remote cache.
    """

    url: str = ""
    enabled: bool = True


@dataclass(frozen=True)
class BuildCacheConfiguration:
    """Build-cache settings; ``remote`` is None when no remote is configured."""

    remote: RemoteBuildCache | None = None

    @property
    def remote_enabled(self) -> bool:
        return self.remote is not None and self.remote.enabled


@dataclass(frozen=True)
class ExpectedInstallations:
    """Installations the environment must provide for remote cache hits.

    Attributes:
        compilation_property: Property hinting the older compilation JDK.
        compilation: Expected display name of the compilation JDK.
        runtime: Expected display name of the JDK running the build.
    """

    compilation_property: str = "java7Home"
    compilation: str = "Oracle JDK 7"
    runtime: str = "Oracle JDK 8"
