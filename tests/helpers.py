"""Shared test helpers: a scripted probe and fake Java homes on disk.

``FakeProbe`` answers from a fixed table, so registry tests never touch
the file system. ``create_java_home`` builds a minimal but realistic Java
home for tests of ``ReleaseFileProbe`` and the CLI.
"""

from __future__ import annotations

import stat
from pathlib import Path

from jdkregistry.core.version import JavaVersion
from jdkregistry.exceptions import InvalidInstallationPath
from jdkregistry.installation import (
    FixedEnvironment,
    JavaInstallation,
    JavaInstallationProbe,
    JavaInstallationRegistry,
    ProbeResult,
    build_registry,
)

CURRENT_HOME = Path("/opt/jdk1.8.0_202")


def probe_result(display_name: str, major: int) -> ProbeResult:
    """Shorthand for a ``ProbeResult`` with a plain major version."""
    return ProbeResult(java_version=JavaVersion(major), display_name=display_name)


class FakeProbe(JavaInstallationProbe):
    """Probe answering from a table of known Java homes."""

    def __init__(
        self,
        known: dict[str | Path, ProbeResult] | None = None,
        current: ProbeResult | None = None,
    ) -> None:
        self.known = {Path(home): result for home, result in (known or {}).items()}
        self.current = current or probe_result("Oracle JDK 8", 8)
        self.checked: list[Path] = []

    def check_jdk(self, java_home: Path) -> ProbeResult:
        self.checked.append(Path(java_home))
        try:
            return self.known[Path(java_home)]
        except KeyError:
            raise InvalidInstallationPath(java_home, "unknown to the fake probe") from None

    def describe_current(self, installation: JavaInstallation) -> None:
        self.current.configure(installation)


class CountingLookup:
    """``tools.jar`` lookup that records how often it is invoked."""

    def __init__(self, result: Path | None = None) -> None:
        self.result = result
        self.calls = 0

    def __call__(self, java_home: Path) -> Path | None:
        self.calls += 1
        return self.result


def make_registry(
    hinted: dict[str | Path, ProbeResult] | None = None,
    current: ProbeResult | None = None,
    test_home: str | Path | None = None,
    compilation_homes: list[str | Path | None] | None = None,
) -> JavaInstallationRegistry:
    """Build a registry over a ``FakeProbe`` and a fixed ambient Java home."""
    hinted = hinted or {}
    probe = FakeProbe(hinted, current=current)
    homes = compilation_homes if compilation_homes is not None else list(hinted) or [None]
    return build_registry(homes, test_home, probe, FixedEnvironment(CURRENT_HOME))


def create_java_home(
    base: Path,
    name: str,
    java_version: str = "1.8.0_202",
    implementor: str | None = "Oracle Corporation",
    jdk: bool = True,
    tools_jar: bool = False,
    build_type: str | None = None,
) -> Path:
    """Create a fake Java home with a ``release`` file and ``bin/java``."""
    home = base / name
    bin_dir = home / "bin"
    bin_dir.mkdir(parents=True)
    executables = ["java", "javac"] if jdk else ["java"]
    for executable in executables:
        path = bin_dir / executable
        path.write_text("#!/bin/sh\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    lines = [f'JAVA_VERSION="{java_version}"']
    if implementor is not None:
        lines.append(f'IMPLEMENTOR="{implementor}"')
    if build_type is not None:
        lines.append(f'BUILD_TYPE="{build_type}"')
    (home / "release").write_text("\n".join(lines) + "\n")

    if tools_jar:
        lib = home / "lib"
        lib.mkdir()
        (lib / "tools.jar").write_bytes(b"PK\x03\x04")
    return home
