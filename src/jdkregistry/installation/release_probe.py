"""Probe that reads the ``release`` file shipped in every Java home.

Since Java 7, JDK and JRE distributions ship a ``release`` file of
shell-style ``KEY="value"`` lines at the root of the Java home::

    JAVA_VERSION="1.8.0_202"
    IMPLEMENTOR="Oracle Corporation"

This is the probe the command line uses. Library callers may plug in any
``JavaInstallationProbe``.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from jdkregistry.core.version import JavaVersion
from jdkregistry.exceptions import InvalidInstallationPath
from jdkregistry.installation.models import JavaInstallation
from jdkregistry.installation.probe import JavaInstallationProbe, ProbeResult

logger = logging.getLogger(__name__)

_RELEASE_LINE_RE = re.compile(r'^\s*(?P<key>[A-Z_][A-Z0-9_]*)=(?P<value>.*?)\s*$')

# IMPLEMENTOR values mapped to the vendor label used in display names.
_VENDOR_NAMES: dict[str, str] = {
    "Oracle Corporation": "Oracle",
    "Eclipse Adoptium": "Eclipse Temurin",
    "Eclipse Foundation": "Eclipse Temurin",
    "AdoptOpenJDK": "AdoptOpenJDK",
    "Azul Systems, Inc.": "Zulu",
    "Amazon.com Inc.": "Amazon Corretto",
    "BellSoft": "Liberica",
    "Microsoft": "Microsoft",
}

_OPENJDK = "OpenJDK"


def parse_release_file(content: str) -> dict[str, str]:
    """Parse ``KEY="value"`` lines, ignoring blanks and comments."""
    values: dict[str, str] = {}
    for line in content.splitlines():
        m = _RELEASE_LINE_RE.match(line)
        if not m:
            continue
        value = m.group("value")
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        values[m.group("key")] = value
    return values


def _executable(java_home: Path, name: str) -> Path | None:
    for candidate in (java_home / "bin" / name, java_home / "bin" / f"{name}.exe"):
        if candidate.is_file():
            return candidate
    return None


def _vendor(release: dict[str, str]) -> str:
    implementor = release.get("IMPLEMENTOR", "").strip()
    if implementor and implementor != "N/A":
        return _VENDOR_NAMES.get(implementor, implementor)
    # Pre-9 Oracle builds carry no IMPLEMENTOR, only a commercial build type.
    if release.get("BUILD_TYPE") == "commercial":
        return "Oracle"
    return _OPENJDK


def display_name_for(vendor: str, is_jdk: bool, version: JavaVersion) -> str:
    """Build the "<vendor> JDK|JRE <major>" label used to compare installations."""
    if vendor == _OPENJDK:
        return f"OpenJDK {version.major}" if is_jdk else f"OpenJDK JRE {version.major}"
    kind = "JDK" if is_jdk else "JRE"
    return f"{vendor} {kind} {version.major}"


class ReleaseFileProbe(JavaInstallationProbe):
    """Identifies installations from their ``release`` file and ``bin`` directory."""

    def check_jdk(self, java_home: Path) -> ProbeResult:
        java_home = Path(java_home)
        if not java_home.is_dir():
            raise InvalidInstallationPath(java_home, "directory does not exist")

        java = _executable(java_home, "java")
        if java is None or not os.access(java, os.X_OK):
            raise InvalidInstallationPath(java_home, "no executable bin/java")

        release_file = java_home / "release"
        try:
            release = parse_release_file(release_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidInstallationPath(java_home, f"unreadable release file ({exc})") from exc

        raw_version = release.get("JAVA_VERSION")
        if not raw_version:
            raise InvalidInstallationPath(java_home, "release file has no JAVA_VERSION")
        try:
            version = JavaVersion.parse(raw_version)
        except ValueError as exc:
            raise InvalidInstallationPath(java_home, str(exc)) from exc

        is_jdk = _executable(java_home, "javac") is not None
        result = ProbeResult(
            java_version=version,
            display_name=display_name_for(_vendor(release), is_jdk, version),
        )
        logger.debug("Probed %s: %s (Java %s)", java_home, result.display_name, version)
        return result

    def describe_current(self, installation: JavaInstallation) -> None:
        self.check_jdk(installation.java_home).configure(installation)
