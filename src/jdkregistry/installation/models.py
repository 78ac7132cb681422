"""Installation records for discovered Java homes.

A ``JavaInstallation`` is created once per discovered Java home and is
never destroyed or re-pointed. The probe fills in the version and display
name exactly once; after that the record is read-only. The only state that
changes later is the lazily looked-up ``tools.jar`` location.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from jdkregistry.core.version import JavaVersion
from jdkregistry.exceptions import InstallationNotProbed, UnsupportedMutation

logger = logging.getLogger(__name__)

ToolsJarLookup = Callable[[Path], "Path | None"]

_UNSET = object()


def find_tools_jar(java_home: Path) -> Path | None:
    """Locate the ``tools.jar`` archive shipped with pre-9 JDKs.

    Looks in ``<java_home>/lib``. When the home is the JRE nested inside a
    JDK (``<jdk>/jre``), the JDK's ``lib`` directory is checked as well.

    Args:
        java_home: The Java home to inspect.

    Returns:
        Path to ``tools.jar``, or None when the distribution has none.
    """
    candidate = java_home / "lib" / "tools.jar"
    if candidate.is_file():
        return candidate
    if java_home.name == "jre":
        candidate = java_home.parent / "lib" / "tools.jar"
        if candidate.is_file():
            return candidate
    return None


class JavaInstallation:
    """One Java installation, identified by its Java home.

    Args:
        current: True only for the installation this build runs under.
        java_home: Directory of the installation.
        tools_jar_lookup: Function locating ``tools.jar`` for a Java home.
        name: Identifier for the record; defaults to the directory name.
    """

    def __init__(
        self,
        current: bool,
        java_home: Path | str,
        tools_jar_lookup: ToolsJarLookup = find_tools_jar,
        name: str | None = None,
    ) -> None:
        self._current = current
        self._java_home = Path(java_home)
        self._name = name or self._java_home.name
        self._java_version: JavaVersion | None = None
        self._display_name: str | None = None
        self._tools_jar_lookup = tools_jar_lookup
        self._tools_jar: object = _UNSET
        self._tools_jar_lock = threading.Lock()

    @property
    def current(self) -> bool:
        return self._current

    @property
    def name(self) -> str:
        return self._name

    @property
    def java_home(self) -> Path:
        return self._java_home

    @java_home.setter
    def java_home(self, value: Path | str) -> None:
        raise UnsupportedMutation("JavaHome cannot be changed")

    @property
    def java_version(self) -> JavaVersion:
        if self._java_version is None:
            raise InstallationNotProbed(f"Java version of {self._java_home} is not known yet")
        return self._java_version

    @java_version.setter
    def java_version(self, value: JavaVersion) -> None:
        if self._java_version is not None:
            raise UnsupportedMutation(f"Java version of {self._java_home} is already set")
        self._java_version = JavaVersion.parse(value)

    @property
    def display_name(self) -> str:
        if self._display_name is None:
            raise InstallationNotProbed(f"Display name of {self._java_home} is not known yet")
        return self._display_name

    @display_name.setter
    def display_name(self, value: str) -> None:
        if self._display_name is not None:
            raise UnsupportedMutation(f"Display name of {self._java_home} is already set")
        self._display_name = value

    @property
    def probed(self) -> bool:
        """Whether a probe has populated the version and display name."""
        return self._java_version is not None and self._display_name is not None

    @property
    def tools_jar(self) -> Path | None:
        """Location of ``tools.jar``, looked up once on first access."""
        if self._tools_jar is _UNSET:
            with self._tools_jar_lock:
                if self._tools_jar is _UNSET:
                    self._tools_jar = self._tools_jar_lookup(self._java_home)
                    logger.debug("tools.jar for %s: %s", self._java_home, self._tools_jar)
        return self._tools_jar  # type: ignore[return-value]

    def __str__(self) -> str:
        display = self._display_name if self.probed else "Unprobed Java"
        return f"{display} ({self._java_home.absolute()})"

    def __repr__(self) -> str:
        return (
            f"JavaInstallation(current={self._current!r}, "
            f"java_home={str(self._java_home)!r}, version={self._java_version!r})"
        )
