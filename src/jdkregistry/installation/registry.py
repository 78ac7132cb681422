"""Registry of the Java installations available to a build.

The registry is built once at start-up from a small set of hinted Java
homes plus the ambient installation the build runs under, and is read-only
afterwards.

Selection rules (first match wins) for ``select_for_compilation(v)``:
    1. ``v`` is the current version: the current installation.
    2. ``v`` was hinted explicitly: the hinted installation.
    3. ``v`` is older than the current version: the current installation.
    4. Otherwise: ``NoCompatibleInstallation``.

The current installation is held apart from the hinted ones. It is always
authoritative for its own version and never needs a hint.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from jdkregistry.config.properties import (
    DEFAULT_COMPILATION_PROPERTY,
    DEFAULT_TEST_PROPERTY,
    PropertyResolver,
)
from jdkregistry.core.version import JavaVersion, VersionLike
from jdkregistry.exceptions import NoCompatibleInstallation
from jdkregistry.installation.environment import CurrentEnvironment
from jdkregistry.installation.models import JavaInstallation, ToolsJarLookup, find_tools_jar
from jdkregistry.installation.probe import JavaInstallationProbe

logger = logging.getLogger(__name__)


class JavaInstallationRegistry:
    """The set of known installations and the rules for choosing one.

    Args:
        current: The ambient installation; must have ``current=True``.
        installations: Hinted compilation installations keyed by version.
        for_test: Installation used to run tests; defaults to *current*.
        compilation_home_set: Whether the primary compilation hint was given.
    """

    def __init__(
        self,
        current: JavaInstallation,
        installations: Mapping[JavaVersion, JavaInstallation] | None = None,
        for_test: JavaInstallation | None = None,
        compilation_home_set: bool = False,
    ) -> None:
        if not current.current:
            raise ValueError(f"{current!r} is not the current installation")
        hinted = dict(installations or {})
        for installation in hinted.values():
            if installation.current:
                raise ValueError(f"Hinted installation {installation!r} is marked current")
        if for_test is not None and for_test.current and for_test is not current:
            raise ValueError(f"Test installation {for_test!r} is marked current")
        self._current = current
        self._installations: Mapping[JavaVersion, JavaInstallation] = MappingProxyType(hinted)
        self._for_test = for_test if for_test is not None else current
        self._compilation_home_set = compilation_home_set

    @classmethod
    def from_properties(
        cls,
        properties: PropertyResolver,
        probe: JavaInstallationProbe,
        environment: CurrentEnvironment,
        compilation_property: str = DEFAULT_COMPILATION_PROPERTY,
        test_property: str = DEFAULT_TEST_PROPERTY,
        tools_jar_lookup: ToolsJarLookup = find_tools_jar,
    ) -> JavaInstallationRegistry:
        """Build the registry from named property hints.

        Args:
            properties: Resolver for the hint properties.
            probe: Probe used to inspect every Java home.
            environment: Source of the ambient Java home.
            compilation_property: Property naming the older compilation JDK.
            test_property: Property naming the JDK used for tests.
            tools_jar_lookup: ``tools.jar`` lookup handed to every record.

        Raises:
            InvalidInstallationPath: If a hinted Java home fails probing.
        """
        compilation_home = properties.resolve(compilation_property)
        test_home = properties.resolve(test_property)
        logger.debug(
            "Resolved hints: %s=%s, %s=%s",
            compilation_property, compilation_home, test_property, test_home,
        )
        return build_registry(
            [compilation_home], test_home, probe, environment,
            tools_jar_lookup=tools_jar_lookup,
        )

    @property
    def current(self) -> JavaInstallation:
        return self._current

    @property
    def for_test(self) -> JavaInstallation:
        return self._for_test

    @property
    def installations(self) -> Mapping[JavaVersion, JavaInstallation]:
        """Hinted compilation installations keyed by version (read-only)."""
        return self._installations

    @property
    def compilation_home_set(self) -> bool:
        return self._compilation_home_set

    @property
    def compilation_installation(self) -> JavaInstallation | None:
        """The first hinted compilation installation, if any."""
        return next(iter(self._installations.values()), None)

    def __iter__(self) -> Iterator[JavaInstallation]:
        """Iterate over every distinct installation, current first."""
        seen: set[int] = set()
        for installation in (self._current, *self._installations.values(), self._for_test):
            if id(installation) not in seen:
                seen.add(id(installation))
                yield installation

    def select_for_compilation(self, version: VersionLike) -> JavaInstallation:
        """Choose the installation used to compile for *version*.

        Raises:
            NoCompatibleInstallation: If only newer versions would do.
            ValueError: If *version* is not a recognizable Java version.
        """
        requested = JavaVersion.parse(version)
        current_version = self._current.java_version
        if requested == current_version:
            return self._current
        if requested in self._installations:
            return self._installations[requested]
        if requested <= current_version:
            return self._current
        raise NoCompatibleInstallation(requested)


def _detect_installation(
    java_home: str | Path,
    probe: JavaInstallationProbe,
    tools_jar_lookup: ToolsJarLookup,
) -> JavaInstallation:
    installation = JavaInstallation(False, java_home, tools_jar_lookup=tools_jar_lookup)
    probe.check_jdk(installation.java_home).configure(installation)
    logger.debug("Detected %s", installation)
    return installation


def build_registry(
    compilation_homes: Sequence[str | Path | None],
    test_home: str | Path | None,
    probe: JavaInstallationProbe,
    environment: CurrentEnvironment,
    tools_jar_lookup: ToolsJarLookup = find_tools_jar,
) -> JavaInstallationRegistry:
    """Probe every hinted Java home and assemble the registry.

    Args:
        compilation_homes: Hinted compilation Java homes; None entries are
            absent hints. The first entry is the primary hint.
        test_home: Hinted Java home for running tests, or None.
        probe: Probe used to inspect every Java home.
        environment: Source of the ambient Java home.
        tools_jar_lookup: ``tools.jar`` lookup handed to every record.

    Returns:
        The fully populated registry.

    Raises:
        InvalidInstallationPath: If any hinted Java home fails probing.
            No registry is produced in that case.
    """
    compilation_home_set = bool(compilation_homes) and compilation_homes[0] is not None

    installations: dict[JavaVersion, JavaInstallation] = {}
    for java_home in compilation_homes:
        if java_home is None:
            continue
        installation = _detect_installation(java_home, probe, tools_jar_lookup)
        previous = installations.get(installation.java_version)
        if previous is not None:
            logger.warning(
                "Both %s and %s provide Java %s, using %s",
                previous.java_home, installation.java_home,
                installation.java_version, installation.java_home,
            )
        installations[installation.java_version] = installation

    current = JavaInstallation(True, environment.java_home(), tools_jar_lookup=tools_jar_lookup)
    probe.describe_current(current)
    logger.debug("Current installation: %s", current)

    for_test = current
    if test_home is not None:
        for_test = _detect_installation(test_home, probe, tools_jar_lookup)

    return JavaInstallationRegistry(
        current=current,
        installations=installations,
        for_test=for_test,
        compilation_home_set=compilation_home_set,
    )
