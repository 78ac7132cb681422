"""Java language versions.

Java has published two numbering schemes: the legacy ``1.N`` form used up
to Java 8 (``1.7``, ``1.8.0_202``) and the plain ``N`` form used from
Java 9 onwards (``9``, ``11.0.2``, ``17``). ``JavaVersion`` normalizes both
to the major language version so that ``1.8`` and ``8`` compare equal.

Only the major version matters for selection: update and build numbers
are parsed away.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_JAVA_VERSION_RE = re.compile(
    r"^(?:1\.(?P<legacy>[0-9]+)|(?P<major>[1-9][0-9]*))"
    r"(?:[._+\-].+)?$"
)

# Last major version published with the ``1.N`` prefix.
_LAST_LEGACY_MAJOR = 8


@dataclass(frozen=True, order=True)
class JavaVersion:
    """A Java language version, identified by its major number.

    Attributes:
        major: The major language version (7 for ``1.7``, 11 for ``11.0.2``).
    """

    major: int

    def __post_init__(self) -> None:
        if self.major < 1:
            raise ValueError(f"Invalid Java major version: {self.major!r}")

    @classmethod
    def parse(cls, value: VersionLike) -> JavaVersion:
        """Parse a version string, integer, or existing ``JavaVersion``.

        Args:
            value: ``"1.7"``, ``"7"``, ``"1.8.0_202"``, ``"11.0.2"``, ``17``...

        Returns:
            The normalized ``JavaVersion``.

        Raises:
            ValueError: If *value* is not a recognizable Java version.
        """
        if isinstance(value, JavaVersion):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid Java version: {value!r}")
        if isinstance(value, int):
            return cls(value)
        m = _JAVA_VERSION_RE.match(str(value).strip())
        if not m:
            raise ValueError(f"Invalid Java version: {value!r}")
        if m.group("legacy") is not None:
            return cls(int(m.group("legacy")))
        return cls(int(m.group("major")))

    def __str__(self) -> str:
        if self.major <= _LAST_LEGACY_MAJOR:
            return f"1.{self.major}"
        return str(self.major)

    def __repr__(self) -> str:
        return f"JavaVersion({str(self)!r})"


VersionLike = Union[JavaVersion, int, str]
