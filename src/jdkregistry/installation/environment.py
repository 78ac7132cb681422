"""Lookup of the ambient Java installation.

The installation the build runs under is never hinted: it comes straight
from the execution environment. It is modelled as an injected capability
so tests can substitute a fake ambient JDK without touching process state.
"""

from __future__ import annotations

import logging
import os
import shutil
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path

from jdkregistry.exceptions import InvalidInstallationPath

logger = logging.getLogger(__name__)


class CurrentEnvironment(ABC):
    """Reports the Java home of the ambient installation."""

    @abstractmethod
    def java_home(self) -> Path:
        ...


class FixedEnvironment(CurrentEnvironment):
    """An environment whose ambient Java home is known up front."""

    def __init__(self, java_home: Path | str) -> None:
        self._java_home = Path(java_home)

    def java_home(self) -> Path:
        return self._java_home


class ProcessEnvironment(CurrentEnvironment):
    """Derives the ambient Java home from the process environment.

    ``JAVA_HOME`` wins when set. Otherwise the ``java`` executable on
    ``PATH`` is resolved through symlinks and its ``bin/..`` directory is
    used.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        which: Callable[[str], str | None] = shutil.which,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._which = which

    def java_home(self) -> Path:
        java_home = self._environ.get("JAVA_HOME")
        if java_home:
            logger.debug("Ambient Java home from JAVA_HOME: %s", java_home)
            return Path(java_home)

        java = self._which("java")
        if java is None:
            raise InvalidInstallationPath(
                "JAVA_HOME", "JAVA_HOME is not set and no 'java' executable is on PATH"
            )
        home = Path(java).resolve().parent.parent
        logger.debug("Ambient Java home from PATH: %s", home)
        return home
