"""Shared fixtures for jdkregistry tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import create_java_home


@pytest.fixture
def oracle_jdk8(tmp_path: Path) -> Path:
    """An Oracle JDK 8 home, as the build is expected to run under."""
    return create_java_home(tmp_path, "jdk1.8.0_202", java_version="1.8.0_202")


@pytest.fixture
def oracle_jdk7(tmp_path: Path) -> Path:
    """An Oracle JDK 7 home with ``tools.jar``; pre-9 Oracle builds have no IMPLEMENTOR."""
    return create_java_home(
        tmp_path, "jdk1.7.0_80", java_version="1.7.0_80",
        implementor=None, build_type="commercial", tools_jar=True,
    )


@pytest.fixture
def openjdk7(tmp_path: Path) -> Path:
    """An OpenJDK 7 home."""
    return create_java_home(tmp_path, "openjdk-7", java_version="1.7.0_261", implementor=None)
