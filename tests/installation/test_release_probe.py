"""Tests for ReleaseFileProbe against fake Java homes on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from jdkregistry.core.version import JavaVersion
from jdkregistry.exceptions import InvalidInstallationPath
from jdkregistry.installation import JavaInstallation, ReleaseFileProbe
from jdkregistry.installation.release_probe import display_name_for, parse_release_file

from tests.helpers import create_java_home


class TestParseReleaseFile:
    """Tests for ``parse_release_file``."""

    def test_quoted_values(self) -> None:
        content = 'JAVA_VERSION="1.8.0_202"\nIMPLEMENTOR="Oracle Corporation"\n'
        assert parse_release_file(content) == {
            "JAVA_VERSION": "1.8.0_202",
            "IMPLEMENTOR": "Oracle Corporation",
        }

    def test_ignores_blank_and_comment_lines(self) -> None:
        content = "# generated\n\nOS_ARCH=amd64\n"
        assert parse_release_file(content) == {"OS_ARCH": "amd64"}


class TestDisplayName:
    """Tests for ``display_name_for``."""

    def test_vendor_jdk(self) -> None:
        assert display_name_for("Oracle", True, JavaVersion(7)) == "Oracle JDK 7"

    def test_vendor_jre(self) -> None:
        assert display_name_for("Oracle", False, JavaVersion(8)) == "Oracle JRE 8"

    def test_openjdk(self) -> None:
        assert display_name_for("OpenJDK", True, JavaVersion(7)) == "OpenJDK 7"
        assert display_name_for("OpenJDK", False, JavaVersion(7)) == "OpenJDK JRE 7"


class TestCheckJdk:
    """Tests for ``ReleaseFileProbe.check_jdk``."""

    def test_oracle_jdk8(self, oracle_jdk8: Path) -> None:
        result = ReleaseFileProbe().check_jdk(oracle_jdk8)
        assert result.java_version == JavaVersion(8)
        assert result.display_name == "Oracle JDK 8"

    def test_legacy_oracle_jdk7_without_implementor(self, oracle_jdk7: Path) -> None:
        result = ReleaseFileProbe().check_jdk(oracle_jdk7)
        assert result.java_version == JavaVersion(7)
        assert result.display_name == "Oracle JDK 7"

    def test_openjdk7(self, openjdk7: Path) -> None:
        assert ReleaseFileProbe().check_jdk(openjdk7).display_name == "OpenJDK 7"

    def test_temurin(self, tmp_path: Path) -> None:
        home = create_java_home(
            tmp_path, "temurin-17", java_version="17.0.9", implementor="Eclipse Adoptium",
        )
        result = ReleaseFileProbe().check_jdk(home)
        assert result.java_version == JavaVersion(17)
        assert result.display_name == "Eclipse Temurin JDK 17"

    def test_unknown_implementor_used_verbatim(self, tmp_path: Path) -> None:
        home = create_java_home(tmp_path, "acme", java_version="11.0.2", implementor="Acme")
        assert ReleaseFileProbe().check_jdk(home).display_name == "Acme JDK 11"

    def test_jre(self, tmp_path: Path) -> None:
        home = create_java_home(tmp_path, "jre8", jdk=False)
        assert ReleaseFileProbe().check_jdk(home).display_name == "Oracle JRE 8"

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidInstallationPath, match="does not exist"):
            ReleaseFileProbe().check_jdk(tmp_path / "missing")

    def test_missing_java_executable(self, tmp_path: Path) -> None:
        (tmp_path / "not-a-jdk").mkdir()
        with pytest.raises(InvalidInstallationPath, match="bin/java"):
            ReleaseFileProbe().check_jdk(tmp_path / "not-a-jdk")

    def test_missing_release_file(self, oracle_jdk8: Path) -> None:
        (oracle_jdk8 / "release").unlink()
        with pytest.raises(InvalidInstallationPath, match="unreadable release file"):
            ReleaseFileProbe().check_jdk(oracle_jdk8)

    def test_release_file_without_version(self, oracle_jdk8: Path) -> None:
        (oracle_jdk8 / "release").write_text('IMPLEMENTOR="Oracle Corporation"\n')
        with pytest.raises(InvalidInstallationPath, match="JAVA_VERSION"):
            ReleaseFileProbe().check_jdk(oracle_jdk8)

    def test_unparseable_version(self, oracle_jdk8: Path) -> None:
        (oracle_jdk8 / "release").write_text('JAVA_VERSION="unknown"\n')
        with pytest.raises(InvalidInstallationPath, match="Invalid Java version"):
            ReleaseFileProbe().check_jdk(oracle_jdk8)


class TestDescribeCurrent:
    """Tests for ``ReleaseFileProbe.describe_current``."""

    def test_populates_installation(self, oracle_jdk8: Path) -> None:
        installation = JavaInstallation(True, oracle_jdk8)
        ReleaseFileProbe().describe_current(installation)
        assert installation.display_name == "Oracle JDK 8"
        assert installation.java_version == JavaVersion(8)
