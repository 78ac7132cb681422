"""Tests for JavaVersion parsing, ordering, and rendering.

Both the legacy ``1.N`` scheme and the plain ``N`` scheme must normalize
to the same major version.
"""

from __future__ import annotations

import pytest

from jdkregistry.core.version import JavaVersion


class TestParse:
    """Tests for ``JavaVersion.parse``."""

    @pytest.mark.parametrize(
        ("raw", "major"),
        [
            ("1.7", 7),
            ("7", 7),
            ("1.7.0_80", 7),
            ("1.8", 8),
            ("1.8.0_202", 8),
            ("9", 9),
            ("10.0.1", 10),
            ("11.0.2", 11),
            ("17", 17),
            ("21-ea", 21),
            (" 1.8 ", 8),
        ],
    )
    def test_parses_both_numbering_schemes(self, raw: str, major: int) -> None:
        assert JavaVersion.parse(raw).major == major

    def test_parses_int(self) -> None:
        assert JavaVersion.parse(11) == JavaVersion(11)

    def test_returns_existing_instance(self) -> None:
        version = JavaVersion(8)
        assert JavaVersion.parse(version) is version

    @pytest.mark.parametrize("raw", ["", "java", "0", "1.", "x.8", "-1"])
    def test_rejects_garbage(self, raw: str) -> None:
        with pytest.raises(ValueError, match="Invalid Java version"):
            JavaVersion.parse(raw)

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            JavaVersion.parse(True)

    def test_rejects_non_positive_major(self) -> None:
        with pytest.raises(ValueError, match="Invalid Java major version"):
            JavaVersion(0)


class TestOrderingAndRendering:
    """Comparison and string forms."""

    def test_legacy_and_plain_forms_are_equal(self) -> None:
        assert JavaVersion.parse("1.8") == JavaVersion.parse("8")
        assert hash(JavaVersion.parse("1.8")) == hash(JavaVersion.parse("8"))

    def test_ordering_by_major(self) -> None:
        assert JavaVersion.parse("1.7") < JavaVersion.parse("1.8") < JavaVersion.parse("11")
        assert JavaVersion.parse("9") > JavaVersion.parse("1.8.0_202")

    def test_str_uses_legacy_form_up_to_8(self) -> None:
        assert str(JavaVersion(7)) == "1.7"
        assert str(JavaVersion(8)) == "1.8"
        assert str(JavaVersion(9)) == "9"
        assert str(JavaVersion(17)) == "17"

    def test_repr(self) -> None:
        assert repr(JavaVersion(7)) == "JavaVersion('1.7')"
