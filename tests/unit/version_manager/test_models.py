"""Test iackit.version_manager.models."""

from __future__ import annotations

import pytest
from packaging.version import Version
from pydantic import ValidationError

from iackit.version_manager import SemVer, VersionSpec


class TestSemVer:
    """Test SemVer."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("0.75.10", (0, 75, 10, "0.75.10")),
            ("1.0.0", (1, 0, 0, "1.0.0")),
            ("1.2", (1, 2, 0, "1.2.0")),
            ("1.9.0rc1", (1, 9, 0, "1.9.0")),
        ],
    )
    def test_from_version(self, expected: tuple[int, int, int, str], version: str) -> None:
        """Test from_version."""
        result = SemVer.from_version(Version(version))
        assert (result.major, result.minor, result.patch, result.raw) == expected

    def test___str__(self) -> None:
        """Test __str__."""
        assert str(SemVer(major=1, minor=9, patch=8, raw="1.9.8")) == "1.9.8"

    def test_frozen(self) -> None:
        """Test the model is immutable."""
        obj = SemVer(major=1, minor=9, patch=8, raw="1.9.8")
        with pytest.raises(ValidationError):
            obj.major = 2  # type: ignore

    def test_negative(self) -> None:
        """Test negative components are rejected."""
        with pytest.raises(ValidationError):
            SemVer(major=-1, minor=0, patch=0, raw="-1.0.0")


class TestVersionSpec:
    """Test VersionSpec."""

    def test_source(self) -> None:
        """Test only known sources are accepted."""
        assert VersionSpec(input="latest", resolved="1.9.8", source="latest").source == "latest"
        with pytest.raises(ValidationError):
            VersionSpec(input="1.9.8", resolved="1.9.8", source="cache")  # type: ignore
