"""Version models."""

from __future__ import annotations

from typing import Annotated, Literal

from packaging.version import Version
from pydantic import ConfigDict, Field

from ..utils import BaseModel

VersionSource = Literal["input", "file", "latest"]


class SemVer(BaseModel):
    """Parsed ``major.minor.patch`` version of an installed tool."""

    model_config = ConfigDict(frozen=True)

    major: Annotated[int, Field(ge=0)]
    minor: Annotated[int, Field(ge=0)]
    patch: Annotated[int, Field(ge=0)]
    raw: str
    """The version as ``major.minor.patch``."""

    @classmethod
    def from_version(cls, version: Version) -> SemVer:
        """Create from a :class:`packaging.version.Version`.

        Pre-release and local segments are dropped from ``raw``.

        """
        major, minor, patch = version.major, version.minor, version.micro
        return cls(major=major, minor=minor, patch=patch, raw=f"{major}.{minor}.{patch}")

    def __str__(self) -> str:
        """Return the version string."""
        return self.raw


class VersionSpec(BaseModel):
    """Result of resolving a requested version."""

    model_config = ConfigDict(frozen=True)

    input: str
    """Version as it was requested (e.g. ``latest``, ``1.9.8``)."""

    resolved: str
    """Exact version to install."""

    source: VersionSource
    """Where the version came from."""
