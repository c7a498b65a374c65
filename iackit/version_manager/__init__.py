"""Tool version resolution, installation and detection."""

from .detector import (
    TERRAGRUNT_VERSION_REGEX,
    VersionDetector,
    is_v1_or_later,
)
from .models import SemVer, VersionSource, VersionSpec
from .protocols import VersionInstaller, VersionResolver

__all__ = [
    "TERRAGRUNT_VERSION_REGEX",
    "SemVer",
    "VersionDetector",
    "VersionInstaller",
    "VersionResolver",
    "VersionSource",
    "VersionSpec",
    "is_v1_or_later",
]
