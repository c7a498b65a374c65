"""Detect the installed version of a tool."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final, Optional, cast

from packaging.version import Version

from ..exceptions import VersionDetectionError
from .models import SemVer

if TYPE_CHECKING:
    from .._logging import IacKitLogger
    from ..agents import ToolAgentProtocol

LOGGER = cast("IacKitLogger", logging.getLogger(__name__))

TERRAGRUNT_VERSION_REGEX: Final = re.compile(
    r"terragrunt\s+version\s+v(?P<version>\d+\.\d+\.\d+)", re.IGNORECASE
)


class VersionDetector:
    """Detect the version of a tool by running ``<tool> --version``.

    The result is cached so the tool is only run once per instance.

    """

    def __init__(self, tool: str, pattern: re.Pattern[str]) -> None:
        """Instantiate class.

        Args:
            tool: Name of the executable.
            pattern: Regex with a ``version`` group that matches the output of
                ``<tool> --version``.

        """
        self._cache: Optional[SemVer] = None
        self.pattern = pattern
        self.tool = tool

    @classmethod
    def terragrunt(cls) -> VersionDetector:
        """Create a detector for Terragrunt."""
        return cls("terragrunt", TERRAGRUNT_VERSION_REGEX)

    def clear_cache(self) -> None:
        """Forget the detected version."""
        self._cache = None

    def detect(self, agent: ToolAgentProtocol) -> SemVer:
        """Detect the installed version.

        Args:
            agent: Agent used to run the tool.

        Raises:
            VersionDetectionError: The tool exited non-zero or its output did
                not contain a version.

        """
        if self._cache:
            return self._cache
        result = agent.exec(self.tool, ["--version"], silent=True, ignore_return_code=True)
        if result.exit_code != 0:
            raise VersionDetectionError(
                self.tool,
                f"{self.tool} --version failed (exit {result.exit_code}): {result.stderr}",
            )
        self._cache = self.parse(result.stdout)
        LOGGER.debug("detected %s version %s", self.tool, self._cache)
        return self._cache

    def parse(self, output: str) -> SemVer:
        """Parse the output of ``<tool> --version``.

        Raises:
            VersionDetectionError: Output did not contain a version.

        """
        match = self.pattern.search(output)
        if not match:
            raise VersionDetectionError(
                self.tool, f"failed to parse version from output: {output[:200]}"
            )
        return SemVer.from_version(Version(match.group("version")))


def is_v1_or_later(version: SemVer) -> bool:
    """Whether a Terragrunt version uses the redesigned (v1) CLI."""
    return version.major >= 1
