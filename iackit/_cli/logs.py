"""iackit CLI logging setup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional, TextIO

import coloredlogs
from humanfriendly.terminal import terminal_supports_colors  # type: ignore
from typing_extensions import TypedDict

from .._logging import LogLevels
from ..compat import cached_property

LOGGER = logging.getLogger("iackit")

LOG_FORMAT = "[iackit] %(message)s"
LOG_FORMAT_VERBOSE = logging.BASIC_FORMAT
LOG_FIELD_STYLES: dict[str, dict[str, Any]] = {
    "asctime": {},
    "hostname": {},
    "levelname": {},
    "message": {},
    "name": {},
    "prefix": {},
    "programname": {},
}
LOG_LEVEL_STYLES: dict[str, dict[str, Any]] = {
    "critical": {"color": "red", "bold": True},
    "debug": {"color": "green"},
    "error": {"color": "red"},
    "info": {},
    "success": {"color": "green", "bold": True},
    "verbose": {"color": "cyan"},
    "warning": {"color": 214},
}


class LogSettingsEnvTypeDef(TypedDict):
    """Type definition for :attr:`iackit._cli.logs.LogSettings._env` attribute."""

    field_styles: Optional[str]
    fmt: Optional[str]
    level_styles: Optional[str]


class LogSettings:
    """CLI log settings."""

    _env: LogSettingsEnvTypeDef

    def __init__(self, *, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
        """Instantiate class.

        Args:
            debug: Debug level.
            no_color: Disable color in iackit's logs.
            verbose: Whether to display verbose logs.

        """
        self._env = {
            "field_styles": os.getenv("IACKIT_LOG_FIELD_STYLES"),
            "fmt": os.getenv("IACKIT_LOG_FORMAT"),
            "level_styles": os.getenv("IACKIT_LOG_LEVEL_STYLES"),
        }
        self.debug = debug
        self.no_color = no_color
        self.verbose = verbose

    @property
    def coloredlogs(self) -> dict[str, Any]:
        """Keyword arguments for :func:`coloredlogs.install`."""
        return {
            "field_styles": self.field_styles,
            "fmt": self.fmt,
            "isatty": None if self.no_color else self.supports_colors,
            "level_styles": self.level_styles,
            "stream": self.stream,
        }

    @cached_property
    def fmt(self) -> str:
        """Log record format.

        ``IACKIT_LOG_FORMAT`` takes precedence when set.

        """
        fmt = self._env["fmt"]
        if fmt:
            return fmt
        if self.debug or self.verbose:
            return LOG_FORMAT_VERBOSE
        return LOG_FORMAT

    @cached_property
    def field_styles(self) -> dict[str, Any]:
        """Log field styles updated from ``IACKIT_LOG_FIELD_STYLES``."""
        if self.no_color:
            return {}
        result = LOG_FIELD_STYLES.copy()
        if self._env["field_styles"]:
            result.update(
                coloredlogs.parse_encoded_styles(self._env["field_styles"])  # type: ignore
            )
        return result

    @cached_property
    def level_styles(self) -> dict[str, Any]:
        """Log level styles updated from ``IACKIT_LOG_LEVEL_STYLES``."""
        if self.no_color:
            return {}
        result = LOG_LEVEL_STYLES.copy()
        if self._env["level_styles"]:
            result.update(
                coloredlogs.parse_encoded_styles(self._env["level_styles"])  # type: ignore
            )
        return result

    @cached_property
    def log_level(self) -> LogLevels:
        """Log level to use."""
        if self.debug:
            return LogLevels.DEBUG
        if self.verbose:
            return LogLevels.VERBOSE
        return LogLevels.INFO

    @property
    def stream(self) -> TextIO:
        """Stream that will be logged to."""
        return sys.stdout

    @cached_property
    def supports_colors(self) -> bool:
        """Whether ``stream`` supports ANSI escape sequences."""
        if os.getenv("GITHUB_ACTIONS") == "true":
            # the runner log viewer renders ANSI colors without a TTY
            return True
        return terminal_supports_colors(self.stream)  # type: ignore


def setup_logging(*, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
    """Configure log settings for the iackit CLI.

    Keyword Args:
        debug: Debug level.
        no_color: Whether to use colorized logs.
        verbose: Use verbose logging.

    """
    settings = LogSettings(debug=debug, no_color=no_color, verbose=verbose)

    coloredlogs.install(settings.log_level, logger=LOGGER, **settings.coloredlogs)
    LOGGER.debug("iackit log level: %s", LOGGER.getEffectiveLevel())
    LOGGER.debug("initialized logging for iackit")
