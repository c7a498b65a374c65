"""Set package version."""

from __future__ import annotations

import logging

from ._logging import IacKitLogger, LogLevels  # noqa: F401

logging.setLoggerClass(IacKitLogger)

__version__: str = "0.1.0"
"""Version of the Python package presented as a :class:`string`."""

__version_tuple__: tuple[int, int, int] | tuple[int, int, int, str] = (0, 1, 0)
"""Version of the Python package presented as a :class:`tuple`."""
