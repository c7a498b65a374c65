"""Parse raw string inputs."""

from __future__ import annotations

import json
import logging
from typing import Any

LOGGER = logging.getLogger(__name__.replace("._", "."))


def parse_comma_separated(value: str | None) -> list[str]:
    """Split a comma-separated string into a list of trimmed, non-empty items."""
    if not value or not value.strip():
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_json_object(value: str | None) -> dict[str, str]:
    """Parse a JSON object into a mapping of strings.

    Values that are not strings are converted to their JSON text so the result
    can be used directly as ``key=value`` CLI arguments. Anything that is not a
    JSON object is logged and treated as empty.

    """
    if not value or value.strip() in ("", "{}"):
        return {}
    try:
        data: Any = json.loads(value)
    except json.JSONDecodeError:
        LOGGER.warning("failed to parse JSON: %s", value)
        return {}
    if not isinstance(data, dict):
        LOGGER.warning("expected a JSON object but got %s: %s", type(data).__name__, value)
        return {}
    return {str(key): val if isinstance(val, str) else json.dumps(val) for key, val in data.items()}
