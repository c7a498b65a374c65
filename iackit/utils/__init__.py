"""Utility functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel as _BaseModel

from ..exceptions import InvalidConfigurationError
from ._parsers import parse_comma_separated, parse_json_object

if TYPE_CHECKING:
    from collections.abc import MutableSequence

__all__ = [
    "BaseModel",
    "add_unique",
    "parse_comma_separated",
    "parse_json_object",
    "validate_positive_int",
    "validate_string_input",
]


class BaseModel(_BaseModel):
    """Base class for iackit models."""


def add_unique(items: MutableSequence[str], value: str) -> bool:
    """Append ``value`` to ``items`` unless it is already present.

    Returns:
        Whether the value was appended.

    """
    if value in items:
        return False
    items.append(value)
    return True


def validate_string_input(value: Any, field_name: str = "input") -> str:
    """Ensure a value is a non-empty string.

    Args:
        value: Value to check.
        field_name: Name used in the error message.

    Raises:
        InvalidConfigurationError: Value is not a string or is empty.

    """
    if not isinstance(value, str):
        raise InvalidConfigurationError(field_name, value, "must be a string")
    if not value.strip():
        raise InvalidConfigurationError(field_name, value, "cannot be empty")
    return value


def validate_positive_int(value: Any, field_name: str) -> int:
    """Ensure a value is an integer of at least 1.

    ``bool`` is rejected even though it is a subclass of ``int``.

    Raises:
        InvalidConfigurationError: Value is not an integer or is less than 1.

    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(field_name, value, "must be an integer")
    if value < 1:
        raise InvalidConfigurationError(field_name, value, "must be at least 1")
    return value
