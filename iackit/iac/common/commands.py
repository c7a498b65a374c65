"""Terraform-compatible commands and the argument categories they support."""

from __future__ import annotations

from enum import Enum
from typing import Final


class TerraformCommand(str, Enum):
    """Supported Terraform commands."""

    INIT = "init"
    VALIDATE = "validate"
    FMT = "fmt"
    PLAN = "plan"
    APPLY = "apply"
    DESTROY = "destroy"
    OUTPUT = "output"
    SHOW = "show"
    STATE = "state"
    IMPORT = "import"
    REFRESH = "refresh"
    TAINT = "taint"
    UNTAINT = "untaint"
    WORKSPACE = "workspace"


TERRAFORM_COMMANDS: Final[tuple[str, ...]] = tuple(i.value for i in TerraformCommand)

AUTO_APPROVE_COMMANDS: Final[frozenset[str]] = frozenset({"apply", "destroy"})
"""Commands that accept ``-auto-approve``."""

TARGET_COMMANDS: Final[frozenset[str]] = frozenset(
    {"plan", "apply", "destroy", "refresh", "taint", "untaint"}
)
"""Commands that accept ``-target``."""

VARIABLE_COMMANDS: Final[frozenset[str]] = frozenset(
    {"plan", "apply", "destroy", "refresh", "import"}
)
"""Commands that accept ``-var`` and ``-var-file``."""


def command_name(command: str | Enum) -> str:
    """Return the CLI spelling of a command enum member or string."""
    if isinstance(command, Enum):
        return str(command.value)
    return command


def is_terraform_command(command: str | Enum) -> bool:
    """Check if a command is one of the Terraform-compatible commands."""
    return command_name(command) in TERRAFORM_COMMANDS
