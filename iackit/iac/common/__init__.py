"""Configuration, argument rendering and formatting shared by every IaC tool."""

from .arguments import CommandBuilder, render_shared_arguments
from .builder import BaseIacBuilder, transfer_shared_state
from .commands import (
    AUTO_APPROVE_COMMANDS,
    TARGET_COMMANDS,
    TERRAFORM_COMMANDS,
    VARIABLE_COMMANDS,
    TerraformCommand,
    command_name,
    is_terraform_command,
)
from .formatter import IacStringFormatter, escape_arg
from .provider import IacProvider
from .service import BaseIacService

__all__ = [
    "AUTO_APPROVE_COMMANDS",
    "TARGET_COMMANDS",
    "TERRAFORM_COMMANDS",
    "VARIABLE_COMMANDS",
    "BaseIacBuilder",
    "BaseIacService",
    "CommandBuilder",
    "IacProvider",
    "IacStringFormatter",
    "TerraformCommand",
    "command_name",
    "escape_arg",
    "is_terraform_command",
    "render_shared_arguments",
    "transfer_shared_state",
]
