"""Terragrunt command synthesis with v0.x and v1.x CLI translation."""

from .arguments import TerragruntArgumentBuilder
from .builder import TerragruntBuilder
from .commands import TERRAGRUNT_COMMANDS, TerragruntCommand
from .flags import (
    LEGACY_FLAG_PREFIX,
    REMOVED_V1_COMMANDS,
    TERRAGRUNT_COMMAND_MAP,
    TERRAGRUNT_FLAG_MAP,
    FlagMapping,
    select_flag,
    translate_command,
)
from .provider import TerragruntProvider
from .service import TerragruntService

__all__ = [
    "LEGACY_FLAG_PREFIX",
    "REMOVED_V1_COMMANDS",
    "TERRAGRUNT_COMMANDS",
    "TERRAGRUNT_COMMAND_MAP",
    "TERRAGRUNT_FLAG_MAP",
    "FlagMapping",
    "TerragruntArgumentBuilder",
    "TerragruntBuilder",
    "TerragruntCommand",
    "TerragruntProvider",
    "TerragruntService",
    "select_flag",
    "translate_command",
]
