"""Runners that read inputs from an agent, build a command and run it."""

from .base import RunnerBase, RunnerResult
from .helpers import configure_shared_iac_builder, execute_iac_command, setup_tool_version
from .settings import SharedIacSettings
from .terraform import TerraformRunner, TerraformSettings
from .terragrunt import TerragruntRunner, TerragruntSettings

__all__ = [
    "RunnerBase",
    "RunnerResult",
    "SharedIacSettings",
    "TerraformRunner",
    "TerraformSettings",
    "TerragruntRunner",
    "TerragruntSettings",
    "configure_shared_iac_builder",
    "execute_iac_command",
    "setup_tool_version",
]
