"""Terragrunt commands."""

from __future__ import annotations

from enum import Enum
from typing import Final


class TerragruntCommand(str, Enum):
    """Supported Terragrunt commands.

    Includes every Terraform command, which Terragrunt passes through.

    """

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
    RUN_ALL = "run-all"
    GRAPH_DEPENDENCIES = "graph-dependencies"
    HCLFMT = "hclfmt"
    AWS_PROVIDER_PATCH = "aws-provider-patch"
    RENDER_JSON = "render-json"
    OUTPUT_MODULE_GROUPS = "output-module-groups"
    VALIDATE_INPUTS = "validate-inputs"


TERRAGRUNT_COMMANDS: Final[tuple[str, ...]] = tuple(i.value for i in TerragruntCommand)
