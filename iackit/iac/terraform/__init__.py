"""Terraform command synthesis."""

from ..common import TERRAFORM_COMMANDS, TerraformCommand
from .arguments import TerraformArgumentBuilder
from .builder import TerraformBuilder
from .provider import TerraformProvider
from .service import TerraformService

__all__ = [
    "TERRAFORM_COMMANDS",
    "TerraformArgumentBuilder",
    "TerraformBuilder",
    "TerraformCommand",
    "TerraformProvider",
    "TerraformService",
]
