"""Terraform runner."""

from .runner import TerraformRunner
from .settings import TerraformSettings, get_settings

__all__ = ["TerraformRunner", "TerraformSettings", "get_settings"]
