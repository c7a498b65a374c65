"""Terragrunt runner."""

from .runner import TerragruntRunner
from .settings import TerragruntSettings, get_settings

__all__ = ["TerragruntRunner", "TerragruntSettings", "get_settings"]
