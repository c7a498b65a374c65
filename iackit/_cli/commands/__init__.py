"""CLI commands."""

from ._terraform import terraform
from ._terragrunt import terragrunt

__all__ = ["terraform", "terragrunt"]
