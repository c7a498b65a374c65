"""Terraform configuration snapshot."""

from __future__ import annotations

from typing import Literal

from ..common import IacProvider, TerraformCommand


class TerraformProvider(IacProvider):
    """Read-only configuration of a Terraform command."""

    command: TerraformCommand
    executor: Literal["terraform"] = "terraform"
