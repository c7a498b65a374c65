"""Terraform service."""

from __future__ import annotations

from ..common import BaseIacService
from .arguments import TerraformArgumentBuilder
from .provider import TerraformProvider


class TerraformService(BaseIacService[TerraformProvider]):
    """Built Terraform command configuration."""

    def _create_argument_builder(self, provider: TerraformProvider) -> TerraformArgumentBuilder:
        return TerraformArgumentBuilder(provider)

    def _create_default_provider(self) -> TerraformProvider:
        return TerraformProvider(command=self._provider.command)
