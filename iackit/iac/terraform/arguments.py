"""Build command-line arguments for Terraform."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import command_name, render_shared_arguments

if TYPE_CHECKING:
    from .provider import TerraformProvider


class TerraformArgumentBuilder:
    """Render a :class:`~iackit.iac.terraform.provider.TerraformProvider` as CLI tokens.

    Terraform commands have the same shape for every Terraform version so
    only the shared argument categories are rendered.

    """

    def __init__(self, provider: TerraformProvider) -> None:
        """Instantiate class."""
        self.provider = provider

    def to_command_args(self) -> list[str]:
        """Return the arguments that follow the command."""
        return render_shared_arguments(self.provider)

    def build_command(self) -> list[str]:
        """Return the executor, the command and its arguments."""
        return [
            self.provider.executor,
            command_name(self.provider.command),
            *self.to_command_args(),
        ]
