"""Terraform runner settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..settings import SharedIacSettings

if TYPE_CHECKING:
    from ...agents import AgentProtocol


class TerraformSettings(SharedIacSettings):
    """Inputs of the Terraform runner."""


def get_settings(agent: AgentProtocol) -> TerraformSettings:
    """Read Terraform settings from the inputs of an agent.

    Raises:
        RequiredInputError: ``command`` was not supplied.
        InvalidInputError: An input could not be parsed.

    """
    return TerraformSettings(**TerraformSettings.read_inputs(agent))
