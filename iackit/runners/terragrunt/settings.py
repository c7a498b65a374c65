"""Terragrunt runner settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Optional

from pydantic import Field

from ...utils import parse_comma_separated, parse_json_object
from ..settings import SharedIacSettings, get_optional_int_input

if TYPE_CHECKING:
    from ...agents import AgentProtocol


class TerragruntSettings(SharedIacSettings):
    """Inputs of the Terragrunt runner."""

    terragrunt_version: str = ""
    terragrunt_version_file: str = ".terragrunt-version"

    run_all: bool = False
    """Run the command against every unit in the stack."""

    terragrunt_config: str = ""
    terragrunt_working_dir: str = ""
    non_interactive: bool = False
    no_auto_init: bool = False
    no_auto_retry: bool = False
    terragrunt_parallelism: Annotated[Optional[int], Field(ge=1)] = None
    include_dirs: list[str] = Field(default_factory=list)
    exclude_dirs: list[str] = Field(default_factory=list)
    ignore_dependency_errors: bool = False
    ignore_external_dependencies: bool = False
    include_external_dependencies: bool = False
    terragrunt_source: str = ""
    source_map: dict[str, str] = Field(default_factory=dict)
    download_dir: str = ""
    iam_role: str = ""

    iam_role_session_name: str = ""
    """Only used together with ``iam_role``."""

    strict_include: bool = False


def get_settings(agent: AgentProtocol) -> TerragruntSettings:
    """Read Terragrunt settings from the inputs of an agent.

    Raises:
        RequiredInputError: ``command`` was not supplied.
        InvalidInputError: An input could not be parsed.

    """
    return TerragruntSettings(
        **TerragruntSettings.read_inputs(agent),
        terragrunt_version=agent.get_input("terragrunt-version"),
        terragrunt_version_file=agent.get_input("terragrunt-version-file")
        or ".terragrunt-version",
        run_all=agent.get_boolean_input("run-all"),
        terragrunt_config=agent.get_input("terragrunt-config"),
        terragrunt_working_dir=agent.get_input("terragrunt-working-dir"),
        non_interactive=agent.get_boolean_input("non-interactive"),
        no_auto_init=agent.get_boolean_input("no-auto-init"),
        no_auto_retry=agent.get_boolean_input("no-auto-retry"),
        terragrunt_parallelism=get_optional_int_input(agent, "terragrunt-parallelism"),
        include_dirs=parse_comma_separated(agent.get_input("include-dirs")),
        exclude_dirs=parse_comma_separated(agent.get_input("exclude-dirs")),
        ignore_dependency_errors=agent.get_boolean_input("ignore-dependency-errors"),
        ignore_external_dependencies=agent.get_boolean_input("ignore-external-dependencies"),
        include_external_dependencies=agent.get_boolean_input(
            "include-external-dependencies"
        ),
        terragrunt_source=agent.get_input("terragrunt-source"),
        source_map=parse_json_object(agent.get_input("source-map")),
        download_dir=agent.get_input("download-dir"),
        iam_role=agent.get_input("iam-role"),
        iam_role_session_name=agent.get_input("iam-role-session-name"),
        strict_include=agent.get_boolean_input("strict-include"),
    )
