"""Settings shared by the IaC runners."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Optional

from pydantic import ConfigDict, Field

from ..exceptions import InvalidInputError
from ..utils import BaseModel, parse_comma_separated, parse_json_object

if TYPE_CHECKING:
    from ..agents import AgentProtocol


def get_optional_int_input(agent: AgentProtocol, name: str) -> Optional[int]:
    """Get an integer input where a blank value means absent.

    Raises:
        InvalidInputError: Value is not an integer.

    """
    value = agent.get_input(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidInputError(name, value, "must be an integer") from None


class SharedIacSettings(BaseModel):
    """Inputs common to every IaC runner."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: str
    """IaC subcommand to run (e.g. ``plan``)."""

    working_directory: str = "."
    """Directory containing the configuration files."""

    terraform_version: str = ""
    """Terraform version to install (``latest``, ``1.9.8``, ``skip``)."""

    terraform_version_file: str = ".terraform-version"
    """File read for the Terraform version when none was given."""

    variables: dict[str, str] = Field(default_factory=dict)
    var_files: list[str] = Field(default_factory=list)
    backend_config: dict[str, str] = Field(default_factory=dict)
    targets: list[str] = Field(default_factory=list)
    auto_approve: bool = False

    plan_file: str = ""
    """Plan file applied by ``apply`` or written by ``plan``."""

    no_color: bool = False
    compact_warnings: bool = False
    parallelism: Annotated[Optional[int], Field(ge=1)] = None
    lock_timeout: str = ""

    refresh: bool = True
    """Disabled only by the literal input value ``false``."""

    reconfigure: bool = False
    migrate_state: bool = False

    dry_run: bool = False
    """Render the command without running it."""

    @classmethod
    def read_inputs(cls, agent: AgentProtocol) -> dict[str, Any]:
        """Read the shared inputs from an agent.

        Raises:
            RequiredInputError: ``command`` was not supplied.
            InvalidInputError: An input could not be parsed.

        """
        return {
            "command": agent.get_input("command", required=True),
            "working_directory": agent.get_input("working-directory") or ".",
            "terraform_version": agent.get_input("terraform-version"),
            "terraform_version_file": agent.get_input("terraform-version-file")
            or ".terraform-version",
            "variables": parse_json_object(agent.get_input("variables")),
            "var_files": parse_comma_separated(agent.get_input("var-files")),
            "backend_config": parse_json_object(agent.get_input("backend-config")),
            "targets": parse_comma_separated(agent.get_input("targets")),
            "auto_approve": agent.get_boolean_input("auto-approve"),
            "plan_file": agent.get_input("plan-file"),
            "no_color": agent.get_boolean_input("no-color"),
            "compact_warnings": agent.get_boolean_input("compact-warnings"),
            "parallelism": get_optional_int_input(agent, "parallelism"),
            "lock_timeout": agent.get_input("lock-timeout"),
            "refresh": agent.get_input("refresh") != "false",
            "reconfigure": agent.get_boolean_input("reconfigure"),
            "migrate_state": agent.get_boolean_input("migrate-state"),
            "dry_run": agent.get_boolean_input("dry-run"),
        }
