"""Terragrunt v0.x and v1.x flag and command spellings.

Terragrunt v1.x dropped the ``--terragrunt-`` prefix from every flag,
renamed several flags and replaced some commands with multi-word
equivalents. These tables are the only place either spelling is written
down and must follow the upstream CLI.

https://terragrunt.gruntwork.io/docs/migrate/cli-redesign/

"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, NamedTuple

from ...exceptions import UnknownFlagKeyError, UnsupportedCommandError

LEGACY_FLAG_PREFIX: Final = "--terragrunt-"


class FlagMapping(NamedTuple):
    """Spelling of one flag in each major version."""

    v0: str
    v1: str


TERRAGRUNT_FLAG_MAP: Final[Mapping[str, FlagMapping]] = MappingProxyType(
    {
        "config": FlagMapping("--terragrunt-config", "--config"),
        "working_dir": FlagMapping("--terragrunt-working-dir", "--working-dir"),
        "no_auto_init": FlagMapping("--terragrunt-no-auto-init", "--no-auto-init"),
        "no_auto_retry": FlagMapping("--terragrunt-no-auto-retry", "--no-auto-retry"),
        "non_interactive": FlagMapping("--terragrunt-non-interactive", "--non-interactive"),
        "parallelism": FlagMapping("--terragrunt-parallelism", "--parallelism"),
        "include_dir": FlagMapping("--terragrunt-include-dir", "--queue-include-dir"),
        "exclude_dir": FlagMapping("--terragrunt-exclude-dir", "--queue-exclude-dir"),
        "ignore_dependency_errors": FlagMapping(
            "--terragrunt-ignore-dependency-errors", "--queue-ignore-errors"
        ),
        "ignore_external_dependencies": FlagMapping(
            "--terragrunt-ignore-external-dependencies", "--queue-exclude-external"
        ),
        "include_external_dependencies": FlagMapping(
            "--terragrunt-include-external-dependencies", "--queue-include-external"
        ),
        "source": FlagMapping("--terragrunt-source", "--source"),
        "source_map": FlagMapping("--terragrunt-source-map", "--source-map"),
        "download_dir": FlagMapping("--terragrunt-download-dir", "--download-dir"),
        "iam_role": FlagMapping("--terragrunt-iam-role", "--iam-role"),
        "iam_role_session_name": FlagMapping(
            "--terragrunt-iam-role-session-name", "--iam-role-session-name"
        ),
        "strict_include": FlagMapping("--terragrunt-strict-include", "--queue-strict-include"),
    }
)
"""Semantic flag name to its v0.x and v1.x spelling."""

TERRAGRUNT_COMMAND_MAP: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "run-all": ("run", "--all"),
        "graph-dependencies": ("dag", "graph"),
        "hclfmt": ("hcl", "fmt"),
        "render-json": ("render", "--json", "-w"),
        "output-module-groups": ("find", "--dag", "--json"),
        "validate-inputs": ("validate", "inputs"),
    }
)
"""v0.x command to the tokens of its v1.x replacement."""

REMOVED_V1_COMMANDS: Final[frozenset[str]] = frozenset({"aws-provider-patch"})
"""v0.x commands with no v1.x equivalent."""


def select_flag(flag_key: str, major_version: int) -> str:
    """Return the spelling of a flag for a Terragrunt major version.

    Args:
        flag_key: Semantic key from :data:`TERRAGRUNT_FLAG_MAP`.
        major_version: Installed Terragrunt major version.

    Raises:
        UnknownFlagKeyError: ``flag_key`` is not in the table.

    """
    try:
        mapping = TERRAGRUNT_FLAG_MAP[flag_key]
    except KeyError:
        raise UnknownFlagKeyError(flag_key) from None
    return mapping.v1 if major_version >= 1 else mapping.v0


def translate_command(command: str, major_version: int) -> list[str]:
    """Return the tokens that invoke a command for a Terragrunt major version.

    Args:
        command: v0.x command name.
        major_version: Installed Terragrunt major version.

    Raises:
        UnsupportedCommandError: The command was removed in v1.x.

    """
    if major_version < 1:
        return [command]
    if command in REMOVED_V1_COMMANDS:
        raise UnsupportedCommandError(command, major_version)
    return list(TERRAGRUNT_COMMAND_MAP.get(command, (command,)))
