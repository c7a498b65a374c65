"""Build command-line arguments for Terragrunt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import command_name, is_terraform_command, render_shared_arguments
from .flags import select_flag, translate_command

if TYPE_CHECKING:
    from .provider import TerragruntProvider


class TerragruntArgumentBuilder:
    """Render a :class:`~iackit.iac.terragrunt.provider.TerragruntProvider` as CLI tokens.

    Terragrunt global flags come first, spelled for the provider's major
    version, followed by the shared Terraform arguments when the command is
    passed through to Terraform.

    """

    def __init__(self, provider: TerragruntProvider) -> None:
        """Instantiate class."""
        self.provider = provider

    def _flag(self, flag_key: str) -> str:
        return select_flag(flag_key, self.provider.terragrunt_major_version)

    def to_command_args(self) -> list[str]:
        """Return the arguments that follow the command."""
        args = self.render_global_arguments()
        if is_terraform_command(self.provider.command):
            args.extend(render_shared_arguments(self.provider))
        return args

    def build_command(self) -> list[str]:
        """Return the executor, the command tokens and the arguments.

        Raises:
            UnsupportedCommandError: The command was removed in the installed
                major version.

        """
        args = self.to_command_args()
        command = command_name(self.provider.command)
        major_version = self.provider.terragrunt_major_version
        if self.provider.run_all and is_terraform_command(command):
            return [
                self.provider.executor,
                *translate_command("run-all", major_version),
                command,
                *args,
            ]
        return [self.provider.executor, *translate_command(command, major_version), *args]

    def render_global_arguments(self) -> list[str]:
        """Render the Terragrunt-only flags."""
        provider = self.provider
        args: list[str] = []
        if provider.terragrunt_config:
            args.extend([self._flag("config"), provider.terragrunt_config])
        if provider.terragrunt_working_dir:
            args.extend([self._flag("working_dir"), provider.terragrunt_working_dir])
        if provider.no_auto_init:
            args.append(self._flag("no_auto_init"))
        if provider.no_auto_retry:
            args.append(self._flag("no_auto_retry"))
        if provider.non_interactive:
            args.append(self._flag("non_interactive"))
        if provider.run_all and provider.terragrunt_parallelism is not None:
            args.extend([self._flag("parallelism"), str(provider.terragrunt_parallelism)])
        for directory in provider.include_dirs:
            args.extend([self._flag("include_dir"), directory])
        for directory in provider.exclude_dirs:
            args.extend([self._flag("exclude_dir"), directory])
        if provider.ignore_dependency_errors:
            args.append(self._flag("ignore_dependency_errors"))
        if provider.ignore_external_dependencies:
            args.append(self._flag("ignore_external_dependencies"))
        if provider.include_external_dependencies:
            args.append(self._flag("include_external_dependencies"))
        if provider.terragrunt_source:
            args.extend([self._flag("source"), provider.terragrunt_source])
        for original, replacement in provider.source_map.items():
            args.extend([self._flag("source_map"), f"{original}={replacement}"])
        if provider.download_dir:
            args.extend([self._flag("download_dir"), provider.download_dir])
        if provider.iam_role:
            args.extend([self._flag("iam_role"), provider.iam_role])
            if provider.iam_role_session_name:
                args.extend([self._flag("iam_role_session_name"), provider.iam_role_session_name])
        if provider.strict_include:
            args.append(self._flag("strict_include"))
        return args
