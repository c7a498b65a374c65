"""Terragrunt service."""

from __future__ import annotations

from typing import Optional

from ..common import BaseIacService
from .arguments import TerragruntArgumentBuilder
from .provider import TerragruntProvider


class TerragruntService(BaseIacService[TerragruntProvider]):
    """Built Terragrunt command configuration."""

    def _create_argument_builder(self, provider: TerragruntProvider) -> TerragruntArgumentBuilder:
        return TerragruntArgumentBuilder(provider)

    def _create_default_provider(self) -> TerragruntProvider:
        return TerragruntProvider(command=self._provider.command)

    @property
    def terragrunt_config(self) -> Optional[str]:
        """Value of the ``config`` flag."""
        return self._provider.terragrunt_config

    @property
    def terragrunt_working_dir(self) -> Optional[str]:
        """Value of the ``working-dir`` flag."""
        return self._provider.terragrunt_working_dir

    @property
    def run_all(self) -> bool:
        """Whether the command runs against every module in the stack."""
        return self._provider.run_all

    @property
    def no_auto_init(self) -> bool:
        """Whether automatic ``init`` is disabled."""
        return self._provider.no_auto_init

    @property
    def no_auto_retry(self) -> bool:
        """Whether automatic retries are disabled."""
        return self._provider.no_auto_retry

    @property
    def non_interactive(self) -> bool:
        """Whether prompts are disabled."""
        return self._provider.non_interactive

    @property
    def terragrunt_parallelism(self) -> Optional[int]:
        """Number of modules processed concurrently by ``run-all``."""
        return self._provider.terragrunt_parallelism

    @property
    def include_dirs(self) -> list[str]:
        """Directories included in the run queue."""
        return list(self._provider.include_dirs)

    @property
    def exclude_dirs(self) -> list[str]:
        """Directories excluded from the run queue."""
        return list(self._provider.exclude_dirs)

    @property
    def ignore_dependency_errors(self) -> bool:
        """Whether errors in dependencies are ignored."""
        return self._provider.ignore_dependency_errors

    @property
    def ignore_external_dependencies(self) -> bool:
        """Whether dependencies outside the working directory are skipped."""
        return self._provider.ignore_external_dependencies

    @property
    def include_external_dependencies(self) -> bool:
        """Whether dependencies outside the working directory are included."""
        return self._provider.include_external_dependencies

    @property
    def terragrunt_source(self) -> Optional[str]:
        """Override of the Terraform module source."""
        return self._provider.terragrunt_source

    @property
    def source_map(self) -> dict[str, str]:
        """Original module source to replacement source."""
        return dict(self._provider.source_map)

    @property
    def download_dir(self) -> Optional[str]:
        """Directory modules are downloaded to."""
        return self._provider.download_dir

    @property
    def iam_role(self) -> Optional[str]:
        """IAM role assumed before running."""
        return self._provider.iam_role

    @property
    def iam_role_session_name(self) -> Optional[str]:
        """Session name used when assuming :attr:`iam_role`."""
        return self._provider.iam_role_session_name

    @property
    def strict_include(self) -> bool:
        """Whether only included directories are processed."""
        return self._provider.strict_include

    @property
    def terragrunt_major_version(self) -> int:
        """Installed Terragrunt major version."""
        return self._provider.terragrunt_major_version
