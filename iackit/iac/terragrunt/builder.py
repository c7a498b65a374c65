"""Fluent builder for Terragrunt commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from ...exceptions import InvalidConfigurationError
from ...utils import add_unique, validate_positive_int, validate_string_input
from ..common import BaseIacBuilder, transfer_shared_state
from .commands import TerragruntCommand
from .provider import TerragruntProvider
from .service import TerragruntService

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ...compat import Self


class TerragruntBuilder(BaseIacBuilder[TerragruntCommand, TerragruntService]):
    """Build a :class:`~iackit.iac.terragrunt.service.TerragruntService`.

    Example:
        .. code-block:: python

            service = (
                TerragruntBuilder.for_run_all_plan()
                .with_terragrunt_major_version(1)
                .with_non_interactive()
                .build()
            )
            service.build_command()
            # ['terragrunt', 'run', '--all', 'plan', '--non-interactive']

    """

    COMMAND_TYPE: ClassVar[type[TerragruntCommand]] = TerragruntCommand
    TOOL: ClassVar[str] = "terragrunt"

    _terragrunt_config: Optional[str]
    _terragrunt_working_dir: Optional[str]
    _run_all: bool
    _no_auto_init: bool
    _no_auto_retry: bool
    _non_interactive: bool
    _terragrunt_parallelism: Optional[int]
    _include_dirs: list[str]
    _exclude_dirs: list[str]
    _ignore_dependency_errors: bool
    _ignore_external_dependencies: bool
    _include_external_dependencies: bool
    _terragrunt_source: Optional[str]
    _source_map: dict[str, str]
    _download_dir: Optional[str]
    _iam_role: Optional[str]
    _iam_role_session_name: Optional[str]
    _strict_include: bool
    _terragrunt_major_version: int

    @classmethod
    def for_init(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt init``."""
        return cls.create(TerragruntCommand.INIT)

    @classmethod
    def for_validate(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt validate``."""
        return cls.create(TerragruntCommand.VALIDATE)

    @classmethod
    def for_fmt(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt fmt``."""
        return cls.create(TerragruntCommand.FMT)

    @classmethod
    def for_hcl_fmt(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt hclfmt``."""
        return cls.create(TerragruntCommand.HCLFMT)

    @classmethod
    def for_plan(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt plan``."""
        return cls.create(TerragruntCommand.PLAN)

    @classmethod
    def for_apply(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt apply``."""
        return cls.create(TerragruntCommand.APPLY)

    @classmethod
    def for_destroy(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt destroy``."""
        return cls.create(TerragruntCommand.DESTROY)

    @classmethod
    def for_output(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt output``."""
        return cls.create(TerragruntCommand.OUTPUT)

    @classmethod
    def for_run_all_plan(cls) -> TerragruntBuilder:
        """Create a builder for ``plan`` across every module."""
        return cls.create(TerragruntCommand.PLAN).with_run_all()

    @classmethod
    def for_run_all_apply(cls) -> TerragruntBuilder:
        """Create a builder for ``apply`` across every module."""
        return cls.create(TerragruntCommand.APPLY).with_run_all()

    @classmethod
    def for_run_all_destroy(cls) -> TerragruntBuilder:
        """Create a builder for ``destroy`` across every module."""
        return cls.create(TerragruntCommand.DESTROY).with_run_all()

    @classmethod
    def for_graph_dependencies(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt graph-dependencies``."""
        return cls.create(TerragruntCommand.GRAPH_DEPENDENCIES)

    @classmethod
    def for_validate_inputs(cls) -> TerragruntBuilder:
        """Create a builder for ``terragrunt validate-inputs``."""
        return cls.create(TerragruntCommand.VALIDATE_INPUTS)

    def with_terragrunt_config(self, config_path: str) -> Self:
        """Use a Terragrunt configuration file other than ``terragrunt.hcl``."""
        self._terragrunt_config = validate_string_input(config_path, "terragrunt config path")
        return self

    def with_terragrunt_working_dir(self, directory: str) -> Self:
        """Set the directory Terragrunt runs in."""
        self._terragrunt_working_dir = validate_string_input(
            directory, "terragrunt working directory"
        )
        return self

    def with_run_all(self) -> Self:
        """Run the Terraform command against every module in the stack."""
        self._run_all = True
        return self

    def with_no_auto_init(self) -> Self:
        """Disable automatic ``init``."""
        self._no_auto_init = True
        return self

    def with_no_auto_retry(self) -> Self:
        """Disable automatic retries of transient errors."""
        self._no_auto_retry = True
        return self

    def with_non_interactive(self) -> Self:
        """Assume "yes" for every prompt."""
        self._non_interactive = True
        return self

    def with_terragrunt_parallelism(self, level: int) -> Self:
        """Limit the number of modules processed concurrently by ``run-all``.

        Raises:
            InvalidConfigurationError: ``level`` is not an integer of at least 1.

        """
        self._terragrunt_parallelism = validate_positive_int(level, "terragrunt parallelism")
        return self

    def with_include_dir(self, directory: str) -> Self:
        """Add a directory to the run queue; duplicates are ignored."""
        add_unique(self._include_dirs, validate_string_input(directory, "include directory"))
        return self

    def with_include_dirs(self, directories: Iterable[str]) -> Self:
        """Add several directories to the run queue."""
        for directory in directories:
            self.with_include_dir(directory)
        return self

    def with_exclude_dir(self, directory: str) -> Self:
        """Exclude a directory from the run queue; duplicates are ignored."""
        add_unique(self._exclude_dirs, validate_string_input(directory, "exclude directory"))
        return self

    def with_exclude_dirs(self, directories: Iterable[str]) -> Self:
        """Exclude several directories from the run queue."""
        for directory in directories:
            self.with_exclude_dir(directory)
        return self

    def with_ignore_dependency_errors(self) -> Self:
        """Continue when a dependency fails."""
        self._ignore_dependency_errors = True
        return self

    def with_ignore_external_dependencies(self) -> Self:
        """Skip dependencies outside the working directory."""
        self._ignore_external_dependencies = True
        return self

    def with_include_external_dependencies(self) -> Self:
        """Include dependencies outside the working directory."""
        self._include_external_dependencies = True
        return self

    def with_terragrunt_source(self, source: str) -> Self:
        """Override the source of the Terraform module."""
        self._terragrunt_source = validate_string_input(source, "terragrunt source")
        return self

    def with_source_map(self, original_source: str, new_source: str) -> Self:
        """Replace one module source with another."""
        validate_string_input(original_source, "original source")
        self._source_map[original_source] = validate_string_input(new_source, "new source")
        return self

    def with_source_maps(self, source_map: Mapping[str, str]) -> Self:
        """Replace several module sources."""
        for original_source, new_source in source_map.items():
            self.with_source_map(original_source, new_source)
        return self

    def with_download_dir(self, directory: str) -> Self:
        """Set where modules are downloaded to."""
        self._download_dir = validate_string_input(directory, "download directory")
        return self

    def with_iam_role(self, role: str) -> Self:
        """Assume an IAM role before running."""
        self._iam_role = validate_string_input(role, "IAM role")
        return self

    def with_iam_role_and_session(self, role: str, session_name: str) -> Self:
        """Assume an IAM role using a specific session name."""
        self.with_iam_role(role)
        self._iam_role_session_name = validate_string_input(
            session_name, "IAM role session name"
        )
        return self

    def with_strict_include(self) -> Self:
        """Only process directories that were explicitly included."""
        self._strict_include = True
        return self

    def with_terragrunt_major_version(self, major: int) -> Self:
        """Select v0.x (``0``) or v1.x (``1`` and up) flag and command spellings.

        Raises:
            InvalidConfigurationError: ``major`` is not an integer of at least 0.

        """
        if isinstance(major, bool) or not isinstance(major, int):
            raise InvalidConfigurationError(
                "terragrunt major version", major, "must be an integer"
            )
        if major < 0:
            raise InvalidConfigurationError(
                "terragrunt major version", major, "cannot be negative"
            )
        self._terragrunt_major_version = major
        return self

    def build(self) -> TerragruntService:
        """Build the service.

        Raises:
            MissingCommandError: No command was set.

        """
        return TerragruntService(
            TerragruntProvider(
                command=self._require_command(),
                **transfer_shared_state(self),
                terragrunt_config=self._terragrunt_config,
                terragrunt_working_dir=self._terragrunt_working_dir,
                run_all=self._run_all,
                no_auto_init=self._no_auto_init,
                no_auto_retry=self._no_auto_retry,
                non_interactive=self._non_interactive,
                terragrunt_parallelism=self._terragrunt_parallelism,
                include_dirs=tuple(self._include_dirs),
                exclude_dirs=tuple(self._exclude_dirs),
                ignore_dependency_errors=self._ignore_dependency_errors,
                ignore_external_dependencies=self._ignore_external_dependencies,
                include_external_dependencies=self._include_external_dependencies,
                terragrunt_source=self._terragrunt_source,
                source_map=dict(self._source_map),
                download_dir=self._download_dir,
                iam_role=self._iam_role,
                iam_role_session_name=self._iam_role_session_name,
                strict_include=self._strict_include,
                terragrunt_major_version=self._terragrunt_major_version,
            )
        )

    def _reset_specific(self) -> None:
        self._terragrunt_config = None
        self._terragrunt_working_dir = None
        self._run_all = False
        self._no_auto_init = False
        self._no_auto_retry = False
        self._non_interactive = False
        self._terragrunt_parallelism = None
        self._include_dirs = []
        self._exclude_dirs = []
        self._ignore_dependency_errors = False
        self._ignore_external_dependencies = False
        self._include_external_dependencies = False
        self._terragrunt_source = None
        self._source_map = {}
        self._download_dir = None
        self._iam_role = None
        self._iam_role_session_name = None
        self._strict_include = False
        self._terragrunt_major_version = 0
