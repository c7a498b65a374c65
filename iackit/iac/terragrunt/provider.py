"""Terragrunt configuration snapshot."""

from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import Field

from ..common import IacProvider
from .commands import TerragruntCommand


class TerragruntProvider(IacProvider):
    """Read-only configuration of a Terragrunt command."""

    command: TerragruntCommand
    executor: Literal["terragrunt"] = "terragrunt"

    terragrunt_config: Optional[str] = None
    terragrunt_working_dir: Optional[str] = None
    run_all: bool = False
    """Run a Terraform command against every module in the stack."""

    no_auto_init: bool = False
    no_auto_retry: bool = False
    non_interactive: bool = False
    terragrunt_parallelism: Annotated[Optional[int], Field(ge=1)] = None
    """Only rendered when :attr:`run_all` is set."""

    include_dirs: tuple[str, ...] = ()
    exclude_dirs: tuple[str, ...] = ()
    ignore_dependency_errors: bool = False
    ignore_external_dependencies: bool = False
    include_external_dependencies: bool = False
    terragrunt_source: Optional[str] = None
    source_map: dict[str, str] = {}
    """Original module source to replacement source."""

    download_dir: Optional[str] = None
    iam_role: Optional[str] = None
    iam_role_session_name: Optional[str] = None
    strict_include: bool = False
    terragrunt_major_version: Annotated[int, Field(ge=0)] = 0
    """Selects v0.x or v1.x flag and command spellings."""
