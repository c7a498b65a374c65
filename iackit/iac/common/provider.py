"""Read-only configuration snapshot shared by every IaC tool."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import ConfigDict, Field

from ...utils import BaseModel


class IacProvider(BaseModel):
    """Configuration consumed when rendering a Terraform-compatible command.

    Instances are frozen; a new snapshot is created for every change.
    Mappings are rendered in insertion order and sequences never contain
    duplicates.

    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        validate_default=True,
    )

    command: str
    """The command to execute."""

    executor: str
    """Name of the binary that is invoked."""

    working_directory: str = "."
    environment: dict[str, str] = {}
    """Environment variables for the process."""

    variables: dict[str, str] = {}
    """Rendered as ``-var key=value``."""

    var_files: tuple[str, ...] = ()
    backend_config: dict[str, str] = {}
    """Rendered as ``-backend-config key=value`` for ``init``."""

    targets: tuple[str, ...] = ()
    auto_approve: bool = False
    dry_run: bool = False
    plan_file: Optional[str] = None
    """Positional plan file for ``apply``."""

    out_file: Optional[str] = None
    """Rendered as ``-out`` for ``plan``."""

    no_color: bool = False
    compact_warnings: bool = False
    parallelism: Annotated[Optional[int], Field(ge=1)] = None
    lock_timeout: Optional[str] = None
    refresh: bool = True
    reconfigure: bool = False
    migrate_state: bool = False
