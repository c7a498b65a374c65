"""``iackit terragrunt`` command."""

from __future__ import annotations

from typing import Any

import click

from ...runners import TerragruntRunner
from ...version_manager import VersionDetector
from .. import options
from ..utils import run_step


@click.command("terragrunt", short_help="run a terragrunt command")
@options.step
@click.pass_context
def terragrunt(ctx: click.Context, step: str, **_: Any) -> None:
    """Build a Terragrunt command from the action inputs and run it.

    The installed Terragrunt version is detected to choose between the
    v0.x and v1.x spelling of flags and commands.

    \b
    Process
    -------
    1. Read the inputs (INPUT_<NAME> environment variables).
    2. Set up the Terraform and Terragrunt versions (uses the binaries on PATH).
    3. Detect the Terragrunt major version.
    4. Build the command and run it unless "dry-run" is set.
    5. Write the command, exit-code, stdout and stderr outputs.

    """  # noqa: D301
    run_step(ctx, TerragruntRunner(detector=VersionDetector.terragrunt()), step)
