"""``iackit terraform`` command."""

from __future__ import annotations

from typing import Any

import click

from ...runners import TerraformRunner
from .. import options
from ..utils import run_step


@click.command("terraform", short_help="run a terraform command")
@options.step
@click.pass_context
def terraform(ctx: click.Context, step: str, **_: Any) -> None:
    """Build a Terraform command from the action inputs and run it.

    \b
    Process
    -------
    1. Read the inputs (INPUT_<NAME> environment variables).
    2. Set up the Terraform version (uses the binary on PATH).
    3. Build the command and run it unless "dry-run" is set.
    4. Write the command, exit-code, stdout and stderr outputs.

    """  # noqa: D301
    run_step(ctx, TerraformRunner(), step)
