"""iackit CLI entrypoint."""

from __future__ import annotations

import logging
from typing import Any

import click

from .. import __version__
from . import commands, options
from .logs import setup_logging
from .utils import CliContext

LOGGER = logging.getLogger("iackit.cli")

CLICK_CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 999,
}


@click.group(context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__version__, message="%(version)s")
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def cli(ctx: click.Context, *, debug: int, no_color: bool, verbose: bool) -> None:
    """Build and run Terraform and Terragrunt commands from CI inputs."""
    setup_logging(debug=debug, no_color=no_color, verbose=verbose)
    ctx.obj = CliContext(debug=debug, no_color=no_color, verbose=verbose)


# register all the other commands from the importable modules defined
# in commands.
for cmd in commands.__all__:
    cli.add_command(getattr(commands, cmd))
