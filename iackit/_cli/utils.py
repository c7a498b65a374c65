"""CLI utils."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from ..agents import GitHubActionsAgent
from ..compat import cached_property

if TYPE_CHECKING:
    import click

    from .._logging import IacKitLogger
    from ..agents import AgentProtocol
    from ..runners import RunnerBase

LOGGER = cast("IacKitLogger", logging.getLogger(__name__))


class CliContext:
    """CLI context object."""

    def __init__(
        self, *, debug: int = 0, no_color: bool = False, verbose: bool = False, **_: Any
    ) -> None:
        """Instantiate class.

        Args:
            debug: Debug level.
            no_color: Whether color was disabled in logs.
            verbose: Whether to display verbose logs.

        """
        self.debug = debug
        self.no_color = no_color
        self.verbose = verbose

    @cached_property
    def agent(self) -> AgentProtocol:
        """Agent supplying inputs and collecting outputs."""
        return GitHubActionsAgent()


def run_step(ctx: click.Context, runner: RunnerBase, step: str) -> None:
    """Run a step of a runner and publish its outputs.

    Exits with ``1`` when the step fails.

    """
    agent: AgentProtocol = ctx.obj.agent
    result = runner.run(agent, step)
    for name, value in result.outputs.items():
        agent.set_output(name, value)
    if not result.success:
        error = result.error or RuntimeError(f"{runner.name} {step} failed")
        LOGGER.error("%s %s failed: %s", runner.name, step, error, exc_info=ctx.obj.debug > 1)
        agent.set_failed(error)
        ctx.exit(1)
    LOGGER.success("%s %s complete", runner.name, step)
