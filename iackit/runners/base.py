"""Base class for runners."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Union, cast

from pydantic import ConfigDict, Field

from .._logging import PrefixAdaptor
from ..exceptions import UnknownStepError
from ..utils import BaseModel

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .._logging import IacKitLogger
    from ..agents import AgentProtocol, OutputValue

LOGGER = cast("IacKitLogger", logging.getLogger(__name__))


class RunnerResult(BaseModel):
    """Outcome of running a step."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    success: bool
    """Whether the step succeeded."""

    outputs: dict[str, Union[str, int, bool]] = Field(default_factory=dict)
    """Values that should be published as outputs of the step."""

    error: Optional[Exception] = None
    """Cause of the failure."""


class RunnerBase(ABC):
    """Run the steps of a tool through an agent.

    Subclasses name themselves and map step names to methods that accept an
    agent. :meth:`run` never raises; unknown steps and exceptions raised by a
    step are returned as failed results.

    """

    name: ClassVar[str]

    def __init__(self) -> None:
        """Instantiate class."""
        self.logger = PrefixAdaptor(self.name, LOGGER)

    @property
    @abstractmethod
    def steps(self) -> Mapping[str, Callable[[AgentProtocol], RunnerResult]]:
        """Steps provided by the runner."""
        raise NotImplementedError

    def run(self, agent: AgentProtocol, step: str) -> RunnerResult:
        """Run a step.

        Args:
            agent: Agent providing inputs and executing processes.
            step: Name of the step to run.

        """
        step_fn = self.steps.get(step)
        if not step_fn:
            return self.failure(UnknownStepError(self.name, step, self.steps))
        try:
            return step_fn(agent)
        except Exception as exc:  # noqa: BLE001
            self.logger.debug("step %s raised an exception", step, exc_info=True)
            return self.failure(exc)

    @staticmethod
    def success(outputs: Mapping[str, OutputValue]) -> RunnerResult:
        """Create a successful result."""
        return RunnerResult(success=True, outputs=dict(outputs))

    @staticmethod
    def failure(
        error: Union[Exception, str], outputs: Optional[Mapping[str, OutputValue]] = None
    ) -> RunnerResult:
        """Create a failed result.

        Args:
            error: Cause of the failure. Strings are wrapped in a
                :class:`RuntimeError`.
            outputs: Outputs collected before the failure.

        """
        return RunnerResult(
            success=False,
            outputs=dict(outputs or {}),
            error=RuntimeError(error) if isinstance(error, str) else error,
        )
