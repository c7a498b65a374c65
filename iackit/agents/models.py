"""Agent data models."""

from __future__ import annotations

from pydantic import ConfigDict

from ..utils import BaseModel


class ExecResult(BaseModel):
    """Result of executing a process."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    exit_code: int
    stdout: str = ""
    stderr: str = ""
