"""Test iackit.runners.settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest
from pydantic import ValidationError

from iackit.exceptions import InvalidInputError, RequiredInputError
from iackit.runners import SharedIacSettings
from iackit.runners.settings import get_optional_int_input

if TYPE_CHECKING:
    from ...factories import MockAgent


@pytest.mark.parametrize("value, expected", [("", None), ("  ", None), ("10", 10)])
def test_get_optional_int_input(
    expected: int | None, mock_agent: Callable[..., MockAgent], value: str
) -> None:
    """Test get_optional_int_input."""
    assert get_optional_int_input(mock_agent(inputs={"parallelism": value}), "parallelism") == (
        expected
    )


def test_get_optional_int_input_invalid(mock_agent: Callable[..., MockAgent]) -> None:
    """Test get_optional_int_input with a value that is not an integer."""
    with pytest.raises(InvalidInputError, match="must be an integer"):
        get_optional_int_input(mock_agent(inputs={"parallelism": "ten"}), "parallelism")


class TestSharedIacSettings:
    """Test SharedIacSettings."""

    def test_parallelism(self) -> None:
        """Test parallelism must be at least 1."""
        with pytest.raises(ValidationError):
            SharedIacSettings(command="plan", parallelism=0)

    def test_read_inputs(self, mock_agent: Callable[..., MockAgent]) -> None:
        """Test read_inputs."""
        agent = mock_agent(
            inputs={
                "command": "plan",
                "working-directory": "infra",
                "terraform-version": "1.9.8",
                "variables": '{"region": "us-east-1", "count": 2}',
                "var-files": "common.tfvars, prod.tfvars",
                "backend-config": '{"bucket": "state"}',
                "targets": "module.vpc,,module.eks",
                "auto-approve": "true",
                "plan-file": "plan.tfplan",
                "no-color": "true",
                "compact-warnings": "false",
                "parallelism": "5",
                "lock-timeout": "30s",
                "refresh": "false",
                "reconfigure": "true",
                "migrate-state": "",
                "dry-run": "TRUE",
            }
        )
        assert SharedIacSettings(**SharedIacSettings.read_inputs(agent)) == SharedIacSettings(
            command="plan",
            working_directory="infra",
            terraform_version="1.9.8",
            variables={"region": "us-east-1", "count": "2"},
            var_files=["common.tfvars", "prod.tfvars"],
            backend_config={"bucket": "state"},
            targets=["module.vpc", "module.eks"],
            auto_approve=True,
            plan_file="plan.tfplan",
            no_color=True,
            parallelism=5,
            lock_timeout="30s",
            refresh=False,
            reconfigure=True,
            dry_run=True,
        )

    def test_read_inputs_defaults(self, mock_agent: Callable[..., MockAgent]) -> None:
        """Test read_inputs with only the required input."""
        settings = SharedIacSettings(
            **SharedIacSettings.read_inputs(mock_agent(inputs={"command": "validate"}))
        )
        assert settings.working_directory == "."
        assert settings.terraform_version_file == ".terraform-version"
        assert settings.parallelism is None
        assert settings.refresh
        assert not settings.dry_run

    @pytest.mark.parametrize("value", ["", "true", "False", "no"])
    def test_read_inputs_refresh(self, mock_agent: Callable[..., MockAgent], value: str) -> None:
        """Test refresh is only disabled by the literal value false."""
        inputs = SharedIacSettings.read_inputs(
            mock_agent(inputs={"command": "plan", "refresh": value})
        )
        assert inputs["refresh"] is True

    def test_read_inputs_required(self, mock_agent: Callable[..., MockAgent]) -> None:
        """Test read_inputs without a command."""
        with pytest.raises(RequiredInputError, match="command"):
            SharedIacSettings.read_inputs(mock_agent())

    def test_read_inputs_invalid_json(self, mock_agent: Callable[..., MockAgent]) -> None:
        """Test read_inputs treats invalid JSON as empty."""
        inputs = SharedIacSettings.read_inputs(
            mock_agent(inputs={"command": "plan", "variables": "{not json"})
        )
        assert inputs["variables"] == {}
