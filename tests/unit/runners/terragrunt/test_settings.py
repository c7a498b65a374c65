"""Test iackit.runners.terragrunt.settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest
from pydantic import ValidationError

from iackit.exceptions import InvalidInputError
from iackit.runners.terragrunt import TerragruntSettings, get_settings

if TYPE_CHECKING:
    from ....factories import MockAgent


def test_get_settings(mock_agent: Callable[..., MockAgent]) -> None:
    """Test get_settings."""
    agent = mock_agent(
        inputs={
            "command": "plan",
            "terragrunt-version": "0.75.10",
            "run-all": "true",
            "terragrunt-config": "root.hcl",
            "terragrunt-working-dir": "live",
            "non-interactive": "true",
            "no-auto-init": "true",
            "no-auto-retry": "True",
            "terragrunt-parallelism": "4",
            "include-dirs": "vpc, eks",
            "exclude-dirs": "legacy",
            "ignore-dependency-errors": "true",
            "ignore-external-dependencies": "true",
            "include-external-dependencies": "false",
            "terragrunt-source": "../modules",
            "source-map": '{"git::old": "git::new"}',
            "download-dir": "/tmp/tg",
            "iam-role": "arn:aws:iam::123456789012:role/deploy",
            "iam-role-session-name": "ci",
            "strict-include": "true",
        }
    )
    assert get_settings(agent) == TerragruntSettings(
        command="plan",
        terragrunt_version="0.75.10",
        run_all=True,
        terragrunt_config="root.hcl",
        terragrunt_working_dir="live",
        non_interactive=True,
        no_auto_init=True,
        no_auto_retry=True,
        terragrunt_parallelism=4,
        include_dirs=["vpc", "eks"],
        exclude_dirs=["legacy"],
        ignore_dependency_errors=True,
        ignore_external_dependencies=True,
        terragrunt_source="../modules",
        source_map={"git::old": "git::new"},
        download_dir="/tmp/tg",
        iam_role="arn:aws:iam::123456789012:role/deploy",
        iam_role_session_name="ci",
        strict_include=True,
    )


def test_get_settings_defaults(mock_agent: Callable[..., MockAgent]) -> None:
    """Test get_settings with only the required input."""
    settings = get_settings(mock_agent(inputs={"command": "init"}))
    assert settings.terragrunt_version_file == ".terragrunt-version"
    assert settings.terraform_version_file == ".terraform-version"
    assert not settings.run_all
    assert settings.terragrunt_parallelism is None
    assert settings.source_map == {}


def test_get_settings_invalid(mock_agent: Callable[..., MockAgent]) -> None:
    """Test get_settings with invalid inputs."""
    with pytest.raises(InvalidInputError):
        get_settings(mock_agent(inputs={"command": "plan", "run-all": "yes"}))
    with pytest.raises(InvalidInputError):
        get_settings(mock_agent(inputs={"command": "plan", "terragrunt-parallelism": "x"}))
    with pytest.raises(ValidationError):
        get_settings(mock_agent(inputs={"command": "plan", "terragrunt-parallelism": "0"}))
