"""Test ``iackit terraform``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from iackit._cli import cli
from iackit.runners import TerraformRunner

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import CliRunner
    from pytest_mock import MockerFixture
    from pytest_subprocess import FakeProcess

MODULE = "iackit._cli.commands._terraform"


def read_outputs(path: Path) -> dict[str, str]:
    """Parse a GITHUB_OUTPUT file."""
    outputs: dict[str, str] = {}
    lines = iter(path.read_text().splitlines())
    for line in lines:
        name, delimiter = line.split("<<", 1)
        value: list[str] = []
        for value_line in lines:
            if value_line == delimiter:
                break
            value.append(value_line)
        outputs[name] = "\n".join(value)
    return outputs


def test_terraform(cli_runner: CliRunner, fake_process: FakeProcess, tmp_path: Path) -> None:
    """Test iackit terraform."""
    output_file = tmp_path / "output"
    output_file.touch()
    fake_process.register_subprocess(
        ["terraform", "plan", "-var", "region=us-east-1", "-no-color"],
        stdout="No changes. Your infrastructure matches the configuration.\n",
    )
    result = cli_runner.invoke(
        cli,
        ["terraform"],
        env={
            "GITHUB_OUTPUT": str(output_file),
            "INPUT_COMMAND": "plan",
            "INPUT_VARIABLES": '{"region": "us-east-1"}',
            "INPUT_NO-COLOR": "true",
            "INPUT_WORKING-DIRECTORY": str(tmp_path),
        },
    )
    assert result.exit_code == 0, result.output
    assert "No changes. Your infrastructure matches the configuration." in result.output
    outputs = read_outputs(output_file)
    assert outputs["command"] == "plan"
    assert json.loads(outputs["command-args"]) == [
        "terraform",
        "plan",
        "-var",
        "region=us-east-1",
        "-no-color",
    ]
    assert outputs["exit-code"] == "0"
    assert outputs["stderr"] == ""


def test_terraform_dry_run(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test iackit terraform with dry-run."""
    output_file = tmp_path / "output"
    output_file.touch()
    result = cli_runner.invoke(
        cli,
        ["terraform"],
        env={
            "GITHUB_OUTPUT": str(output_file),
            "INPUT_COMMAND": "apply",
            "INPUT_AUTO-APPROVE": "true",
            "INPUT_PLAN-FILE": "plan.tfplan",
            "INPUT_DRY-RUN": "true",
        },
    )
    assert result.exit_code == 0, result.output
    assert "Command: terraform apply -auto-approve plan.tfplan" in result.output
    assert read_outputs(output_file) == {
        "command": "apply",
        "command-args": json.dumps(["terraform", "apply", "-auto-approve", "plan.tfplan"]),
        "command-string": "terraform apply -auto-approve plan.tfplan",
        "exit-code": "0",
        "stdout": "",
        "stderr": "",
    }


def test_terraform_invalid_command(cli_runner: CliRunner) -> None:
    """Test iackit terraform with an invalid command."""
    result = cli_runner.invoke(cli, ["terraform"], env={"INPUT_COMMAND": "deploy"})
    assert result.exit_code == 1
    assert "::error::Invalid Terraform command: deploy." in result.output


def test_terraform_step(cli_runner: CliRunner, mocker: MockerFixture) -> None:
    """Test iackit terraform --step."""
    mock_run_step = mocker.patch(f"{MODULE}.run_step")
    assert cli_runner.invoke(cli, ["terraform", "--step", "validate"]).exit_code == 0
    _ctx, runner, step = mock_run_step.call_args.args
    assert isinstance(runner, TerraformRunner)
    assert step == "validate"


def test_terraform_unknown_step(cli_runner: CliRunner) -> None:
    """Test iackit terraform with a step the runner does not have."""
    result = cli_runner.invoke(cli, ["terraform", "--step", "destroy"])
    assert result.exit_code == 1
    assert "Unknown step 'destroy' for runner 'terraform'" in result.output
