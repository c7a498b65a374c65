"""Test iackit.iac.common.builder."""

from __future__ import annotations

from typing import Any

import pytest

from iackit.exceptions import InvalidCommandError, InvalidConfigurationError, MissingCommandError
from iackit.iac.common import TerraformCommand, transfer_shared_state
from iackit.iac.terraform import TerraformBuilder
from iackit.iac.terragrunt import TerragruntBuilder, TerragruntCommand


class TestBaseIacBuilder:
    """Test BaseIacBuilder."""

    def test_build_independent_of_builder(self) -> None:
        """Test mutating the builder after build does not change the service."""
        builder = TerraformBuilder.for_plan().with_target("a").with_variable("env", "dev")
        service = builder.build()
        builder.with_target("b").with_variable("env", "prod").with_no_color()
        assert service.targets == ["a"]
        assert service.variables == {"env": "dev"}
        assert not service.no_color
        assert builder.build().targets == ["a", "b"]

    def test_build_missing_command(self) -> None:
        """Test build without a command."""
        with pytest.raises(MissingCommandError, match="Terraform command is required"):
            TerraformBuilder.create().build()

    def test_chaining(self) -> None:
        """Test every with_* method returns the builder."""
        builder = TerraformBuilder.create()
        assert builder.with_command("plan") is builder
        assert builder.with_working_directory("infra") is builder
        assert builder.with_environment_variable("TF_LOG", "DEBUG") is builder
        assert builder.with_environment_variables({"TF_IN_AUTOMATION": "1"}) is builder
        assert builder.with_variable("a", "1") is builder
        assert builder.with_variables({"b": "2"}) is builder
        assert builder.with_var_file("a.tfvars") is builder
        assert builder.with_var_files(["b.tfvars"]) is builder
        assert builder.with_backend_config("key", "value") is builder
        assert builder.with_backend_configs({"bucket": "state"}) is builder
        assert builder.with_target("module.a") is builder
        assert builder.with_targets(["module.b"]) is builder
        assert builder.with_auto_approve() is builder
        assert builder.with_dry_run() is builder
        assert builder.with_plan_file("plan.tfplan") is builder
        assert builder.with_out_file("out.tfplan") is builder
        assert builder.with_no_color() is builder
        assert builder.with_compact_warnings() is builder
        assert builder.with_parallelism(2) is builder
        assert builder.with_lock_timeout("5m") is builder
        assert builder.with_refresh() is builder
        assert builder.without_refresh() is builder
        assert builder.with_reconfigure() is builder
        assert builder.with_migrate_state() is builder
        assert builder.reset() is builder

    def test_create(self) -> None:
        """Test create."""
        assert TerraformBuilder.create(TerraformCommand.SHOW).build().command == "show"
        assert TerraformBuilder.create("state").build().command == "state"

    def test_idempotent_add(self) -> None:
        """Test adding the same entry twice keeps one occurrence."""
        service = (
            TerraformBuilder.for_plan()
            .with_target("module.vpc")
            .with_target("module.vpc")
            .with_var_files(["a.tfvars", "b.tfvars", "a.tfvars"])
            .build()
        )
        assert service.targets == ["module.vpc"]
        assert service.var_files == ["a.tfvars", "b.tfvars"]

    def test_mapping_last_write_wins(self) -> None:
        """Test a repeated key replaces the previous value."""
        service = (
            TerraformBuilder.for_plan()
            .with_variable("env", "dev")
            .with_variables({"env": "prod", "region": "us-east-1"})
            .build()
        )
        assert service.variables == {"env": "prod", "region": "us-east-1"}

    def test_reset(self) -> None:
        """Test reset."""
        builder = (
            TerraformBuilder.for_apply()
            .with_auto_approve()
            .with_target("module.vpc")
            .with_parallelism(3)
            .without_refresh()
        )
        builder.reset()
        with pytest.raises(MissingCommandError):
            builder.build()
        assert builder.with_command("apply").build().build_command() == ["terraform", "apply"]

    def test_with_command_invalid(self) -> None:
        """Test with_command with an unsupported command."""
        with pytest.raises(InvalidCommandError) as excinfo:
            TerraformBuilder.create("run-all")
        assert excinfo.value.command == "run-all"
        assert excinfo.value.valid_commands == [i.value for i in TerraformCommand]
        assert "Valid commands are: init, validate, fmt" in str(excinfo.value)

    def test_with_command_other_tool(self) -> None:
        """Test with_command accepts a member of another tool's enum by value."""
        assert TerraformBuilder.create(TerragruntCommand.PLAN).build().command == "plan"
        with pytest.raises(InvalidCommandError):
            TerraformBuilder.create(TerragruntCommand.HCLFMT)

    @pytest.mark.parametrize(
        "method, args",
        [
            ("with_working_directory", ("",)),
            ("with_environment_variable", ("", "value")),
            ("with_variable", ("  ", "value")),
            ("with_var_file", ("",)),
            ("with_backend_config", ("", "value")),
            ("with_target", ("",)),
            ("with_plan_file", ("",)),
            ("with_out_file", (" ",)),
            ("with_parallelism", (0,)),
            ("with_parallelism", (-1,)),
            ("with_lock_timeout", ("",)),
        ],
    )
    def test_validation(self, args: tuple[Any, ...], method: str) -> None:
        """Test with_* methods validate their arguments when called."""
        with pytest.raises(InvalidConfigurationError):
            getattr(TerraformBuilder.for_plan(), method)(*args)


def test_transfer_shared_state() -> None:
    """Test transfer_shared_state copies collections."""
    builder = TerragruntBuilder.for_plan().with_target("a").with_variable("k", "v")
    result = transfer_shared_state(builder)
    assert result["targets"] == ("a",)
    result["variables"]["k"] = "changed"
    assert builder.build().variables == {"k": "v"}
