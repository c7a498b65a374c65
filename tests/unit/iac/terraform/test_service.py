"""Test iackit.iac.terraform.service."""

from __future__ import annotations

from iackit.iac.terraform import TerraformArgumentBuilder, TerraformProvider, TerraformService


class TestTerraformService:
    """Test TerraformService."""

    def test___init__(self) -> None:
        """Test __init__."""
        service = TerraformService(
            TerraformProvider(command="destroy", auto_approve=True)  # type: ignore
        )
        assert service.executor == "terraform"
        assert service.build_command() == ["terraform", "destroy", "-auto-approve"]
        assert service.to_command_args() == ["-auto-approve"]

    def test_reset(self) -> None:
        """Test reset."""
        service = TerraformService(
            TerraformProvider(command="plan", no_color=True, targets=("a",))  # type: ignore
        )
        service.reset()
        assert service.provider == TerraformProvider(command="plan")  # type: ignore


class TestTerraformArgumentBuilder:
    """Test TerraformArgumentBuilder."""

    def test_build_command(self) -> None:
        """Test build_command."""
        obj = TerraformArgumentBuilder(
            TerraformProvider(
                command="refresh", variables={"a": "b"}, lock_timeout="10s"  # type: ignore
            )
        )
        assert obj.build_command() == [
            "terraform",
            "refresh",
            "-var",
            "a=b",
            "-lock-timeout",
            "10s",
        ]
