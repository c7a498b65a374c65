"""Fluent builder for Terraform commands."""

from __future__ import annotations

from typing import ClassVar

from ..common import BaseIacBuilder, TerraformCommand, transfer_shared_state
from .provider import TerraformProvider
from .service import TerraformService


class TerraformBuilder(BaseIacBuilder[TerraformCommand, TerraformService]):
    """Build a :class:`~iackit.iac.terraform.service.TerraformService`.

    Example:
        .. code-block:: python

            service = (
                TerraformBuilder.for_plan()
                .with_var_file("prod.tfvars")
                .with_out_file("plan.tfplan")
                .build()
            )
            service.build_command()
            # ['terraform', 'plan', '-var-file', 'prod.tfvars', '-out', 'plan.tfplan']

    """

    COMMAND_TYPE: ClassVar[type[TerraformCommand]] = TerraformCommand
    TOOL: ClassVar[str] = "terraform"

    @classmethod
    def for_init(cls) -> TerraformBuilder:
        """Create a builder for ``terraform init``."""
        return cls.create(TerraformCommand.INIT)

    @classmethod
    def for_validate(cls) -> TerraformBuilder:
        """Create a builder for ``terraform validate``."""
        return cls.create(TerraformCommand.VALIDATE)

    @classmethod
    def for_fmt(cls) -> TerraformBuilder:
        """Create a builder for ``terraform fmt``."""
        return cls.create(TerraformCommand.FMT)

    @classmethod
    def for_plan(cls) -> TerraformBuilder:
        """Create a builder for ``terraform plan``."""
        return cls.create(TerraformCommand.PLAN)

    @classmethod
    def for_apply(cls) -> TerraformBuilder:
        """Create a builder for ``terraform apply``."""
        return cls.create(TerraformCommand.APPLY)

    @classmethod
    def for_destroy(cls) -> TerraformBuilder:
        """Create a builder for ``terraform destroy``."""
        return cls.create(TerraformCommand.DESTROY)

    @classmethod
    def for_output(cls) -> TerraformBuilder:
        """Create a builder for ``terraform output``."""
        return cls.create(TerraformCommand.OUTPUT)

    @classmethod
    def for_show(cls) -> TerraformBuilder:
        """Create a builder for ``terraform show``."""
        return cls.create(TerraformCommand.SHOW)

    def build(self) -> TerraformService:
        """Build the service.

        Raises:
            MissingCommandError: No command was set.

        """
        return TerraformService(
            TerraformProvider(command=self._require_command(), **transfer_shared_state(self))
        )

    def _reset_specific(self) -> None:
        """Terraform has no additional configuration."""
