"""Steps shared by the IaC runners."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, cast

from ..exceptions import UnsupportedCommandError

if TYPE_CHECKING:
    from .._logging import IacKitLogger
    from ..agents import AgentProtocol, OutputValue
    from ..iac.common import BaseIacBuilder, BaseIacService
    from ..version_manager import VersionInstaller, VersionResolver
    from .base import RunnerResult
    from .settings import SharedIacSettings

LOGGER = cast("IacKitLogger", logging.getLogger(__name__))

BuilderTypeVar = TypeVar("BuilderTypeVar", bound="BaseIacBuilder[Any, Any]")


def setup_tool_version(
    agent: AgentProtocol,
    tool_name: str,
    version: str,
    version_file: str,
    working_directory: str,
    resolver: Optional[VersionResolver] = None,
    installer: Optional[VersionInstaller] = None,
) -> None:
    """Resolve the requested version of a tool and install it.

    Without a resolver, or when the resolver returns nothing, the binary
    already on ``PATH`` is used.

    Args:
        agent: Agent used to report progress and update ``PATH``.
        tool_name: Display name of the tool.
        version: Requested version.
        version_file: Version file consulted when no version was requested.
        working_directory: Where the search for the version file starts.
        resolver: Turns the request into an exact version.
        installer: Installs the exact version.

    """
    agent.start_group(f"{tool_name} version setup")
    try:
        spec = (
            resolver.resolve(version, version_file, working_directory) if resolver else None
        )
        if not spec:
            agent.info(f"{tool_name} version: skip (using existing PATH binary)")
            return
        agent.info(f"{tool_name} version: {spec.resolved} (source: {spec.source})")
        if not installer:
            agent.warning(
                f"no installer available for {tool_name}; using existing PATH binary"
            )
            return
        agent.add_path(installer.install(spec.resolved, agent))
    finally:
        agent.end_group()


def configure_shared_iac_builder(
    builder: BuilderTypeVar, settings: SharedIacSettings
) -> BuilderTypeVar:
    """Apply the shared settings to a builder.

    ``plan_file`` becomes the positional plan file of ``apply`` and the
    ``-out`` file of ``plan``. It is ignored for every other command.

    """
    builder.with_working_directory(settings.working_directory)
    if settings.variables:
        builder.with_variables(settings.variables)
    if settings.var_files:
        builder.with_var_files(settings.var_files)
    if settings.backend_config:
        builder.with_backend_configs(settings.backend_config)
    if settings.targets:
        builder.with_targets(settings.targets)
    if settings.auto_approve:
        builder.with_auto_approve()
    if settings.plan_file:
        if settings.command == "apply":
            builder.with_plan_file(settings.plan_file)
        elif settings.command == "plan":
            builder.with_out_file(settings.plan_file)
        else:
            LOGGER.debug("plan file ignored for command %s", settings.command)
    if settings.no_color:
        builder.with_no_color()
    if settings.compact_warnings:
        builder.with_compact_warnings()
    if settings.parallelism is not None:
        builder.with_parallelism(settings.parallelism)
    if settings.lock_timeout:
        builder.with_lock_timeout(settings.lock_timeout)
    if not settings.refresh:
        builder.without_refresh()
    if settings.reconfigure:
        builder.with_reconfigure()
    if settings.migrate_state:
        builder.with_migrate_state()
    if settings.dry_run:
        builder.with_dry_run()
    return builder


def execute_iac_command(
    agent: AgentProtocol,
    tool_label: str,
    service: BaseIacService[Any],
    success: Callable[[dict[str, OutputValue]], RunnerResult],
    failure: Callable[[Exception, dict[str, OutputValue]], RunnerResult],
) -> RunnerResult:
    """Run the command of a service through an agent.

    A command that can not be rendered for the installed tool fails with only
    the ``command`` output.

    Args:
        agent: Agent that executes the process.
        tool_label: Name used in messages (e.g. ``Terraform plan``).
        service: Service holding the command.
        success: Creates a successful result.
        failure: Creates a failed result.

    """
    try:
        command_args = service.build_command()
    except UnsupportedCommandError as exc:
        return failure(exc, {"command": service.command})
    command_string = service.to_string()
    agent.info(f"Command: {command_string}")
    LOGGER.debug("multi-line rendering:\n%s", service.to_string_multi_line_command())

    outputs: dict[str, OutputValue] = {
        "command": service.command,
        "command-args": json.dumps(command_args),
        "command-string": command_string,
    }
    if service.dry_run:
        agent.info("Dry run mode - skipping execution")
        return success({**outputs, "exit-code": "0", "stdout": "", "stderr": ""})

    cmd, *cmd_args = command_args
    result = agent.exec(
        cmd,
        cmd_args,
        cwd=service.working_directory,
        env=service.environment,
        ignore_return_code=True,
    )
    outputs.update(
        {"exit-code": str(result.exit_code), "stdout": result.stdout, "stderr": result.stderr}
    )
    if result.exit_code != 0:
        return failure(
            RuntimeError(f"{tool_label} failed with exit code {result.exit_code}"), outputs
        )
    return success(outputs)
