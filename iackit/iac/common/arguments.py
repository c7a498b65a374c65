"""Render the Terraform-compatible argument subset.

Categories are rendered in a fixed order that mirrors the grammar of the
wrapped CLI. The plan file given to ``apply`` is positional and always last.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import Protocol

from .commands import (
    AUTO_APPROVE_COMMANDS,
    TARGET_COMMANDS,
    VARIABLE_COMMANDS,
    command_name,
)

if TYPE_CHECKING:
    from .provider import IacProvider


class CommandBuilder(Protocol):
    """Anything that can produce a full command token list."""

    def to_command_args(self) -> list[str]:
        """Return the arguments without the executor or command."""
        ...

    def build_command(self) -> list[str]:
        """Return the executor, command and arguments."""
        ...


def render_shared_arguments(provider: IacProvider) -> list[str]:
    """Render every shared argument category supported by the provider's command."""
    command = command_name(provider.command)
    return [
        *render_init_arguments(provider, command),
        *render_variable_arguments(provider, command),
        *render_target_arguments(provider, command),
        *render_plan_arguments(provider, command),
        *render_apply_arguments(provider, command),
        *render_common_arguments(provider, command),
    ]


def render_init_arguments(provider: IacProvider, command: str) -> list[str]:
    """Backend configuration, ``-reconfigure`` and ``-migrate-state``."""
    if command != "init":
        return []
    args: list[str] = []
    for key, value in provider.backend_config.items():
        args.extend(["-backend-config", f"{key}={value}"])
    if provider.reconfigure:
        args.append("-reconfigure")
    if provider.migrate_state:
        args.append("-migrate-state")
    return args


def render_variable_arguments(provider: IacProvider, command: str) -> list[str]:
    """``-var-file`` entries followed by ``-var`` entries."""
    if command not in VARIABLE_COMMANDS:
        return []
    args: list[str] = []
    for var_file in provider.var_files:
        args.extend(["-var-file", var_file])
    for key, value in provider.variables.items():
        args.extend(["-var", f"{key}={value}"])
    return args


def render_target_arguments(provider: IacProvider, command: str) -> list[str]:
    """``-target`` entries."""
    if command not in TARGET_COMMANDS:
        return []
    args: list[str] = []
    for target in provider.targets:
        args.extend(["-target", target])
    return args


def render_plan_arguments(provider: IacProvider, command: str) -> list[str]:
    """``-out`` and ``-refresh=false`` for ``plan``."""
    if command != "plan":
        return []
    args: list[str] = []
    if provider.out_file:
        args.extend(["-out", provider.out_file])
    if not provider.refresh:
        args.append("-refresh=false")
    return args


def render_apply_arguments(provider: IacProvider, command: str) -> list[str]:
    """``-auto-approve`` and ``-refresh=false`` for ``apply`` and ``destroy``.

    ``-refresh=false`` is rendered here independently of
    :func:`render_plan_arguments`; a command belongs to at most one of the two.

    """
    if command not in AUTO_APPROVE_COMMANDS:
        return []
    args: list[str] = []
    if provider.auto_approve:
        args.append("-auto-approve")
    if not provider.refresh:
        args.append("-refresh=false")
    return args


def render_common_arguments(provider: IacProvider, command: str) -> list[str]:
    """Arguments accepted by every command, then the positional plan file."""
    args: list[str] = []
    if provider.parallelism is not None:
        args.extend(["-parallelism", str(provider.parallelism)])
    if provider.lock_timeout:
        args.extend(["-lock-timeout", provider.lock_timeout])
    if provider.no_color:
        args.append("-no-color")
    if provider.compact_warnings:
        args.append("-compact-warnings")
    # must be last; apply takes the plan file as a positional argument
    if command == "apply" and provider.plan_file:
        args.append(provider.plan_file)
    return args
