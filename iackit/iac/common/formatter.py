"""Render a command token list for display."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .arguments import CommandBuilder

NEEDS_QUOTING = re.compile(r"[\s\"'\\$`]")


def escape_arg(arg: str) -> str:
    """Wrap an argument in double quotes if it contains characters a shell would interpret.

    Double quotes inside the argument are escaped with a backslash. Arguments
    that contain none of whitespace, quotes, backslash, ``$`` or a backtick
    are returned unchanged.

    """
    if NEEDS_QUOTING.search(arg):
        return '"' + arg.replace('"', '\\"') + '"'
    return arg


class IacStringFormatter:
    """Format the output of a command builder.

    Every rendering is derived from
    :meth:`~iackit.iac.common.arguments.CommandBuilder.build_command` so all
    of them describe the same invocation.

    """

    def __init__(self, command_builder: CommandBuilder) -> None:
        """Instantiate class.

        Args:
            command_builder: Object producing the full command token list.

        """
        self.command_builder = command_builder

    def to_string(self) -> str:
        """Return the command as a single line with each token escaped."""
        return " ".join(escape_arg(arg) for arg in self.command_builder.build_command())

    def to_string_multi_line_command(self) -> str:
        """Return the command split across lines joined with backslash continuations.

        The executor is on the first line. A flag shares its line with the
        token that follows it unless that token also starts with ``-``.

        """
        command = self.command_builder.build_command()
        if not command:
            return ""

        last = len(command) - 1
        lines: list[str] = []
        index = 0
        while index <= last:
            arg = escape_arg(command[index])
            if index == 0:
                lines.append(arg if index == last else f"{arg} \\")
                index += 1
                continue
            following = command[index + 1] if index < last else ""
            if arg.startswith("-") and following and not following.startswith("-"):
                value = escape_arg(following)
                lines.append(f"  {arg} {value}" + ("" if index + 1 == last else " \\"))
                index += 2
                continue
            lines.append(f"  {arg}" + ("" if index == last else " \\"))
            index += 1
        return "\n".join(lines)

    def to_string_list(self) -> list[str]:
        """Return the raw token list."""
        return self.command_builder.build_command()
