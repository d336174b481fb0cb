# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

# "project, p" registers the command "project" with the alias "p"
_ALIAS_SEPARATOR = re.compile(r" ?, ?")


def command_aliases(name: str) -> list[str]:
    return _ALIAS_SEPARATOR.split(name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands can be invoked by any of their comma-separated names"""

    def resolve_alias(self, cmd_name: str) -> str:
        for registered_name in self.commands:
            if cmd_name in command_aliases(registered_name):
                return registered_name
        return cmd_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name if name is not None else cmd.name
        registered_name = self.resolve_alias(name or "")
        # Registering an alias of an existing command is a no-op
        if registered_name != name and registered_name in self.commands:
            return
        super().add_command(cmd, name)


class OrderedTyperGroup(AliasedTyperGroup):
    """Aliased group that lists the top-level commands in workflow order"""

    desired_order = [
        "project, p",
        "task, t",
        "event, e",
        "view, v",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.desired_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
