"""Click groups used by the kt-cli typer apps."""

import click
from typer.core import TyperGroup


class FallbackGroup(TyperGroup):
    """Group that routes unknown command names to a fallback command.

    The fallback command receives the remaining arguments, so it must
    accept extra args.
    """

    fallback_command = "help"

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is None:
            command = super().get_command(ctx, self.fallback_command)
        return command


class AIGroup(FallbackGroup):
    """``kt-cli ai`` group: unknown sub-commands print the AI usage hint."""

    fallback_command = "usage"
