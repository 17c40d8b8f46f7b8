"""Rich console output utilities for the kt-cli CLI."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


console = Console()
error_console = Console(stderr=True)

BANNER = "━" * 46

USAGE_TEXT = """\
[bold]USAGE:[/bold]
  kt-cli <command> \\[options]

[bold]COMMANDS:[/bold]
  new <name>      Create new project with Knowledge Transfer Protocols
  ai prepare      Generate context for AI assistant
  ai validate     Test AI understanding of protocols
  ai handoff      Create handoff package for new AI session
  learn capture   Capture lessons learned during development
  sync            Update to latest protocols
  config show     Show current configuration
  config init     Create a default config file
  version         Show version information
  help            Show this help

[bold]EXAMPLES:[/bold]
  kt-cli new my-awesome-app
  kt-cli ai prepare
  kt-cli sync protocols\
"""


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {message}")


def print_banner() -> None:
    console.print(BANNER)


def print_usage(version: str) -> None:
    """Print the top-level usage text."""
    console.print(
        Panel(
            USAGE_TEXT,
            title=f"[bold cyan]Knowledge Transfer CLI v{escape(version)}[/bold cyan]",
            subtitle="[dim]AI-Optimized Protocol Management System[/dim]",
            border_style="cyan",
            expand=False,
        )
    )


def print_config(sections: list[tuple[str, Any]]) -> None:
    """Print configuration sections as tables."""
    for name, section_config in sections:
        console.print(f"\n[bold]\\[{name}][/bold]")

        table = Table(show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for key, value in vars(section_config).items():
            if not key.startswith("_"):
                table.add_row(key, escape(str(value)))

        console.print(table)


def setup_logging(level: str = "WARNING") -> None:
    """Send log records to stderr through rich.

    Safe to call more than once; only one handler is installed.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not any(isinstance(handler, RichHandler) for handler in root_logger.handlers):
        root_logger.addHandler(
            RichHandler(console=error_console, show_path=False, markup=False)
        )
