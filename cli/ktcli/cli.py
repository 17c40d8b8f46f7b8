"""kt-cli command-line interface.

Creates AI-ready projects with Knowledge Transfer Protocols and shares
their context with AI assistants.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from cli.ktcli.groups import FallbackGroup
from cli.ktcli.output import (
    console,
    print_config,
    print_error,
    print_info,
    print_success,
    print_usage,
    print_warning,
    setup_logging,
)

EXTRA_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}

app = typer.Typer(
    name="kt-cli",
    help="Knowledge Transfer CLI - AI-Optimized Protocol Management",
    cls=FallbackGroup,
    invoke_without_command=True,
    context_settings=EXTRA_ARGS,
)

# Config sub-app
config_app = typer.Typer(
    name="config",
    help="Manage configuration settings.",
)
app.add_typer(config_app, name="config")

# Register command sub-apps
from cli.commands.ai import ai_app

app.add_typer(ai_app, name="ai")


@app.callback()
def bootstrap(ctx: typer.Context) -> None:
    """Knowledge Transfer CLI - AI-Optimized Protocol Management."""
    from settings import ensure_config_dir, get_config

    config = get_config()
    setup_logging(config.general.log_level)
    ensure_config_dir(config)

    if ctx.invoked_subcommand is None:
        _show_usage()


def _show_usage() -> None:
    from cli.ktcli import __version__

    print_usage(__version__)


@app.command(context_settings=EXTRA_ARGS)
def new(
    name: Optional[str] = typer.Argument(None, help="Project name (also the directory name)"),
    no_git: bool = typer.Option(
        False,
        "--no-git",
        help="Skip git initialization",
    ),
) -> None:
    """Create a new project with Knowledge Transfer Protocols.

    Examples:
        kt-cli new my-awesome-app
        kt-cli new my-awesome-app --no-git
    """
    from scaffolding import FilesystemError, ProjectGenerator, UserInputError

    try:
        generator = ProjectGenerator(name)
        generator.generate(init_git=False if no_git else None)
    except UserInputError as e:
        print_error(escape(str(e)))
        return
    except FilesystemError as e:
        print_error(f"Error: {escape(str(e))}")
        raise typer.Exit(1)


@app.command(context_settings=EXTRA_ARGS)
def learn(ctx: typer.Context) -> None:
    """Capture lessons learned during development (not implemented yet)."""
    command = " ".join(["learn", *ctx.args[:1]])
    print_warning(f"'{escape(command)}' is not implemented yet.")
    _show_usage()


@app.command(context_settings=EXTRA_ARGS)
def sync() -> None:
    """Update to latest protocols (not implemented yet)."""
    print_warning("'sync' is not implemented yet.")


@app.command(context_settings=EXTRA_ARGS)
def version() -> None:
    """Show kt-cli version."""
    from cli.ktcli import __version__

    console.print(f"kt-cli v{__version__}")


@app.command("help", context_settings=EXTRA_ARGS)
def help_command() -> None:
    """Show usage."""
    _show_usage()


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    from settings import find_config_file, get_config

    config_path = find_config_file()
    if config_path:
        print_info(f"Config file: {escape(str(config_path))}")
    else:
        print_warning("No config file found (using defaults)")

    config = get_config()
    print_info(f"Config directory: {escape(str(config.config_dir))}")
    print_config(config.sections())


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing config.toml",
    ),
) -> None:
    """Create a default config.toml in the config directory.

    Example:
        kt-cli config init
        kt-cli config init --force
    """
    from settings import get_config, reload_config

    config_path = Path(get_config().config_dir) / "config.toml"

    if config_path.exists() and not force:
        print_warning(f"Config file already exists: {escape(str(config_path))}")
        print_info("Use --force to overwrite")
        raise typer.Exit(1)

    default_config = '''# kt-cli configuration
# Auto-generated by 'kt-cli config init'

[general]
# WARNING, INFO or DEBUG (log records go to stderr)
log_level = "WARNING"

[protocols]
# Directory copied into BestPractices/Generic of new projects
# (empty = bundled protocols, or the built-in documents)
source_dir = ""

[git]
enabled = true
commit_message = "feat: initial {project_name} setup with Knowledge Transfer Protocols"
'''

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(default_config, encoding="utf-8")
    print_success(f"Created config file: {escape(str(config_path))}")

    reload_config()


def main() -> None:
    """Main entry point for the CLI.

    Errors that escape a command are reported on one line with exit code 1.
    """
    try:
        app()
    except Exception as e:
        print_error(f"Error: {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
