"""AI assistant commands for kt-cli.

Share the generated project context with an AI chat assistant.
"""

from pathlib import Path

import typer

from cli.ktcli.groups import AIGroup
from cli.ktcli.output import console, print_banner, print_error, print_success, print_warning
from scaffolding import AI_CONTEXT_FILE

EXTRA_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}

ai_app = typer.Typer(
    name="ai",
    help="Share project context with an AI assistant.",
    cls=AIGroup,
    invoke_without_command=True,
    context_settings=EXTRA_ARGS,
)


def print_ai_usage() -> None:
    console.print("AI Commands:")
    console.print("  kt-cli ai prepare   - Generate context for AI assistant")
    console.print("  kt-cli ai validate  - Test AI understanding of protocols")
    console.print("  kt-cli ai handoff   - Create handoff package for new AI session")


@ai_app.callback()
def ai_callback(ctx: typer.Context) -> None:
    """Share project context with an AI assistant."""
    if ctx.invoked_subcommand is None:
        print_ai_usage()


@ai_app.command("prepare")
def prepare() -> None:
    """Print the project's AI context for pasting into an assistant.

    Must be run from the root of a project created with ``kt-cli new``.
    """
    context_path = Path.cwd() / AI_CONTEXT_FILE

    if not context_path.is_file():
        print_error("No AI context found. Run this in a kt-cli project directory.")
        return

    try:
        content = context_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read {AI_CONTEXT_FILE}: {e}")
        raise typer.Exit(1)

    console.print("Preparing AI Assistant context...")
    console.print("")
    console.print("Share this with your AI Assistant:")
    print_banner()
    console.print("")
    console.print("I'm working on a project that uses Knowledge Transfer Protocols.")
    console.print("Please read and understand this context:")
    console.print("")
    # Echoed verbatim: the document contains [brackets] rich would parse as markup
    typer.echo(content)
    console.print("")
    print_banner()
    console.print("")
    print_success("Copy the above text and share it with your AI assistant")


@ai_app.command("validate", context_settings=EXTRA_ARGS)
def validate() -> None:
    """Test AI understanding of protocols (not implemented yet)."""
    print_warning("'ai validate' is not implemented yet.")
    print_ai_usage()


@ai_app.command("handoff", context_settings=EXTRA_ARGS)
def handoff() -> None:
    """Create a handoff package for a new AI session (not implemented yet)."""
    print_warning("'ai handoff' is not implemented yet.")
    print_ai_usage()


@ai_app.command("usage", hidden=True, context_settings=EXTRA_ARGS)
def usage() -> None:
    """Show AI command usage."""
    print_ai_usage()
