"""Project generator for scaffolding new projects."""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from settings import Config, get_config
from tools import GitTool, ToolResult

from .context import AI_CONTEXT_FILE, render_context_files
from .errors import UserInputError
from .protocols import ProtocolMaterializer
from .templates import (
    EXPRESS_TEMPLATE,
    PROTOCOLS_DIR,
    ProjectTemplate,
    TemplateContext,
    render_files,
)
from .writer import ensure_directory, write_text


console = Console()
logger = logging.getLogger(__name__)


class ProjectGenerator:
    """Generates a new AI-ready project.

    Runs, in order, stopping at the first fatal error:
    - Validate the name and target directory
    - Create the directory structure and initial files
    - Materialize the protocol documents
    - Write the AI context document and project metadata
    - Initialize git (best-effort, never fatal)
    - Report next steps
    """

    def __init__(
        self,
        name: str | None,
        output_dir: Path | None = None,
        template: ProjectTemplate = EXPRESS_TEMPLATE,
        config: Config | None = None,
        materializer: ProtocolMaterializer | None = None,
        now: datetime | None = None,
    ):
        """Initialize project generator.

        Args:
            name: Project name, used verbatim as the directory name
            output_dir: Parent directory for project (default: current dir)
            template: Template providing directories and files
            config: Configuration (default: global config)
            materializer: Protocol materializer (default: from config)
            now: Generation timestamp (default: current UTC time)
        """
        self.name = name or ""
        self.output_dir = output_dir or Path.cwd()
        self.project_dir = self.output_dir / self.name
        self.template = template
        self.config = config or get_config()

        if materializer is None:
            source_dir = self.config.protocols.source_dir
            materializer = ProtocolMaterializer(Path(source_dir).expanduser() if source_dir else None)
        self.materializer = materializer

        self.context = TemplateContext.create(self.name, now=now)
        self.git_result: ToolResult | None = None

    def validate(self) -> None:
        """Check the name and target directory before anything is written.

        Raises:
            UserInputError: If the name is missing or invalid, or the
                directory already exists.
        """
        if not self.name.strip():
            raise UserInputError("Project name required: kt-cli new <project-name>")

        if (
            self.name in (".", "..")
            or "/" in self.name
            or "\\" in self.name
            or self.name != self.name.strip()
        ):
            raise UserInputError(f"Invalid project name: {self.name!r}")

        if self.project_dir.exists():
            raise UserInputError(f"Directory {self.name} already exists")

    def generate(self, init_git: bool | None = None) -> Path:
        """Generate the project.

        Args:
            init_git: Initialize git repository (default: ``git.enabled``)

        Returns:
            Path to created project directory

        Raises:
            UserInputError: If validation fails (nothing is written)
            FilesystemError: If a directory or file cannot be written
        """
        self.validate()

        if init_git is None:
            init_git = self.config.git.enabled

        console.print(f"\n[bold blue]Creating AI-ready project:[/bold blue] {escape(self.name)}")
        console.print(f"[dim]Template: {self.template.name}[/dim]")
        console.print(f"[dim]Directory: {escape(str(self.project_dir))}[/dim]\n")

        self._create_directories()
        self._create_files()
        self._setup_protocols()
        self._generate_context()

        if init_git:
            self.git_result = self._init_git()
        else:
            self.git_result = ToolResult.skipped("git disabled")

        self._report()
        return self.project_dir

    def _create_directories(self) -> None:
        """Create directory structure."""
        ensure_directory(self.project_dir)
        for directory in self.template.directories:
            ensure_directory(self.project_dir / directory)
        logger.info("Created %d directories under %s", len(self.template.directories), self.project_dir)

    def _create_files(self) -> None:
        """Create files from template."""
        for file_path, content in render_files(self.template, self.context).items():
            write_text(self.project_dir / file_path, content)
            console.print(f"[green]Created:[/green] {file_path}")

    def _setup_protocols(self) -> None:
        """Copy or generate the protocol documents."""
        console.print("[bold]Setting up Knowledge Transfer Protocols...[/bold]")
        copied_from_source = self.materializer.has_source
        written = self.materializer.materialize(self.project_dir / PROTOCOLS_DIR)

        if copied_from_source:
            console.print(
                f"[green]Copied:[/green] {len(written)} protocol files from {self.materializer.source_dir}"
            )
        else:
            console.print("[green]Created:[/green] basic Knowledge Transfer Protocols")

    def _generate_context(self) -> None:
        """Write the AI context document and project metadata."""
        console.print("[bold]Generating comprehensive AI Assistant context...[/bold]")
        for file_path, content in render_context_files(self.context).items():
            write_text(self.project_dir / file_path, content)
            console.print(f"[green]Created:[/green] {file_path}")

    def _init_git(self) -> ToolResult:
        """Initialize git repository with one conventional commit.

        Failures are logged and reported as a warning, never raised.
        """
        message = self.config.git.commit_message.replace("{project_name}", self.name)
        result = GitTool(self.project_dir).initialize_repository(message)

        if result.success:
            console.print("[green]Initialized:[/green] git repository with conventional commit")
        else:
            logger.info("Git initialization failed: %s", result.error)
            console.print(
                f"[yellow]Warning:[/yellow] Git initialization skipped ({escape(result.reason)})"
            )
        return result

    def _report(self) -> None:
        console.print(f"\n[bold green]Project {escape(self.name)} created successfully![/bold green]")
        console.print(f"Location: {escape(str(self.project_dir))}")
        console.print(f"AI Context: {escape(str(self.project_dir / AI_CONTEXT_FILE))}")
        console.print("\n[bold]Next steps:[/bold]")
        console.print(f"  cd {escape(self.name)}")
        console.print("  kt-cli ai prepare  # Share context with AI assistant")
