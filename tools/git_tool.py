"""Git operations for freshly scaffolded projects."""

import logging
import subprocess
from pathlib import Path

from .base import ToolResult


logger = logging.getLogger(__name__)


class VersionControlError(Exception):
    """Raised when a git command fails or git is not installed."""

    pass


class GitTool:
    """Runs the git commands that follow scaffolding.

    Commands run with ``cwd`` set to the repository, so the working
    directory of the calling process never changes.
    """

    def __init__(self, repo_path: Path | str | None = None) -> None:
        """Initialize Git tool.

        Args:
            repo_path: Path to repository (default: current directory)
        """
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()

    def _run_git(self, *args: str) -> subprocess.CompletedProcess:
        """Run a git command in the repository.

        Raises:
            VersionControlError: If git is missing or exits non-zero.
        """
        cmd = ["git", *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            raise VersionControlError("Git is not installed or not in PATH")
        except OSError as e:
            raise VersionControlError(f"Cannot run {' '.join(cmd)}: {e}") from e

        if result.returncode != 0:
            raise VersionControlError(
                f"Git command failed: {' '.join(cmd)}\n"
                f"stderr: {result.stderr.strip()}"
            )
        return result

    def initialize_repository(self, message: str) -> ToolResult:
        """Run ``git init``, ``git add .`` and a single commit.

        Each command is attempted once; the first failure stops the
        sequence and is returned as a failure result.

        Args:
            message: Commit message for the initial commit

        Returns:
            ToolResult; ``metadata["completed"]`` lists the steps that ran
        """
        completed: list[str] = []
        steps = [
            ("init", ("init",)),
            ("add", ("add", ".")),
            ("commit", ("commit", "-m", message)),
        ]

        for step, args in steps:
            try:
                self._run_git(*args)
            except VersionControlError as e:
                logger.debug("git %s failed in %s: %s", step, self.repo_path, e)
                return ToolResult.failed(str(e), completed=completed, failed_step=step)
            completed.append(step)

        logger.info("Initialized git repository in %s", self.repo_path)
        return ToolResult.ok(message, completed=completed)
