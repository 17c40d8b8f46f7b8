"""Knowledge Transfer CLI.

Command-line interface for creating AI-ready projects. The typer app
lives in ``cli.ktcli.cli``.
"""

__version__ = "1.0.0-alpha"

__all__ = ["__version__"]
