"""Tools module for external operations.

Provides:
- Git repository initialization for new projects
- The result type for best-effort steps
"""

from .base import ToolResult, ToolStatus
from .git_tool import GitTool, VersionControlError

__all__ = [
    "ToolResult",
    "ToolStatus",
    "GitTool",
    "VersionControlError",
]
