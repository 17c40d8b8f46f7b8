"""Result type for external commands run while scaffolding."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ToolStatus(Enum):
    """Outcome of a best-effort step."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass
class ToolResult:
    """Outcome of a best-effort step such as git initialization.

    Failures are carried here instead of being raised, so the caller can
    report them and carry on. Truthy only on success.
    """

    status: ToolStatus
    output: Any = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, output: Any = None, **metadata: Any) -> "ToolResult":
        return cls(status=ToolStatus.SUCCESS, output=output, metadata=metadata)

    @classmethod
    def failed(cls, error: str, **metadata: Any) -> "ToolResult":
        return cls(status=ToolStatus.FAILURE, error=error, metadata=metadata)

    @classmethod
    def skipped(cls, reason: str | None = None) -> "ToolResult":
        return cls(status=ToolStatus.SKIPPED, output=reason)

    @property
    def success(self) -> bool:
        return self.status == ToolStatus.SUCCESS

    @property
    def reason(self) -> str:
        """First line of the error, for one-line warnings."""
        if not self.error:
            return "unknown error"
        return self.error.strip().splitlines()[0]

    def __bool__(self) -> bool:
        return self.success
