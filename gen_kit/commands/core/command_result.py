"""
Command result types for standardized command execution results.

Provides consistent result handling across all command implementations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CommandStatus(Enum):
    """Command execution status."""

    SUCCESS = "success"
    FAILED = "failed"
    VALIDATION_ERROR = "validation_error"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self == CommandStatus.SUCCESS

    def is_error(self) -> bool:
        """Check if status indicates an error."""
        return self in (CommandStatus.FAILED, CommandStatus.VALIDATION_ERROR)


@dataclass
class CommandResult:
    """Result of command execution."""

    status: CommandStatus
    data: Any | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_success(self) -> bool:
        """Check if command execution was successful."""
        return self.status.is_success()

    def is_error(self) -> bool:
        """Check if command execution failed."""
        return self.status.is_error()

    def exit_code(self) -> int:
        """Process exit status for this result."""
        return 0 if self.is_success() else 1

    @classmethod
    def success(cls, data: Any = None, **metadata: Any) -> "CommandResult":
        """Create a successful command result."""
        return cls(status=CommandStatus.SUCCESS, data=data, metadata=metadata)

    @classmethod
    def failure(cls, error_message: str) -> "CommandResult":
        """Create a failed command result."""
        return cls(status=CommandStatus.FAILED, error_message=error_message)

    @classmethod
    def validation_error(cls, error_message: str) -> "CommandResult":
        """Create a validation error command result."""
        return cls(status=CommandStatus.VALIDATION_ERROR, error_message=error_message)

    def __str__(self) -> str:
        """String representation of the command result."""
        if self.is_success():
            return f"SUCCESS: {self.data}"
        return f"{self.status.value.upper()}: {self.error_message}"
