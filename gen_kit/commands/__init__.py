"""
Commands package for the gen-kit CLI tool.

Each command is in its own module and returns a CommandResult.
"""

from .sample import GENERATORS, list_command, sample_command, sample_values

__all__ = ["GENERATORS", "list_command", "sample_command", "sample_values"]
