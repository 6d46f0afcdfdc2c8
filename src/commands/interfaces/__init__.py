"""
Command pattern interfaces for the command relay.
"""

from .command import Command
from .command_context import CommandContext
from .command_result import CommandResult, CommandStatus

__all__ = ["Command", "CommandContext", "CommandResult", "CommandStatus"]
