from abc import ABC, abstractmethod
import logging
from .command_context import CommandContext
from .command_result import CommandResult


class Command(ABC):
    """
    Base interface for all commands in the relay service.

    Commands encapsulate a single operation and can be executed
    independently of the API layer.

    All commands must implement:
    - execute(): The operation itself
    - get_command_name(): Unique identifier for the command
    - validate_context(): Context validation before execution
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def execute(self, context: CommandContext) -> CommandResult:
        """
        Execute the command with the given context.

        Args:
            context: CommandContext containing all necessary data and dependencies

        Returns:
            CommandResult with execution status, data, and metadata
        """
        pass

    @abstractmethod
    def get_command_name(self) -> str:
        """
        Return unique identifier for this command.

        Used for logging and in the returned CommandResult. Should be
        lowercase with underscores (e.g., 'relay_command').
        """
        pass

    @abstractmethod
    def validate_context(self, context: CommandContext) -> bool:
        """
        Validate that the context contains all required data for execution.

        Must not modify the context.

        Returns:
            True if context is valid, False otherwise
        """
        pass

    def get_estimated_duration_seconds(self) -> float:
        """Return estimated execution duration in seconds."""
        return 30.0

    def supports_retry(self) -> bool:
        """
        Return whether this command may be retried on failure.

        Commands that trigger side effects outside this service should
        return False.
        """
        return True

    async def pre_execute_hook(self, context: CommandContext) -> None:
        """Hook called before command execution."""
        self.logger.info(
            f"Executing command '{self.get_command_name()}' for request {context.request_id}"
        )

    async def post_execute_hook(
        self, context: CommandContext, result: CommandResult
    ) -> None:
        """Hook called after command execution."""
        status_msg = "successfully" if result.is_success() else "with errors"
        self.logger.info(
            f"Command '{self.get_command_name()}' completed {status_msg} "
            f"for request {context.request_id} in {result.execution_time_ms:.2f}ms"
        )

    async def run(self, context: CommandContext) -> CommandResult:
        """Execute the command wrapped in its pre/post hooks."""
        await self.pre_execute_hook(context)
        result = await self.execute(context)
        await self.post_execute_hook(context, result)
        return result

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.get_command_name()}')"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"name='{self.get_command_name()}', "
            f"estimated_duration={self.get_estimated_duration_seconds()}s, "
            f"supports_retry={self.supports_retry()}"
            f")"
        )
