import time
import logging
from typing import Any

from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import CommandContext
from src.commands.interfaces.command_result import CommandResult

logger = logging.getLogger(__name__)


def is_missing_command(command: Any) -> bool:
    """
    Check whether an inbound command value counts as absent.

    null, empty string, false, zero and NaN are treated as missing. Any
    other JSON value, including empty arrays and objects, is relayed.
    """
    if command is None or command is False:
        return True
    if isinstance(command, str):
        return command == ""
    if isinstance(command, (int, float)) and not isinstance(command, bool):
        return command == 0 or command != command
    return False


def _reject_constant(name: str) -> Any:
    """Refuse the NaN and Infinity tokens json.loads accepts by default"""
    raise ValueError(f"Invalid JSON constant {name}")


class RelayCommand(Command):
    """
    Forwards a single command to the configured webhook.

    Exactly one outbound POST is made per execution with the body
    {"command": <command>}. The remote HTTP status is not inspected:
    any response whose body parses as JSON is a success. Network
    errors and unparseable bodies become a failure result carrying
    the underlying error message.
    """

    def get_command_name(self) -> str:
        return "relay_command"

    def get_estimated_duration_seconds(self) -> float:
        return 5.0

    def supports_retry(self) -> bool:
        return False  # Webhook side effects are not idempotent

    def validate_context(self, context: CommandContext) -> bool:
        if is_missing_command(context.command):
            logger.error(f"command is required for request {context.request_id}")
            return False
        if context.http_client is None:
            logger.error(f"http_client is required for request {context.request_id}")
            return False
        return True

    async def execute(self, context: CommandContext) -> CommandResult:
        start_time = time.time()

        if not self.validate_context(context):
            return CommandResult.failure(
                request_id=context.request_id,
                command_name=self.get_command_name(),
                execution_time_ms=(time.time() - start_time) * 1000,
                error_message="Invalid relay context",
                error_details={"error_type": "ValidationError"},
            )

        webhook_url = context.settings.webhook_url
        logger.debug(
            f"Relaying command for request {context.request_id} "
            f"from {context.get_metadata('client', 'unknown')} "
            f"via {context.get_metadata('path', '/')} to {context.settings.webhook_host}"
        )

        try:
            response = await context.http_client.post(
                webhook_url,
                json={"command": context.command},
                headers={"Content-Type": "application/json"},
            )
            remote_body = response.json(parse_constant=_reject_constant)

        except Exception as e:
            execution_time = (time.time() - start_time) * 1000
            logger.error(
                f"Proxy error for request {context.request_id}: {str(e)}",
                exc_info=True,
            )
            return CommandResult.failure(
                request_id=context.request_id,
                command_name=self.get_command_name(),
                execution_time_ms=execution_time,
                error_message=str(e) or type(e).__name__,
                error_details={"error_type": type(e).__name__},
            )

        execution_time = (time.time() - start_time) * 1000
        return CommandResult.success(
            request_id=context.request_id,
            command_name=self.get_command_name(),
            execution_time_ms=execution_time,
            data=remote_body,
            metadata={"remote_status_code": response.status_code},
        )
