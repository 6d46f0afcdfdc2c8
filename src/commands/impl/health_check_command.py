import time
import logging

from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import CommandContext
from src.commands.interfaces.command_result import CommandResult

logger = logging.getLogger(__name__)


class HealthCheckCommand(Command):
    """
    Reports on the relay's configuration without contacting the webhook.
    """

    def get_command_name(self) -> str:
        return "health_check"

    def get_estimated_duration_seconds(self) -> float:
        return 0.1  # Very fast operation

    def validate_context(self, context: CommandContext) -> bool:
        """Validate context - healthz needs minimal validation"""
        if not context.request_id:
            logger.error("request_id is required for health check")
            return False
        return True

    async def execute(self, context: CommandContext) -> CommandResult:
        """Execute health check workflow"""
        start_time = time.time()

        try:
            health_status = self._check_relay_health(context)
            execution_time = (time.time() - start_time) * 1000

            return CommandResult.success(
                request_id=context.request_id,
                command_name=self.get_command_name(),
                execution_time_ms=execution_time,
                data=health_status,
            )

        except Exception as e:
            execution_time = (time.time() - start_time) * 1000
            logger.error(
                f"Health check failed for request {context.request_id}: {str(e)}",
                exc_info=True,
            )

            return CommandResult.failure(
                request_id=context.request_id,
                command_name=self.get_command_name(),
                execution_time_ms=execution_time,
                error_message=str(e),
                error_details={"error_type": type(e).__name__},
            )

    def _check_relay_health(self, context: CommandContext) -> dict:
        settings = context.settings
        checks = {}

        if settings.webhook_url:
            checks["webhook"] = {
                "status": "healthy",
                "host": settings.webhook_host,
            }
        else:
            checks["webhook"] = {"status": "unhealthy", "error": "no webhook URL"}

        checks["timeout"] = {
            "status": "healthy",
            "timeout_seconds": settings.timeout_seconds,
        }

        unhealthy_count = sum(
            1 for check in checks.values() if check.get("status") == "unhealthy"
        )
        overall_status = "healthy" if unhealthy_count == 0 else "unhealthy"

        return {
            "overall_status": overall_status,
            "timestamp": time.time(),
            "checks": checks,
            "unhealthy_components": unhealthy_count,
        }
