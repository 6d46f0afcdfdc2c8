from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class CommandStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class CommandResult:
    """
    Outcome of a single command execution.

    Either carries the data produced by the command, or an error
    message describing why it failed.
    """

    request_id: str
    command_name: str
    status: CommandStatus
    execution_time_ms: float
    data: Any = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success(
        cls,
        request_id: str,
        command_name: str,
        execution_time_ms: float,
        data: Any = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "CommandResult":
        return cls(
            request_id=request_id,
            command_name=command_name,
            status=CommandStatus.SUCCESS,
            execution_time_ms=execution_time_ms,
            data=data,
            metadata=metadata,
        )

    @classmethod
    def failure(
        cls,
        request_id: str,
        command_name: str,
        execution_time_ms: float,
        error_message: str,
        error_details: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "CommandResult":
        return cls(
            request_id=request_id,
            command_name=command_name,
            status=CommandStatus.FAILED,
            execution_time_ms=execution_time_ms,
            error_message=error_message,
            error_details=error_details,
            metadata=metadata,
        )

    def is_success(self) -> bool:
        return self.status == CommandStatus.SUCCESS

    def is_failure(self) -> bool:
        return self.status == CommandStatus.FAILED
