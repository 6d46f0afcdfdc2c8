from typing import Any, Dict, Optional
from dataclasses import dataclass

import httpx

from src.config.relay_settings import RelaySettings


@dataclass
class CommandContext:
    """
    Encapsulates all data and dependencies needed for command execution.

    The router builds one context per inbound request; commands never
    look up configuration or clients on their own.
    """

    # Core execution parameters
    request_id: str
    settings: RelaySettings

    # Outbound transport, only needed by commands that call the webhook
    http_client: Optional[httpx.AsyncClient] = None

    # The value of the inbound "command" field, relayed as-is
    command: Any = None

    # Additional context (client address, route, ...)
    metadata: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        """Validate context after initialization"""
        if not self.request_id:
            raise ValueError("request_id is required")
        if not self.settings:
            raise ValueError("settings is required")

    def get_metadata(self, key: str, default: Any = None) -> Any:
        """Get metadata value with fallback"""
        if self.metadata is None:
            return default
        return self.metadata.get(key, default)

    def add_metadata(self, key: str, value: Any) -> None:
        """Add metadata key-value pair"""
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value
