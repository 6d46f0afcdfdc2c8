import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

from src.config.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_WEBHOOK_URL,
    LOG_LEVEL_ENV,
    TIMEOUT_SECONDS_ENV,
    WEBHOOK_URL_ENV,
)


@dataclass(frozen=True)
class RelaySettings:
    """
    Immutable configuration for the command relay.

    Built once when the application is created and handed to routes
    through a FastAPI dependency. The webhook URL is the only
    functional configuration surface; the timeout is unset by default
    so the outbound call waits as long as the webhook takes.
    """

    webhook_url: str = DEFAULT_WEBHOOK_URL
    timeout_seconds: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate settings after initialization"""
        if not self.webhook_url:
            raise ValueError("webhook_url is required")
        parsed = urlparse(self.webhook_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"webhook_url must be an http(s) URL: {self.webhook_url}")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive when set")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"log_level must be a logging level name, got {self.log_level!r}")

    @property
    def webhook_host(self) -> str:
        return urlparse(self.webhook_url).netloc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RelaySettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            RelaySettings populated from the environment, with defaults
            for anything unset
        """
        env = os.environ if environ is None else environ

        webhook_url = env.get(WEBHOOK_URL_ENV) or DEFAULT_WEBHOOK_URL
        log_level = (env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()

        timeout_raw = (env.get(TIMEOUT_SECONDS_ENV) or "").strip()
        timeout_seconds = None
        if timeout_raw:
            try:
                timeout_seconds = float(timeout_raw)
            except ValueError:
                raise ValueError(
                    f"{TIMEOUT_SECONDS_ENV} must be a number, got {timeout_raw!r}"
                )

        return cls(
            webhook_url=webhook_url,
            timeout_seconds=timeout_seconds,
            log_level=log_level,
        )
