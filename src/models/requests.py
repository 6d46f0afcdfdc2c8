from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class CommandRelayRequest(BaseModel):
    """Inbound relay body. Extra keys are accepted and ignored."""

    model_config = ConfigDict(extra="ignore")

    command: Any = Field(
        None, description="Command to forward to the webhook (any JSON value)"
    )
