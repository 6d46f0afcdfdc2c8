from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class RelaySuccessResponse(BaseModel):
    proxy_status: str = Field("ok", description="Always 'ok' when the relay succeeded")
    google_response: Any = Field(
        ..., description="Parsed JSON body returned by the webhook"
    )


class ErrorResponse(BaseModel):
    """Error envelope shared by every non-2xx response"""

    error: str
    detail: Optional[str] = None


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint"""

    status: str
    request_id: str
    overall_status: str = Field(..., description="Overall relay health status")
    timestamp: float = Field(..., description="Unix timestamp of the health check")
    checks: Dict[str, Dict[str, Any]] = Field(
        ..., description="Individual component health checks"
    )
    unhealthy_components: int = Field(..., description="Number of unhealthy components")
