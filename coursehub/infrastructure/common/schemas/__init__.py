"""Common schemas shared across contexts."""

from coursehub.infrastructure.common.schemas.response_wrappers import (
    ErrorResponse,
    HealthResponse,
    ServiceInfoResponse,
)

__all__ = ["ErrorResponse", "HealthResponse", "ServiceInfoResponse"]
