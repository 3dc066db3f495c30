"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request."""

    error: str
    detail: str


class HealthResponse(BaseModel):
    status: str


class ServiceInfoResponse(BaseModel):
    """Service name, version and where to find the API."""

    message: str
    version: str
    docs: str
    api: str
