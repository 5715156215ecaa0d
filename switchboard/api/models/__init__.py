"""API request, response and error models."""

from switchboard.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from switchboard.api.models.requests import PolicyRequest, PromptRequest, VerticalResolveRequest
from switchboard.api.models.responses import (
    HealthResponse,
    PromptResponse,
    VerticalResolveResponse,
    VerticalSummary,
)

__all__ = [
    # Errors
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    # Requests
    "PolicyRequest",
    "PromptRequest",
    "VerticalResolveRequest",
    # Responses
    "HealthResponse",
    "PromptResponse",
    "VerticalResolveResponse",
    "VerticalSummary",
]
