"""API exception hierarchy for consistent error handling.

All API exceptions inherit from SwitchboardAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from switchboard.api.models.errors import ErrorCode


class SwitchboardAPIError(Exception):
    """Base exception for all API errors.

    Subclasses set status_code and error_code to define the HTTP response.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(SwitchboardAPIError):
    """Raised when a request is well-formed but semantically invalid."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class CustomerNotFoundError(SwitchboardAPIError):
    """Raised when no settings are stored for a customer_id."""

    status_code = 404
    error_code = ErrorCode.CUSTOMER_NOT_FOUND

    def __init__(self, customer_id: str) -> None:
        super().__init__(f"No settings found for customer {customer_id}")
        self.customer_id = customer_id
