"""
Error types raised by the call pipeline.
"""

from enum import Enum

import httpx


class ErrorType(Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    FETCH_ERROR = "FETCH_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class PipelineError(Exception):
    """Base exception for the call pipeline.

    Common status codes:
    - 400: Bad Request - invalid input dates
    - 502: Bad Gateway - Net2Phone API failures
    - 500: Internal Server Error - anything else
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
        status_code: int = 500,
    ):
        """
        Initialize a PipelineError.

        Args:
            message (str): A human-readable error message.
            error_type (ErrorType): The category of the error.
            status_code (int): HTTP-style status code associated with the error.
        """
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(PipelineError):
    """Bad or missing input dates."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, ErrorType.VALIDATION_ERROR, status_code)


class AuthError(PipelineError):
    """The client-credentials grant against Net2Phone failed."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message, ErrorType.AUTH_ERROR, status_code)


class FetchError(PipelineError):
    """A call log request for a single day failed."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message, ErrorType.FETCH_ERROR, status_code)


class UnknownError(PipelineError):
    def __init__(self, message: str = "Unknown error occurred", status_code: int = 500):
        super().__init__(message, ErrorType.UNKNOWN_ERROR, status_code)


def describe_provider_error(exc: Exception) -> str:
    """
    Pull the most useful message out of a failed provider call.

    Prefers the ``error`` then ``message`` field of the JSON error body,
    falls back to the exception text.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            if body.get("error"):
                return str(body["error"])
            if body.get("message"):
                return str(body["message"])
    text = str(exc)
    return text if text else "Unknown error occurred"
