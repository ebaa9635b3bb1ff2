"""
Error types for the NemLager API harness.

Request helpers never raise these for request/response problems; they are
returned in ApiResult.error so tests can inspect the status code alongside
the failure. authenticate() and ApiResult.unwrap() raise them.
"""

from typing import Optional


class ApiError(Exception):
    """Base class for every failed API call."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class TransportError(ApiError):
    """No response was received (DNS, connect, TLS, reset)."""

    def __init__(self, message: str):
        super().__init__(message, status=None)


class RequestTimeoutError(TransportError):
    """The request did not complete within the configured timeout."""


class HttpStatusError(ApiError):
    """The server answered with a status >= 400 and an error envelope."""

    def __init__(self, status: int, message: str):
        super().__init__(message, status=status)

    def __str__(self):
        return f"{self.status}: {self.message}"


class DecodeError(ApiError):
    """The response body could not be decoded into the expected shape."""


class EnvFileError(Exception):
    """The env file is missing, malformed or lacks required keys."""
