"""
Error handling utilities for the Jupiter swap client.

This module defines the exception hierarchy raised by the clients:
- Transport failures are surfaced unchanged from httpx (``NetworkFailure``)
- Non-success status codes become ``RequestRejected`` subclasses
- Bodies that do not match the expected shape become ``DecodeFailure`` subclasses
- Registry lookups with no match become ``NotFound`` subclasses
"""

from enum import Enum
from typing import Any, Dict, Optional

import httpx

# Transport-level errors are not wrapped; callers catch httpx's own hierarchy.
NetworkFailure = httpx.TransportError


class ErrorCode(Enum):
    """Error codes for the Jupiter swap client."""
    # General errors
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001

    # Remote service errors
    REQUEST_REJECTED = 2001

    # Data errors
    DECODE_ERROR = 4000
    NOT_FOUND = 4004


class JupiterError(Exception):
    """Base exception class for all Jupiter swap client errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize a new JupiterError.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        formatted_message = f"[{error_code.name}] {message}"
        if details:
            formatted_message += f" - Details: {details}"

        super().__init__(formatted_message)


class ConfigurationError(JupiterError):
    """Error raised when client settings are invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class RequestRejected(JupiterError):
    """The remote service answered with a non-success status code."""

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        """
        Initialize the rejection error.

        Args:
            message: Error message
            status_code: HTTP status code returned by the service
            body: Raw response body, if any
        """
        self.status_code = status_code
        self.body = body
        super().__init__(message, ErrorCode.REQUEST_REJECTED, {"status_code": status_code})


class DecodeFailure(JupiterError):
    """A response body was present but did not conform to the expected shape."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        status_code: Optional[int] = None
    ):
        """
        Initialize the decode error.

        Args:
            message: Error message
            original_error: The parsing/validation exception that caused this error
            status_code: HTTP status code of the response that failed to decode
        """
        self.original_error = original_error
        self.status_code = status_code
        details: Dict[str, Any] = {"status_code": status_code}
        if original_error is not None:
            details["original_error"] = str(original_error)
        super().__init__(message, ErrorCode.DECODE_ERROR, details)


class NotFound(JupiterError):
    """A registry lookup produced no match."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_FOUND, details)


class TokenNotFoundError(NotFound):
    """No token in the registry matches the given symbol or mint."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No token found for: {query}", {"query": query})


# Quote errors

class QuoteRequestFailed(JupiterError):
    """Base class for failures of the quote request."""


class QuoteRejected(QuoteRequestFailed, RequestRejected):
    """The quote endpoint answered with a non-success status code."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Quote request failed with status code: {status_code}", status_code, body)


class QuoteDecodeFailed(QuoteRequestFailed, DecodeFailure):
    """The quote endpoint answered with a body that is not a quote."""

    def __init__(self, original_error: Exception, status_code: Optional[int] = None):
        super().__init__(f"Could not decode quote response: {original_error}", original_error, status_code)


# Swap build errors

class SwapBuildFailed(JupiterError):
    """Base class for failures of the swap build request."""


class SwapRejected(SwapBuildFailed, RequestRejected):
    """The swap endpoint answered with a non-success status code."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Swap request failed with status code: {status_code}", status_code, body)


class SwapDecodeFailed(SwapBuildFailed, DecodeFailure):
    """The swap endpoint answered without a usable transaction payload."""

    def __init__(self, original_error: Exception, status_code: Optional[int] = None):
        super().__init__(
            f"Could not decode swap transaction (status code: {status_code}): {original_error}",
            original_error,
            status_code
        )


# Token list errors

class TokenListRejected(RequestRejected):
    """The token list host answered with a non-success status code."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Token list request failed with status code: {status_code}", status_code, body)


class TokenListDecodeFailed(DecodeFailure):
    """The token list body is not an array of token entries."""

    def __init__(self, original_error: Exception, status_code: Optional[int] = None):
        super().__init__(f"Could not decode token list: {original_error}", original_error, status_code)
