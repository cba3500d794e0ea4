#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Custom exception classes and error handling utilities for the YouTube MCP server.

Every failure an operation can report is an ``AppBaseError`` subclass, so the
operation layer can turn it into an error payload and the HTTP layer into an
``HTTPException`` without inspecting library-specific exception types.
"""

from typing import Optional
from fastapi import HTTPException, status


# --- Base Exception Class ---

class AppBaseError(Exception):
    """Base class for all application-specific exceptions.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        http_status_code: HTTP status code to use in API responses
    """

    def __init__(self, message: str, error_code: Optional[str] = None,
                http_status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            http_status_code: HTTP status code to use in API responses
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.http_status_code = http_status_code
        super().__init__(message)

    def to_http_exception(self) -> HTTPException:
        """Convert this exception to a FastAPI HTTPException.

        Returns:
            HTTPException: FastAPI exception with appropriate status and headers
        """
        return HTTPException(
            status_code=self.http_status_code,
            detail=self.message,
            headers={"X-Error-Code": self.error_code}
        )


# --- Input Exceptions ---

class InvalidInputError(AppBaseError):
    """Raised when the user input is invalid."""

    def __init__(self, message: str = "Invalid input", error_code: str = "INVALID_INPUT"):
        super().__init__(
            message=message,
            error_code=error_code,
            http_status_code=status.HTTP_400_BAD_REQUEST
        )


class IdentifierParseError(InvalidInputError):
    """Raised when no video ID or channel identifier can be extracted from the input."""

    def __init__(self, message: str = "Could not extract identifier"):
        super().__init__(message=message, error_code="IDENTIFIER_PARSE_ERROR")


# --- Upstream Exceptions ---

class UpstreamApiError(AppBaseError):
    """Raised when the YouTube Data API answers with a non-success status.

    Attributes:
        status: The HTTP status returned by the API.
        body: The raw response body, as text.
    """

    def __init__(self, status_code: int, body: str):
        self.status = status_code
        self.body = body
        super().__init__(
            message=f"YouTube API error ({status_code}): {body}",
            error_code="UPSTREAM_API_ERROR",
            http_status_code=status.HTTP_502_BAD_GATEWAY
        )


class ResourceNotFoundError(AppBaseError):
    """Raised when a requested YouTube resource or tool cannot be found."""

    def __init__(self, message: str = "Resource not found or inaccessible", error_code: str = "RESOURCE_NOT_FOUND"):
        super().__init__(
            message=message,
            error_code=error_code,
            http_status_code=status.HTTP_404_NOT_FOUND
        )


class TranscriptFetchError(AppBaseError):
    """Raised when captions cannot be retrieved for a video."""

    def __init__(self, message: str = "Could not retrieve transcript"):
        super().__init__(
            message=message,
            error_code="TRANSCRIPT_FETCH_ERROR",
            http_status_code=status.HTTP_502_BAD_GATEWAY
        )


class APIConfigurationError(AppBaseError):
    """Raised when there's an issue with the API configuration."""

    def __init__(self, message: str = "API configuration error"):
        super().__init__(
            message=message,
            error_code="API_CONFIG_ERROR",
            http_status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )


# --- Error Handling Utilities ---

def handle_exception(exception: Exception) -> HTTPException:
    """Convert any exception to an appropriate HTTPException.

    Args:
        exception: The exception to handle

    Returns:
        HTTPException: FastAPI exception with appropriate status and headers
    """
    if isinstance(exception, AppBaseError):
        return exception.to_http_exception()

    elif isinstance(exception, ValueError):
        return InvalidInputError(str(exception)).to_http_exception()

    elif isinstance(exception, HTTPException):
        return exception

    else:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {type(exception).__name__}",
            headers={"X-Error-Code": "INTERNAL_SERVER_ERROR"}
        )
