"""
Domain exceptions.

Typed exceptions for explicit error handling. Each carries the HTTP
status the API layer answers with, so route handlers never map errors
by hand.
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Attributes:
        message: Short, user-visible message
        http_status: Status code used at the HTTP boundary
    """

    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════
# VALIDATION / LOOKUP EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class InvalidArgumentError(DomainError):
    """
    Missing or malformed required field.

    Example:
        >>> raise InvalidArgumentError("userId, mealName, and foodItems are required")
    """

    http_status = 400


class NotFoundError(DomainError):
    """
    Referenced meal or food entry does not exist for this user.

    Ownership mismatches are reported the same way as missing records.

    Example:
        >>> raise NotFoundError("Meal not found")
    """

    http_status = 404


# ═══════════════════════════════════════════════════════════
# EXTERNAL SERVICE / INFRASTRUCTURE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class UpstreamError(DomainError):
    """
    External nutrition API returned a non-success status or was unreachable.

    Attributes:
        status_code: Upstream HTTP status, None on network failure

    Example:
        >>> raise UpstreamError("USDA API error", status_code=404)
    """

    http_status = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        if status_code is not None:
            message = f"{message}: {status_code}"
        super().__init__(message)
        self.status_code = status_code


class InternalError(DomainError):
    """Persistence failure or unexpected exception."""

    http_status = 500
