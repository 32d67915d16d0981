# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the site.
# Errors should tell HOW to fix, not just WHAT failed.
#
# JSON endpoints answer with {"error": ..., "code": ...}. Guarded admin pages
# answer an unauthenticated request with a redirect to the login page.
# =============================================================================

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from lib.database import DatabaseError

logger = logging.getLogger(__name__)

LOGIN_PATH = "/admin/login"


class PortfolioException(Exception):
    """
    Base exception for the portfolio site.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PORTFOLIO_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class MissingFieldsError(PortfolioException):
    """Raised when a submission lacks required fields."""

    def __init__(self, fields: list[str], message: str | None = None):
        super().__init__(
            message=message or f"{', '.join(fields)} required",
            code="MISSING_FIELDS",
            status_code=400,
            suggestion="Fill in every required field and submit again",
            details={"fields": fields},
        )


class StoreUnavailableError(PortfolioException):
    """Raised when a write to the database fails."""

    def __init__(self, error: str | None = None):
        super().__init__(
            message="db error",
            code="DB_ERROR",
            status_code=500,
            suggestion="Try again later or contact the site owner if the issue persists",
            details={"error": error} if error else None,
        )


class LoginRequired(Exception):
    """
    Raised by the admin guard when the request has no valid admin session.

    Never shown as an error: the handler turns it into a redirect to the
    login page.
    """


# =============================================================================
# Exception Handlers
# =============================================================================

async def portfolio_exception_handler(
    request: Request,
    exc: PortfolioException
) -> JSONResponse:
    """
    Convert PortfolioException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def database_exception_handler(
    request: Request,
    exc: DatabaseError
) -> JSONResponse:
    """Store failures that no route handled become a generic 500."""
    logger.error(f"Unhandled database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "db error", "code": exc.code},
    )


async def login_required_handler(
    request: Request,
    exc: LoginRequired
) -> RedirectResponse:
    """Send the visitor to the login page."""
    return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
