# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

logger = logging.getLogger("panel_planner.api")

class APIError(Exception):
    """
    Base class for API-specific exceptions.

    This class extends the standard Exception to include HTTP status codes
    and structured error details for API responses.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the APIError with HTTP status and details.

        Args:
            status_code: HTTP status code to return
            detail: Human-readable error message
            internal_code: Optional internal error code for client reference
            extra: Optional additional error context
        """
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_http_exception(self) -> HTTPException:
        """
        Convert to FastAPI HTTPException.

        Returns:
            HTTPException with appropriate status code and details
        """
        error_response = {
            "detail": self.detail,
        }

        if self.internal_code:
            error_response["code"] = self.internal_code

        if self.extra:
            error_response["extra"] = self.extra

        return HTTPException(
            status_code=self.status_code,
            detail=error_response
        )

class ValidationError(APIError):
    """Error raised for input that the planner cannot use."""
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize with validation details.

        Args:
            detail: Validation error details
            field: Optional field that failed validation
            extra: Optional additional context
        """
        message = "Validation error"
        if field:
            message += f" for field '{field}'"
        message += f": {detail}"

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            internal_code="validation_error",
            extra=extra
        )

def handle_exception(e: Exception, resource_type: str = "resource") -> HTTPException:
    """
    Convert planner exceptions to HTTPExceptions.

    ValueError (which includes catalog errors) maps to 400; anything else
    is logged and reported as 500.

    Args:
        e: The exception to handle
        resource_type: Type of resource being processed (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    if isinstance(e, APIError):
        return e.to_http_exception()

    if isinstance(e, HTTPException):
        return e

    if isinstance(e, ValueError):
        return ValidationError(str(e)).to_http_exception()

    # Log the full error
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")

    error_response = {
        "detail": f"An unexpected error occurred: {str(e)}",
        "code": "internal_server_error"
    }

    if resource_type:
        error_response["resource_type"] = resource_type

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_response
    )
