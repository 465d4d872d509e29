"""Domain exceptions and FastAPI exception handlers.

Every failure of the sales report pipeline is raised during validation,
before any aggregation starts. Handlers render them as RFC 7807 Problem
Details.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from sales_analytics.core.logging import get_logger
from sales_analytics.core.middleware import bind_request_outcome
from sales_analytics.core.problem_details import (
    ERROR_TYPES,
    ProblemDetailResponse,
    problem_response,
)

logger = get_logger(__name__)


# =============================================================================
# Exception Classes
# =============================================================================


class SalesAnalyticsError(Exception):
    """Base exception for sales analytics errors.

    Each exception type maps to an RFC 7807 problem type URI.
    """

    error_type_uri: str = ERROR_TYPES["INTERNAL_ERROR"]

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application error.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code.
            status_code: HTTP status code.
            details: Additional error context.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    @property
    def title(self) -> str:
        """RFC 7807 title - short summary of problem type."""
        return self.code.replace("_", " ").title()


# -----------------------------------------------------------------------------
# Dataset errors
# -----------------------------------------------------------------------------


class DatasetValidationError(SalesAnalyticsError):
    """The dataset is structurally unusable."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 422,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code=code, status_code=status_code, details=details)
        self.error_type_uri = ERROR_TYPES.get(code, ERROR_TYPES["VALIDATION_ERROR"])


class InvalidInputError(DatasetValidationError):
    """Dataset is missing or is not a structured record."""

    def __init__(self, message: str = "Dataset must be a mapping", received: str = "None") -> None:
        super().__init__(
            message=message,
            code="INVALID_INPUT",
            details={"received_type": received},
        )


class MissingFieldError(DatasetValidationError):
    """One of the required dataset collections is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(
            message=f"Missing required field: {field}",
            code="MISSING_FIELD",
            details={"field": field},
        )
        self.field = field


class InvalidTypeError(DatasetValidationError):
    """A required dataset collection is not a sequence."""

    def __init__(self, field: str, received: str) -> None:
        super().__init__(
            message=f"Field {field} must be a list, got {received}",
            code="INVALID_TYPE",
            details={"field": field, "received_type": received},
        )
        self.field = field


class EmptyCollectionError(DatasetValidationError):
    """A required dataset collection has no elements."""

    def __init__(self, field: str) -> None:
        super().__init__(
            message=f"Field {field} must not be empty",
            code="EMPTY_COLLECTION",
            details={"field": field},
        )
        self.field = field


class InvalidRecordError(DatasetValidationError):
    """An element of a dataset collection cannot be parsed."""

    def __init__(self, field: str, errors: list[dict[str, str]]) -> None:
        super().__init__(
            message=f"Field {field} contains {len(errors)} invalid value(s)",
            code="INVALID_RECORD",
            details={"field": field, "errors": errors},
        )
        self.field = field
        self.errors = errors


# -----------------------------------------------------------------------------
# Options errors
# -----------------------------------------------------------------------------


class OptionsError(SalesAnalyticsError):
    """Calculation options are unusable."""

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code=code, status_code=400, details=details)
        self.error_type_uri = ERROR_TYPES.get(code, ERROR_TYPES["VALIDATION_ERROR"])


class MissingOptionsError(OptionsError):
    """Options object is missing or malformed."""

    def __init__(self, received: str = "None") -> None:
        super().__init__(
            message="Calculation options were not provided",
            code="MISSING_OPTIONS",
            details={"received_type": received},
        )


class InvalidOptionError(OptionsError):
    """An option value is outside its allowed range."""

    def __init__(self, option: str, value: object, reason: str) -> None:
        super().__init__(
            message=f"Option {option} {reason}, got {value!r}",
            code="INVALID_OPTION",
            details={"option": option, "value": repr(value)},
        )
        self.option = option


class MissingStrategyError(OptionsError):
    """Revenue and/or bonus strategy is absent or not callable."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            message=f"Missing calculation strategies: {', '.join(missing)}",
            code="MISSING_STRATEGY",
            details={"missing": missing},
        )
        self.missing = missing


# =============================================================================
# Exception Handlers (RFC 7807)
# =============================================================================


async def sales_analytics_exception_handler(
    request: Request,
    exc: SalesAnalyticsError,
) -> ProblemDetailResponse:
    """Handle SalesAnalyticsError exceptions with RFC 7807 Problem Details.

    Args:
        request: FastAPI request object.
        exc: The raised exception.

    Returns:
        RFC 7807 Problem Detail response.
    """
    bind_request_outcome(request, error_code=exc.code)
    logger.warning(
        "app.error_handled",
        error=exc.message,
        error_type=type(exc).__name__,
        error_code=exc.code,
        status_code=exc.status_code,
        details=exc.details,
    )

    return problem_response(
        status=exc.status_code,
        title=exc.title,
        detail=exc.message,
        error_code=exc.code,
        errors=exc.details.get("errors"),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> ProblemDetailResponse:
    """Handle request validation errors with RFC 7807 Problem Details.

    Args:
        request: FastAPI request object.
        exc: Pydantic validation error.

    Returns:
        RFC 7807 Problem Detail response with field-level errors.
    """
    field_errors: list[dict[str, str]] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_path = ".".join(str(part) for part in loc if part != "body")
        field_errors.append(
            {
                "field": field_path,
                "message": str(error.get("msg", "Validation failed")),
                "type": str(error.get("type", "unknown")),
            }
        )

    logger.warning(
        "app.validation_error",
        error_count=len(field_errors),
        path=str(request.url.path),
        fields=[e["field"] for e in field_errors],
    )

    return problem_response(
        status=422,
        title="Validation Error",
        detail=f"Request validation failed with {len(field_errors)} error(s). "
        "Check the 'errors' field for details.",
        error_code="VALIDATION_ERROR",
        errors=field_errors,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> ProblemDetailResponse:
    """Handle unexpected exceptions with RFC 7807 Problem Details.

    Args:
        request: FastAPI request object.
        exc: The raised exception.

    Returns:
        RFC 7807 Problem Detail response.
    """
    logger.error(
        "app.unhandled_error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=str(request.url.path),
        exc_info=True,
    )

    return problem_response(
        status=500,
        title="Internal Server Error",
        detail="An unexpected error occurred. Contact support with the request_id.",
        error_code="INTERNAL_ERROR",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(SalesAnalyticsError, sales_analytics_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
