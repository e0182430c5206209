"""Converter error hierarchy and the mapping from exceptions to error pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ErrorCodes = {
    "MISSING_INPUT": "MISSING_INPUT",
    "UNPARSEABLE_INPUT": "UNPARSEABLE_INPUT",
    "UNKNOWN_UNIT": "UNKNOWN_UNIT",
    "UNKNOWN_CATEGORY": "UNKNOWN_CATEGORY",
    "TEMPLATE_RENDER_FAILURE": "TEMPLATE_RENDER_FAILURE",
    "INTERNAL_ERROR": "INTERNAL_ERROR",
}


class ConverterError(Exception):
    """Base class for errors surfaced to the user as an error page."""

    code: str = ErrorCodes["INTERNAL_ERROR"]
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingInputError(ConverterError):
    """The numeric field was empty."""

    code = ErrorCodes["MISSING_INPUT"]
    status_code = 400

    def __init__(self, field: str = "num") -> None:
        super().__init__("please enter a value", {"field": field})


class UnparseableInputError(ConverterError):
    """The numeric field could not be parsed as a floating-point number."""

    code = ErrorCodes["UNPARSEABLE_INPUT"]
    status_code = 400

    def __init__(self, raw: str, field: str = "num") -> None:
        super().__init__(f"invalid number: {raw!r}", {"field": field, "value": raw})


class UnknownUnitError(ConverterError):
    code = ErrorCodes["UNKNOWN_UNIT"]
    status_code = 400

    def __init__(self, unit: str, category: str) -> None:
        super().__init__(
            f"unknown {category} unit: {unit!r}",
            {"unit": unit, "category": category},
        )


class UnknownCategoryError(ConverterError):
    code = ErrorCodes["UNKNOWN_CATEGORY"]
    status_code = 404

    def __init__(self, name: str) -> None:
        super().__init__("invalid path", {"category": name})


class TemplateRenderError(ConverterError):
    """A template could not be loaded or rendered."""

    code = ErrorCodes["TEMPLATE_RENDER_FAILURE"]
    status_code = 500

    def __init__(self, template_name: str, reason: str) -> None:
        super().__init__(
            f"failed to render template {template_name!r}: {reason}",
            {"template": template_name},
        )


@dataclass(frozen=True)
class ErrorPage:
    """User-facing message and HTTP status for an error response."""

    error_type: str
    message: str
    status_code: int


class ErrorMapper:
    """Maps exceptions to the message and status shown on the error page."""

    # Errors whose message may leak internals
    _SANITIZED_ERROR_CODES = {
        ErrorCodes["TEMPLATE_RENDER_FAILURE"],
        ErrorCodes["INTERNAL_ERROR"],
    }

    def to_error_page(self, error: Exception) -> ErrorPage:
        """Convert any exception to an ErrorPage.

        Known converter errors pass their message through. Render failures
        and unknown exceptions get a generic message.
        """
        if isinstance(error, ConverterError):
            return self._handle_converter_error(error)

        return ErrorPage(
            error_type=ErrorCodes["INTERNAL_ERROR"],
            message="Internal error occurred",
            status_code=500,
        )

    def _handle_converter_error(self, error: ConverterError) -> ErrorPage:
        if error.code in self._SANITIZED_ERROR_CODES:
            return ErrorPage(
                error_type=error.code,
                message="Internal error occurred",
                status_code=error.status_code,
            )
        return ErrorPage(
            error_type=error.code,
            message=error.message,
            status_code=error.status_code,
        )
