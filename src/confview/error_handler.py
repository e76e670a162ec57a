"""Error handling implementation for confview."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ErrorResponse,
    ViewerError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Validates options up front and turns errors into user-facing responses.

    Every error is terminal: the response carries the message to print
    and the exit status, never a recovery path.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_options(self, indent: int, path: Optional[str],
                         language: Optional[str]) -> ValidationResult:
        """
        Validate command options before any input is read.

        Args:
            indent: Requested indentation width
            path: File path, or None for standard input
            language: Explicit format tag, if any

        Returns:
            Combined ValidationResult
        """
        indent_result = ValidationUtils.validate_indent(indent)
        source_result = ValidationUtils.validate_source(path, language)

        errors = indent_result.errors + source_result.errors
        warnings = indent_result.warnings + source_result.warnings

        for warning in warnings:
            self.logger.warning(warning)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_error(self, error: ViewerError) -> ErrorResponse:
        """
        Map an error to the message and exit status shown to the user.

        Args:
            error: ViewerError to report

        Returns:
            ErrorResponse for the CLI to print
        """
        self.logger.error(f"{error.error_type.value} error: {error}")

        if error.error_type == ErrorType.INPUT:
            return self._response(error, "Check that the input exists and is readable.")
        elif error.error_type == ErrorType.CONFIGURATION:
            return self._response(error, "Pass a json, toml, yaml or yml document "
                                         "and an indentation between 0 and 10.")
        elif error.error_type == ErrorType.PARSE:
            return self._response(error, "Fix the syntax error reported above and retry.")
        else:
            return ErrorResponse(
                message=f"Internal error: {error}",
                suggested_action="This is a bug in a format adapter; please report it.",
                exit_code=1
            )

    @staticmethod
    def _response(error: ViewerError, suggested_action: str) -> ErrorResponse:
        return ErrorResponse(
            message=f"Error: {error}",
            suggested_action=suggested_action,
            exit_code=1
        )

    @staticmethod
    def first_error(result: ValidationResult) -> ViewerError:
        """Raise-ready error for the first failure of a validation result."""
        error = result.errors[0]
        return ViewerError(error.message, error.type, context={"location": error.location})
