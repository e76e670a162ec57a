"""Validation utilities for command options and parsed documents."""

from typing import List, Optional
from ..config import MAX_INDENT
from ..parsers import SUPPORTED_FORMATS
from ..types import ValidationResult, ValidationError, ErrorType
from ..values import Object, Value


class ValidationUtils:
    """Utility class for validating options and parse results."""

    @staticmethod
    def validate_indent(indent: int) -> ValidationResult:
        """
        Validate the indentation width.

        Args:
            indent: Spaces per nesting level

        Returns:
            ValidationResult with validation details
        """
        errors = []

        if indent < 0:
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message="indentation level must not be negative.",
                location="indent"
            ))
        elif indent > MAX_INDENT:
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message=f"indentation level must be less than or equal to {MAX_INDENT}.",
                location="indent"
            ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])

    @staticmethod
    def validate_source(path: Optional[str], language: Optional[str]) -> ValidationResult:
        """
        Validate where the input comes from and how it will be parsed.

        Args:
            path: File path, or None/empty for standard input
            language: Explicit format tag, if any

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if path:
            if language:
                warnings.append("--language is ignored when a file path is given; "
                                "the format is taken from the file extension.")
        elif not language:
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message="language is not specified for stdin",
                location="language"
            ))
        elif language.lower() not in SUPPORTED_FORMATS:
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message="unsupported file format",
                location="language"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_root(value: Value) -> ValidationResult:
        """
        Check that a parsed document has an object at its root.

        A failure here means a format adapter broke its contract.
        """
        errors = []

        if not isinstance(value, Object):
            errors.append(ValidationError(
                type=ErrorType.INTERNAL,
                message="parsed data is not a valid object.",
                location=f"root ({value.kind.value})"
            ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])
