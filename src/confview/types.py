"""Core type definitions for confview."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional
from .values import Value


class ErrorType(Enum):
    """Enumeration of error types."""
    INPUT = "input"
    CONFIGURATION = "configuration"
    PARSE = "parse"
    INTERNAL = "internal"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of option validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """User-facing response for a reported error."""
    message: str
    suggested_action: str
    exit_code: int = 1


@dataclass
class SourceDocument:
    """Raw input text together with the format tag it must be parsed with."""
    text: str
    format_tag: str
    origin: str = "<stdin>"


class ViewerError(Exception):
    """Custom exception for every failure confview reports."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class FormatParserInterface(ABC):
    """Abstract interface for format adapters."""

    #: Human readable format name used in error messages.
    name: str = ""

    @abstractmethod
    def parse(self, text: str) -> Value:
        """Parse raw text into a Value tree."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_options(self, indent: int, path: Optional[str],
                         language: Optional[str]) -> ValidationResult:
        """Validate command options before any input is read."""
        pass

    @abstractmethod
    def handle_error(self, error: ViewerError) -> ErrorResponse:
        """Map an error to the response shown to the user."""
        pass

