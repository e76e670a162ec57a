"""Utility functions for confview."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
