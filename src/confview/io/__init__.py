"""I/O utilities for confview."""

from .source_reader import SourceReader

__all__ = ["SourceReader"]
