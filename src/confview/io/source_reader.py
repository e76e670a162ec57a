"""Input acquisition from files and standard input."""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union

import click

from ..parsers import SUPPORTED_FORMATS
from ..types import ErrorType, SourceDocument, ViewerError


class SourceReader:
    """
    Reads the raw text of a document and works out its format tag.

    Files take their tag from the lower-cased extension; standard input
    requires the tag to be given explicitly.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the source reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read_file(self, file_path: Union[str, Path]) -> SourceDocument:
        """
        Read a document from disk.

        Args:
            file_path: Path of the file to read

        Returns:
            SourceDocument with the file contents and its format tag

        Raises:
            ViewerError: If the file is missing, unreadable or of an unsupported format
        """
        path = Path(file_path)

        if not path.exists():
            raise ViewerError("file not found", ErrorType.INPUT, context={"path": str(path)})

        format_tag = self.detect_format(path)

        try:
            with path.open("r", encoding="utf-8") as handle:
                text = handle.read()
        except UnicodeDecodeError as e:
            raise ViewerError(f"failed to read file: {e}", ErrorType.INPUT,
                              context={"path": str(path)}) from e
        except OSError as e:
            raise ViewerError(f"failed to read file: {e.strerror or e}", ErrorType.INPUT,
                              context={"path": str(path)}) from e

        self.logger.debug(f"Read {len(text)} characters from {path} as {format_tag}")
        return SourceDocument(text=text, format_tag=format_tag, origin=str(path))

    def read_stdin(self, language: Optional[str],
                   stream: Optional[TextIO] = None) -> SourceDocument:
        """
        Read a document from standard input.

        The language tag is checked before anything is read so that a
        missing tag never blocks on an open pipe.

        Args:
            language: Format tag supplied by the caller
            stream: Stream to read (defaults to stdin)

        Returns:
            SourceDocument with the stream contents

        Raises:
            ViewerError: If the language is missing or the stream cannot be read
        """
        if not language:
            raise ViewerError("language is not specified for stdin", ErrorType.CONFIGURATION)

        if stream is None:
            stream = click.get_text_stream("stdin")

        try:
            with stream:
                text = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ViewerError(f"failed to read from stdin: {e}", ErrorType.INPUT) from e

        self.logger.debug(f"Read {len(text)} characters from stdin as {language}")
        return SourceDocument(text=text, format_tag=language.lower(), origin="<stdin>")

    @staticmethod
    def detect_format(path: Path) -> str:
        """
        Derive the format tag from a file extension.

        Raises:
            ViewerError: If the extension is missing or unsupported
        """
        format_tag = path.suffix[1:].lower()
        if format_tag not in SUPPORTED_FORMATS:
            raise ViewerError("unsupported file format", ErrorType.CONFIGURATION,
                              context={"path": str(path)})
        return format_tag
