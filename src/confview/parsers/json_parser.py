"""JSON format adapter."""

import json
import logging
from typing import Optional

from ..types import ErrorType, FormatParserInterface, ViewerError
from ..values import Value, from_native


class JSONFormatParser(FormatParserInterface):
    """Parse JSON text with the standard library decoder."""

    name = "JSON"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> Value:
        """
        Parse JSON text into a Value tree.

        Raises:
            ViewerError: If the text is not valid JSON
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ViewerError(
                f"{self.name} parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                ErrorType.PARSE,
                context={"line": e.lineno, "column": e.colno},
            ) from e
        except RecursionError as e:
            raise ViewerError(f"{self.name} parsing failed: document is nested too deeply",
                              ErrorType.PARSE) from e

        self.logger.debug(f"Parsed JSON document of type {type(data).__name__}")
        return from_native(data)
