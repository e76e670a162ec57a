"""TOML format adapter."""

import logging
import tomllib
from typing import Optional

from ..types import ErrorType, FormatParserInterface, ViewerError
from ..values import Value, from_native


class TOMLFormatParser(FormatParserInterface):
    """Parse TOML text with ``tomllib``; tables keep declaration order."""

    name = "TOML"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> Value:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ViewerError(f"{self.name} parsing failed: {e}", ErrorType.PARSE) from e
        except RecursionError as e:
            raise ViewerError(f"{self.name} parsing failed: document is nested too deeply",
                              ErrorType.PARSE) from e

        self.logger.debug(f"Parsed TOML document with {len(data)} top-level keys")
        return from_native(data)
