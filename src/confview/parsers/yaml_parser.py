"""YAML format adapter."""

import logging
from typing import Optional

import yaml

from ..types import ErrorType, FormatParserInterface, ViewerError
from ..values import CyclicStructureError, Object, Value, from_native

_NO_DOCUMENT = object()


class YAMLFormatParser(FormatParserInterface):
    """
    Parse YAML text with PyYAML's safe loader.

    Only the first document of a stream is read. A stream with no
    document at all becomes an empty object; an explicit ``~`` stays null.
    """

    name = "YAML"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> Value:
        try:
            documents = yaml.safe_load_all(text)
            data = next(documents, _NO_DOCUMENT)
        except yaml.YAMLError as e:
            raise ViewerError(f"{self.name} parsing failed: {e}", ErrorType.PARSE) from e
        except RecursionError as e:
            raise ViewerError(f"{self.name} parsing failed: document is nested too deeply",
                              ErrorType.PARSE) from e

        if data is _NO_DOCUMENT:
            self.logger.debug("Empty YAML stream, rendering an empty object")
            return Object()

        self.logger.debug(f"Parsed YAML document of type {type(data).__name__}")
        try:
            return from_native(data)
        except CyclicStructureError as e:
            raise ViewerError(f"{self.name} parsing failed: recursive alias ({e})",
                              ErrorType.PARSE) from e
