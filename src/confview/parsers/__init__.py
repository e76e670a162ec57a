"""Format adapters turning raw text into the uniform value model."""

from typing import Optional
import logging

from ..types import ErrorType, FormatParserInterface, ViewerError
from .json_parser import JSONFormatParser
from .toml_parser import TOMLFormatParser
from .yaml_parser import YAMLFormatParser

PARSERS = {
    "json": JSONFormatParser,
    "toml": TOMLFormatParser,
    "yaml": YAMLFormatParser,
    "yml": YAMLFormatParser,
}

SUPPORTED_FORMATS = tuple(PARSERS)


def get_parser(format_tag: str, logger: Optional[logging.Logger] = None) -> FormatParserInterface:
    """
    Look up the adapter for a format tag.

    Args:
        format_tag: One of ``json``, ``toml``, ``yaml`` or ``yml`` (any case)
        logger: Optional logger handed to the adapter

    Returns:
        Parser instance for the tag

    Raises:
        ViewerError: If the tag is not supported
    """
    parser_class = PARSERS.get(format_tag.lower())
    if parser_class is None:
        raise ViewerError("unsupported file format", ErrorType.CONFIGURATION,
                          context={"format": format_tag})
    return parser_class(logger=logger)


__all__ = [
    "JSONFormatParser",
    "TOMLFormatParser",
    "YAMLFormatParser",
    "PARSERS",
    "SUPPORTED_FORMATS",
    "get_parser",
]
