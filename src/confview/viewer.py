"""Main confview orchestration: parse a document and render it."""

import logging
from typing import Optional, TextIO
from .config import RenderOptions, Theme
from .error_handler import ErrorHandler
from .parsers import get_parser
from .renderer import Renderer
from .types import SourceDocument
from .utils.validation import ValidationUtils
from .values import Object, Value


class ConfigViewer:
    """
    Turns a SourceDocument into colorized output.

    Parsing finishes completely before rendering starts, and a root that
    is not an object is rejected before a single line is written.
    """

    def __init__(self, theme: Optional[Theme] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the viewer.

        Args:
            theme: Optional styling for the renderer
            logger: Optional logger instance
        """
        self.theme = theme
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

    def load(self, document: SourceDocument) -> Value:
        """
        Parse a document with the adapter for its format tag.

        Raises:
            ViewerError: On an unsupported tag or a parse failure
        """
        parser = get_parser(document.format_tag, self.logger)
        self.logger.info(f"Parsing {document.origin} as {parser.name}")
        return parser.parse(document.text)

    def ensure_object(self, value: Value) -> Object:
        """
        Check the root contract of the format adapters.

        Raises:
            ViewerError: INTERNAL error if the root is not an object
        """
        result = ValidationUtils.validate_root(value)
        if not result.is_valid:
            raise self.error_handler.first_error(result)
        return value

    def view(self, document: SourceDocument, options: Optional[RenderOptions] = None,
             out: Optional[TextIO] = None) -> int:
        """
        Parse and render a document.

        Args:
            document: Input text and format tag
            options: Indentation and color settings
            out: Output stream (stdout by default)

        Returns:
            Number of lines written
        """
        root = self.ensure_object(self.load(document))
        renderer = Renderer(options, self.theme, self.logger)
        return renderer.render(root, out)
