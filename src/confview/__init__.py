"""
confview - colorized viewer for structured configuration files.

Parses JSON, TOML or YAML into a uniform value model and renders it
as indented, color-highlighted JSON.
"""

import logging

from .config import RenderOptions, Theme, resolve_color
from .renderer import Renderer
from .types import ErrorType, SourceDocument, ViewerError
from .values import Array, Bool, Null, Number, Object, String, Value, ValueKind, from_native
from .viewer import ConfigViewer

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigViewer",
    "Renderer",
    "RenderOptions",
    "Theme",
    "resolve_color",
    "ErrorType",
    "SourceDocument",
    "ViewerError",
    "Array",
    "Bool",
    "Null",
    "Number",
    "Object",
    "String",
    "Value",
    "ValueKind",
    "from_native",
]
