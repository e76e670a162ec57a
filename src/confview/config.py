"""Render configuration: indentation, color resolution and styling."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

DEFAULT_INDENT = 2
MAX_INDENT = 10


@dataclass
class RenderOptions:
    """Options threaded into the renderer."""
    indent: int = DEFAULT_INDENT
    color: bool = True


@dataclass
class Theme:
    """``click.style`` keyword arguments per token class."""
    key: Dict[str, Any] = field(default_factory=lambda: {"fg": "blue", "bold": True})
    string: Dict[str, Any] = field(default_factory=lambda: {"fg": "green"})
    number: Dict[str, Any] = field(default_factory=lambda: {"fg": "cyan"})
    boolean: Dict[str, Any] = field(default_factory=lambda: {"fg": "magenta"})
    null: Dict[str, Any] = field(default_factory=lambda: {"fg": "bright_black"})


def resolve_color(no_color_flag: bool, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Decide once whether output is colored.

    ``NO_COLOR`` in the environment wins over the flag, whatever its value.

    Args:
        no_color_flag: Value of the ``--no-color`` option
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        True if color escape sequences should be emitted
    """
    if environ is None:
        environ = os.environ
    if "NO_COLOR" in environ:
        return False
    return not no_color_flag
