"""Colorized, indented JSON-style rendering of a Value tree."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TextIO, Union

import click

from .config import RenderOptions, Theme
from .values import Array, Bool, Null, Number, Object, String, Value


@dataclass
class _Entry:
    """A key/value pair or array element still to be written."""
    key: Optional[str]
    value: Value
    depth: int
    is_last: bool


@dataclass
class _Close:
    """Closing bracket of a container opened earlier."""
    bracket: str
    depth: int
    is_last: bool


_Frame = Union[_Entry, _Close]


class Renderer:
    """
    Depth-first printer for Value trees.

    The walk uses an explicit frame stack instead of recursion, so
    arbitrarily deep documents render without hitting the interpreter's
    recursion limit. Every line except the last one of a container is
    followed by a comma.
    """

    def __init__(self, options: Optional[RenderOptions] = None,
                 theme: Optional[Theme] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the renderer.

        Args:
            options: Indentation width and resolved color switch
            theme: Styles applied to each token class when color is on
            logger: Optional logger instance
        """
        self.options = options or RenderOptions()
        self.theme = theme or Theme()
        self.logger = logger or logging.getLogger(__name__)

    def render(self, root: Object, out: Optional[TextIO] = None) -> int:
        """
        Write the rendered document to ``out`` (stdout by default).

        Args:
            root: Top-level object treated as the document body
            out: Output stream

        Returns:
            Number of lines written
        """
        count = 0
        for line in self.iter_lines(root):
            click.echo(line, file=out, color=self.options.color)
            count += 1
        self.logger.debug(f"Rendered {count} lines with indent {self.options.indent}")
        return count

    def render_to_string(self, root: Object) -> str:
        """Render the whole document into a single newline-terminated string."""
        return "".join(line + "\n" for line in self.iter_lines(root))

    def iter_lines(self, root: Object) -> Iterator[str]:
        """
        Yield output lines (without trailing newlines).

        Args:
            root: Top-level object

        Yields:
            One rendered line at a time
        """
        if not root.entries:
            yield "{}"
            return

        yield "{"
        stack: List[_Frame] = [_Close("}", 0, True)]
        stack.extend(reversed(self._children(root, 1)))

        while stack:
            frame = stack.pop()

            if isinstance(frame, _Close):
                yield self._pad(frame.depth) + frame.bracket + self._comma(frame.is_last)
                continue

            head = self._pad(frame.depth)
            if frame.key is not None:
                head += self._style(f'"{frame.key}"', self.theme.key) + ": "

            value = frame.value
            if isinstance(value, (Array, Object)) and len(value):
                opening, closing = ("[", "]") if isinstance(value, Array) else ("{", "}")
                yield head + opening
                stack.append(_Close(closing, frame.depth, frame.is_last))
                stack.extend(reversed(self._children(value, frame.depth + 1)))
            else:
                yield head + self._format_leaf(value) + self._comma(frame.is_last)

    def _children(self, container: Union[Array, Object], depth: int) -> List[_Entry]:
        """Build entry frames for a container's children in source order."""
        if isinstance(container, Object):
            pairs = list(container.entries.items())
        else:
            pairs = [(None, item) for item in container.items]

        total = len(pairs)
        return [
            _Entry(key, value, depth, index == total - 1)
            for index, (key, value) in enumerate(pairs)
        ]

    def _format_leaf(self, value: Value) -> str:
        """Format a scalar or an empty container."""
        if isinstance(value, Null):
            return self._style("null", self.theme.null)
        if isinstance(value, Bool):
            return self._style("true" if value.value else "false", self.theme.boolean)
        if isinstance(value, Number):
            return self._style(str(value), self.theme.number)
        if isinstance(value, String):
            return self._style(f'"{value.value}"', self.theme.string)
        if isinstance(value, Array):
            return "[]"
        return "{}"

    def _style(self, text: str, style: Dict[str, Any]) -> str:
        if not self.options.color:
            return text
        return click.style(text, **style)

    def _pad(self, depth: int) -> str:
        return " " * (depth * self.options.indent)

    @staticmethod
    def _comma(is_last: bool) -> str:
        return "" if is_last else ","
