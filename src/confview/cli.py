"""Command-line interface for confview."""

import logging
import sys
from typing import Optional

import click

from . import __version__
from .config import DEFAULT_INDENT, RenderOptions, resolve_color
from .error_handler import ErrorHandler
from .io import SourceReader
from .types import ViewerError
from .viewer import ConfigViewer


@click.command()
@click.version_option(version=__version__)
@click.argument('path', required=False)
@click.option('--language', '-l', default=None,
              help='Format of data read from stdin (json, toml, yaml, yml)')
@click.option('--indent', '-i', default=DEFAULT_INDENT, type=int, show_default=True,
              help='Spaces per nesting level (0-10)')
@click.option('--no-color', '-n', is_flag=True, help='Disable colored output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(path: Optional[str], language: Optional[str], indent: int,
         no_color: bool, verbose: bool):
    """Show a JSON, TOML or YAML document as colorized, indented JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)s %(name)s: %(message)s")

    logger = logging.getLogger("confview")
    error_handler = ErrorHandler(logger)

    try:
        validation = error_handler.validate_options(indent, path, language)
        if not validation.is_valid:
            raise error_handler.first_error(validation)

        options = RenderOptions(indent=indent, color=resolve_color(no_color))

        reader = SourceReader(logger)
        if path:
            document = reader.read_file(path)
        else:
            document = reader.read_stdin(language)

        ConfigViewer(logger=logger).view(document, options)

    except ViewerError as e:
        response = error_handler.handle_error(e)
        click.echo(f"❌ {response.message}", err=True)
        if verbose:
            click.echo(f"   • {response.suggested_action}", err=True)
        sys.exit(response.exit_code)


if __name__ == '__main__':
    main()
