"""Command-line interface for tacos."""
import os
import sys
import logging

import click

from . import __version__
from .core.models import Config, TraversalMode
from .core.pricing import get_cost_table, get_model_info
from .core.tokenizer import TokenCounter
from .core.traversal import TraversalEngine, TraversalError
from .utils.console import ConsoleManager, THEMES


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    # Reduce noise from external libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


@click.command()
@click.argument('input_model', required=False)
@click.argument('output_model', required=False)
@click.option('--recursive', '-r', is_flag=True, help='Recursively traverse directories, with subtotals')
@click.option('--collapse', is_flag=True, help='Summarize each top-level directory in one row')
@click.option('--cost-table', '-c', is_flag=True, help='Display cost table')
@click.option('--path', '-p', 'path', type=click.Path(file_okay=False), default=None,
              help='Directory to scan (default: current directory)')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default=None,
              help='Terminal color theme')
@click.option('--encoding', default=None, help='tiktoken encoding used to count tokens')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__, prog_name='tacos')
def main(input_model: str, output_model: str, recursive: bool, collapse: bool,
         cost_table: bool, path: str, theme: str, encoding: str, debug: bool) -> None:
    """
    Token And Cost Output Summarizer.

    List the files in a directory with their size, token count and the
    estimated cost of sending them to INPUT_MODEL and getting them back
    from OUTPUT_MODEL.

    Examples:

        tacos

        tacos gpt-4o o1 -r

        tacos --collapse --path ./src

        tacos -c
    """
    setup_logging(debug)

    config = Config()
    if input_model:
        config.input_model = input_model
    if output_model:
        config.output_model = output_model
    if theme:
        config.theme = theme
    if encoding:
        config.token_encoder = encoding

    console = ConsoleManager(theme=config.theme)

    if cost_table:
        console.print_cost_table(get_cost_table())
        return

    if recursive and collapse:
        raise click.UsageError("--recursive and --collapse cannot be combined")

    input_info = get_model_info(config.input_model)
    output_info = get_model_info(config.output_model)
    if input_info is None:
        console.print_error(f"Unknown input model: {config.input_model}")
        sys.exit(1)
    if output_info is None:
        console.print_error(f"Unknown output model: {config.output_model}")
        sys.exit(1)

    if recursive:
        mode = TraversalMode.EXPAND
    elif collapse:
        mode = TraversalMode.COLLAPSE
    else:
        mode = TraversalMode.FLAT

    engine = TraversalEngine(
        path or os.getcwd(),
        input_info,
        output_info,
        mode,
        token_counter=TokenCounter(config.token_encoder),
        config=config,
    )

    try:
        entries = engine.traverse()
    except TraversalError as e:
        console.print_error(str(e))
        if debug:
            console.print_exception()
        sys.exit(1)

    console.print_entries(entries)


if __name__ == '__main__':
    main()
