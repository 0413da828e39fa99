"""Console output for tacos.

Row styling is a pure function of an Entry (``render_entry``); the
ConsoleManager only decides where and how the rendered rows are printed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional
import os
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ..core.models import Entry, PricingModel, RowType
from .formatting import (
    format_context_window, format_cost, format_file_size, format_rate, format_token_count,
)


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    # Core status colors
    info: str
    warning: str
    error: str
    success: str
    header: str
    path: str
    number: str
    dim: str
    # Row columns
    directory: str        # Directory names
    token_count: str      # Token column
    cost: str             # Cost columns
    ignored: str          # Everything on an ignored row
    # Subtotal rows swap foreground and background
    total_size: str
    total_tokens: str
    total_cost: str


# Define retro terminal themes
THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        header='bold bright_white',
        path='white',
        number='bright_blue',
        dim='bright_black',
        directory='bold blue',
        token_count='yellow',
        cost='green',
        ignored='bright_black',
        total_size='white on magenta',
        total_tokens='black on yellow',
        total_cost='black on green',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        header='bold green',
        path='bright_green',
        number='green',
        dim='green',
        directory='bold bright_green',
        token_count='bright_white',
        cost='green',
        ignored='dim green',
        total_size='black on green',
        total_tokens='black on bright_white',
        total_cost='black on bright_green',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        warning='yellow',
        error='red',
        success='green',
        header='bold bright_green',
        path='green',
        number='bright_green',
        dim='green',
        directory='bold bright_cyan',
        token_count='bright_white',
        cost='bright_green',
        ignored='dim green',
        total_size='black on bright_cyan',
        total_tokens='black on bright_white',
        total_cost='black on bright_green',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        header='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
        directory='bold dark_orange3',
        token_count='orange1',
        cost='gold1',
        ignored='grey50',
        total_size='black on wheat1',
        total_tokens='black on orange1',
        total_cost='black on gold1',
    ),
}

# Column widths: size, name, tokens, input cost, output cost
COLUMN_WIDTHS = (10, 25, 10, 12, 12)
HEADERS = ('Size', 'Name', 'Tokens', 'Input Cost', 'Output Cost')

COST_TABLE_HEADERS = ('Model', 'Input Cost (/1M)', 'Output Cost (/1M)', 'Context Window')

MISSING = '-'


def _cell(value: Optional[str], width: int) -> str:
    return (value if value is not None else MISSING).ljust(width)


def _display_name(entry: Entry) -> str:
    name = entry.name + '/' if entry.is_directory else entry.name
    if entry.row_type is RowType.CUMULATIVE:
        name = f"Σ {name}"
    return '  ' * entry.indent + name


def render_entry(entry: Entry, theme: ThemeColors) -> Text:
    """Render one row as styled text.

    Cumulative and collapsed rows swap text and background colors for
    their numeric columns; ignored rows are dimmed throughout.
    """
    size_w, name_w, tokens_w, in_w, out_w = COLUMN_WIDTHS
    size = _cell(format_file_size(entry.size) if entry.size is not None else None, size_w)
    tokens = _cell(format_token_count(entry.tokens) if entry.tokens is not None else None, tokens_w)
    input_cost = _cell(format_cost(entry.input_cost) if entry.input_cost is not None else None, in_w)
    output_cost = _cell(format_cost(entry.output_cost) if entry.output_cost is not None else None, out_w)
    name = _display_name(entry).ljust(name_w)

    if entry.is_directory:
        name_style = theme.directory
    elif entry.is_executable:
        name_style = 'underline'
    else:
        name_style = ''

    text = Text()
    if entry.is_ignored:
        dimmed = f"{theme.ignored} {name_style}".strip()
        for column, style in ((size, theme.ignored), (name, dimmed), (tokens, theme.ignored),
                              (input_cost, theme.ignored), (output_cost, theme.ignored)):
            text.append(column, style=style)
            text.append(' ')
    elif entry.is_synthetic:
        for column, style in ((size, theme.total_size), (name, name_style), (tokens, theme.total_tokens),
                              (input_cost, theme.total_cost), (output_cost, theme.total_cost)):
            text.append(column, style=style)
            text.append(' ')
    else:
        for column, style in ((size, ''), (name, name_style), (tokens, theme.token_count),
                              (input_cost, theme.cost), (output_cost, theme.cost)):
            text.append(column, style=style)
            text.append(' ')
    text.rstrip()
    return text


def render_header(theme: ThemeColors) -> Text:
    """Render the column header line."""
    line = ' '.join(header.ljust(width) for header, width in zip(HEADERS, COLUMN_WIDTHS))
    return Text(line.rstrip(), style=theme.header)


class ConsoleManager:
    """Console management with theme support and Rich/plain output."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console manager.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Print without colors even on a terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        try:
            terminal_width = os.get_terminal_size().columns
            console_width = max(80, terminal_width)
        except (OSError, AttributeError):
            console_width = 80

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=force_plain,
            width=console_width,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        return Theme({
            'info': self.theme_colors.info,
            'warning': self.theme_colors.warning,
            'error': self.theme_colors.error,
            'success': self.theme_colors.success,
            'header': self.theme_colors.header,
            'path': self.theme_colors.path,
            'number': self.theme_colors.number,
            'dim': self.theme_colors.dim,
        })

    def print(self, *args, **kwargs):
        """Print through the Rich console."""
        self.console.print(*args, **kwargs)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.print_status(StatusType.WARNING, message)

    def print_entries(self, entries: Iterable[Entry]):
        """Print the header followed by one line per row."""
        self.console.print(render_header(self.theme_colors))
        for entry in entries:
            self.console.print(render_entry(entry, self.theme_colors), soft_wrap=True)

    def print_cost_table(self, models: List[PricingModel]):
        """Print the pricing table."""
        table = Table(show_header=True, header_style="header", box=None)
        for header in COST_TABLE_HEADERS:
            table.add_column(header)

        for model in models:
            table.add_row(
                Text(model.name),
                Text(format_rate(model.input_rate), style=self.theme_colors.cost),
                Text(format_rate(model.output_rate) if model.has_output_rate else 'N/A',
                     style=self.theme_colors.cost),
                Text(format_context_window(model.context_window) if model.context_window else 'N/A',
                     style=self.theme_colors.info),
            )
        self.console.print(table)

    def print_exception(self):
        """Print exception traceback with Rich formatting."""
        self.console.print_exception()
