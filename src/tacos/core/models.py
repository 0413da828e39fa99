"""
Core data models for tacos.

This module contains the fundamental data structures used throughout
the application for configuration, pricing, and traversal results.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from dotenv import load_dotenv

from ..utils.ignore import BUILTIN_IGNORES, DEFAULT_IGNORE_FILES

# Load environment variables from .env file
load_dotenv()


DEFAULT_INPUT_MODEL = "o3-mini"
DEFAULT_OUTPUT_MODEL = "3-small"  # alias for "gpt-4o mini"


@dataclass
class Config:
    """Configuration settings for tacos."""

    input_model: str = field(default_factory=lambda: os.getenv('TACOS_INPUT_MODEL', DEFAULT_INPUT_MODEL))
    output_model: str = field(default_factory=lambda: os.getenv('TACOS_OUTPUT_MODEL', DEFAULT_OUTPUT_MODEL))
    token_encoder: str = field(default_factory=lambda: os.getenv('TACOS_TOKEN_ENCODER', 'cl100k_base'))
    theme: str = field(default_factory=lambda: os.getenv('TACOS_THEME', 'manhattan'))

    ignore_files: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_FILES))
    builtin_ignores: List[str] = field(default_factory=lambda: list(BUILTIN_IGNORES))


@dataclass(frozen=True)
class PricingModel:
    """Pricing for one model. Rates are in dollars per 1,000,000 tokens."""

    name: str
    input_rate: float
    output_rate: Optional[float] = None
    context_window: Optional[int] = None

    @property
    def has_output_rate(self) -> bool:
        return self.output_rate is not None


class TraversalMode(Enum):
    """How directories are handled during a scan."""
    FLAT = "flat"
    EXPAND = "expand"
    COLLAPSE = "collapse"


class RowType(Enum):
    """Kind of row emitted by the traversal engine."""
    NORMAL = "normal"
    CUMULATIVE = "cumulative"
    COLLAPSED = "collapsed"


class ContentKind(Enum):
    """Classification of a file's content."""
    TEXT = "text"
    BINARY = "binary"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class FileMetrics:
    """Token count and cost estimates for one piece of text."""

    tokens: int
    input_cost: float
    output_cost: Optional[float] = None


@dataclass(frozen=True)
class Entry:
    """A single output row: a filesystem node or a synthetic subtotal."""

    name: str
    path: str  # posix path relative to the scan root
    is_directory: bool
    is_ignored: bool = False
    size: Optional[int] = None
    tokens: Optional[int] = None
    input_cost: Optional[float] = None
    output_cost: Optional[float] = None
    indent: int = 0
    row_type: RowType = RowType.NORMAL
    is_executable: bool = False
    error: Optional[str] = None

    @property
    def has_metrics(self) -> bool:
        """Check if this row carries a token count."""
        return self.tokens is not None

    @property
    def is_synthetic(self) -> bool:
        """Check if this row is a subtotal rather than a real node."""
        return self.row_type is not RowType.NORMAL


@dataclass
class Aggregate:
    """
    Running totals for a subtree.

    Each directory frame owns one aggregate; a child's aggregate is merged
    into its parent's when the child frame returns.
    """

    size: int = 0
    tokens: int = 0
    input_cost: float = 0.0
    output_cost: float = 0.0

    def add_entry(self, entry: Entry) -> None:
        """Add a metric-bearing file row to the totals."""
        if entry.is_ignored or not entry.has_metrics:
            return
        self.size += entry.size or 0
        self.tokens += entry.tokens
        self.input_cost += entry.input_cost
        if entry.output_cost is not None:
            self.output_cost += entry.output_cost

    def merge(self, other: 'Aggregate') -> None:
        """Fold a child subtree's totals into this one."""
        self.size += other.size
        self.tokens += other.tokens
        self.input_cost += other.input_cost
        self.output_cost += other.output_cost
