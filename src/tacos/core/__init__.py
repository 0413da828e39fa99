"""Core components for tacos."""

from .models import (
    Config, PricingModel, Entry, Aggregate, FileMetrics, RowType, TraversalMode, ContentKind,
)
from .file_analyzer import FileAnalyzer
from .metrics import MetricsResolver
from .tokenizer import TokenCounter
from .traversal import TraversalEngine, TraversalError, traverse

__all__ = [
    "Config",
    "PricingModel",
    "Entry",
    "Aggregate",
    "FileMetrics",
    "RowType",
    "TraversalMode",
    "ContentKind",
    "FileAnalyzer",
    "MetricsResolver",
    "TokenCounter",
    "TraversalEngine",
    "TraversalError",
    "traverse",
]
