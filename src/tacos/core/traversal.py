"""
Directory traversal for tacos.

This module walks a directory tree once and produces the ordered row
sequence shown to the user. Three modes are supported:

- FLAT: the root's children only, directories are not entered.
- EXPAND: every non-ignored directory is entered; its rows are followed by
  a cumulative row holding the subtree totals.
- COLLAPSE: each top-level directory is entered silently and replaced by a
  single collapsed row holding the subtree totals.

Each directory frame returns its own (rows, aggregate) pair, and the parent
merges the aggregate on return.
"""

import os
import logging
from typing import Callable, List, Optional, Tuple, Union

from .models import (
    Aggregate, Config, ContentKind, Entry, PricingModel, RowType, TraversalMode,
)
from .file_analyzer import FileAnalyzer
from .metrics import MetricsResolver
from .tokenizer import TokenCounter
from ..utils.ignore import IgnoreMatcher
from ..utils.path_utils import PathUtils


logger = logging.getLogger(__name__)


class TraversalError(Exception):
    """The scan root could not be listed; no rows are produced."""


class TraversalEngine:
    """Walks a directory tree and emits rows with size, token and cost metrics."""

    def __init__(self, root_dir: str, input_model: PricingModel, output_model: PricingModel,
                 mode: Union[TraversalMode, str] = TraversalMode.FLAT,
                 token_counter: Optional[Callable[[str], int]] = None,
                 config: Optional[Config] = None,
                 ignore_matcher: Optional[IgnoreMatcher] = None):
        """
        Initialize the engine.

        Args:
            root_dir: Directory to scan.
            input_model: Pricing model for input cost.
            output_model: Pricing model for output cost.
            mode: Traversal mode, as a TraversalMode or its value.
            token_counter: ``text -> int`` callable; defaults to a tiktoken
                counter using the configured encoding.
            config: Settings; defaults to Config().
            ignore_matcher: Precompiled ignore rules; loaded from root_dir
                when omitted.
        """
        self.config = config or Config()
        self.root_dir = os.path.abspath(root_dir)
        self.mode = TraversalMode(mode)
        self.output_model = output_model
        self.ignore_matcher = ignore_matcher

        if token_counter is None:
            token_counter = TokenCounter(self.config.token_encoder)
        self.resolver = MetricsResolver(token_counter, input_model, output_model)
        self.file_analyzer = FileAnalyzer()

    def traverse(self) -> List[Entry]:
        """
        Scan the root directory.

        Returns:
            Rows in pre-order, with synthetic rows placed according to mode.

        Raises:
            TraversalError: If the root is missing, not a directory, or
                cannot be listed.
        """
        if not os.path.isdir(self.root_dir):
            raise TraversalError(f"Path is not a directory: {self.root_dir}")

        if self.ignore_matcher is None:
            self.ignore_matcher = IgnoreMatcher.load(
                self.root_dir, self.config.ignore_files, self.config.builtin_ignores
            )

        try:
            rows, total = self._scan_directory(self.root_dir, "", 0, emit=True)
        except OSError as e:
            raise TraversalError(f"Failed to read directory: {self.root_dir} ({e})") from e

        logger.debug(
            f"Scanned {self.root_dir} in {self.mode.value} mode: "
            f"{len(rows)} rows, {total.tokens} tokens"
        )
        return rows

    def _scan_directory(self, dir_path: str, rel_path: str, indent: int,
                        emit: bool) -> Tuple[List[Entry], Aggregate]:
        """
        Process one directory frame.

        Raises OSError if the directory itself cannot be listed; failures on
        individual children are absorbed into their rows.
        """
        rows: List[Entry] = []
        aggregate = Aggregate()

        for child in self._list_children(dir_path):
            child_rel = PathUtils.join_relative(rel_path, child.name)
            is_dir = self._is_directory(child)
            is_ignored = self.ignore_matcher.is_ignored(child_rel, is_directory=is_dir)

            if is_dir:
                child_rows, child_total = self._visit_directory(
                    child, child_rel, is_ignored, indent, emit
                )
                rows.extend(child_rows)
                aggregate.merge(child_total)
            else:
                entry = self._file_entry(child, child_rel, is_ignored, indent)
                aggregate.add_entry(entry)
                if emit:
                    rows.append(entry)

        return rows, aggregate

    def _visit_directory(self, child: os.DirEntry, rel_path: str, is_ignored: bool,
                         indent: int, emit: bool) -> Tuple[List[Entry], Aggregate]:
        """Handle a child directory according to the mode and the frame's emit flag."""
        descend = not is_ignored and (not emit or self.mode is not TraversalMode.FLAT)

        sub_rows: List[Entry] = []
        sub_total: Optional[Aggregate] = None
        error = None
        if descend:
            child_emit = emit and self.mode is TraversalMode.EXPAND
            try:
                sub_rows, sub_total = self._scan_directory(child.path, rel_path, indent + 1, child_emit)
            except OSError as e:
                # Listed as a directory with no children and no totals
                logger.warning(f"Cannot list directory {rel_path}: {e}")
                error = self._describe_error(e)

        contribution = sub_total or Aggregate()
        if not emit:
            return [], contribution

        # The directory's own size is shown but never added to any total
        size = None
        try:
            size = child.stat().st_size
        except OSError as e:
            logger.debug(f"Cannot stat {rel_path}: {e}")
            error = error or self._describe_error(e)

        if self.mode is TraversalMode.COLLAPSE:
            row = self._summary_entry(child.name, rel_path, RowType.COLLAPSED, indent,
                                      sub_total, is_ignored=is_ignored, size=size, error=error)
            return [row], contribution

        rows = [Entry(name=child.name, path=rel_path, is_directory=True,
                      is_ignored=is_ignored, size=size, indent=indent, error=error)]
        if sub_total is not None:
            rows.extend(sub_rows)
            rows.append(self._summary_entry(child.name, rel_path, RowType.CUMULATIVE,
                                            indent + 1, sub_total))
        return rows, contribution

    def _file_entry(self, child: os.DirEntry, rel_path: str, is_ignored: bool,
                    indent: int) -> Entry:
        """Build the row for a file, degrading fields that cannot be read."""
        size = None
        is_executable = False
        error = None
        try:
            stat_result = child.stat()
            size = stat_result.st_size
            is_executable = bool(stat_result.st_mode & 0o111)
        except OSError as e:
            logger.debug(f"Cannot stat {rel_path}: {e}")
            error = self._describe_error(e)

        metrics = None
        if not is_ignored:
            text, kind, read_error = self.file_analyzer.read_file_content(child.path)
            error = error or read_error
            if kind is ContentKind.TEXT:
                metrics = self.resolver.resolve(text)

        return Entry(
            name=child.name,
            path=rel_path,
            is_directory=False,
            is_ignored=is_ignored,
            size=size,
            tokens=metrics.tokens if metrics else None,
            input_cost=metrics.input_cost if metrics else None,
            output_cost=metrics.output_cost if metrics else None,
            indent=indent,
            is_executable=is_executable,
            error=error,
        )

    def _summary_entry(self, name: str, rel_path: str, row_type: RowType, indent: int,
                       total: Optional[Aggregate], is_ignored: bool = False,
                       size: Optional[int] = None,
                       error: Optional[str] = None) -> Entry:
        """
        Build a cumulative or collapsed row.

        Without totals the metrics are absent and the row shows the
        directory's own size instead.
        """
        if total is None:
            return Entry(name=name, path=rel_path, is_directory=True, is_ignored=is_ignored,
                         size=size, indent=indent, row_type=row_type, error=error)

        output_cost = total.output_cost if self.output_model.has_output_rate else None
        return Entry(
            name=name,
            path=rel_path,
            is_directory=True,
            is_ignored=is_ignored,
            size=total.size,
            tokens=total.tokens,
            input_cost=total.input_cost,
            output_cost=output_cost,
            indent=indent,
            row_type=row_type,
        )

    @staticmethod
    def _list_children(dir_path: str) -> List[os.DirEntry]:
        with os.scandir(dir_path) as it:
            return sorted(it, key=lambda entry: entry.name)

    @staticmethod
    def _is_directory(child: os.DirEntry) -> bool:
        try:
            return child.is_dir()
        except OSError:
            return False

    @staticmethod
    def _describe_error(error: OSError) -> str:
        if isinstance(error, PermissionError):
            return "Permission denied"
        return error.strerror or str(error)


def traverse(root_dir: str, input_model: PricingModel, output_model: PricingModel,
             mode: Union[TraversalMode, str] = TraversalMode.FLAT,
             token_counter: Optional[Callable[[str], int]] = None,
             config: Optional[Config] = None) -> List[Entry]:
    """Scan root_dir and return its rows. See TraversalEngine."""
    engine = TraversalEngine(root_dir, input_model, output_model, mode,
                             token_counter=token_counter, config=config)
    return engine.traverse()
