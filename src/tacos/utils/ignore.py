"""Gitignore-style pattern matching for directory scans."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pathspec import GitIgnoreSpec

from .path_utils import PathUtils

logger = logging.getLogger(__name__)

# Ignore files read from the scan root, in load order
DEFAULT_IGNORE_FILES = [".gitignore", ".tacosignore"]

# Always ignored, whatever the ignore files say
BUILTIN_IGNORES = [".git", "node_modules"]


class IgnoreMatcher:
    """Compiled ignore rules for one scan root.

    Patterns come from the root's ignore files, in load order, followed by
    the built-in names. Later patterns win, so a negation in a later file can
    re-include a path excluded by an earlier one, but nothing re-includes a
    built-in name.
    """

    def __init__(self, patterns: List[str]) -> None:
        """Initialize with patterns in priority order (lowest first).

        Args:
            patterns: List of gitignore patterns

        """
        self.patterns = patterns
        self.spec = GitIgnoreSpec.from_lines(patterns)

    @classmethod
    def load(
        cls,
        root_dir: str,
        ignore_files: Optional[Iterable[str]] = None,
        builtin_ignores: Optional[Iterable[str]] = None,
    ) -> "IgnoreMatcher":
        """Build a matcher from the ignore files found in root_dir.

        Args:
            root_dir: Scan root holding the ignore files
            ignore_files: File names to read, defaults to DEFAULT_IGNORE_FILES
            builtin_ignores: Names always ignored, defaults to BUILTIN_IGNORES

        Returns:
            IgnoreMatcher for paths relative to root_dir

        """
        if ignore_files is None:
            ignore_files = DEFAULT_IGNORE_FILES
        if builtin_ignores is None:
            builtin_ignores = BUILTIN_IGNORES

        patterns: list[str] = []
        for file_name in ignore_files:
            patterns.extend(cls._read_patterns(Path(root_dir) / file_name))
        patterns.extend(builtin_ignores)

        logger.debug(f"Loaded {len(patterns)} ignore patterns for {root_dir}")
        return cls(patterns)

    @staticmethod
    def _read_patterns(ignore_path: Path) -> list[str]:
        """Read one pattern per non-empty line; a missing file yields none."""
        try:
            content = ignore_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping unreadable ignore file {ignore_path}: {e}")
            return []
        return [line for line in content.splitlines() if line.strip()]

    def is_ignored(self, relative_path: str, is_directory: bool = False) -> bool:
        """Check whether a path relative to the scan root is ignored.

        Args:
            relative_path: Path relative to the scan root
            is_directory: Whether the path names a directory, so that
                directory-only patterns ("build/") apply to it

        Returns:
            True if the path should be ignored, False otherwise

        """
        path_str = PathUtils.normalize_path(relative_path).strip("/")
        if not path_str:
            return False
        if is_directory:
            # Trailing slash lets directory-only patterns ("build/") apply
            path_str += "/"
        return self.spec.match_file(path_str)
