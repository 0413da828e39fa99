"""Utility modules for tacos."""

from .ignore import IgnoreMatcher
from .path_utils import PathUtils

__all__ = ["IgnoreMatcher", "PathUtils"]
