"""
File analysis module for tacos.

This module handles individual file processing:
- Content reading
- Binary detection (a NUL byte anywhere marks the content as binary)
"""

import logging
from typing import Optional, Tuple, Union

from .models import ContentKind


logger = logging.getLogger(__name__)


class FileAnalyzer:
    """Reads files and classifies their content as text or binary."""

    @staticmethod
    def classify(content: Union[bytes, str]) -> ContentKind:
        """
        Classify content as text or binary.

        This is a deliberately coarse check: any NUL byte (or NUL character,
        for already-decoded text) makes the content binary.
        """
        nul = b'\x00' if isinstance(content, bytes) else '\x00'
        if nul in content:
            return ContentKind.BINARY
        return ContentKind.TEXT

    def read_file_content(self, file_path: str) -> Tuple[Optional[str], ContentKind, Optional[str]]:
        """
        Read and classify a file's content.

        Returns:
            Tuple of (text, kind, error_message)
            For text files: (decoded text, TEXT, None)
            For binary files: (None, BINARY, None)
            If the read fails: (None, UNREADABLE, error description)
        """
        try:
            with open(file_path, 'rb') as f:
                raw_content = f.read()
        except PermissionError:
            logger.debug(f"Permission denied reading {file_path}")
            return None, ContentKind.UNREADABLE, "Permission denied"
        except OSError as e:
            logger.debug(f"Error reading {file_path}: {e}")
            return None, ContentKind.UNREADABLE, f"Error reading file: {str(e)}"

        kind = self.classify(raw_content)
        if kind is ContentKind.BINARY:
            return None, kind, None

        return raw_content.decode('utf-8', errors='replace'), kind, None
