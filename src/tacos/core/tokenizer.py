"""
Token counting functionality for tacos.

This module provides token counting capabilities using OpenAI's tiktoken library.
If the encoding cannot be loaded (for example when its data file cannot be
fetched), counting falls back to a whitespace word count.
"""

import logging
from typing import Optional, Any

import tiktoken


logger = logging.getLogger(__name__)


class TokenCounter:
    """
    Handles token counting for text content.

    Instances are callable, so a counter can be passed anywhere a plain
    ``text -> int`` function is expected.
    """

    def __init__(self, encoding_name: str = "cl100k_base"):
        """
        Initialize the token counter.

        Args:
            encoding_name: The name of the tiktoken encoding to use.
                         Default is cl100k_base (used by GPT-4).
        """
        self.encoding_name = encoding_name
        self.encoder: Optional[Any] = None

        try:
            self.encoder = tiktoken.get_encoding(encoding_name)
        except Exception as e:
            logger.warning(
                f"Failed to load tiktoken encoder '{encoding_name}': {e}; "
                "falling back to a simple whitespace split."
            )

    @property
    def is_available(self) -> bool:
        """Check if tiktoken counting is available."""
        return self.encoder is not None

    def count(self, text: str) -> int:
        """
        Count tokens in the given text.

        Args:
            text: The text to count tokens for.

        Returns:
            Number of tokens, or 0 if encoding fails.
        """
        if not text:
            return 0

        if not self.is_available:
            return self.estimate_tokens(text)

        try:
            # Special-token markers in source files are ordinary text here
            return len(self.encoder.encode(text, disallowed_special=()))
        except Exception as e:
            logger.debug(f"Error counting tokens: {e}")
            return 0

    __call__ = count

    @staticmethod
    def estimate_tokens(text: str) -> int:
        """Count whitespace-separated words as a stand-in for tokens."""
        if not text:
            return 0
        return len(text.split())
