"""
Split strategy interface.

Every strategy reduces a text to an ordered list of chunk strings through a
single split_text() operation. The sizing parameters live in an immutable
SplitterConfig, so one splitter can be shared between documents and threads.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional

from doc_chunker.config import SplitterConfig


def split_on_separator(text: str, separator: str, keep_separator: bool = False) -> List[str]:
    """
    Split text on a literal separator.

    The empty separator splits into single characters. With keep_separator
    each separator stays attached to the start of the fragment after it.

    Args:
        text: Text to split
        separator: Literal delimiter
        keep_separator: Retain separators in the fragments

    Returns:
        Fragments in order (may contain empty strings)
    """
    if separator == '':
        return list(text)

    if not keep_separator:
        return text.split(separator)

    parts = re.split(f'({re.escape(separator)})', text)
    return [parts[0]] + [parts[i] + parts[i + 1] for i in range(1, len(parts), 2)]


class TextSplitter(ABC):
    """Abstract base for split strategies."""

    name = 'base'

    def __init__(self, config: Optional[SplitterConfig] = None):
        """
        Initialize splitter.

        Args:
            config: Sizing parameters. Defaults to SplitterConfig()
        """
        self.config = config if config is not None else SplitterConfig()

    def merge_separator(self, separator: str) -> str:
        """Separator used when rejoining fragments split on `separator`."""
        return '' if self.config.keep_separator else separator

    @abstractmethod
    def split_text(self, text: str) -> List[str]:
        """
        Split text into chunk strings.

        Args:
            text: Text to split

        Returns:
            Ordered, non-empty chunk strings (empty list for empty input)
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(chunk_size={self.config.chunk_size}, "
            f"chunk_overlap={self.config.chunk_overlap})"
        )
