"""Single-separator split strategy."""

from typing import List, Optional

from doc_chunker.config import SplitterConfig
from doc_chunker.splitter.base import TextSplitter, split_on_separator
from doc_chunker.splitter.merge import merge_splits


class CharacterTextSplitter(TextSplitter):
    """Splits on one fixed separator, then merges. No fallback to finer separators."""

    name = 'character'

    def __init__(self, config: Optional[SplitterConfig] = None, separator: str = '\n\n'):
        """
        Initialize splitter.

        Args:
            config: Sizing parameters
            separator: Delimiter to split on (paragraphs by default)
        """
        super().__init__(config)
        self.separator = separator

    def split_text(self, text: str) -> List[str]:
        splits = [
            s for s in split_on_separator(text, self.separator, self.config.keep_separator)
            if s.strip()
        ]
        return merge_splits(splits, self.merge_separator(self.separator), self.config)
