"""
Recursive split strategy.

Tries separators from coarsest to finest (paragraph, line, sentence, word,
character) and only re-splits the fragments that do not fit chunk_size.
Recursion always ends: the separator list shrinks on every call and the
empty separator yields single characters, which fit any chunk_size >= 1.
"""

import logging
from typing import List, Sequence

from doc_chunker.splitter.base import TextSplitter, split_on_separator
from doc_chunker.splitter.merge import merge_splits

logger = logging.getLogger(__name__)


class RecursiveCharacterTextSplitter(TextSplitter):
    """Hierarchical separator fallback over config.separators."""

    name = 'recursive'

    def split_text(self, text: str) -> List[str]:
        return self._split(text, self.config.separators)

    def _split(self, text: str, separators: Sequence[str]) -> List[str]:
        cfg = self.config
        measure = cfg.length_function

        # Coarsest separator present in the text, else the finest one
        separator = separators[-1]
        next_separators: Sequence[str] = ()
        for i, candidate in enumerate(separators):
            if candidate in text:
                separator = candidate
                next_separators = separators[i + 1:]
                break

        splits = [s for s in split_on_separator(text, separator, cfg.keep_separator) if s]
        merge_separator = self.merge_separator(separator)

        final_chunks: List[str] = []
        pending: List[str] = []

        for split in splits:
            if measure(split) <= cfg.chunk_size:
                pending.append(split)
                continue

            if pending:
                final_chunks.extend(merge_splits(pending, merge_separator, cfg))
                pending = []

            if next_separators:
                final_chunks.extend(self._split(split, next_separators))
            elif split.strip():
                logger.warning(
                    "Emitting over-limit chunk (size=%s > chunk_size=%s): no finer separator after %r",
                    measure(split), cfg.chunk_size, separator,
                )
                final_chunks.append(split)

        if pending:
            final_chunks.extend(merge_splits(pending, merge_separator, cfg))

        return final_chunks
