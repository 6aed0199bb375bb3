"""
Sliding-window merge of atomic fragments into size-bounded chunks.

Fragments are never subdivided here, only concatenated or dropped. Each
fragment passed in is expected to fit chunk_size on its own; re-splitting an
oversized fragment is the caller's job.

Overlap is approximate: the retained tail is the longest run of trailing
fragments whose size is at most chunk_overlap, so the repeated text can be
shorter than chunk_overlap (and is empty when the last fragment alone is
larger than chunk_overlap).
"""

from collections import deque
from typing import Iterable, List, Optional

from doc_chunker.config import SplitterConfig


def join_splits(splits: Iterable[str], separator: str) -> Optional[str]:
    """
    Join fragments with a separator and strip surrounding whitespace.

    Returns:
        Joined text, or None if nothing but whitespace remains
    """
    text = separator.join(splits).strip()
    return text or None


def merge_splits(splits: Iterable[str], separator: str, config: SplitterConfig) -> List[str]:
    """
    Merge fragments into chunks of at most config.chunk_size.

    Args:
        splits: Ordered fragments, each fitting chunk_size
        separator: Separator re-inserted between fragments
        config: Sizing parameters

    Returns:
        Ordered, non-empty, stripped chunk strings
    """
    measure = config.length_function
    separator_len = len(separator)

    chunks: List[str] = []
    current = deque()
    total = 0

    for split in splits:
        split_len = measure(split)

        if total + split_len + (separator_len if current else 0) > config.chunk_size:
            if current:
                chunk = join_splits(current, separator)
                if chunk is not None:
                    chunks.append(chunk)

            # Keep a tail no larger than chunk_overlap that still leaves room for this split
            while current and (
                total > config.chunk_overlap
                or total + split_len + separator_len > config.chunk_size
            ):
                total -= measure(current[0]) + (separator_len if len(current) > 1 else 0)
                current.popleft()

        current.append(split)
        total += split_len + (separator_len if len(current) > 1 else 0)

    if current:
        chunk = join_splits(current, separator)
        if chunk is not None:
            chunks.append(chunk)

    return chunks
