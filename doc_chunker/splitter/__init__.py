"""Split strategies with name-based lookup."""

from typing import Optional

from doc_chunker.config import ConfigError, SplitterConfig
from .base import TextSplitter, split_on_separator
from .character import CharacterTextSplitter
from .merge import join_splits, merge_splits
from .recursive import RecursiveCharacterTextSplitter
from .token import TokenTextSplitter


SPLITTER_MAP = {
    'character': CharacterTextSplitter,
    'recursive': RecursiveCharacterTextSplitter,
    'token': TokenTextSplitter,
}


def build_splitter(strategy: str = 'recursive', config: Optional[SplitterConfig] = None,
                   **kwargs) -> TextSplitter:
    """
    Build a split strategy by name.

    Args:
        strategy: 'character', 'recursive' or 'token'
        config: Sizing parameters
        **kwargs: Strategy-specific options (separator, encoding_name)

    Returns:
        TextSplitter instance

    Raises:
        ConfigError: If strategy unknown
    """
    if strategy not in SPLITTER_MAP:
        raise ConfigError(f"Unknown splitter strategy: {strategy}")

    return SPLITTER_MAP[strategy](config, **kwargs)


__all__ = [
    'TextSplitter',
    'CharacterTextSplitter',
    'RecursiveCharacterTextSplitter',
    'TokenTextSplitter',
    'SPLITTER_MAP',
    'build_splitter',
    'merge_splits',
    'join_splits',
    'split_on_separator',
]
