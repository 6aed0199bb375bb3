"""Recursive splitting sized in approximate tokens."""

from dataclasses import replace
from typing import Optional

from doc_chunker.config import DEFAULT_SEPARATORS, SplitterConfig
from doc_chunker.length import approximate_token_length
from doc_chunker.splitter.recursive import RecursiveCharacterTextSplitter


class TokenTextSplitter(RecursiveCharacterTextSplitter):
    """
    Recursive splitter whose chunk_size and chunk_overlap count tokens.

    Tokens are approximated as ceil(len / 4); encoding_name is recorded for
    callers but no tokenizer is loaded. The length function and separators of
    the given config are replaced by the token measure and the default
    separator hierarchy.
    """

    name = 'token'

    def __init__(self, config: Optional[SplitterConfig] = None, encoding_name: str = 'cl100k_base'):
        config = config if config is not None else SplitterConfig()
        super().__init__(replace(
            config,
            length_function=approximate_token_length,
            separators=DEFAULT_SEPARATORS,
        ))
        self.encoding_name = encoding_name
