"""
doc-chunker - Document chunking engine for RAG pipelines.

Splits long documents into bounded-size, overlapping chunks ready for
embedding and indexing. Supports single-separator and recursive
separator-fallback strategies, sized in characters or approximate tokens.
"""

__version__ = "1.0.0"

from doc_chunker.config import ConfigError, SplitterConfig, ChunkerConfig, load_config
from doc_chunker.document import Document
from doc_chunker.length import character_length, approximate_token_length
from doc_chunker.splitter import (
    CharacterTextSplitter,
    RecursiveCharacterTextSplitter,
    TokenTextSplitter,
    build_splitter,
)
from doc_chunker.assembler import ChunkAssembler

__all__ = [
    'ConfigError', 'SplitterConfig', 'ChunkerConfig', 'load_config',
    'Document', 'character_length', 'approximate_token_length',
    'CharacterTextSplitter', 'RecursiveCharacterTextSplitter', 'TokenTextSplitter',
    'build_splitter', 'ChunkAssembler',
]
