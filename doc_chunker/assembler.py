"""
Document -> chunk Document conversion.

Each chunk carries a copy of its source metadata plus:
- chunk_index: 0-based position among the source document's chunks
- total_chunks: number of chunks produced from the source document
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from doc_chunker.audit.logger import get_audit_logger
from doc_chunker.config import ChunkerConfig, ConfigError
from doc_chunker.document import Document
from doc_chunker.splitter.base import TextSplitter

logger = logging.getLogger(__name__)


class ChunkAssembler:
    """Runs a split strategy over documents and wraps the chunks as Documents."""

    def __init__(self, splitter: TextSplitter, audit_logger=None):
        """
        Initialize assembler.

        Args:
            splitter: Configured split strategy
            audit_logger: Optional AuditLogger receiving one event per document
        """
        self.splitter = splitter
        self.audit_logger = audit_logger

    @classmethod
    def from_config(cls, config: ChunkerConfig) -> 'ChunkAssembler':
        """
        Build an assembler from a loaded ChunkerConfig.

        Raises:
            ConfigError: If the splitter section is invalid (also written to
                the audit log when auditing is enabled)
        """
        audit_logger = get_audit_logger(config.get_audit_config())

        try:
            splitter = config.build_splitter()
        except ConfigError as e:
            if audit_logger:
                audit_logger.log_config_error(str(e), splitter=config.get_splitter_section())
            raise

        return cls(splitter, audit_logger=audit_logger)

    def split_document(self, document: Document) -> List[Document]:
        """
        Chunk a single document.

        Args:
            document: Source document (left untouched)

        Returns:
            Chunk documents in order; empty for empty or whitespace-only content
        """
        texts = self.splitter.split_text(document.content)
        total = len(texts)

        chunks = [
            document.with_metadata(text, chunk_index=index, total_chunks=total)
            for index, text in enumerate(texts)
        ]

        source = document.metadata.get('source_path') or document.id or 'unknown'
        logger.debug("Chunked %s into %d chunks (%s)", source, total, self.splitter.name)

        if self.audit_logger:
            cfg = self.splitter.config
            self.audit_logger.log_document_chunking(
                source=source,
                num_chunks=total,
                strategy=self.splitter.name,
                chunk_size=cfg.chunk_size,
                chunk_overlap=cfg.chunk_overlap,
                input_length=document.length,
            )

        return chunks

    def split_documents(self, documents: Iterable[Document]) -> List[Document]:
        """
        Chunk documents independently and concatenate the results.

        Args:
            documents: Source documents

        Returns:
            All chunk documents, grouped by source document in input order
        """
        chunks = []
        for document in documents:
            chunks.extend(self.split_document(document))
        return chunks

    def create_documents(self, texts: Sequence[str],
                         metadatas: Optional[Sequence[Optional[Dict[str, Any]]]] = None) -> List[Document]:
        """
        Chunk raw texts, pairing each with its metadata.

        Args:
            texts: Raw texts
            metadatas: Metadata per text (missing entries mean no metadata)

        Returns:
            Chunk documents for all texts
        """
        metadatas = list(metadatas or [])
        documents = [
            Document(content=text, metadata=dict(metadatas[i] or {}) if i < len(metadatas) else {})
            for i, text in enumerate(texts)
        ]
        return self.split_documents(documents)
