"""
Audit logging for chunking runs.

One JSON event per line in an append-only file. Chunk text is never logged,
only sizes and counts.
"""

import logging
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


class AuditLogger:
    """
    Structured audit logger.

    Features:
    - JSON event logging
    - Per-document chunking events (counts, sizes, strategy)
    - Configuration error events
    """

    def __init__(self, log_file: str = "./audit.log", level: str = "INFO"):
        """
        Initialize audit logger.

        Args:
            log_file: Path to audit log
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger("doc_chunker_audit")
        self.logger.setLevel(getattr(logging, level))
        self.logger.propagate = False

        fh = logging.FileHandler(self.log_file, mode='a', encoding='utf-8')
        fh.setLevel(getattr(logging, level))

        # Each line is a JSON event
        fh.setFormatter(logging.Formatter('%(message)s'))

        # Remove existing handlers to avoid duplicates
        self.close()
        self.logger.addHandler(fh)

    def _log_event(self, event_dict: Dict[str, Any]):
        """
        Log a structured event as JSON.

        Args:
            event_dict: Event data to log
        """
        event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
        self.logger.info(json.dumps(event_dict, default=str))

    def log_document_chunking(self, source: str, num_chunks: int, strategy: str,
                              chunk_size: int, chunk_overlap: int, **kwargs):
        """
        Log the chunking of one document.

        Args:
            source: Document source (path, id or 'unknown')
            num_chunks: Number of chunks produced
            strategy: Split strategy name
            chunk_size: Configured maximum chunk size
            chunk_overlap: Configured overlap
            **kwargs: Additional metadata
        """
        event = {
            "event": "document_chunking",
            "source": source,
            "num_chunks": num_chunks,
            "strategy": strategy,
            "chunk_size": chunk_size,
            "chunk_overlap": chunk_overlap,
            **kwargs
        }
        self._log_event(event)

    def log_config_error(self, message: str, **kwargs):
        """
        Log a rejected configuration.

        Args:
            message: ConfigError message
            **kwargs: Offending values
        """
        event = {
            "event": "config_error",
            "message": message,
            **kwargs
        }
        self._log_event(event)

    def close(self):
        """Detach and close file handlers."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()


def get_audit_logger(config: Optional[Dict[str, Any]] = None) -> Optional[AuditLogger]:
    """
    Get configured audit logger instance.

    Args:
        config: Audit config dict with 'enabled', 'file' and 'level' keys

    Returns:
        AuditLogger instance, or None when auditing is disabled
    """
    if config is None:
        config = {'enabled': True, 'file': './audit.log', 'level': 'INFO'}

    if not config.get('enabled', True):
        return None

    return AuditLogger(
        log_file=config.get('file', './audit.log'),
        level=config.get('level', 'INFO')
    )
