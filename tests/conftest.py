"""
Pytest configuration and fixtures.

Ensures doc_chunker package can be imported from tests.
"""

import sys
import os
import logging
from pathlib import Path

import pytest

# Add the repository root to Python path so tests can import doc_chunker
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

# Also set PYTHONPATH environment variable
os.environ['PYTHONPATH'] = str(repo_root)


@pytest.fixture(autouse=True)
def clean_chunker_env(monkeypatch):
    """Keep CHUNKER_* overrides from the outer environment out of tests."""
    for name in ('CHUNKER_CONFIG_PATH', 'CHUNKER_CHUNK_SIZE', 'CHUNKER_CHUNK_OVERLAP', 'CHUNKER_STRATEGY'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def audit_log_path(tmp_path):
    """Audit log file path; handlers are closed after the test."""
    yield tmp_path / 'audit.log'

    audit = logging.getLogger('doc_chunker_audit')
    for handler in list(audit.handlers):
        audit.removeHandler(handler)
        handler.close()
