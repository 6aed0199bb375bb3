"""Document value type shared by loaders, the chunking engine and indexers."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Document:
    """
    Text content with its metadata.

    Documents are never mutated by the chunking engine; chunks are new
    Documents built with with_metadata().
    """

    content: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None

    @property
    def length(self) -> int:
        """Character count of the content."""
        return len(self.content)

    def with_metadata(self, content: str, **extra_metadata) -> 'Document':
        """
        Create a derived document with a copy of this metadata plus additions.

        Args:
            content: Content of the new document
            **extra_metadata: Fields added on top of the copied metadata

        Returns:
            New Document (this one is left untouched)
        """
        return Document(content=content, metadata={**self.metadata, **extra_metadata})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {
            'content': self.content,
            'metadata': dict(self.metadata),
        }
        if self.id is not None:
            data['id'] = self.id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Document':
        """Create a Document from a dictionary produced by to_dict()."""
        return cls(
            content=data['content'],
            metadata=dict(data.get('metadata') or {}),
            id=data.get('id'),
        )

    def __str__(self) -> str:
        return f'Document(content="{self.content[:50]}...", metadata={json.dumps(self.metadata, default=str)})'
