"""Storage records for chunks.

One DocumentChunk per chunk, carrying its position (chunk_order) and the
chunking method so retrieval can tell contextual chunks from raw windows.
"""

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from .models import ChunkingMethod, ChunkResult


@dataclass(frozen=True)
class ChunkMetadata:
    """Per-chunk metadata stored alongside the text."""

    chunk_index: int
    total_chunks: int
    chunking_method: ChunkingMethod
    queued_for_embedding: bool = False
    queued_at: str | None = None


@dataclass(frozen=True)
class DocumentChunk:
    """A chunk ready for storage and embedding."""

    chunk_text: str
    chunk_order: int
    metadata: ChunkMetadata
    document_id: str | None = None
    id: str | None = None
    embedding: list[float] | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a storage payload (method as its string value)."""
        data = asdict(self)
        data["metadata"]["chunking_method"] = self.metadata.chunking_method.value
        return data


def build_document_chunks(result: ChunkResult, document_id: str | None = None) -> list[DocumentChunk]:
    """Build storage records for a chunking result.

    Args:
        result: Output of chunk_text
        document_id: Owning document, if already known

    Returns:
        DocumentChunk list with chunk_order 0..n-1 in document order
    """
    total = len(result.chunks)
    return [
        DocumentChunk(
            chunk_text=text,
            chunk_order=index,
            metadata=ChunkMetadata(
                chunk_index=index,
                total_chunks=total,
                chunking_method=result.method,
            ),
            document_id=document_id,
        )
        for index, text in enumerate(result.chunks)
    ]


def mark_queued(record: DocumentChunk, queued_at: datetime | None = None) -> DocumentChunk:
    """Return a copy of the record flagged as queued for embedding."""
    timestamp = (queued_at or datetime.now(timezone.utc)).isoformat()
    metadata = replace(record.metadata, queued_for_embedding=True, queued_at=timestamp)
    return replace(record, metadata=metadata)
