"""Document ingestion: fetch -> chunk -> store -> queue for embedding.

Storage, content retrieval and the embedding queue are supplied by the
caller through the protocols below. This module sequences them, enforces the
chunking parameter contract, and logs each step with timing.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from .chunker import chunk_text
from .config import CHUNK_MAX_SIZE, CHUNK_OVERLAP_SIZE, EMBEDDING_BATCH_SIZE
from .logging_utils import structured_logger
from .models import ChunkingMethod
from .quality import ChunkingStats, analyze_chunking_quality
from .records import DocumentChunk, build_document_chunks, mark_queued
from .validation import (
    ProcessingStatus,
    ValidationError,
    ValidationResult,
    validate_batch_size,
    validate_chunk_count,
    validate_chunk_orders,
    validate_chunking_params,
    validate_source_id,
)


@dataclass
class FetchedContent:
    """Raw document text returned by a ContentFetcher."""

    text: str
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class ContentFetcher(Protocol):
    def fetch(self, source_type: str, source_id: str) -> FetchedContent: ...


class ChunkStore(Protocol):
    def store_chunks(self, document_id: str, records: Sequence[DocumentChunk]) -> list[DocumentChunk]: ...


class EmbeddingQueue(Protocol):
    def enqueue(self, records: Sequence[DocumentChunk]) -> None: ...


@dataclass
class IngestReport:
    """Outcome of ingesting one document."""

    document_id: str
    method: ChunkingMethod
    chunk_count: int
    batches_queued: int
    status: ProcessingStatus
    stats: ChunkingStats


def _require(result: ValidationResult, step: str, **fields: Any) -> None:
    if not result.is_valid:
        message = result.error_message or "Validation failed"
        structured_logger.error(step, message, **fields)
        raise ValidationError(message)


def ingest_document(
    document_id: str,
    source_type: str,
    source_id: str,
    fetcher: ContentFetcher,
    store: ChunkStore,
    queue: EmbeddingQueue,
    max_chunk_size: int = CHUNK_MAX_SIZE,
    overlap_size: int = CHUNK_OVERLAP_SIZE,
    batch_size: int = EMBEDDING_BATCH_SIZE,
) -> IngestReport:
    """Chunk a document and hand its chunks to storage and the embedding queue.

    Args:
        document_id: Id of the document record owning the chunks
        source_type: Kind of source (e.g. 'pdf', 'market_report')
        source_id: Id of the source within its type
        fetcher: Supplies raw document text
        store: Persists chunk records
        queue: Receives stored chunks for embedding generation
        max_chunk_size: Maximum chunk size in characters
        overlap_size: Overlap for fixed-length windows
        batch_size: Chunks per enqueue call

    Returns:
        IngestReport describing the run

    Raises:
        ValidationError: If parameters, source id or chunk output are invalid
    """
    with structured_logger.context(document_id=document_id, source_type=source_type, source_id=source_id):
        _require(validate_source_id(source_id), "validate")
        _require(
            validate_chunking_params(max_chunk_size, overlap_size),
            "validate",
            max_chunk_size=max_chunk_size,
            overlap_size=overlap_size,
        )
        _require(validate_batch_size(batch_size), "validate", batch_size=batch_size)

        with structured_logger.timed_operation("fetch", "Fetch document content") as ctx:
            content = fetcher.fetch(source_type, source_id)
            ctx["text_length"] = len(content.text)

        with structured_logger.timed_operation("chunk", "Chunk document") as ctx:
            result = chunk_text(content.text, max_chunk_size, overlap_size)
            ctx["method"] = result.method.value
            ctx["chunk_count"] = len(result.chunks)

        stats = analyze_chunking_quality(result.chunks, result.method, result.fallback_reasons)

        if not result.chunks:
            structured_logger.warning("chunk", "Document has no text content; nothing to store")
            return IngestReport(
                document_id=document_id,
                method=result.method,
                chunk_count=0,
                batches_queued=0,
                status=ProcessingStatus.COMPLETED,
                stats=stats,
            )

        _require(validate_chunk_count(len(result.chunks)), "validate", chunk_count=len(result.chunks))

        records = build_document_chunks(result, document_id=document_id)
        _require(validate_chunk_orders(records), "validate")

        with structured_logger.timed_operation("store", "Store chunks") as ctx:
            stored = store.store_chunks(document_id, records)
            ctx["stored_count"] = len(stored)

        batches_queued = 0
        with structured_logger.timed_operation("queue", "Queue chunks for embedding") as ctx:
            for start in range(0, len(stored), batch_size):
                batch = [mark_queued(record) for record in stored[start:start + batch_size]]
                queue.enqueue(batch)
                batches_queued += 1
            ctx["batches_queued"] = batches_queued

        structured_logger.info(
            "ingest",
            "Document chunks queued for embedding",
            method=result.method.value,
            chunk_count=len(stored),
            sentence_boundary_preservation=stats.sentence_boundary_preservation,
        )

        return IngestReport(
            document_id=document_id,
            method=result.method,
            chunk_count=len(stored),
            batches_queued=batches_queued,
            status=ProcessingStatus.QUEUED,
            stats=stats,
        )
