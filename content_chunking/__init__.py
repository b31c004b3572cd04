"""Content-aware chunking for RAG pipelines.

Exports:
- Chunker: chunk_text with hierarchical chunking and fixed-length fallback
- Sections: heading segmentation and paragraph/sentence splitting
- Markdown: markdown and citation cleanup
- Fallback: fallback criteria evaluation
- Quality: chunk set statistics
- Records: storage records for chunks
- Ingest: fetch -> chunk -> store -> queue driver
- Validation: parameter and output checks
- Logging: Structured JSON logging
"""

from .chunker import chunk_text, create_fixed_length_chunks, create_hierarchical_chunks
from .config import ChunkingConfig
from .fallback import FallbackCriteria, evaluate_fallback_criteria, should_use_fixed_length_fallback
from .ingest import (
    ChunkStore,
    ContentFetcher,
    EmbeddingQueue,
    FetchedContent,
    IngestReport,
    ingest_document,
)
from .logging_utils import StructuredLogger, structured_logger
from .markdown import clean_markdown
from .models import ChunkingMethod, ChunkResult, Section
from .quality import ChunkingStats, analyze_chunking_quality
from .records import ChunkMetadata, DocumentChunk, build_document_chunks, mark_queued
from .sections import extract_document_title, split_by_headings, split_section_into_chunks
from .validation import (
    MAX_CHUNKS_PER_DOCUMENT,
    ProcessingStatus,
    ValidationError,
    ValidationResult,
    validate_batch_size,
    validate_chunk_count,
    validate_chunk_orders,
    validate_chunking_params,
    validate_source_id,
)

__all__ = [
    # Chunker
    "chunk_text",
    "create_hierarchical_chunks",
    "create_fixed_length_chunks",
    "ChunkResult",
    "ChunkingMethod",
    "ChunkingConfig",
    # Sections
    "Section",
    "split_by_headings",
    "split_section_into_chunks",
    "extract_document_title",
    # Markdown
    "clean_markdown",
    # Fallback
    "FallbackCriteria",
    "evaluate_fallback_criteria",
    "should_use_fixed_length_fallback",
    # Quality
    "ChunkingStats",
    "analyze_chunking_quality",
    # Records
    "ChunkMetadata",
    "DocumentChunk",
    "build_document_chunks",
    "mark_queued",
    # Ingest
    "ContentFetcher",
    "ChunkStore",
    "EmbeddingQueue",
    "FetchedContent",
    "IngestReport",
    "ingest_document",
    # Validation
    "ProcessingStatus",
    "ValidationError",
    "ValidationResult",
    "validate_chunking_params",
    "validate_batch_size",
    "validate_source_id",
    "validate_chunk_count",
    "validate_chunk_orders",
    "MAX_CHUNKS_PER_DOCUMENT",
    # Logging
    "StructuredLogger",
    "structured_logger",
]
