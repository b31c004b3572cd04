"""Input and output validation for chunking callers.

The chunking core never raises on its size parameters; drivers call these
checks first and raise ValidationError themselves.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .records import DocumentChunk


class ValidationError(Exception):
    """Raised when chunking input or output fails validation."""

    pass


class ProcessingStatus(Enum):
    """Final document state reported by an ingest run."""

    QUEUED = "queued"
    COMPLETED = "completed"


# Cost control limits
MAX_CHUNKS_PER_DOCUMENT = 500


@dataclass
class ValidationResult:
    """Result of a validation check."""

    is_valid: bool
    error_message: str | None = None


def validate_chunking_params(max_chunk_size: int, overlap_size: int) -> ValidationResult:
    """Validate chunk and overlap sizes.

    Args:
        max_chunk_size: Maximum chunk size in characters
        overlap_size: Overlap between fixed-length windows

    Returns:
        ValidationResult with status and error message if invalid
    """
    if isinstance(max_chunk_size, bool) or not isinstance(max_chunk_size, int) or max_chunk_size <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"max_chunk_size must be a positive integer, got {max_chunk_size!r}",
        )
    if isinstance(overlap_size, bool) or not isinstance(overlap_size, int) or overlap_size < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"overlap_size must be a non-negative integer, got {overlap_size!r}",
        )
    if overlap_size >= max_chunk_size:
        return ValidationResult(
            is_valid=False,
            error_message=f"overlap_size ({overlap_size}) must be smaller than max_chunk_size ({max_chunk_size})",
        )
    return ValidationResult(is_valid=True)


def validate_batch_size(batch_size: int) -> ValidationResult:
    """Validate embedding queue batch size is positive."""
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"batch_size must be a positive integer, got {batch_size!r}",
        )
    return ValidationResult(is_valid=True)


def validate_source_id(source_id: str | None) -> ValidationResult:
    """Validate a document source id is a non-empty string."""
    if not isinstance(source_id, str) or not source_id.strip():
        return ValidationResult(
            is_valid=False,
            error_message="source_id is required and must be a non-empty string",
        )
    return ValidationResult(is_valid=True)


def validate_chunk_count(chunk_count: int) -> ValidationResult:
    """Validate chunk count is within limits.

    Args:
        chunk_count: Number of chunks created

    Returns:
        ValidationResult with status and error message if invalid
    """
    if chunk_count > MAX_CHUNKS_PER_DOCUMENT:
        return ValidationResult(
            is_valid=False,
            error_message=f"Chunk count {chunk_count} exceeds limit of {MAX_CHUNKS_PER_DOCUMENT}",
        )
    return ValidationResult(is_valid=True)


def validate_chunk_orders(records: Sequence["DocumentChunk"]) -> ValidationResult:
    """Validate chunk_order values are sequential starting from 0.

    Args:
        records: DocumentChunk records in storage order

    Returns:
        ValidationResult with status and error message if invalid
    """
    orders = [r.chunk_order for r in records]
    expected = list(range(len(records)))

    if orders != expected:
        return ValidationResult(
            is_valid=False,
            error_message=f"Chunk orders not sequential: got {orders}, expected {expected}",
        )
    return ValidationResult(is_valid=True)
