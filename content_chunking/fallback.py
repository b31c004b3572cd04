"""Fallback decision for hierarchical chunking.

Seven independent criteria are checked in a fixed order; any one being true
means the hierarchical chunks are discarded for fixed-length windows. The
cheap checks run first and the mean computation last.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields

from .logging_utils import structured_logger
from .models import DEFAULT_DOCUMENT_TITLE, chunk_content, chunk_section_label

GENERIC_SECTION_LABELS = frozenset({"Section 1", DEFAULT_DOCUMENT_TITLE})
SENTENCE_TERMINATORS = (".", "!", "?")

# Characters of original text expected per chunk at minimum
CHARS_PER_EXPECTED_CHUNK = 3000


@dataclass
class FallbackCriteria:
    """Flags for each fallback criterion, in evaluation order."""

    no_chunks: bool = False
    single_oversized_chunk: bool = False
    all_generic_sections: bool = False
    broken_sentences: bool = False
    too_few_chunks: bool = False
    too_many_large_chunks: bool = False
    average_too_large: bool = False

    @property
    def triggered(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    @property
    def reasons(self) -> list[str]:
        """Human-readable descriptions of the flags that are set."""
        return [_REASONS[f.name] for f in fields(self) if getattr(self, f.name)]


def _no_chunks(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    return len(chunks) == 0


def _single_oversized_chunk(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    return len(chunks) == 1 and len(chunks[0]) > max_chunk_size * 3


def _all_generic_sections(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    return all(chunk_section_label(chunk) in GENERIC_SECTION_LABELS for chunk in chunks)


def _broken_sentences(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    broken = 0
    for chunk in chunks:
        content = chunk_content(chunk)
        if content is not None and not content.strip().endswith(SENTENCE_TERMINATORS):
            broken += 1
    return broken > len(chunks) * 0.5


def _too_few_chunks(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    return len(chunks) < math.ceil(len(text) / CHARS_PER_EXPECTED_CHUNK)


def _too_many_large_chunks(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    large = sum(1 for chunk in chunks if len(chunk) > max_chunk_size * 2)
    return large > len(chunks) * 0.6


def _average_too_large(text: str, chunks: Sequence[str], max_chunk_size: int) -> bool:
    if not chunks:
        return False
    average = sum(len(chunk) for chunk in chunks) / len(chunks)
    return average > max_chunk_size * 1.8


Criterion = Callable[[str, Sequence[str], int], bool]

_CRITERIA: list[tuple[str, Criterion, str]] = [
    ("no_chunks", _no_chunks, "No chunks were produced"),
    ("single_oversized_chunk", _single_oversized_chunk, "Single chunk larger than 3x max chunk size"),
    ("all_generic_sections", _all_generic_sections, "No real headings found (all sections generic)"),
    ("broken_sentences", _broken_sentences, "Most chunks end mid-sentence"),
    ("too_few_chunks", _too_few_chunks, "Too few chunks for document length"),
    ("too_many_large_chunks", _too_many_large_chunks, "Most chunks larger than 2x max chunk size"),
    ("average_too_large", _average_too_large, "Average chunk size above 1.8x max chunk size"),
]

_REASONS = {name: reason for name, _, reason in _CRITERIA}


def evaluate_fallback_criteria(
    original_text: str,
    chunks: Sequence[str],
    max_chunk_size: int,
    short_circuit: bool = True,
) -> FallbackCriteria:
    """Evaluate fallback criteria over hierarchical chunks.

    Args:
        original_text: The document text that was chunked
        chunks: Hierarchical chunks produced from it
        max_chunk_size: Requested maximum chunk size
        short_circuit: Stop at the first criterion that fires

    Returns:
        FallbackCriteria with the evaluated flags set
    """
    criteria = FallbackCriteria()

    for name, predicate, reason in _CRITERIA:
        if predicate(original_text, chunks, max_chunk_size):
            setattr(criteria, name, True)
            structured_logger.debug(
                "fallback",
                f"Fallback criterion triggered: {reason}",
                criterion=name,
                chunk_count=len(chunks),
            )
            if short_circuit:
                break

    return criteria


def should_use_fixed_length_fallback(
    original_text: str,
    chunks: Sequence[str],
    max_chunk_size: int,
) -> bool:
    """Return True if hierarchical chunks should be replaced by fixed-length ones."""
    return evaluate_fallback_criteria(original_text, chunks, max_chunk_size).triggered
