"""Chunk set statistics.

Observational only: nothing here feeds back into chunking decisions.
"""

import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field

from .fallback import SENTENCE_TERMINATORS
from .models import ChunkingMethod, chunk_content


@dataclass(frozen=True)
class ChunkingStats:
    """Summary of a finished chunk set."""

    total_chunks: int
    method: ChunkingMethod
    average_chunk_size: int
    min_chunk_size: int
    max_chunk_size: int
    sentence_boundary_preservation: float
    fallback_triggered: bool
    fallback_reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["method"] = self.method.value
        return data


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def analyze_chunking_quality(
    chunks: Sequence[str],
    method: ChunkingMethod | str,
    fallback_reasons: Sequence[str] | None = None,
) -> ChunkingStats:
    """Compute size and sentence-boundary statistics for chunks.

    Sizes are raw chunk lengths, context prefix included. Sentence-boundary
    preservation is the percentage of chunks whose content ends in '.', '!'
    or '?', using the text after ``Content: `` for hierarchical chunks.

    Args:
        chunks: Chunks from chunk_text
        method: Method that produced them
        fallback_reasons: Reasons recorded when fallback was triggered

    Returns:
        ChunkingStats for the chunk set

    Raises:
        ValueError: If method is not a known chunking method
    """
    method = ChunkingMethod(method)
    reasons = list(fallback_reasons or [])
    fallback_triggered = method is ChunkingMethod.FIXED_LENGTH

    if not chunks:
        return ChunkingStats(
            total_chunks=0,
            method=method,
            average_chunk_size=0,
            min_chunk_size=0,
            max_chunk_size=0,
            sentence_boundary_preservation=0.0,
            fallback_triggered=fallback_triggered,
            fallback_reasons=reasons,
        )

    sizes = [len(chunk) for chunk in chunks]

    ending_properly = 0
    for chunk in chunks:
        content = chunk
        if method is ChunkingMethod.HIERARCHICAL:
            content = chunk_content(chunk) or chunk
        if content.strip().endswith(SENTENCE_TERMINATORS):
            ending_properly += 1

    preservation = ending_properly / len(chunks) * 100

    return ChunkingStats(
        total_chunks=len(chunks),
        method=method,
        average_chunk_size=int(_round_half_up(sum(sizes) / len(sizes))),
        min_chunk_size=min(sizes),
        max_chunk_size=max(sizes),
        sentence_boundary_preservation=_round_half_up(preservation, 2),
        fallback_triggered=fallback_triggered,
        fallback_reasons=reasons,
    )
