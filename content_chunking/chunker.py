"""Text chunking for retrieval-augmented generation.

chunk_text tries content-aware hierarchical chunking first (headings, then
paragraphs, then sentences) and falls back to overlapping fixed-length
windows when the hierarchical result looks poor.
"""

from .config import DEFAULT_MAX_CHUNK_SIZE, DEFAULT_OVERLAP_SIZE, ChunkingConfig
from .fallback import evaluate_fallback_criteria
from .logging_utils import structured_logger
from .markdown import clean_markdown
from .models import (
    DEFAULT_DOCUMENT_TITLE,
    ChunkingMethod,
    ChunkResult,
    Section,
    format_contextual_chunk,
)
from .sections import extract_document_title, split_by_headings, split_section_into_chunks


def chunk_text(
    text: str,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    overlap_size: int = DEFAULT_OVERLAP_SIZE,
) -> ChunkResult:
    """Chunk a document, choosing the chunking method automatically.

    Args:
        text: Document text (markdown or plain)
        max_chunk_size: Maximum chunk size in characters
        overlap_size: Overlap between fixed-length windows

    Returns:
        ChunkResult with chunks in document order and the method used
    """
    if not text or not text.strip():
        return ChunkResult(chunks=[], method=ChunkingMethod.HIERARCHICAL)

    hierarchical_chunks = create_hierarchical_chunks(text, max_chunk_size)
    criteria = evaluate_fallback_criteria(text, hierarchical_chunks, max_chunk_size)

    if criteria.triggered:
        structured_logger.info(
            "chunk",
            "Hierarchical chunking produced poor results, falling back to fixed-length chunking",
            reasons=criteria.reasons,
            hierarchical_chunk_count=len(hierarchical_chunks),
        )
        result = ChunkResult(
            chunks=create_fixed_length_chunks(text, max_chunk_size, overlap_size),
            method=ChunkingMethod.FIXED_LENGTH,
            fallback_reasons=criteria.reasons,
        )
    else:
        result = ChunkResult(chunks=hierarchical_chunks, method=ChunkingMethod.HIERARCHICAL)

    structured_logger.info(
        "chunk",
        "Document chunked",
        method=result.method.value,
        chunk_count=len(result.chunks),
        text_length=len(text),
    )
    return result


def create_hierarchical_chunks(text: str, target_max: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Create context-prefixed chunks along heading and paragraph boundaries.

    Args:
        text: Document text
        target_max: Requested maximum chunk size (capped for embedding limits)

    Returns:
        Chunks in ``Title/Section/Content`` format, in document order
    """
    config = ChunkingConfig.from_sizes(target_max)
    document_title = extract_document_title(text)

    sections = split_by_headings(text)
    if not sections:
        sections = [Section(title=DEFAULT_DOCUMENT_TITLE, content=text)]

    chunks: list[str] = []
    for index, section in enumerate(sections, start=1):
        chunks.extend(_section_chunks(section, index, document_title, config))

    structured_logger.debug(
        "segment",
        "Hierarchical chunks created",
        section_count=len(sections),
        chunk_count=len(chunks),
        target_min=config.target_min,
        target_max=config.adjusted_target_max,
    )
    return chunks


def _section_chunks(section: Section, index: int, document_title: str, config: ChunkingConfig) -> list[str]:
    section_title = section.title or f"Section {index}"
    cleaned = clean_markdown(section.content)

    return [
        format_contextual_chunk(document_title, section_title, content)
        for content in split_section_into_chunks(cleaned, config.target_min, config.adjusted_target_max)
    ]


def create_fixed_length_chunks(text: str, max_chunk_size: int, overlap_size: int) -> list[str]:
    """Split text into overlapping windows snapped to sentence boundaries.

    Each window ends at the last '.' or blank line up to its cutoff when that
    boundary lies past the window's midpoint, otherwise at the hard cutoff.
    The next window starts overlap_size characters before the previous end.

    Args:
        text: Raw document text
        max_chunk_size: Window size in characters
        overlap_size: Characters shared between consecutive windows

    Returns:
        Trimmed, unprefixed chunks in document order
    """
    chunks: list[str] = []
    length = len(text)
    start = 0

    while start < length:
        end = start + max_chunk_size

        if end < length:
            last_sentence = text.rfind(".", 0, end + 1)
            last_paragraph = text.rfind("\n\n", 0, end + 2)
            break_point = max(last_sentence, last_paragraph)

            if break_point > start + max_chunk_size * 0.5:
                end = break_point + 1

        chunk = text[start:end].strip()
        if chunk:
            chunks.append(chunk)

        next_start = end - overlap_size
        # Overlap never moves the window backwards
        start = next_start if next_start > start else end

    return chunks
