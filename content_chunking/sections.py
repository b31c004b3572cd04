"""Heading segmentation and section splitting.

Two phases of hierarchical chunking:
1. split_by_headings cuts raw text into titled sections at #, ## and ###.
2. split_section_into_chunks packs a cleaned section's paragraphs (or, for
   oversized paragraphs, its sentences) into size-bounded chunks.
"""

import re

from .models import DEFAULT_DOCUMENT_TITLE, Section

_HEADING = re.compile(r"^#{1,3}\s+")
_DOCUMENT_TITLE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")


def split_by_headings(text: str) -> list[Section]:
    """Split text into sections along markdown headings.

    Returns an empty list when the text has no headings at all; callers
    substitute a single whole-document section in that case.

    Args:
        text: Raw document text

    Returns:
        Sections in document order, each with non-blank content
    """
    sections: list[Section] = []
    title = ""
    content = ""
    has_headings = False

    for line in text.split("\n"):
        stripped = line.strip()

        if _HEADING.match(stripped):
            has_headings = True
            if content.strip():
                sections.append(Section(title=title, content=content))
            title = _HEADING.sub("", stripped, count=1).strip()
            content = ""
        else:
            content += ("\n" if content else "") + line

    if has_headings and content.strip():
        sections.append(Section(title=title, content=content))

    return sections


def extract_document_title(text: str) -> str:
    """Return the first level-1 heading of the text, or 'Document'."""
    match = _DOCUMENT_TITLE.search(text)
    return match.group(1).strip() if match else DEFAULT_DOCUMENT_TITLE


def _split_sentences(paragraph: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_BREAK.split(paragraph) if s.strip()]


def _pack_sentences(running: str, paragraph: str, target_max: int, chunks: list[str]) -> str:
    """Pack an oversized paragraph sentence by sentence.

    The running chunk is continued rather than discarded, and every run that
    cannot take the next sentence is emitted even when below the minimum.

    Returns:
        The trailing sentence run, to become the new running chunk
    """
    current = running
    separator = "\n\n"

    for sentence in _split_sentences(paragraph):
        candidate = f"{current}{separator}{sentence}" if current else sentence
        separator = " "

        if len(candidate) <= target_max:
            current = candidate
            continue

        if current:
            chunks.append(current)
        current = sentence

    return current


def split_section_into_chunks(content: str, target_min: int, target_max: int) -> list[str]:
    """Split cleaned section content into chunks on paragraph boundaries.

    Args:
        content: Cleaned section text
        target_min: Size a chunk must reach before it is flushed
        target_max: Size a chunk should not grow past

    Returns:
        Chunk strings in document order; no text is dropped
    """
    chunks: list[str] = []
    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(content) if p.strip()]
    current = ""

    for paragraph in paragraphs:
        candidate = f"{current}\n\n{paragraph}" if current else paragraph

        if len(candidate) <= target_max:
            current = candidate
        elif len(current) >= target_min:
            chunks.append(current)
            current = paragraph
        elif len(paragraph) > target_max:
            current = _pack_sentences(current, paragraph, target_max, chunks)
        else:
            # Small paragraphs merge even past target_max
            current = candidate

    if current:
        if len(current) >= target_min // 2 or not chunks:
            chunks.append(current)
        else:
            chunks[-1] = f"{chunks[-1]}\n\n{current}"

    return chunks
