"""Core data types for content-aware chunking.

Also owns the contextual chunk wire format:

    Title: <document title>
    Section: <section title>
    Content: <chunk text>
"""

import re
from dataclasses import dataclass, field
from enum import Enum


class ChunkingMethod(str, Enum):
    """Method that produced a chunk set."""

    HIERARCHICAL = "content_aware_hierarchical"
    FIXED_LENGTH = "fixed_length"


DEFAULT_DOCUMENT_TITLE = "Document"

_CONTENT_FIELD = re.compile(r"Content: (.+)$", re.DOTALL)
_SECTION_FIELD = re.compile(r"^Section: (.*)$", re.MULTILINE)


@dataclass(frozen=True)
class Section:
    """A run of document text under one heading."""

    title: str
    content: str


@dataclass
class ChunkResult:
    """Chunks in document order plus the method actually used."""

    chunks: list[str]
    method: ChunkingMethod
    fallback_reasons: list[str] = field(default_factory=list)

    @property
    def fallback_triggered(self) -> bool:
        return self.method == ChunkingMethod.FIXED_LENGTH


def format_contextual_chunk(document_title: str, section_title: str, content: str) -> str:
    """Prefix chunk text with its document and section context."""
    return f"Title: {document_title}\nSection: {section_title}\nContent: {content}"


def chunk_content(chunk: str) -> str | None:
    """Return the text after ``Content: `` or None for unprefixed chunks."""
    match = _CONTENT_FIELD.search(chunk)
    return match.group(1) if match else None


def chunk_section_label(chunk: str) -> str | None:
    """Return the ``Section:`` label of a contextual chunk."""
    match = _SECTION_FIELD.search(chunk)
    return match.group(1) if match else None
