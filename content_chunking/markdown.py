"""Markdown cleanup for chunk content.

Strips markdown structure and citation noise so that embedded text carries
only prose. Paragraph breaks survive; every other whitespace run collapses.
"""

import re

# Markdown structure, applied in order
_STRUCTURE_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),  # heading markers
    (re.compile(r"\|"), " "),  # table dividers
    (re.compile(r"^[-*+]\s+", re.MULTILINE), ""),  # list markers
    (re.compile(r"```[\s\S]*?```"), " "),  # fenced code blocks
    (re.compile(r"`[^`]+`"), " "),  # inline code
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),  # bold
    (re.compile(r"\*([^*]+)\*"), r"\1"),  # italic
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),  # links -> link text
]

# Parenthetical citations such as (Author, 2025) or (Figure 1.2)
_CITATION_PATTERNS = [
    re.compile(r"\([^)]*\d{4}[^)]*\)"),
    re.compile(r"\([^)]*Research[^)]*\)", re.IGNORECASE),
    re.compile(r"\([^)]*Source[^)]*\)", re.IGNORECASE),
    re.compile(r"\([^)]*Figure[^)]*\)", re.IGNORECASE),
    re.compile(r"\([^)]*Table[^)]*\)", re.IGNORECASE),
]

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def clean_markdown(content: str) -> str:
    """Remove markdown artifacts and citations from text.

    Args:
        content: Raw section text

    Returns:
        Cleaned text; paragraphs separated by a single blank line
    """
    cleaned = content

    for pattern, replacement in _STRUCTURE_PATTERNS:
        cleaned = pattern.sub(replacement, cleaned)

    for pattern in _CITATION_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    cleaned = _EXCESS_NEWLINES.sub("\n\n", cleaned)
    paragraphs = (" ".join(part.split()) for part in _PARAGRAPH_BREAK.split(cleaned))
    return "\n\n".join(p for p in paragraphs if p)
