from content_chunking.models import format_contextual_chunk


def make_chunk(section: str, size: int, ending: str = ".", title: str = "Doc") -> str:
    """Build a contextual chunk of exactly `size` characters."""
    prefix = format_contextual_chunk(title, section, "")
    body = "x" * (size - len(prefix) - len(ending))
    return prefix + body + ending
