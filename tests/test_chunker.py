import math

import pytest

from content_chunking.chunker import chunk_text, create_fixed_length_chunks, create_hierarchical_chunks
from content_chunking.models import ChunkingMethod, chunk_content, chunk_section_label


class TestChunkText:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_empty_input(self, text):
        result = chunk_text(text)

        assert result.chunks == []
        assert result.method is ChunkingMethod.HIERARCHICAL
        assert result.fallback_reasons == []

    def test_structured_document_uses_hierarchical(self, structured_document):
        result = chunk_text(structured_document, 1000, 80)

        assert result.method is ChunkingMethod.HIERARCHICAL
        assert result.method.value == "content_aware_hierarchical"
        assert result.chunks[0].startswith(
            "Title: AI Technology Overview\nSection: Machine Learning\nContent: Machine learning algorithms"
        )
        assert not result.fallback_triggered

    def test_title_with_two_subsections(self):
        text = "# Title\n\n## Alpha\nAlpha body sentence.\n\n## Beta\nBeta body sentence."
        result = chunk_text(text)

        assert result.method is ChunkingMethod.HIERARCHICAL
        assert result.chunks == [
            "Title: Title\nSection: Alpha\nContent: Alpha body sentence.",
            "Title: Title\nSection: Beta\nContent: Beta body sentence.",
        ]

    def test_unstructured_document_falls_back(self, unstructured_document):
        result = chunk_text(unstructured_document, 1000, 80)

        assert result.method is ChunkingMethod.FIXED_LENGTH
        assert len(result.chunks) > 0
        assert "Title:" not in result.chunks[0]

    def test_long_prose_without_headings_falls_back(self, long_prose):
        assert len(long_prose) >= 3000
        result = chunk_text(long_prose)

        assert result.method is ChunkingMethod.FIXED_LENGTH
        assert len(result.chunks) > 1
        assert all("Title:" not in c and "Section:" not in c for c in result.chunks)
        assert result.fallback_reasons == ["No real headings found (all sections generic)"]

    @pytest.mark.parametrize(
        "text",
        [
            "Short text.",
            "# Title\n## Section 1\n### Subsection",
            "Text with émojis 🚀 and spëcial chars.",
            "## Heading\n```\ncode only\n```",
        ],
    )
    def test_non_empty_input_yields_chunks(self, text):
        assert len(chunk_text(text, 1000, 80).chunks) > 0

    def test_section_order_is_preserved(self):
        names = ["One", "Two", "Three", "Four", "Five"]
        text = "\n".join(f"## {name}\nThe {name.lower()} section has a sentence." for name in names)
        result = chunk_text(text)

        assert result.method is ChunkingMethod.HIERARCHICAL
        assert [chunk_section_label(c) for c in result.chunks] == names

    def test_untitled_leading_section_gets_numbered_label(self):
        result = chunk_text("Intro paragraph.\n## Next\nBody text.")

        assert result.method is ChunkingMethod.HIERARCHICAL
        assert [chunk_section_label(c) for c in result.chunks] == ["Section 1", "Next"]


class TestCreateHierarchicalChunks:
    def test_chunk_structure(self, structured_document):
        chunks = create_hierarchical_chunks(structured_document, 1000)

        assert len(chunks) == 2
        assert "Title: AI Technology Overview" in chunks[0]
        assert "Section: Machine Learning" in chunks[0]
        assert "Section: Deep Learning" in chunks[1]

    def test_document_without_headings(self, unstructured_document):
        chunks = create_hierarchical_chunks(unstructured_document, 1000)

        assert chunks[0].startswith("Title: Document\nSection: Document\nContent: This is a long paragraph")

    def test_content_is_cleaned(self):
        chunks = create_hierarchical_chunks("# Doc\n## Part\nSome **bold** and [a link](http://x.y) (Smith, 2020).")

        assert chunk_content(chunks[0]) == "Some bold and a link ."

    def test_target_is_capped(self):
        paragraph = "x" * 199 + "."
        text = "# Big\n## Body\n" + "\n\n".join([paragraph] * 30)
        chunks = create_hierarchical_chunks(text, 5000)

        contents = [chunk_content(c) for c in chunks]
        assert len(contents) == 4
        assert all(len(c) <= 1800 for c in contents)
        assert sum(c.count(paragraph) for c in contents) == 30


class TestCreateFixedLengthChunks:
    def test_no_context_prefix(self, unstructured_document):
        chunks = create_fixed_length_chunks(unstructured_document, 800, 80)

        assert len(chunks) > 0
        assert all("Title:" not in c and "Section:" not in c for c in chunks)

    @pytest.mark.parametrize("size", [200, 500, 800])
    def test_chunks_stay_within_one_char_of_max_size(self, long_prose, size):
        assert all(len(c) <= size + 1 for c in create_fixed_length_chunks(long_prose, size, 40))

    def test_sentence_end_exactly_at_cutoff_is_kept(self):
        text = "a" * 800 + "." + "b" * 500
        chunks = create_fixed_length_chunks(text, 800, 80)

        assert chunks[0] == "a" * 800 + "."

    def test_paragraph_break_exactly_at_cutoff_is_used(self):
        text = "a" * 800 + "\n\n" + "b" * 500
        chunks = create_fixed_length_chunks(text, 800, 80)

        assert chunks[0] == "a" * 800

    def test_windows_overlap(self, long_prose):
        chunks = create_fixed_length_chunks(long_prose, 800, 80)

        assert len(chunks) >= math.ceil((len(long_prose) - 80) / (800 - 80))
        for current, following in zip(chunks, chunks[1:]):
            assert len(current) + len(following) > 800 - 80
            assert following[:20] in current

    def test_hard_cutoff_without_boundaries(self):
        chunks = create_fixed_length_chunks("x" * 2000, 800, 80)

        assert [len(c) for c in chunks] == [800, 800, 560]

    def test_snaps_to_sentence_end_past_midpoint(self):
        text = "a" * 500 + "." + "b" * 1000
        chunks = create_fixed_length_chunks(text, 800, 80)

        assert chunks[0] == "a" * 500 + "."
        assert chunks[-1].endswith("b")

    def test_snaps_to_paragraph_break(self):
        text = "a" * 600 + "\n\n" + "b" * 600
        chunks = create_fixed_length_chunks(text, 800, 80)

        assert chunks[0] == "a" * 600

    def test_ignores_boundary_before_midpoint(self):
        text = "a" * 100 + "." + "b" * 1000
        chunks = create_fixed_length_chunks(text, 800, 80)

        assert len(chunks[0]) == 800

    def test_short_and_blank_text(self):
        assert create_fixed_length_chunks("Short text.", 800, 80) == ["Short text."]
        assert create_fixed_length_chunks("   ", 800, 80) == []

    def test_terminates_when_overlap_exceeds_progress(self):
        chunks = create_fixed_length_chunks("abc. " * 100, 10, 50)

        assert chunks
        assert chunks[-1].endswith("abc.")
