import pytest

STRUCTURED_DOCUMENT = """
# AI Technology Overview

## Machine Learning
Machine learning algorithms enable computers to learn and improve from experience without being explicitly programmed. Key techniques include supervised learning, unsupervised learning, and reinforcement learning.

Supervised learning uses labeled training data to learn a mapping function from inputs to outputs. This is the most common type of machine learning.

## Deep Learning
Deep learning is a subset of machine learning that uses neural networks with multiple layers to model and understand complex patterns in data.

Deep learning has revolutionized many fields including computer vision, natural language processing, and speech recognition.
"""

UNSTRUCTURED_DOCUMENT = """
This is a long paragraph without any clear headings or structure. It contains multiple sentences that discuss various topics related to artificial intelligence and machine learning. The content flows from one idea to the next without clear section breaks or hierarchical organization. This type of document would typically benefit from fixed-length chunking rather than hierarchical chunking because there are no clear semantic boundaries to respect. The text continues with more information about AI applications, challenges, and future prospects.
"""

PROSE_SENTENCE = "The quick brown fox jumps over the lazy dog near the river bank. "


@pytest.fixture
def structured_document() -> str:
    return STRUCTURED_DOCUMENT


@pytest.fixture
def unstructured_document() -> str:
    return UNSTRUCTURED_DOCUMENT


@pytest.fixture
def long_prose() -> str:
    """Heading-free prose well over 3000 characters."""
    return PROSE_SENTENCE * 60

