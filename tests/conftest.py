"""Pytest configuration and global fixtures for slabs tests."""

from pathlib import Path

import pytest

from slabs.embedder import MockEmbedder
from slabs.observability import shutdown_tracer
from tests.utils.fakes import FakeSyntaxProvider, KeywordEmbedder, PeriodSegmenter

# Technical prose used by several chunker tests
SAMPLE_DOCUMENT = """Retrieval-Augmented Generation: An Overview

Retrieval-Augmented Generation (RAG) combines dense retrieval with generative models. By grounding answers in retrieved passages, RAG systems produce more accurate and verifiable responses than purely parametric approaches.

Chunking Strategies

Document chunking is a crucial preprocessing step. The goal is to split long documents into smaller, coherent segments that can be embedded and retrieved. Poor chunking fragments context and reduces answer quality.

Fixed-size chunking with overlap is simple. Sentence-based chunking respects sentence boundaries. Recursive character splitting tries separators in order of significance and offers a good balance between simplicity and effectiveness.

Conclusion

Chunk size matters: chunks that are too small lack context, while overly large chunks dilute relevant information with noise."""

MULTILINGUAL_DOCUMENT = (
    "Größenordnung und Übermaß. "
    "日本語のテキストを分割します。"
    "Emoji 🎉🚀 mixed with text. "
    "Ελληνικά κείμενα εδώ. "
    "Русский текст тоже."
)


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def multilingual_document() -> str:
    return MULTILINGUAL_DOCUMENT


# ==================== Component Fixtures ====================

@pytest.fixture
def mock_embedder():
    """Deterministic embedder matching the BaseEmbedder interface."""
    return MockEmbedder(dimension=32)


@pytest.fixture
def topic_embedder():
    """Embedder that separates sentences about cats from sentences about stocks."""
    return KeywordEmbedder(["Cats", "Stocks"])


@pytest.fixture
def period_segmenter():
    return PeriodSegmenter()


@pytest.fixture
def fake_syntax_provider():
    return FakeSyntaxProvider()


@pytest.fixture(autouse=True)
def reset_tracing():
    """Leave tracing disabled between tests."""
    yield
    shutdown_tracer()


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
