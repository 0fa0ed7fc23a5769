"""
Shared test fixtures for the retrieval test suite.

Provides: small chunk collections, numbered word documents, CLI config files
"""

import pytest
from loguru import logger

from edunav_rag.chunking.schemas import Chunk


@pytest.fixture(autouse=True)
def _quiet_logger():
    """Drop loguru sinks so tests never write log files."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def animal_chunks():
    """Three chunks where only the second mentions cats."""
    return [
        Chunk(text="the cat sat on the mat"),
        Chunk(text="dogs and cats are friends"),
        Chunk(text="quantum mechanics is hard"),
    ]


@pytest.fixture
def numbered_words():
    """Return a builder for 'w1 w2 ... wN' documents."""

    def _build(n: int) -> str:
        return " ".join(f"w{i}" for i in range(1, n + 1))

    return _build


@pytest.fixture
def cli_config(tmp_path):
    """Config YAML with file logging disabled."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "chunking:\n"
        "  target_words: 4\n"
        "  overlap: 2\n"
        "retrieval:\n"
        "  keyword_top_k: 2\n"
        "  vector_top_k: 2\n"
        "logging:\n"
        "  level: WARNING\n"
        "  file: null\n",
        encoding="utf-8",
    )
    return path
