"""
Unit tests for DocumentSession ingestion, retrieval and prompt assembly.

Dependencies: pytest, edunav_rag.serving.pipeline
"""

import pytest

from edunav_rag.chunking.schemas import Chunk
from edunav_rag.generation.prompts import BASE_SYSTEM_PROMPT
from edunav_rag.schemas import StudentProfile
from edunav_rag.serving.pipeline import DocumentSession, RetrievalResult


@pytest.fixture
def session():
    return DocumentSession(target_words=4, overlap=2, keyword_top_k=2)


class TestIngest:
    """Test suite for DocumentSession.ingest."""

    def test_ingest_chunks_document(self, session, numbered_words):
        """Test ingestion chunks text and reports counts."""
        text = numbered_words(10)
        doc = session.ingest(text, file_name="notes.pdf", page_count=2)

        assert doc.file_name == "notes.pdf"
        assert doc.page_count == 2
        assert doc.char_count == len(text)
        assert doc.chunk_count == 4
        assert [c.text for c in doc.chunks][0] == "w1 w2 w3 w4"
        assert session.chunks == doc.chunks
        assert session.has_document

    def test_ingest_strips_control_characters(self, session):
        """Test extraction debris does not reach chunk text."""
        doc = session.ingest("heap\x00sort \x07works")
        assert doc.chunks[0].text == "heapsort works"

    def test_ingest_replaces_previous_chunks(self, session):
        """Test a new upload replaces the chunk set."""
        session.ingest("first document text")
        session.ingest("second upload")
        assert [c.text for c in session.chunks] == ["second upload"]
        assert session.file_name == "document"

    @pytest.mark.parametrize("text", ["", "   \n\t", "\x00\x01"])
    def test_blank_text_rejected(self, session, text):
        """Test blank documents raise ValueError and keep existing chunks."""
        session.ingest("kept chunk")
        with pytest.raises(ValueError, match="Could not extract text"):
            session.ingest(text)
        assert [c.text for c in session.chunks] == ["kept chunk"]

    def test_document_without_chunks_rejected(self):
        """Test a chunker that yields nothing is reported as an empty document."""
        session = DocumentSession(target_words=0, overlap=0)
        with pytest.raises(ValueError, match="appears to be empty"):
            session.ingest("some words here", file_name="blank.pdf")

    def test_clear(self, session):
        """Test clear discards the chunk set."""
        session.ingest("something to forget")
        session.clear()
        assert session.chunks == []
        assert session.file_name is None
        assert not session.has_document


class TestRetrieve:
    """Test suite for DocumentSession.retrieve."""

    def test_keyword_result(self, session, animal_chunks):
        """Test retrieval ranks loaded chunks and records the strategy."""
        session.load_chunks(animal_chunks)
        result = session.retrieve("cats")

        assert isinstance(result, RetrievalResult)
        assert result.strategy == "keyword"
        assert result.chunks[0][0] is animal_chunks[1]
        assert result.texts == ["dogs and cats are friends", "the cat sat on the mat"]
        assert result.retrieval_ms >= 0

    def test_vector_result(self, session):
        """Test a query embedding switches to the cosine path."""
        session.load_chunks([
            Chunk(text="left", embedding=[1.0, 0.0]),
            Chunk(text="right", embedding=[0.0, 1.0]),
        ])
        result = session.retrieve("which side", query_embedding=[0.0, 1.0])
        assert result.strategy == "vector"
        assert result.texts[0] == "right"

    def test_empty_session(self, session):
        """Test retrieval on an empty session returns nothing."""
        assert session.retrieve("cats").chunks == []

    def test_to_dict(self, session, animal_chunks):
        """Test the serialisable view of a result."""
        session.load_chunks(animal_chunks)
        data = session.retrieve("quantum").to_dict()

        assert data["query"] == "quantum"
        assert data["strategy"] == "keyword"
        assert data["results"][0]["rank"] == 1
        assert data["results"][0]["text"] == "quantum mechanics is hard"
        assert data["results"][0]["score"] > 0
        assert "latency_ms" in data


class TestBuildPrompt:
    """Test suite for DocumentSession.build_prompt."""

    def test_without_document(self, session):
        """Test no upload means the bare system prompt."""
        assert session.build_prompt("anything") == BASE_SYSTEM_PROMPT

    def test_with_document_and_profile(self, session, animal_chunks):
        """Test retrieved excerpts and profile are both included."""
        session.load_chunks(animal_chunks)
        profile = StudentProfile(name="Asha", branch="Mechanical", semester="3rd", goals="pass")
        prompt = session.build_prompt("cats", profile=profile)

        assert prompt.startswith(BASE_SYSTEM_PROMPT)
        assert "- Branch: Mechanical" in prompt
        assert "[Excerpt 1]:\ndogs and cats are friends" in prompt
        assert "[Excerpt 2]:\nthe cat sat on the mat" in prompt
        assert "[Excerpt 3]" not in prompt


class TestFromConfig:
    """Test suite for DocumentSession.from_config."""

    def test_reads_sections(self):
        """Test config sections override defaults."""
        session = DocumentSession.from_config({
            "chunking": {"target_words": 50, "overlap": 5},
            "retrieval": {"keyword_top_k": 7},
        })
        assert session.chunker.target_words == 50
        assert session.chunker.overlap == 5
        assert session.retriever.keyword_top_k == 7
        assert session.retriever.vector_top_k == 4

    def test_empty_config_uses_defaults(self):
        """Test missing sections fall back to 200/40 and 5/4."""
        session = DocumentSession.from_config({"chunking": None})
        assert session.chunker.target_words == 200
        assert session.chunker.overlap == 40
        assert session.retriever.keyword_top_k == 5
