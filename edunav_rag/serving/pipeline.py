"""
Document Session
-----------------
Caller-owned chunk storage for one chat session:

    uploaded text
        |
        v
    clean_text (strip extraction control characters)
        |
        v
    WordWindowChunker (200-word windows, 40-word overlap)
        |
        v
    session chunk list  <-- replaced on every upload, dropped by clear()
        |
        v
    ChunkRetriever (keyword TF x IDF, or cosine when embeddings exist)
        |
        v
    system prompt + "Retrieved Document Context" block

Every retrieval works on the chunk list as it was at call time; nothing is
cached between queries.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

from langsmith import traceable
from loguru import logger

from edunav_rag.chunking.chunker import OVERLAP_WORDS, TARGET_WORDS, WordWindowChunker
from edunav_rag.chunking.schemas import Chunk
from edunav_rag.generation.prompts import build_rag_prompt, build_system_prompt
from edunav_rag.retrieval.keyword import KEYWORD_TOP_K
from edunav_rag.retrieval.retriever import ChunkRetriever
from edunav_rag.retrieval.vector import VECTOR_TOP_K
from edunav_rag.schemas import IngestedDocument, StudentProfile
from edunav_rag.utils.helpers import clean_text


# ---------------------------------------------------------------------------
# Result schema
# ---------------------------------------------------------------------------

@dataclass
class RetrievalResult:
    """Ranked chunks for one query. Timing is in milliseconds."""

    query: str
    strategy: str
    chunks: list[tuple[Chunk, float]] = field(default_factory=list)
    retrieval_ms: float = 0.0

    @property
    def texts(self) -> list[str]:
        return [chunk.text for chunk, _ in self.chunks]

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "strategy": self.strategy,
            "results": [
                {"rank": i, "score": round(score, 6), "text": chunk.text}
                for i, (chunk, score) in enumerate(self.chunks, start=1)
            ],
            "latency_ms": round(self.retrieval_ms, 1),
        }


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class DocumentSession:
    """
    Holds the chunks of the most recent upload and answers retrieval calls.

    Usage:
        session = DocumentSession()
        session.ingest(pdf_text, file_name="syllabus.pdf", page_count=12)
        prompt = session.build_prompt("What is covered in unit 3?")
    """

    def __init__(
        self,
        target_words: int = TARGET_WORDS,
        overlap: int = OVERLAP_WORDS,
        keyword_top_k: int = KEYWORD_TOP_K,
        vector_top_k: int = VECTOR_TOP_K,
    ) -> None:
        self.chunker = WordWindowChunker(target_words=target_words, overlap=overlap)
        self.retriever = ChunkRetriever(
            keyword_top_k=keyword_top_k,
            vector_top_k=vector_top_k,
        )
        self.chunks: list[Chunk] = []
        self.file_name: Optional[str] = None

    @classmethod
    def from_config(cls, cfg: dict) -> "DocumentSession":
        """Build a session from the `chunking` / `retrieval` config sections."""
        chunking = cfg.get("chunking", {}) or {}
        retrieval = cfg.get("retrieval", {}) or {}
        return cls(
            target_words=chunking.get("target_words", TARGET_WORDS),
            overlap=chunking.get("overlap", OVERLAP_WORDS),
            keyword_top_k=retrieval.get("keyword_top_k", KEYWORD_TOP_K),
            vector_top_k=retrieval.get("vector_top_k", VECTOR_TOP_K),
        )

    # --- Chunk set ------------------------------------------------------------

    def ingest(
        self,
        text: str,
        file_name: str = "document",
        page_count: Optional[int] = None,
    ) -> IngestedDocument:
        """
        Chunk extracted document text and replace the session's chunk set.

        Raises:
            ValueError: if the text is blank or produces no chunks.  The
                previous chunk set is kept in that case.
        """
        cleaned = clean_text(text or "")
        if not cleaned.strip():
            raise ValueError(
                "Could not extract text. Make sure the PDF is not a scanned image."
            )

        chunks = self.chunker.chunk_document(cleaned)
        if not chunks:
            raise ValueError(f"{file_name} appears to be empty.")

        self.chunks = chunks
        self.file_name = file_name
        logger.info(
            f"[Session] Ingested {file_name} | {len(cleaned):,} chars -> {len(chunks)} chunks"
        )
        return IngestedDocument(
            file_name=file_name,
            page_count=page_count,
            char_count=len(text),
            chunk_count=len(chunks),
            chunks=chunks,
        )

    def load_chunks(self, chunks: Sequence[Chunk], file_name: Optional[str] = None) -> None:
        """Adopt a chunk list the caller persisted earlier."""
        self.chunks = list(chunks)
        self.file_name = file_name
        logger.debug(f"[Session] Loaded {len(self.chunks)} chunks")

    def clear(self) -> None:
        self.chunks = []
        self.file_name = None
        logger.debug("[Session] Chunk set cleared")

    @property
    def has_document(self) -> bool:
        return bool(self.chunks)

    # --- Retrieval ------------------------------------------------------------

    @traceable(name="session_retrieve", run_type="chain")
    def retrieve(
        self,
        query: str,
        query_embedding: Optional[Sequence[float]] = None,
    ) -> RetrievalResult:
        """Rank the session's chunks for one query."""
        t0 = time.perf_counter()
        ranked = self.retriever.retrieve(query, self.chunks, query_embedding)
        retrieval_ms = (time.perf_counter() - t0) * 1000

        return RetrievalResult(
            query=query,
            strategy=self.retriever.last_strategy or "keyword",
            chunks=ranked,
            retrieval_ms=retrieval_ms,
        )

    def build_prompt(
        self,
        query: str,
        profile: Optional[StudentProfile] = None,
        query_embedding: Optional[Sequence[float]] = None,
    ) -> str:
        """
        System prompt for the chat model: mentor instructions, optional
        student profile, and the excerpts retrieved for this query.
        """
        system_prompt = build_system_prompt(profile)
        if not self.chunks:
            return system_prompt
        result = self.retrieve(query, query_embedding)
        return system_prompt + build_rag_prompt(result.texts)
