"""
Chunk Retriever
----------------
Picks a ranking strategy per query:

    Vector path  : cosine similarity, used only when the caller passes a
                   query embedding AND at least one chunk carries one
    Keyword path : TF x IDF over the query's terms (the default, since the
                   ingestion flow never attaches embeddings)

The retriever holds no chunk state -- callers pass the chunk list on every
call, so one instance can serve any number of sessions.
"""
from __future__ import annotations

from typing import Optional, Sequence

from langsmith import traceable
from loguru import logger

from edunav_rag.chunking.schemas import Chunk
from edunav_rag.retrieval.keyword import KEYWORD_TOP_K, rank_by_keyword
from edunav_rag.retrieval.vector import VECTOR_TOP_K, rank_by_embedding

KEYWORD = "keyword"
VECTOR = "vector"


class ChunkRetriever:
    """Selects keyword or vector ranking depending on embedding availability."""

    def __init__(
        self,
        keyword_top_k: int = KEYWORD_TOP_K,
        vector_top_k: int = VECTOR_TOP_K,
    ) -> None:
        self.keyword_top_k = keyword_top_k
        self.vector_top_k = vector_top_k
        self.last_strategy: Optional[str] = None

    @staticmethod
    def select_strategy(
        chunks: Sequence[Chunk],
        query_embedding: Optional[Sequence[float]] = None,
    ) -> str:
        if query_embedding is not None and len(query_embedding) > 0:
            if any(chunk.has_embedding for chunk in chunks):
                return VECTOR
        return KEYWORD

    @traceable(name="retrieve_chunks", run_type="retriever")
    def retrieve(
        self,
        query: str,
        chunks: Sequence[Chunk],
        query_embedding: Optional[Sequence[float]] = None,
    ) -> list[tuple[Chunk, float]]:
        """
        Rank chunks for a query.

        Args:
            query: Raw user query string.
            chunks: The session's chunk list.
            query_embedding: Optional query vector from an embedding service.

        Returns:
            List of (Chunk, score) sorted by score descending.
        """
        strategy = self.select_strategy(chunks, query_embedding)
        self.last_strategy = strategy
        logger.debug(f"[Retriever] Query: {query[:80]!r} | strategy={strategy}")

        if strategy == VECTOR:
            results = rank_by_embedding(query_embedding, chunks, self.vector_top_k)
        else:
            results = rank_by_keyword(query, chunks, self.keyword_top_k)

        logger.info(
            f"[Retriever] Retrieved {len(results)} of {len(chunks)} chunks "
            f"(top score: {results[0][1]:.4f})" if results else "[Retriever] No results"
        )
        return results
