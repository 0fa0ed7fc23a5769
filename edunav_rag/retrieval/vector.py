"""
Vector Retrieval (cosine similarity)
-------------------------------------
Alternate ranking path for chunks that carry embeddings.  Chunks without
an embedding are skipped rather than scored as zero.
"""
from __future__ import annotations

from typing import Sequence

from edunav_rag.chunking.schemas import Chunk
from edunav_rag.retrieval.scoring import cosine_similarity

VECTOR_TOP_K = 4


def score_chunks_by_embedding(
    query_embedding: Sequence[float],
    chunks: Sequence[Chunk],
) -> list[tuple[Chunk, float]]:
    """(Chunk, cosine) pairs for embedded chunks, in input order."""
    return [
        (chunk, cosine_similarity(query_embedding, chunk.embedding))
        for chunk in chunks
        if chunk.has_embedding
    ]


def rank_by_embedding(
    query_embedding: Sequence[float],
    chunks: Sequence[Chunk],
    k: int = VECTOR_TOP_K,
) -> list[tuple[Chunk, float]]:
    """Top-k (Chunk, cosine) pairs, highest first; ties keep input order."""
    if k <= 0:
        return []
    scored = score_chunks_by_embedding(query_embedding, chunks)
    return sorted(scored, key=lambda item: item[1], reverse=True)[:k]


def retrieve_top_k(
    query_embedding: Sequence[float],
    chunks: Sequence[Chunk],
    k: int = VECTOR_TOP_K,
) -> list[Chunk]:
    return [chunk for chunk, _ in rank_by_embedding(query_embedding, chunks, k)]
