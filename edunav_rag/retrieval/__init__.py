from edunav_rag.retrieval.keyword import (
    rank_by_keyword,
    retrieve_top_k_by_keyword,
    score_chunks_by_keyword,
)
from edunav_rag.retrieval.retriever import ChunkRetriever
from edunav_rag.retrieval.scoring import cosine_similarity, query_terms, tokenize_words
from edunav_rag.retrieval.vector import (
    rank_by_embedding,
    retrieve_top_k,
    score_chunks_by_embedding,
)

__all__ = [
    "ChunkRetriever",
    "cosine_similarity",
    "query_terms",
    "rank_by_embedding",
    "rank_by_keyword",
    "retrieve_top_k",
    "retrieve_top_k_by_keyword",
    "score_chunks_by_embedding",
    "score_chunks_by_keyword",
    "tokenize_words",
]
