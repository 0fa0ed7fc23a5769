"""
EduNavigator RAG - lexical retrieval for a document-grounded study assistant.

Chunks uploaded document text into overlapping word windows and selects the
passages most relevant to a question by TF x IDF, with a cosine-similarity
path for chunks that carry embeddings.
"""
from edunav_rag.chunking import Chunk, WordWindowChunker, chunk_text
from edunav_rag.retrieval import (
    ChunkRetriever,
    cosine_similarity,
    retrieve_top_k,
    retrieve_top_k_by_keyword,
)

__all__ = [
    "Chunk",
    "ChunkRetriever",
    "WordWindowChunker",
    "chunk_text",
    "cosine_similarity",
    "retrieve_top_k",
    "retrieve_top_k_by_keyword",
]
