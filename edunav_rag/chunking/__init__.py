from edunav_rag.chunking.chunker import WordWindowChunker, chunk_text
from edunav_rag.chunking.schemas import Chunk

__all__ = ["Chunk", "WordWindowChunker", "chunk_text"]
