"""
EduNavigator RAG - Word Window Chunker
---------------------------------------
Splits extracted document text into overlapping fixed-size word windows.

    words:   w1 w2 w3 w4 w5 w6 w7 w8 w9 w10
    target=4, overlap=2  ->  stride 2

    [w1 w2 w3 w4]
          [w3 w4 w5 w6]
                [w5 w6 w7 w8]
                      [w7 w8 w9 w10]

Windowing stops as soon as the next window would only repeat words the
previous window already covered, so the chunk count is

    ceil(max(W - overlap, 1) / stride)

for W > 0 words.  A stride below 1 (overlap >= target) is clamped to 1.
"""
from __future__ import annotations

from loguru import logger

from edunav_rag.chunking.schemas import Chunk

# ── Constants ─────────────────────────────────────────────────────────────────

TARGET_WORDS = 200    # Words per chunk
OVERLAP_WORDS = 40    # Words shared by consecutive chunks


def _stride(target_words: int, overlap: int) -> int:
    return max(target_words - overlap, 1)


def chunk_text(
    text: str,
    target_words: int = TARGET_WORDS,
    overlap: int = OVERLAP_WORDS,
) -> list[str]:
    """
    Split text into overlapping windows of ~target_words words.

    Args:
        text: Raw extracted document text.
        target_words: Words per window.
        overlap: Words repeated at the start of each following window.

    Returns:
        Window texts in document order, words joined by single spaces.
        Empty for empty or all-whitespace input.
    """
    if target_words <= 0:
        return []

    words = text.split()
    stride = _stride(target_words, overlap)
    effective_overlap = target_words - stride

    chunks: list[str] = []
    i = 0
    while i < len(words):
        chunk = " ".join(words[i: i + target_words])
        if chunk.strip():
            chunks.append(chunk)
        i += stride
        if i + effective_overlap >= len(words):
            break
    return chunks


# ── Chunker ───────────────────────────────────────────────────────────────────

class WordWindowChunker:
    """
    Turns document text into Chunk objects ready for retrieval.

    Usage:
        chunker = WordWindowChunker(target_words=200, overlap=40)
        chunks = chunker.chunk_document(text)
    """

    def __init__(
        self,
        target_words: int = TARGET_WORDS,
        overlap: int = OVERLAP_WORDS,
    ) -> None:
        self.target_words = target_words
        self.overlap = overlap

        if target_words <= 0:
            logger.warning(
                f"[Chunker] target_words={target_words} is not positive; "
                "every document will produce zero chunks"
            )
        elif overlap >= target_words:
            logger.warning(
                f"[Chunker] overlap={overlap} >= target_words={target_words}; "
                "stride clamped to 1"
            )

    @property
    def stride(self) -> int:
        return _stride(self.target_words, self.overlap)

    def chunk_document(self, text: str) -> list[Chunk]:
        """Chunk one document's text. Chunks carry no embedding."""
        chunks = [
            Chunk(text=window)
            for window in chunk_text(text, self.target_words, self.overlap)
        ]
        logger.debug(
            f"[Chunker] {len(text.split())} words | "
            f"target={self.target_words} overlap={self.overlap} -> {len(chunks)} chunk(s)"
        )
        return chunks

    def chunk_batch(self, texts: list[str]) -> list[Chunk]:
        """Chunk several documents. Returns flat list of all chunks, in order."""
        all_chunks: list[Chunk] = []
        for text in texts:
            all_chunks.extend(self.chunk_document(text))
        return all_chunks
