"""
Keyword Retrieval (TF x IDF)
-----------------------------
Ranks chunks against a query without any embedding calls.

For each query term t and chunk c over a collection of N chunks:

    tf(t, c) = count(t in c) / words(c)
    idf(t)   = ln((N + 1) / df(t))      (0 when df(t) == 0)
    score(c) = sum over query terms of tf * idf

df(t) is counted only for the query's own terms and only over the chunks
passed in, and is rebuilt on every call.  This is a deliberate
approximation of corpus-level IDF, not a persistent inverted index.

A query with no usable terms (punctuation only, or every term shorter than
three characters) falls back to the first k chunks in input order.

words(c) counts real words only: the empty strings a non-word split leaves
at leading or trailing punctuation are dropped, so "Cats!" is one word.
"""
from __future__ import annotations

import math
from collections import Counter
from typing import Sequence

from loguru import logger

from edunav_rag.chunking.schemas import Chunk
from edunav_rag.retrieval.scoring import query_terms, tokenize_words

KEYWORD_TOP_K = 5


def _document_frequency(terms: list[str], chunks: Sequence[Chunk]) -> dict[str, int]:
    # One increment per chunk per distinct term, however often the query repeats it
    distinct_terms = set(terms)
    doc_freq: dict[str, int] = {}
    for chunk in chunks:
        words = set(tokenize_words(chunk.text))
        for term in distinct_terms & words:
            doc_freq[term] = doc_freq.get(term, 0) + 1
    return doc_freq


def score_chunks_by_keyword(query: str, chunks: Sequence[Chunk]) -> list[tuple[Chunk, float]]:
    """
    Score every chunk against the query.

    Returns:
        (Chunk, score) pairs in input order. Empty when the query has no
        usable terms.
    """
    terms = query_terms(query)
    if not terms:
        return []

    doc_freq = _document_frequency(terms, chunks)
    n = len(chunks)

    scored: list[tuple[Chunk, float]] = []
    for chunk in chunks:
        words = tokenize_words(chunk.text)
        word_count = len(words) or 1
        term_freq = Counter(words)

        score = 0.0
        for term in terms:
            df = doc_freq.get(term, 0)
            if df == 0:
                continue
            tf = term_freq[term] / word_count
            score += tf * math.log((n + 1) / df)
        scored.append((chunk, score))
    return scored


def rank_by_keyword(
    query: str,
    chunks: Sequence[Chunk],
    k: int = KEYWORD_TOP_K,
) -> list[tuple[Chunk, float]]:
    """
    Top-k (Chunk, score) pairs, highest score first.

    Equal scores keep their input order.  Zero-score chunks still fill the
    result when fewer than k chunks match.
    """
    if k <= 0 or not chunks:
        return []

    scored = score_chunks_by_keyword(query, chunks)
    if not scored:
        logger.debug(f"[Keyword] No usable terms in {query[:80]!r}; returning first {k} chunks")
        return [(chunk, 0.0) for chunk in chunks[:k]]

    # sorted() is stable, also with reverse=True
    ranked = sorted(scored, key=lambda item: item[1], reverse=True)[:k]
    logger.debug(
        f"[Keyword] {len(chunks)} chunks scored | top score={ranked[0][1]:.4f}"
    )
    return ranked


def retrieve_top_k_by_keyword(
    query: str,
    chunks: Sequence[Chunk],
    k: int = KEYWORD_TOP_K,
) -> list[Chunk]:
    """Return the k chunks most relevant to the query by TF x IDF."""
    return [chunk for chunk, _ in rank_by_keyword(query, chunks, k)]
