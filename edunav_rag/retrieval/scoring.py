"""
Shared scoring utilities for the keyword and vector retrieval paths.
"""
from __future__ import annotations

import re
from typing import Sequence

import numpy as np

_NON_WORD_RE = re.compile(r"\W+")

MIN_TERM_LENGTH = 3   # Query terms of 1-2 characters carry no signal


def tokenize_words(text: str) -> list[str]:
    """Lower-case text and split it on runs of non-word characters."""
    return [w for w in _NON_WORD_RE.split(text.lower()) if w]


def query_terms(query: str) -> list[str]:
    """
    Extract scoring terms from a raw query.

    Duplicates are kept: a term typed twice is scored twice.
    """
    return [t for t in tokenize_words(query) if len(t) >= MIN_TERM_LENGTH]


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity dot(a, b) / (|a| * |b|).

    Vectors of different length are compared over their common prefix.
    Returns 0.0 when either vector is empty or has zero norm.
    """
    n = min(len(a), len(b))
    if n == 0:
        return 0.0
    va = np.asarray(a[:n], dtype=np.float64)
    vb = np.asarray(b[:n], dtype=np.float64)

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))
