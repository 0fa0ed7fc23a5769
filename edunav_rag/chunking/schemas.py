"""
Chunk schema - the atomic unit of retrieval.

A Chunk is a value object: it has no identity beyond its position in the
caller's ordered chunk list and carries no back-reference to the document
it came from.  Chunks are frozen once created.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Chunk(BaseModel):
    """
    A word-window slice of an uploaded document.

    `embedding` is only populated when a caller attaches vectors; the
    keyword retrieval path never reads it.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    embedding: Optional[list[float]] = None

    @property
    def has_embedding(self) -> bool:
        return bool(self.embedding)
