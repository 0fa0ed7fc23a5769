"""
Pydantic schemas shared by the session layer, prompt builders and CLI.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from edunav_rag.chunking.schemas import Chunk


class StudentProfile(BaseModel):
    """Who the assistant is talking to; used to personalise the system prompt."""

    name: str
    branch: str                          # e.g. "Computer Science"
    semester: str                        # e.g. "5th"
    goals: str = ""


class IngestedDocument(BaseModel):
    """
    Result of ingesting one uploaded document into a session.

    Chunks are returned without embeddings; the keyword path needs none.
    """

    file_name: str
    page_count: Optional[int] = None
    char_count: int
    chunk_count: int
    chunks: list[Chunk] = Field(default_factory=list)
