"""Text clean-up and chunk-list persistence helpers."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Sequence

import orjson

from edunav_rag.chunking.schemas import Chunk

# Control characters PDF text extraction leaves behind; newlines and tabs stay
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


# --- Text ---------------------------------------------------------------------

def clean_text(text: str) -> str:
    return _CONTROL_CHARS_RE.sub("", text)


def truncate_text(text: str, max_chars: int = 300) -> str:
    """Shorten an excerpt for a table cell."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars].rstrip() + "..."


# --- JSON ---------------------------------------------------------------------

def save_json(data: Any, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))


def load_json(path: str | Path) -> Any:
    return orjson.loads(Path(path).read_bytes())


def save_chunks(chunks: Sequence[Chunk], path: str | Path) -> None:
    """Persist a session's chunk list; embeddings are written as null when absent."""
    save_json([chunk.model_dump(mode="json") for chunk in chunks], path)


def load_chunks(path: str | Path) -> list[Chunk]:
    """Read a chunk list written by save_chunks, in the same order."""
    return [Chunk.model_validate(item) for item in load_json(path)]
