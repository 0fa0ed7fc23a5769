"""
EduNavigator RAG - CLI Entry Point
-----------------------------------
Exposes Typer commands for chunking a document and querying its chunks.

Usage:
    python -m edunav_rag.main chunk notes.txt --out data/chunks.json
    python -m edunav_rag.main query "what is a b-tree" --chunks data/chunks.json
    python -m edunav_rag.main query "..." --chunks data/chunks.json --json
    python -m edunav_rag.main prompt "..." --chunks data/chunks.json --profile me.yaml
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from edunav_rag.schemas import StudentProfile
from edunav_rag.serving.pipeline import DocumentSession, RetrievalResult
from edunav_rag.utils.helpers import load_chunks, save_chunks, truncate_text
from edunav_rag.utils.logger import setup_logger_from_config

app = typer.Typer(
    name="edunav-rag",
    help="EduNavigator - lexical retrieval over uploaded study documents",
    add_completion=False,
)
console = Console()


# --- Helpers ------------------------------------------------------------------

def _load_config(path: str) -> dict:
    """Load the YAML config; a missing file means built-in defaults."""
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _setup(config: str) -> dict:
    from dotenv import load_dotenv

    load_dotenv()
    cfg = _load_config(config)
    setup_logger_from_config(cfg)
    return cfg


def _load_session(cfg: dict, chunks_path: str) -> DocumentSession:
    path = Path(chunks_path)
    if not path.exists():
        console.print(
            f"[red]Chunk file not found: {chunks_path}[/red]\n"
            "Run: [bold]python -m edunav_rag.main chunk <file>[/bold]"
        )
        raise typer.Exit(1)

    session = DocumentSession.from_config(cfg)
    session.load_chunks(load_chunks(path), file_name=path.name)
    return session


def _load_profile(profile_path: str) -> StudentProfile:
    path = Path(profile_path)
    if not path.exists():
        console.print(f"[red]Profile file not found: {profile_path}[/red]")
        raise typer.Exit(1)

    try:
        data = _load_config(profile_path)
        if not isinstance(data, dict):
            raise ValueError("expected a mapping of name/branch/semester/goals")
        return StudentProfile(**data)
    except (ValueError, yaml.YAMLError) as exc:
        console.print(f"Invalid profile {profile_path}: {exc}", style="red", markup=False)
        raise typer.Exit(1)


# --- Commands -----------------------------------------------------------------

@app.command()
def chunk(
    file: str = typer.Argument(..., help="UTF-8 text file extracted from the document"),
    out: str = typer.Option(
        "data/chunks.json", "--out", "-o", help="Where to write the chunk list"
    ),
    target_words: Optional[int] = typer.Option(
        None, "--target-words", help="Words per chunk (default from config)"
    ),
    overlap: Optional[int] = typer.Option(
        None, "--overlap", help="Words shared by consecutive chunks (default from config)"
    ),
    config: str = typer.Option(
        "config/config.yaml", "--config", "-c", help="Path to config YAML"
    ),
) -> None:
    """Split a document into overlapping word windows and save them as JSON."""
    cfg = _setup(config)
    src = Path(file)
    if not src.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    chunking = dict(cfg.get("chunking", {}) or {})
    if target_words is not None:
        chunking["target_words"] = target_words
    if overlap is not None:
        chunking["overlap"] = overlap
    session = DocumentSession.from_config({**cfg, "chunking": chunking})

    try:
        doc = session.ingest(src.read_text(encoding="utf-8"), file_name=src.name)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    save_chunks(doc.chunks, out)
    console.print(
        f"[green][OK] {doc.file_name}[/green] "
        f"| {doc.char_count:,} chars "
        f"| {doc.chunk_count} chunks -> {out}"
    )


@app.command()
def query(
    text: str = typer.Argument(..., help="Question to retrieve context for"),
    chunks: str = typer.Option(
        "data/chunks.json", "--chunks", help="Chunk list written by the chunk command"
    ),
    top_k: Optional[int] = typer.Option(
        None, "--top-k", "-k", help="Chunks to return (default from config)"
    ),
    json_out: bool = typer.Option(False, "--json", help="Print result as JSON"),
    config: str = typer.Option(
        "config/config.yaml", "--config", "-c", help="Path to config YAML"
    ),
) -> None:
    """Rank saved chunks against a query with keyword TF x IDF scoring."""
    cfg = _setup(config)
    session = _load_session(cfg, chunks)
    if top_k is not None:
        session.retriever.keyword_top_k = top_k

    result = session.retrieve(text)
    if json_out:
        console.print_json(json.dumps(result.to_dict()))
    else:
        _print_result(result)


@app.command()
def prompt(
    text: str = typer.Argument(..., help="Question to build the prompt for"),
    chunks: str = typer.Option(
        "data/chunks.json", "--chunks", help="Chunk list written by the chunk command"
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", help="YAML file with name/branch/semester/goals"
    ),
    config: str = typer.Option(
        "config/config.yaml", "--config", "-c", help="Path to config YAML"
    ),
) -> None:
    """Print the system prompt a chat model would receive for this question."""
    cfg = _setup(config)
    session = _load_session(cfg, chunks)

    student = _load_profile(profile) if profile else None

    console.print(
        session.build_prompt(text, profile=student),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _print_result(result: RetrievalResult) -> None:
    """Render a RetrievalResult to the terminal using Rich."""
    if not result.chunks:
        console.print("[yellow]No chunks to search.[/yellow]")
        return

    table = Table(
        "Rank", "Score", "Excerpt",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold dim",
    )
    for i, (chunk_, score) in enumerate(result.chunks, start=1):
        table.add_row(str(i), f"{score:.4f}", truncate_text(chunk_.text, 120))

    console.print(
        Panel(
            table,
            title=f"[bold green]{result.query}[/bold green]",
            subtitle=f"[dim]{result.strategy} | {result.retrieval_ms:.1f}ms[/dim]",
            border_style="green",
            expand=True,
        )
    )
    logger.debug(f"[CLI] Rendered {len(result.chunks)} results")


# --- Entry Point --------------------------------------------------------------

if __name__ == "__main__":
    app()
