"""Loguru setup for the CLI and for services that host a DocumentSession."""
from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"

DEFAULT_LOG_FILE = "logs/edunav_rag.log"


def setup_logger(log_level: str = "INFO", log_file: str | None = DEFAULT_LOG_FILE) -> None:
    """
    Replace loguru's default sink with ours.

    Chunker and retriever messages are DEBUG; session ingest and retrieval
    summaries are INFO.  Pass log_file=None for console output only.
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            enqueue=True,
        )

    logger.info(f"Logger initialised | level={log_level} | file={log_file}")


def setup_logger_from_config(cfg: dict) -> None:
    """Configure logging from the `logging` section of config.yaml."""
    log_cfg = cfg.get("logging", {}) or {}
    setup_logger(
        log_level=log_cfg.get("level", "INFO"),
        log_file=log_cfg.get("file", DEFAULT_LOG_FILE),
    )
