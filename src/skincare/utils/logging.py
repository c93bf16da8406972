"""Logging helpers for the web app."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

_CONFIGURED = False

_ROTATE_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3


def setup_logging(
    log_path: Optional[Path] = None,
    *,
    level: str = "INFO",
    stdout: bool = False,
) -> Path:
    """Configure root logging plus a separate llm.log, once per process."""
    global _CONFIGURED
    resolved = _resolve_log_path(log_path)
    if _CONFIGURED:
        return resolved

    resolved.parent.mkdir(parents=True, exist_ok=True)
    level_no = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    root_handler = _build_handler(resolved)
    root_handler.setFormatter(formatter)

    llm_handler = _build_handler(resolved.parent / "llm.log")
    llm_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level_no)
    root.addHandler(root_handler)
    if stdout:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    _attach_logger("skincare.llm", level_no, llm_handler)

    _CONFIGURED = True
    logging.getLogger(__name__).info("Logging initialized: %s", resolved)
    return resolved


def _resolve_log_path(log_path: Optional[Path]) -> Path:
    if log_path is not None:
        return Path(log_path)
    return _data_dir() / "logs" / "backend.log"


def _data_dir() -> Path:
    """SKINCARE_DATA_DIR if set (relative to the repo root), else <repo>/.skincare."""
    repo_root = Path(__file__).resolve().parents[3]
    raw = os.getenv("SKINCARE_DATA_DIR", "").strip()
    if not raw:
        return repo_root / ".skincare"
    path = Path(raw)
    return path if path.is_absolute() else (repo_root / path).resolve()


def _attach_logger(name: str, level: int, handler: logging.Handler) -> None:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False


def _build_handler(path: Path) -> logging.Handler:
    return RotatingFileHandler(
        path,
        maxBytes=_ROTATE_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
