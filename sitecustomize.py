"""Project-wide logging setup for card_deck.

Python auto-imports sitecustomize when it is on sys.path (run_tests.py puts the
repo root there). Deck and demo logs go to text/log_file.log unless
CARD_DECK_LOG_FILE is set; CARD_DECK_LOG_LEVEL picks the level (default INFO).
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


def _log_path() -> Path:
    override = os.getenv("CARD_DECK_LOG_FILE")
    if override is None or override.strip() == "":
        return Path(__file__).resolve().parent / "text" / "log_file.log"
    return Path(override).expanduser()


def _configure_logging() -> None:
    log_path = _log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(os.getenv("CARD_DECK_LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    has_file = any(
        isinstance(h, logging.FileHandler) and Path(getattr(h, "baseFilename", "")) == log_path
        for h in root.handlers
    )
    has_stream = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) in {sys.stdout, sys.stderr}
        for h in root.handlers
    )
    if not has_file:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        file_handler.setLevel(level)
        root.addHandler(file_handler)
    if not has_stream:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        stream_handler.setLevel(level)
        root.addHandler(stream_handler)


_configure_logging()
