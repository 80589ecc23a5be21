import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from logic.config import GameConfig


def setup_logging(level: Optional[str] = None) -> None:
    log_level = (level or os.getenv("LOG_LEVEL") or GameConfig.DEFAULT_LOG_LEVEL).upper()
    log_file = os.getenv("LOG_FILE", "").strip()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)

    # Console play prints to stdout, so only log to a file when asked.
    if log_file:
        max_mb = int(os.getenv("LOG_MAX_MB", "10") or "10")
        backup_count = int(os.getenv("LOG_BACKUP_COUNT", "5") or "5")

        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
