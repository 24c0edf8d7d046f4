from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass
class LogConfig:
    log_file: Path | str | None = None
    log_level: int = logging.WARNING
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LogConfig | None = None) -> logging.Logger:
    if config is None:
        config = LogConfig()

    logger = logging.getLogger("literal_extractor")
    logger.setLevel(config.log_level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    # Console handler
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(config.log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler
    if config.log_file is not None:
        fh = logging.FileHandler(config.log_file)
        fh.setLevel(config.log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
