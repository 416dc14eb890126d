"""Logging utilities for scoring runs."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str = 'aqtscore', log_level: Union[int, str] = logging.INFO,
                 log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console and optional file output to a logger.

    Pass 'aqtscore' to see the per-hole DEBUG lines from the scorer and the
    stage timings from the analyzer. `log_level` may be a level name such as
    "DEBUG", as read from a YAML file. Calling this again for the same name
    only updates the level.
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{log_level}'")
        log_level = level

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def create_session_log_file(log_dir: str = 'logs', prefix: str = 'scoring') -> str:
    """Path for one batch session's log, e.g. logs/scoring_20240101_093000.log."""
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return str(Path(log_dir) / f"{prefix}_{timestamp}.log")
