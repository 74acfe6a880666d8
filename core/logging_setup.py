import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def configure_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> None:
    """
    Sends logs to stderr and, when a folder is given, to a rotating club.log.
    """
    logger.remove()
    logger.add(sys.stderr, level=level)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "club.log",
            level=level,
            rotation="1 MB",
            retention=5,
            encoding="utf-8",
        )
