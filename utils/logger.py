# utils/logger.py
import logging
import sys
from config.paths import LOG_PATH


def setup_logging(level: int = logging.INFO, log_to_file: bool = True) -> logging.Logger:
    """Configure the root logger once: a file handler at LOG_PATH and a stdout stream handler."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if getattr(logger, "_planner_configured", False):
        return logger

    if log_to_file:
        # Ensure directory exists
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
        file_formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Stream handler (stdout -> docker logs)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_formatter = logging.Formatter("[%(levelname)s] %(message)s")
    stream_handler.setFormatter(stream_formatter)
    logger.addHandler(stream_handler)

    logger._planner_configured = True
    return logger
