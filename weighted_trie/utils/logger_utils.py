# logger_utils.py - logging setup and timing metrics

import logging
import time
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

metrics_logger = logging.getLogger("weighted_trie.metrics")


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    log_path: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Route the package loggers to a Rich console handler (and a log file if given).
    Calling it again replaces the handlers installed by the previous call.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {level}")

    root = logging.getLogger("weighted_trie")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(rich_handler)

    if log_path:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)

    root.setLevel(level)
    root.propagate = False
    return root


def time_block(label: str) -> "_Timer":
    """
    Measure how long a block takes and log it as a metric.
    To use:
        with time_block("seed"):
            load_words()
    """
    return _Timer(label)


class _Timer:
    """Context manager behind time_block()."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        metrics_logger.info("%s done: %.6fs", self.label, self.elapsed)
        return False
