"""
Logging for the CrawlKit client.

Library modules log through ``get_logger(__name__)`` under the ``crawlkit``
logger and never install handlers themselves. Applications, including the
bundled CLI, call setup_logging() to route those records somewhere.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from crawlkit.config.settings import LoggingSettings

ROOT_LOGGER_NAME = "crawlkit"


def setup_logging(
    settings: LoggingSettings | None = None,
    level: str | None = None,
) -> logging.Logger:
    """
    Attach handlers to the ``crawlkit`` logger.

    Calling it again replaces the previous handlers, so the logger never
    ends up with duplicates. Console output goes to stderr so that stdout
    stays free for JSON payloads.

    Args:
        settings: Logging configuration; defaults to LoggingSettings()
        level: Level name overriding ``settings.level`` (e.g. "DEBUG")

    Returns:
        The ``crawlkit`` logger
    """
    settings = settings or LoggingSettings()
    numeric_level = getattr(logging, (level or settings.level).upper())
    formatter = logging.Formatter(fmt=settings.format, datefmt=settings.date_format)

    handlers: list[logging.Handler] = []
    if settings.log_to_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if settings.file_path is not None:
        settings.file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            filename=str(settings.file_path),
            maxBytes=settings.max_file_size_mb * 1024 * 1024,
            backupCount=settings.backup_count,
            encoding="utf-8",
        ))

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger parented under ``crawlkit``.

    ``get_logger(__name__)`` inside the package gives the module's own
    logger; any other name is nested below ``crawlkit``.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """Appends ``[key=value]`` pairs from ``extra`` to every message."""

    def process(self, msg, kwargs):
        if self.extra:
            context = " ".join(f"[{k}={v}]" for k, v in self.extra.items())
            msg = f"{msg} {context}"
        return msg, kwargs


def get_logger_with_context(name: str | None = None, **context: str) -> LoggerAdapter:
    """
    Get a logger that tags every message with ``context``.

    Example:
        >>> log = get_logger_with_context(__name__, endpoint="/v1/crawl/scrape")
        >>> log.warning("Request failed")  # "Request failed [endpoint=/v1/crawl/scrape]"
    """
    return LoggerAdapter(get_logger(name), context)
