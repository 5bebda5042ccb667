# ============================================================================
# src/prescription_insight/utils/logging.py
# ============================================================================
"""
Logging setup for prescription analysis.

Stages log through injected `logging.Logger` instances. Structured fields go
in `extra={"context": {...}}` and are emitted by JsonFormatter when JSON
output is enabled.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False
) -> None:
    """
    Configure the root logger.

    Console output goes to stderr so analysis JSON on stdout stays clean.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives the same records
        format_json: Emit one JSON object per record

    Raises:
        ConfigurationError: unknown level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    formatter = JsonFormatter() if format_json else logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def setup_logging_from_settings(settings=None) -> None:
    """Configure logging from LoggingSettings (environment / .env)."""
    if settings is None:
        from ..config import logging_settings as settings

    setup_logging(
        level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        format_json=settings.LOG_JSON,
    )


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the structured `context` payload."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
        }

        context = getattr(record, 'context', None)
        if context:
            log_data['context'] = context

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_performance(logger: Optional[logging.Logger], operation: str):
    """
    Decorator timing a pipeline operation.

    With `logger=None` the decorated method logs through its instance's
    `self.logger`, so an injected logger receives the timing records.

    Success is logged at DEBUG, failure at ERROR; the exception propagates.
    Duration is attached as `context.duration_ms`.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or args[0].logger
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                log.error(
                    f"{operation} failed after {elapsed_ms:.1f}ms: {e}",
                    extra={"context": {"operation": operation, "duration_ms": round(elapsed_ms, 1)}}
                )
                raise

            elapsed_ms = (time.perf_counter() - started) * 1000
            log.debug(
                f"{operation} completed in {elapsed_ms:.1f}ms",
                extra={"context": {"operation": operation, "duration_ms": round(elapsed_ms, 1)}}
            )
            return result

        return wrapper
    return decorator
