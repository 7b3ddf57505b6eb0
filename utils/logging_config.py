"""
Logging Configuration

Loggers for the calculator and its Streamlit page:
- One structured line per record, with key=value context appended
- ``log_context`` to build that context from enums, field tuples and None
- Timing of recomputation cycles triggered by widget callbacks
- Level and optional log file from the environment

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional
import os

# Rendered for context values that are None or empty
MISSING = "-"


def _render_value(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (tuple, list, set, frozenset)):
        rendered = ",".join(_render_value(item) for item in value)
        return rendered or MISSING
    return str(value)


def log_context(**fields: Any) -> Dict[str, Dict[str, str]]:
    """
    Build the ``extra`` argument of a log call.

    Usage:
        logger.debug("Derivation stopped", extra=log_context(category=issue.category, field=None))

    Enum members log as their value, sequences (e.g. a source pair) as a
    comma-separated list, None as "-".
    """
    return {"context": {key: _render_value(value) for key, value in fields.items()}}


class StructuredFormatter(logging.Formatter):
    """
    Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {key=value ...}

    Context keys are sorted so that cycles can be grepped by source pair or
    error category.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        line = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        context = getattr(record, 'context', None)
        if context:
            rendered = " ".join(f"{key}={context[key]}" for key in sorted(context))
            line += f" {{{rendered}}}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


class PerformanceLogger:
    """Times one recomputation; warns past ``threshold_ms``, else logs at DEBUG."""

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 50):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.start_time = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return
        self.duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        extra = log_context(operation=self.operation, ms=f"{self.duration_ms:.1f}")
        if self.duration_ms > self.threshold_ms:
            self.logger.warning("SLOW recomputation", extra=extra)
        else:
            self.logger.debug("Recomputation timed", extra=extra)


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a module logger.

    Args:
        name: Logger name (usually __name__)
        level: DEBUG, INFO, WARNING or ERROR. Defaults to LOG_LEVEL env var or INFO
        log_file: Optional file path. Defaults to LOG_FILE env var

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Streamlit re-executes the page on every interaction
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO').upper()

    log_level = getattr(logging, level, logging.INFO)
    logger.setLevel(log_level)

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file is None:
        log_file = os.getenv('LOG_FILE')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    logger.propagate = False

    return logger


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 50):
    """
    Usage:
        with get_perf_logger(logger, "derive_display", threshold_ms=20):
            result = derive_display(raw, history)
    """
    return PerformanceLogger(logger, operation, threshold_ms)
