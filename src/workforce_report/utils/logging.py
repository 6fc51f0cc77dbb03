"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Redaction of credentials and personal data fields
- Context binding support
- Dual output (console + optional rotating file)

Configuration is loaded from workforce_report.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- WFR_LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- WFR_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from workforce_report.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("rows_built", source_records=12, rows=9)
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from workforce_report.config import get_settings

# Credentials plus personnel fields that must never reach a log line
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^e?mail$", re.IGNORECASE),
    re.compile(r"^birthday$", re.IGNORECASE),
    re.compile(r"^address$", re.IGNORECASE),
    re.compile(r".*salary.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"email": "ada@example.com", "status": "active"})
        {"email": "[REDACTED]", "status": "active"}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Get log level from settings, falling back to the raw environment."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # A broken .env must not prevent logging from starting
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except Exception:
        return os.getenv("WFR_LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().log_file_dir)
    except Exception:
        log_dir = Path(os.getenv("WFR_LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: workforce-report-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"workforce-report-{date_str}.log"


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and sanitization."""
    level = _get_log_level()

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[],
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    logging.root.addHandler(console_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering and sanitization
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(component="row_builder", source="source-data.json")
        >>> logger.info("record_dropped", index=3, reason="inactive")
    """
    return structlog.get_logger().bind(**kwargs)
