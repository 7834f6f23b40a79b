"""Logging configuration setup.

Provides logging configuration using:
- dictConfig for root logger level and formatters
- QueueHandler + QueueListener for non-blocking I/O
- All handlers on the root logger (library loggers propagate)
- JSONL or plain text output
"""

from __future__ import annotations

import atexit
import logging
import logging.config
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from relay_connection.core.settings.logs import LoggingSettings

_log_queue: Queue[logging.LogRecord] | None = None
_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None
_LOGGING_INITIALIZED = False
logger = logging.getLogger(__name__)

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def shutdown() -> None:
    """Stop the QueueListener and detach the QueueHandler from the root logger.

    Registered with atexit on first configuration; safe to call repeatedly.
    """
    global _log_queue, _listener, _queue_handler

    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None

    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler = None

    _log_queue = None


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from relay_connection.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    log_config = {**log_settings.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "WARNING",
    service_name: str = "relay-connection",
    file_path: str | Path | None = None,
    json_logs: bool = False,
    console_enabled: bool = True,
    capture_warnings: bool = True,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    **kwargs: Any,
) -> None:
    """Configure logging with dictConfig and the QueueHandler pattern.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Static ``service`` field on JSON records.
        file_path: Path to log file. None disables file logging.
        json_logs: Enable JSONL structured logging.
        console_enabled: Enable console/stderr logging.
        capture_warnings: Forward Python warnings to logging system.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        **kwargs: Ignored; logged at DEBUG.

    Example:
        configure_logging(log_level="DEBUG", json_logs=True)
    """
    global _log_queue, _listener, _queue_handler

    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs)))

    shutdown()

    if capture_warnings:
        logging.captureWarnings(True)

    formatter_config = _build_formatters_config(json_logs, service_name)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatter_config,
            "root": {"level": log_level.upper(), "handlers": []},
        }
    )

    handlers: list[logging.Handler] = []

    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_make_formatter(formatter_config))
        handlers.append(console_handler)

    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=file_max_bytes,
            backupCount=file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(_make_formatter(formatter_config))
        handlers.append(file_handler)

    if not handlers:
        return

    _log_queue = Queue()
    _listener = QueueListener(_log_queue, *handlers, respect_handler_level=True)
    _listener.start()
    atexit.register(shutdown)

    _queue_handler = QueueHandler(_log_queue)
    logging.getLogger().addHandler(_queue_handler)


def _build_formatters_config(json_logs: bool, service_name: str) -> dict[str, Any]:
    """Build the formatters section for dictConfig."""
    if json_logs:
        return {
            "json": {
                "()": "relay_connection.infra.logging.formatters.JSONFormatter",
                "fmt_keys": {
                    "level": "levelname",
                    "logger": "name",
                    "message": "message",
                },
                "static": {"service": service_name},
            }
        }
    return {"text": {"format": TEXT_FORMAT, "datefmt": DATE_FORMAT}}


def _make_formatter(formatters_config: dict[str, Any]) -> logging.Formatter:
    from relay_connection.infra.logging.formatters import JSONFormatter

    if "json" in formatters_config:
        formatter_options = formatters_config["json"]
        return JSONFormatter(fmt_keys=formatter_options["fmt_keys"], static=formatter_options["static"])
    formatter_options = formatters_config["text"]
    return logging.Formatter(fmt=formatter_options["format"], datefmt=formatter_options["datefmt"])
