"""Logging configuration for the pagersduty command line.

Supports two logging formats:
- JSON logging (default): Structured logs for log aggregation systems
- Standard logging: Human-readable lines

Library modules log with structlog.get_logger(); setup_logging() hands
structlog events over to the standard library logging so that they end up in
the same handler, with their key/value pairs as JSON fields.
"""

import logging
import sys

import structlog
from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with consistent field names.

    Extra fields of a log call (structlog key/value pairs) are kept as is.
    """

    def add_fields(
        self,
        log_record: dict[str, object],
        record: logging.LogRecord,
        message_dict: dict[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["message"] = record.getMessage()

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def setup_logger(
    logger: logging.Logger, log_level: str = "INFO", *, json_format: bool = True
) -> logging.Logger:
    """Attach a stderr handler with JSON or plain formatting to a logger.

    stdout is left to command output.
    """
    formatter: logging.Formatter
    if json_format:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO))
    logger.propagate = False
    return logger


def setup_logging(log_level: str = "INFO", *, json_format: bool = True) -> logging.Logger:
    """Configure the root logger and route structlog through it.

    Args:
        log_level: Minimum level name (e.g. "DEBUG"); unknown names mean INFO
        json_format: Render JSON lines instead of human-readable ones

    Returns:
        The configured root logger
    """
    root_logger = setup_logger(logging.getLogger(), log_level, json_format=json_format)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return root_logger
