"""
Logging configuration with structured (JSON) and human-readable output
"""
import logging
import sys
import json
from typing import Dict, Any, Optional
from datetime import datetime
from storyshell.core.config import Settings, settings as default_settings


# Attributes every LogRecord carries; anything else was passed through `extra`
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info', 'exc_text',
    'stack_info', 'taskName', 'message', 'asctime',
])


class StructuredFormatter(logging.Formatter):
    """
    Formatter emitting one JSON object per record
    Used in production so logs can be shipped and queried
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON"""
        try:
            log_entry = {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno
            }

            if record.exc_info:
                log_entry["exception"] = {
                    "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                    "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                    "traceback": self.formatException(record.exc_info)
                }

            extra_fields = {
                key: value for key, value in record.__dict__.items()
                if key not in _RESERVED_ATTRS
            }
            if extra_fields:
                log_entry["extra"] = extra_fields

            return json.dumps(log_entry, default=str)

        except Exception as e:
            # Fall back to plain formatting rather than lose the record
            return f"LOGGING_ERROR: {e} | ORIGINAL: {super().format(record)}"


class ContextualFormatter(logging.Formatter):
    """
    Human-readable formatter for development and console output
    Prefixes the agent session id when the record carries one
    """

    def format(self, record: logging.LogRecord) -> str:
        base_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        if hasattr(record, 'session_id'):
            base_format = '%(asctime)s - [%(session_id)s] - %(name)s - %(levelname)s - %(message)s'

        formatter = logging.Formatter(base_format)
        return formatter.format(record)


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """Configure application logging, structured in production"""
    config = config or default_settings

    if config.is_production:
        formatter = StructuredFormatter()
    else:
        formatter = ContextualFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.upper()))

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # LiteLLM and its HTTP stack are chatty at INFO
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("storyshell").setLevel(
        logging.DEBUG if config.debug else getattr(logging, config.log_level.upper())
    )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with consistent configuration

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds fixed context (e.g. session_id) to every record
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        if 'extra' in kwargs:
            kwargs['extra'] = {**self.extra, **kwargs['extra']}
        else:
            kwargs['extra'] = dict(self.extra)
        return msg, kwargs


def get_contextual_logger(name: str, context: Dict[str, Any]) -> LoggerAdapter:
    """
    Get logger with contextual information

    Args:
        name: Logger name
        context: Context dictionary (e.g., {'session_id': 'abc123'})

    Returns:
        Logger adapter with context
    """
    return LoggerAdapter(get_logger(name), context)


def log_error_with_context(logger: logging.Logger, error: Exception,
                           context: Dict[str, Any]) -> None:
    """
    Log error with its type, message and the given context

    Args:
        logger: Logger instance
        error: Exception to log
        context: Additional context information
    """
    error_context = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        **context
    }

    logger.error(
        f"Error occurred: {error}",
        extra=error_context,
        exc_info=(type(error), error, error.__traceback__)
    )


def log_performance_metric(logger: logging.Logger, operation: str,
                           duration: float, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log performance metrics for monitoring

    Args:
        logger: Logger instance
        operation: Operation name
        duration: Duration in seconds
        context: Additional context
    """
    metric_context = {
        "metric_type": "performance",
        "operation": operation,
        "duration_seconds": duration,
    }

    if context:
        metric_context.update(context)

    logger.info(
        f"Performance metric: {operation} completed in {duration:.3f}s",
        extra=metric_context
    )
