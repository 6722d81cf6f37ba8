"""
Structured logging helpers for the lesson service.

Lesson titles and introductions are free text supplied by callers, so
values placed in ``extra`` are reduced to bounded strings before logging.
Store errors are logged with the driver's message instead of the full
rendered SQL statement.

Dependencies: logging (stdlib), sqlalchemy
System role: Error-path logging for services
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a value for a log record's ``extra`` dict.

    Collections are summarised by size, and long text is cut at
    ``max_length`` with the original length noted.
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log a failed lesson operation at ERROR with its traceback.

    Args:
        logger: Module logger of the caller
        message: What failed, e.g. "Failed to create lesson"
        exc: The exception about to be re-raised
        **context: Lesson fields identifying the operation (lesson_id, title, ...)
    """
    safe_context = {
        key: safe_log_value(val) for key, val in context.items()
    }
    # DBAPI message only; str() of a StatementError embeds SQL and parameters
    orig = getattr(exc, "orig", None) if isinstance(exc, SQLAlchemyError) else None
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(orig if orig is not None else exc),
    })
    logger.error(message, exc_info=exc, extra=safe_context)
