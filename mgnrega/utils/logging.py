"""Structured logging utilities."""
import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional


def setup_logging(level: str = "INFO"):
    """Setup structured JSON logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(message)s',
        handlers=[logging.StreamHandler()]
    )


def log_structured(level: str, message: str, **kwargs):
    """
    Log structured JSON message.

    Args:
        level: Log level (info, warning, error, etc.)
        message: Log message
        **kwargs: Additional structured fields
    """
    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level.upper(),
        "message": message,
        **kwargs
    }

    logger = logging.getLogger("mgnrega")
    getattr(logger, level.lower(), logger.info)(json.dumps(log_entry, default=str))


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None):
    """
    Log an exception with its context and forward it to error tracking.

    Args:
        error: The exception that occurred
        context: Extra fields (module, function, inputs) describing where it happened
    """
    # Imported here to keep error tracking optional at logging import time
    from mgnrega.utils.error_tracking import capture_exception

    context = context or {}
    log_structured(
        "error",
        f"{type(error).__name__}: {error}",
        error_type=type(error).__name__,
        error_message=str(error),
        **context
    )
    capture_exception(error, context)
