"""Logging setup for the breach checker and its wrappers.

Console output always, plus a rotating log file when LOG_FILE is set.
A redaction filter keeps full SHA-1 digests out of every record.
"""

import logging
import re
from logging.handlers import RotatingFileHandler
from typing import Optional

from pwned.config import LOG_BACKUP_COUNT, LOG_FILE, LOG_LEVEL, LOG_MAX_BYTES


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# A full SHA-1 digest, in either case
_DIGEST_PATTERN = re.compile(r"\b[0-9A-Fa-f]{40}\b")

# Module-level state
_logging_configured = False


class DigestRedactionFilter(logging.Filter):
    """Replace anything shaped like a full SHA-1 digest with [REDACTED]."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _DIGEST_PATTERN.sub("[REDACTED]", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(level: str = LOG_LEVEL, log_file: Optional[str] = LOG_FILE) -> None:
    """Configure the 'pwned' logger hierarchy on first use.

    Args:
        level: Logging level name
        log_file: Optional path for a size-rotated log file
    """
    global _logging_configured
    if _logging_configured:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    redaction = DigestRedactionFilter()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        ))

    for name in ("pwned", "api", "cli"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in handlers:
            handler.setFormatter(formatter)
            handler.addFilter(redaction)
            logger.addHandler(handler)

    _logging_configured = True
