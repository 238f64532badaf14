"""
Logging Infrastructure - structlog au-dessus du logging stdlib.

    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("backup_completed", filename="manual-20260101-120000.dump")
"""

from src.infrastructure.logging.config import (
    RequestLogger,
    configure_logging,
    get_logger,
    redact_url_passwords,
)

__all__ = ["RequestLogger", "configure_logging", "get_logger", "redact_url_passwords"]
