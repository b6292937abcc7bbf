"""Service layer exports.

Responsibilities:
 - In-process log capture (`LoggingService`)
"""

from .logging_service import LoggingService, configure_logging, get_logging_service  # noqa: F401

__all__ = [
    "LoggingService",
    "configure_logging",
    "get_logging_service",
]
