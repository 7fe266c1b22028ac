"""
Logging Infrastructure

JSON file logging, security events, call timing and structured checkout events.
"""

from .logging_config import (
    PerformanceLogger,
    ProductionLogger,
    QAEnhancedFormatter,
    SecurityLogger,
    get_structured_logger,
    security_logger,
)

__all__ = [
    "PerformanceLogger",
    "ProductionLogger",
    "QAEnhancedFormatter",
    "SecurityLogger",
    "get_structured_logger",
    "security_logger",
]
