"""
Logging configuration for the Autopartes storefront core

Provides JSON file logging, a security event log, timing of outgoing
service calls and the structlog event stream used by checkout.
"""

import logging
import logging.handlers
import os
import sys
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from src.infrastructure.configuration.config import Settings, get_config
from src.infrastructure.utilities.constants import FileSettings, LoggingSettings


class SecurityFilter(logging.Filter):
    """Filter for security events"""

    def filter(self, record):
        return "SECURITY EVENT" in record.getMessage()


class ProductionLogger:
    """Production-ready logging configuration"""

    @staticmethod
    def setup_logging(config: Optional[Settings] = None):
        """
        Setup logging for the storefront

        Features:
        - Console output outside production
        - Rotating JSON application and error logs
        - Security event log
        - structlog event stream rendered through the stdlib handlers
        """
        config = config or get_config()

        logs_dir = Path(config.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.log_level.upper()))
        root_logger.handlers.clear()

        if config.environment != "production":
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root_logger.addHandler(console_handler)

        app_handler = logging.handlers.RotatingFileHandler(
            logs_dir / FileSettings.MAIN_LOG_FILE,
            maxBytes=LoggingSettings.MAX_LOG_FILE_SIZE,
            backupCount=LoggingSettings.MAIN_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        app_handler.setFormatter(QAEnhancedFormatter())
        app_handler.setLevel(logging.INFO)
        root_logger.addHandler(app_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            logs_dir / FileSettings.ERROR_LOG_FILE,
            maxBytes=LoggingSettings.MAX_LOG_FILE_SIZE,
            backupCount=LoggingSettings.ERROR_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        error_handler.setFormatter(QAEnhancedFormatter())
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)

        security_handler = logging.handlers.RotatingFileHandler(
            logs_dir / FileSettings.SECURITY_LOG_FILE,
            maxBytes=LoggingSettings.SECURITY_LOG_FILE_SIZE,
            backupCount=LoggingSettings.SECURITY_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        security_handler.setFormatter(QAEnhancedFormatter())
        security_handler.setLevel(logging.INFO)
        security_handler.addFilter(SecurityFilter())
        root_logger.addHandler(security_handler)

        ProductionLogger._configure_structlog()
        ProductionLogger._configure_specific_loggers()

        logging.getLogger(__name__).info(
            "Logging configured successfully",
            extra={"environment": config.environment, "log_level": config.log_level},
        )

    @staticmethod
    def _configure_structlog():
        """Route structlog events through the stdlib handlers as JSON"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def _configure_specific_loggers():
        """Quiet chatty third-party loggers"""
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


class QAEnhancedFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with storefront-specific fields"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["thread_name"] = threading.current_thread().name
        log_record["process_id"] = os.getpid()

        if hasattr(record, "user_id"):
            log_record["user_id"] = record.user_id

        if hasattr(record, "operation_time"):
            log_record["operation_time_ms"] = record.operation_time


class PerformanceLogger:
    """Context manager for performance logging"""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None, details: Optional[Dict[str, Any]] = None):
        self.operation_name = operation_name
        self.logger = logger or logging.getLogger(__name__)
        self.details = details or {}
        self.start_time = 0.0
        self.duration_ms = 0.0

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(
            "Starting operation: %s",
            self.operation_name,
            extra={"operation": self.operation_name, **self.details},
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.perf_counter() - self.start_time) * 1000

        if exc_type is None:
            self.logger.info(
                "Completed operation: %s",
                self.operation_name,
                extra={
                    "operation": self.operation_name,
                    "operation_time": self.duration_ms,
                    "success": True,
                    **self.details,
                },
            )
        else:
            self.logger.warning(
                "Failed operation: %s",
                self.operation_name,
                extra={
                    "operation": self.operation_name,
                    "operation_time": self.duration_ms,
                    "success": False,
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val) if exc_val else None,
                    **self.details,
                },
            )
        return False


class SecurityLogger:
    """Security event logging"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("security")

    def log_access_attempt(self, user_id: Optional[str], resource: str, success: bool, context: Optional[Dict[str, Any]] = None):
        """Log access attempts to protected resources"""
        level = logging.INFO if success else logging.WARNING
        message = f"SECURITY EVENT: Access {'granted' if success else 'denied'} to {resource}"

        self.logger.log(
            level,
            message,
            extra={
                "user_id": user_id,
                "resource": resource,
                "access_granted": success,
                "security_event": True,
                **(context or {}),
            },
        )


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


security_logger = SecurityLogger()
