"""
Custom exceptions and error handling for the Autopartes storefront core
"""

import logging
import traceback

from src.infrastructure.utilities.i18n import tr

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """Base exception for the storefront core"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or tr("GENERIC_ERROR")
        self.error_code = error_code or "GENERAL_ERROR"

    @property
    def retryable(self) -> bool:
        """Whether the user can simply try the same action again"""
        return False


class ValidationError(StorefrontError):
    """Input validation errors"""

    def __init__(self, message: str, field: str = None, user_message: str = None):
        super().__init__(
            message, user_message or message, "VALIDATION_ERROR"  # Validation errors are user-friendly
        )
        self.field = field


class BusinessLogicError(StorefrontError):
    """Business rule violations"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message, user_message or message, error_code or "BUSINESS_ERROR")


class CartEmptyError(BusinessLogicError):
    """Cart is empty when operation requires items"""

    def __init__(self, lang: str = None):
        super().__init__("Cart is empty", tr("CART_EMPTY", lang), "CART_EMPTY")


class PaymentMethodRequiredError(BusinessLogicError):
    """Checkout attempted without a payment method"""

    def __init__(self, lang: str = None):
        super().__init__(
            "No payment method selected", tr("PAYMENT_METHOD_REQUIRED", lang), "PAYMENT_METHOD_REQUIRED"
        )


class CheckoutNotReadyError(BusinessLogicError):
    """Checkout step requested from the wrong state"""

    def __init__(self, state: str, lang: str = None):
        super().__init__(
            f"Checkout step not allowed in state {state}", tr("CHECKOUT_NOT_READY", lang), "CHECKOUT_NOT_READY"
        )
        self.state = state


class ProductNotFoundError(BusinessLogicError):
    """Product not found"""

    def __init__(self, product_id: str, lang: str = None):
        super().__init__(
            f"Product not found: {product_id}", tr("PRODUCT_NOT_FOUND", lang), "PRODUCT_NOT_FOUND"
        )
        self.product_id = product_id


class ExternalServiceError(StorefrontError):
    """Failure talking to one of the storefront API services"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message, user_message, error_code or "EXTERNAL_SERVICE_ERROR")


class ServiceUnavailableError(ExternalServiceError):
    """Network failure or timeout; the request may be retried"""

    def __init__(self, service: str, reason: str = None):
        super().__init__(
            f"{service} unavailable: {reason}",
            tr("SERVICE_UNAVAILABLE"),
            "SERVICE_UNAVAILABLE",
        )
        self.service = service

    @property
    def retryable(self) -> bool:
        return True


class ApiResponseError(ExternalServiceError):
    """The service answered with a non-success status"""

    def __init__(self, service: str, status_code: int, detail: str = None):
        super().__init__(
            f"{service} returned {status_code}: {detail}",
            detail or tr("API_ERROR"),
            "API_ERROR",
        )
        self.service = service
        self.status_code = status_code
        self.detail = detail

    @property
    def retryable(self) -> bool:
        return self.status_code >= 500


class OrderSubmissionError(StorefrontError):
    """Order creation was not acknowledged by the order service"""

    def __init__(self, reason: str = None):
        super().__init__(
            f"Order submission failed: {reason}", tr("ORDER_FAILED"), "ORDER_FAILED"
        )

    @property
    def retryable(self) -> bool:
        return True


class WholesaleAuthenticationError(StorefrontError):
    """Wholesale code/email check failed"""

    def __init__(self, reason: str = None):
        super().__init__(
            f"Wholesale authentication failed: {reason}",
            tr("WHOLESALE_INVALID"),
            "WHOLESALE_AUTH_FAILED",
        )


class HostedPaymentError(StorefrontError):
    """The hosted card processor reported a failure"""

    def __init__(self, processor_message: str):
        super().__init__(
            f"Hosted payment failed: {processor_message}",
            tr("HOSTED_PAYMENT_FAILED", reason=processor_message),
            "HOSTED_PAYMENT_FAILED",
        )
        self.processor_message = processor_message


class ClientStateError(StorefrontError):
    """Reading or writing the persisted client state failed"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message, tr("CLIENT_STATE_ERROR"), "CLIENT_STATE_ERROR")
        self.operation = operation


# pylint: disable=too-few-public-methods
class ErrorReporter:
    """Error reporting and monitoring class"""

    @staticmethod
    def report_critical_error(error: Exception):
        """Report critical errors to monitoring system"""
        logger.critical(
            "CRITICAL ERROR: %s",
            error,
            extra={
                "error_type": type(error).__name__,
                "traceback": traceback.format_exc(),
            },
        )

    @staticmethod
    def report_business_error(error: StorefrontError, user_id: str | None):
        """Report business logic errors for analysis"""
        logger.info(
            "Business error: %s - %s",
            error.error_code,
            error,
            extra={
                "error_code": error.error_code,
                "user_id": user_id,
                "error_type": type(error).__name__,
            },
        )


def validate_and_raise(condition: bool, error_class: type, *args, **kwargs):
    """Helper function to validate condition and raise specific error"""
    if not condition:
        raise error_class(*args, **kwargs)
