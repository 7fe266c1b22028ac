"""
Checkout Use Case

Turns the finalized cart and payment selection into a completed order,
branching between the hosted card flow and direct order submission.

    IDLE -> METHOD_SELECTION
    METHOD_SELECTION -> REDIRECT_TO_HOSTED_PAYMENT          (card)
    METHOD_SELECTION -> SUBMITTING_ORDER                    (other methods)
    REDIRECT_TO_HOSTED_PAYMENT -> SUBMITTING_ORDER          (hosted success)
    REDIRECT_TO_HOSTED_PAYMENT -> METHOD_SELECTION          (hosted failure)
    SUBMITTING_ORDER -> COMPLETED                           (acknowledged)
    SUBMITTING_ORDER -> METHOD_SELECTION                    (rejected / network)

The cart is cleared and points are credited only after the order service
acknowledged the order.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from src.application.dtos.order_dtos import (
    OrderHistoryResponse,
    OrderInfo,
    OrderSubmission,
    ShippingInfo,
)
from src.application.storefront_store import StorefrontStore
from src.domain.repositories.order_repository import OrderRepository
from src.domain.repositories.payment_gateway import PaymentGateway
from src.domain.value_objects.money import Money
from src.domain.value_objects.payment_method import PaymentMethod
from src.infrastructure.logging.logging_config import PerformanceLogger, get_structured_logger
from src.infrastructure.utilities.exceptions import (
    ApiResponseError,
    BusinessLogicError,
    CartEmptyError,
    CheckoutNotReadyError,
    ClientStateError,
    ErrorReporter,
    ExternalServiceError,
    HostedPaymentError,
    OrderSubmissionError,
    PaymentMethodRequiredError,
    ValidationError,
)
from src.infrastructure.utilities.i18n import tr


class CheckoutState(str, Enum):
    """Checkout flow states"""

    IDLE = "idle"
    METHOD_SELECTION = "method_selection"
    REDIRECT_TO_HOSTED_PAYMENT = "redirect_to_hosted_payment"
    SUBMITTING_ORDER = "submitting_order"
    COMPLETED = "completed"


@dataclass
class CheckoutResponse:
    """Outcome of a checkout step"""

    success: bool
    state: CheckoutState
    order_info: Optional[OrderInfo] = None
    points_earned: int = 0
    client_secret: Optional[str] = None
    message: Optional[str] = None
    error_message: Optional[str] = None
    refused: bool = False
    retryable: bool = False


class CheckoutUseCase:
    """Checkout orchestrator for one shopper session"""

    def __init__(
        self,
        store: StorefrontStore,
        order_repository: OrderRepository,
        payment_gateway: PaymentGateway,
        language: Optional[str] = None,
    ):
        self._store = store
        self._order_repository = order_repository
        self._payment_gateway = payment_gateway
        self._language = language
        self._state = CheckoutState.IDLE
        self._shipping_info: Optional[ShippingInfo] = None
        self._logger = logging.getLogger(self.__class__.__name__)
        self._events = get_structured_logger("checkout")

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def selected_payment(self) -> Optional[PaymentMethod]:
        return self._store.selected_payment

    def open_checkout(self) -> CheckoutState:
        """Enter method selection (from IDLE, or from a finished checkout)"""
        if self._state in (CheckoutState.IDLE, CheckoutState.COMPLETED):
            self._state = CheckoutState.METHOD_SELECTION
            self._logger.info("🧾 CHECKOUT OPENED: %d cart lines", len(self._store.cart))
        return self._state

    def select_payment_method(self, method: Union[str, PaymentMethod]) -> PaymentMethod:
        """Record the payment method; unknown tags raise ValueError"""
        if self._state == CheckoutState.SUBMITTING_ORDER:
            raise ValueError("Payment method cannot change while an order is being submitted")

        payment_method = PaymentMethod.parse(method)
        self._store.selected_payment = payment_method
        self._logger.info("💳 PAYMENT METHOD SELECTED: %s", payment_method.value)
        self._persist()
        return payment_method

    def can_proceed(self) -> bool:
        """Cart non-empty, payment method chosen, and waiting in method selection"""
        return (
            self._state == CheckoutState.METHOD_SELECTION
            and not self._store.cart.is_empty()
            and self._store.selected_payment is not None
        )

    def payment_method_options(self) -> List[Dict[str, Any]]:
        """Payment methods with their display names, in checkout order"""
        return [
            {
                "method": method.value,
                "label": tr(method.label_key, self._language),
                "selected": method == self._store.selected_payment,
            }
            for method in PaymentMethod
        ]

    async def proceed(
        self, shipping_info: Optional[Union[ShippingInfo, Dict[str, Any]]] = None
    ) -> CheckoutResponse:
        """Leave method selection along the branch of the chosen payment method

        A raw form dict is validated first; a bad field keeps the checkout
        in method selection.
        """
        if not self.can_proceed():
            return self._refused()

        if isinstance(shipping_info, dict):
            try:
                shipping_info = ShippingInfo.parse(shipping_info, self._language)
            except ValidationError as e:
                self._logger.info("📋 SHIPPING FORM REJECTED: %s (%s)", e.field, e)
                return CheckoutResponse(success=False, state=self._state, error_message=e.user_message)

        method = self._store.selected_payment
        self._shipping_info = shipping_info

        if method.uses_hosted_payment:
            self._state = CheckoutState.REDIRECT_TO_HOSTED_PAYMENT
            self._logger.info("↪️ REDIRECTING TO HOSTED PAYMENT")
            return CheckoutResponse(
                success=True,
                state=self._state,
                message=tr("HOSTED_PAYMENT_REDIRECT", self._language),
            )

        totals = self._store.cart.compute_totals()
        return await self._submit_order(method, totals.total)

    async def start_hosted_payment(self) -> CheckoutResponse:
        """Create the payment intent the hosted card form is opened with"""
        if self._state != CheckoutState.REDIRECT_TO_HOSTED_PAYMENT:
            return self._refused()

        total = self._store.cart.compute_totals().total
        metadata = {
            "userId": self._store.session.user_id,
            "itemCount": len(self._store.cart),
            "paymentMethod": PaymentMethod.CARD.value,
        }
        try:
            with PerformanceLogger("create_payment_intent", self._logger):
                client_secret = await self._payment_gateway.create_payment_intent(total, metadata)
        except ApiResponseError as e:
            return self.report_hosted_payment_failure(e.detail or str(e))
        except ExternalServiceError as e:
            self._state = CheckoutState.METHOD_SELECTION
            self._logger.error("💥 PAYMENT INTENT FAILED: %s", e)
            return CheckoutResponse(
                success=False,
                state=self._state,
                error_message=tr("SERVICE_UNAVAILABLE", self._language),
                retryable=e.retryable,
            )

        self._logger.info("🔐 PAYMENT INTENT CREATED for %s", total)
        return CheckoutResponse(success=True, state=self._state, client_secret=client_secret)

    async def confirm_hosted_payment(
        self, confirmed_total: Union[Money, Decimal, str, float], payment_intent_id: Optional[str] = None
    ) -> CheckoutResponse:
        """Called back by the hosted flow once the processor accepted the payment"""
        if self._state != CheckoutState.REDIRECT_TO_HOSTED_PAYMENT or self._store.cart.is_empty():
            return self._refused()

        try:
            total = confirmed_total if isinstance(confirmed_total, Money) else Money.of(confirmed_total, self._store.currency)
        except (InvalidOperation, ValueError) as e:
            self._logger.error("💥 INVALID CONFIRMED TOTAL %r: %s", confirmed_total, e)
            return self.report_hosted_payment_failure(str(e))

        return await self._submit_order(PaymentMethod.CARD, total, payment_intent_id)

    def report_hosted_payment_failure(self, processor_message: str) -> CheckoutResponse:
        """The hosted flow failed; no order is created and the user picks again"""
        error = HostedPaymentError(processor_message)
        self._state = CheckoutState.METHOD_SELECTION
        self._logger.warning("💥 HOSTED PAYMENT FAILED: %s", processor_message)
        self._events.warning("hosted_payment_failed", reason=processor_message)
        return CheckoutResponse(
            success=False,
            state=self._state,
            error_message=tr("HOSTED_PAYMENT_FAILED", self._language, reason=error.processor_message),
            retryable=True,
        )

    def reset(self) -> CheckoutState:
        """Close the checkout"""
        if self._state != CheckoutState.SUBMITTING_ORDER:
            self._state = CheckoutState.IDLE
            self._shipping_info = None
        return self._state

    async def get_order_history(self) -> OrderHistoryResponse:
        """Orders of the signed-in user; anonymous shoppers have none"""
        user_id = self._store.session.user_id
        if user_id is None:
            return OrderHistoryResponse(success=True, orders=[])

        try:
            orders = await self._order_repository.get_orders_by_user(user_id)
            return OrderHistoryResponse(
                success=True, orders=[OrderInfo.from_api(order) for order in orders]
            )
        except ExternalServiceError as e:
            self._logger.error("💥 ORDER HISTORY FAILED for user %s: %s", user_id, e)
        except (KeyError, TypeError, ValueError) as e:
            self._logger.error("💥 MALFORMED ORDER HISTORY for user %s: %s", user_id, e, exc_info=True)
        return OrderHistoryResponse(success=False, error_message=tr("ORDER_HISTORY_FAILED", self._language))

    async def _submit_order(
        self, method: PaymentMethod, total: Money, payment_intent_id: Optional[str] = None
    ) -> CheckoutResponse:
        self._state = CheckoutState.SUBMITTING_ORDER
        submission = OrderSubmission.from_cart(
            self._store.cart,
            total=total,
            payment_method=method,
            user_id=self._store.session.user_id,
            shipping_info=self._shipping_info,
            payment_intent_id=payment_intent_id,
        )
        self._logger.info(
            "📝 SUBMITTING ORDER: %d lines, total %s, method %s",
            len(submission.items),
            submission.total,
            method.value,
        )

        try:
            with PerformanceLogger("create_order", self._logger):
                acknowledged = await self._order_repository.create_order(submission.to_payload())
            if not isinstance(acknowledged, dict) or acknowledged.get("id") is None:
                raise OrderSubmissionError("acknowledgement without an order id")
        except (ExternalServiceError, OrderSubmissionError) as e:
            return self._submission_failed(e, e.retryable)
        except Exception as e:  # pylint: disable=broad-exception-caught
            ErrorReporter.report_critical_error(e)
            return self._submission_failed(e, True)

        # The server holds the order from here on; nothing below may send the shopper back to retry
        order_info = OrderInfo.from_api(
            acknowledged,
            fallback_points=submission.points_earned,
            fallback_method=method,
            fallback_total=total.to_float(),
        )
        credited = self._store.points.credit(
            order_info.points_earned, reference=f"order:{order_info.order_id}"
        )
        if not credited:
            self._logger.warning("⚠️ ORDER %s ALREADY CREDITED, skipping points", order_info.order_id)
        points_earned = order_info.points_earned if credited else 0

        self._store.cart.clear()
        self._store.selected_payment = None
        self._store.session.record_purchase()
        self._shipping_info = None
        self._state = CheckoutState.COMPLETED
        self._persist()

        self._logger.info("🎉 ORDER COMPLETED: %s (+%d points)", order_info.order_id, points_earned)
        self._events.info(
            "order_completed",
            order_id=order_info.order_id,
            total=submission.total,
            payment_method=method.value,
            points_earned=points_earned,
        )
        return CheckoutResponse(
            success=True,
            state=self._state,
            order_info=order_info,
            points_earned=points_earned,
            message=tr("ORDER_SUCCESS", self._language, order_id=order_info.order_id, points=points_earned),
        )

    def _submission_failed(self, error: Exception, retryable: bool) -> CheckoutResponse:
        self._state = CheckoutState.METHOD_SELECTION
        self._logger.error("💥 ORDER SUBMISSION FAILED: %s", error)
        self._events.warning("order_failed", error_type=type(error).__name__, retryable=retryable)
        return CheckoutResponse(
            success=False,
            state=self._state,
            error_message=tr("ORDER_FAILED", self._language),
            retryable=retryable,
        )

    def _readiness_error(self) -> BusinessLogicError:
        if self._store.cart.is_empty():
            return CartEmptyError(self._language)
        if self._store.selected_payment is None:
            return PaymentMethodRequiredError(self._language)
        return CheckoutNotReadyError(self._state.value, self._language)

    def _refused(self) -> CheckoutResponse:
        error = self._readiness_error()
        ErrorReporter.report_business_error(error, self._store.session.user_id)
        return CheckoutResponse(
            success=False,
            state=self._state,
            error_message=error.user_message,
            refused=True,
        )

    def _persist(self):
        try:
            self._store.persist()
        except ClientStateError as e:
            self._logger.error("💥 CLIENT STATE NOT SAVED: %s", e, exc_info=True)
