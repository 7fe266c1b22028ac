"""
Storefront store

Injectable state container for one shopper session: the cart, the user
session with its points, and the chosen payment method. Constructed fresh
per session (and per test); seeded from and written back to the persisted
client state.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from src.domain.entities.cart_entity import Cart, ShippingPolicy
from src.domain.entities.points_ledger_entity import PointsLedger
from src.domain.entities.user_session_entity import ActivityCounters, UserSession
from src.domain.repositories.client_state_repository import ClientStateRepository
from src.domain.value_objects.money import DEFAULT_CURRENCY
from src.domain.value_objects.payment_method import PaymentMethod
from src.infrastructure.utilities.constants import ClientStateKeys

logger = logging.getLogger(__name__)

_PERSISTED_KEYS = (
    ClientStateKeys.CART,
    ClientStateKeys.USER,
    ClientStateKeys.IS_WHOLESALE_USER,
    ClientStateKeys.USER_POINTS,
    ClientStateKeys.CREDITED_REFERENCES,
    ClientStateKeys.LAST_VISIT_DATE,
    ClientStateKeys.SELECTED_PAYMENT,
    ClientStateKeys.ACTIVITY,
)


class StorefrontStore:
    """Cart, session and payment selection of a single shopper"""

    def __init__(
        self,
        repository: Optional[ClientStateRepository] = None,
        cart: Optional[Cart] = None,
        session: Optional[UserSession] = None,
        selected_payment: Optional[PaymentMethod] = None,
        shipping_policy: Optional[ShippingPolicy] = None,
        currency: str = DEFAULT_CURRENCY,
    ):
        self._repository = repository
        self.currency = currency
        self.shipping_policy = shipping_policy or ShippingPolicy.default(currency)
        self.cart = cart if cart is not None else Cart(shipping_policy=self.shipping_policy, currency=currency)
        self.session = session if session is not None else UserSession()
        self.selected_payment = selected_payment

    @property
    def points(self) -> PointsLedger:
        return self.session.points

    @classmethod
    def load(
        cls,
        repository: ClientStateRepository,
        shipping_policy: Optional[ShippingPolicy] = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> "StorefrontStore":
        """Seed a store from the persisted client state

        Entries that no longer parse (an unknown payment tag, a corrupt
        line item, a non-numeric balance) are dropped with a warning
        instead of failing startup.
        """
        state = repository.get_many(_PERSISTED_KEYS)
        policy = shipping_policy or ShippingPolicy.default(currency)

        try:
            cart = Cart.from_list(state.get(ClientStateKeys.CART), shipping_policy=policy, currency=currency)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("⚠️ DISCARDING PERSISTED CART: %s", e)
            cart = Cart(shipping_policy=policy, currency=currency)

        last_visit = state.get(ClientStateKeys.LAST_VISIT_DATE)
        try:
            last_visit_date = date.fromisoformat(last_visit) if last_visit else None
        except (TypeError, ValueError):
            last_visit_date = None

        try:
            points = PointsLedger.restore(
                state.get(ClientStateKeys.USER_POINTS, 0),
                state.get(ClientStateKeys.CREDITED_REFERENCES, []),
            )
        except (TypeError, ValueError) as e:
            logger.warning("⚠️ DISCARDING PERSISTED POINTS: %s", e)
            points = PointsLedger()

        try:
            activity = ActivityCounters.from_dict(state.get(ClientStateKeys.ACTIVITY))
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("⚠️ DISCARDING PERSISTED ACTIVITY: %s", e)
            activity = ActivityCounters()

        user = state.get(ClientStateKeys.USER)
        session = UserSession(
            user=user if isinstance(user, dict) else None,
            is_wholesale_tier=bool(state.get(ClientStateKeys.IS_WHOLESALE_USER, False)),
            points=points,
            last_visit_date=last_visit_date,
            activity=activity,
        )

        selected_payment = None
        if state.get(ClientStateKeys.SELECTED_PAYMENT):
            try:
                selected_payment = PaymentMethod.parse(state[ClientStateKeys.SELECTED_PAYMENT])
            except ValueError as e:
                logger.warning("⚠️ DISCARDING PERSISTED PAYMENT METHOD: %s", e)

        store = cls(
            repository=repository,
            cart=cart,
            session=session,
            selected_payment=selected_payment,
            shipping_policy=policy,
            currency=currency,
        )
        logger.info(
            "📦 STORE LOADED: %d cart lines, %d points, wholesale=%s",
            len(cart),
            session.points.balance,
            session.is_wholesale_tier,
        )
        return store

    def snapshot(self) -> Dict[str, Any]:
        """JSON-compatible view of everything that is persisted"""
        return {
            ClientStateKeys.CART: self.cart.to_list(),
            ClientStateKeys.USER: self.session.user,
            ClientStateKeys.IS_WHOLESALE_USER: self.session.is_wholesale_tier,
            ClientStateKeys.USER_POINTS: self.points.balance,
            ClientStateKeys.CREDITED_REFERENCES: list(self.points.credited_references),
            ClientStateKeys.LAST_VISIT_DATE: (
                self.session.last_visit_date.isoformat() if self.session.last_visit_date else None
            ),
            ClientStateKeys.SELECTED_PAYMENT: (
                self.selected_payment.value if self.selected_payment else None
            ),
            ClientStateKeys.ACTIVITY: self.session.activity.to_dict(),
        }

    def persist(self) -> None:
        """Write the session back to the client state store (no-op without one)"""
        if self._repository is None:
            return
        self._repository.set_many(self.snapshot())
