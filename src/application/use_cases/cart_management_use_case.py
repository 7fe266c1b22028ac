"""
Cart management use case

Handles shopping cart operations for the shopper session.
"""

import logging
from typing import Optional

from src.application.dtos.cart_dtos import CartOperationResponse, CartSummary
from src.application.storefront_store import StorefrontStore
from src.domain.entities.product_entity import Product
from src.domain.value_objects.product_id import ProductId
from src.infrastructure.utilities.exceptions import ClientStateError
from src.infrastructure.utilities.i18n import tr


class CartManagementUseCase:
    """
    Use case for cart management operations

    Handles:
    1. Adding items to cart (at the shopper's tier price)
    2. Removing items from cart
    3. Updating cart quantities
    4. Getting cart summary
    5. Clearing cart
    """

    def __init__(self, store: StorefrontStore, points_per_cart_add: int = 5, language: Optional[str] = None):
        self._store = store
        self._points_per_cart_add = points_per_cart_add
        self._language = language
        self._logger = logging.getLogger(self.__class__.__name__)

    def add_to_cart(
        self, product: Product, tier_is_wholesale: Optional[bool] = None
    ) -> CartOperationResponse:
        """Add one unit of a product; awards the add-to-cart points"""
        if tier_is_wholesale is None:
            tier_is_wholesale = self._store.session.is_wholesale_tier

        line = self._store.cart.add_item(product, tier_is_wholesale)
        self._store.points.credit(self._points_per_cart_add)
        self._logger.info(
            "🛒 ADDED TO CART: %s x%d at %s (wholesale=%s)",
            line.product_id,
            line.quantity,
            line.unit_price,
            tier_is_wholesale,
        )

        self._persist()
        return CartOperationResponse(
            success=True,
            cart_summary=self.get_cart_summary(),
            points_awarded=self._points_per_cart_add,
        )

    def remove_item(self, product_id: str) -> CartOperationResponse:
        """Remove a line; removing an absent product is not an error"""
        removed = self._store.cart.remove_item(ProductId(product_id))
        if removed:
            self._logger.info("🗑️ REMOVED FROM CART: %s", product_id)
            self._persist()
        else:
            self._logger.debug("Remove ignored, %s is not in the cart", product_id)
        return CartOperationResponse(success=True, cart_summary=self.get_cart_summary())

    def set_quantity(self, product_id: str, quantity: int) -> CartOperationResponse:
        """Replace a line's quantity; zero or less removes the line"""
        line_id = ProductId(product_id)
        try:
            self._store.cart.set_quantity(line_id, quantity)
        except ValueError as e:
            self._logger.warning("⚠️ QUANTITY REJECTED for %s: %r (%s)", product_id, quantity, e)
            return CartOperationResponse(
                success=False,
                cart_summary=self.get_cart_summary(),
                error_message=tr("INVALID_QUANTITY", self._language),
            )
        self._logger.info("🔄 QUANTITY SET: %s -> %d", product_id, quantity)
        self._persist()
        return CartOperationResponse(success=True, cart_summary=self.get_cart_summary())

    def increase_quantity(self, product_id: str) -> CartOperationResponse:
        line = self._store.cart.get_item(ProductId(product_id))
        if line is None:
            return CartOperationResponse(success=True, cart_summary=self.get_cart_summary())
        return self.set_quantity(product_id, line.quantity + 1)

    def decrease_quantity(self, product_id: str) -> CartOperationResponse:
        line = self._store.cart.get_item(ProductId(product_id))
        if line is None:
            return CartOperationResponse(success=True, cart_summary=self.get_cart_summary())
        return self.set_quantity(product_id, line.quantity - 1)

    def clear_cart(self) -> CartOperationResponse:
        self._store.cart.clear()
        self._logger.info("🗑️ CART CLEARED")
        self._persist()
        return CartOperationResponse(success=True, cart_summary=self.get_cart_summary())

    def get_cart_summary(self) -> CartSummary:
        return CartSummary.from_cart(self._store.cart)

    def _persist(self):
        """Persist the session; a storage failure keeps the in-memory cart usable"""
        try:
            self._store.persist()
        except ClientStateError as e:
            self._logger.error("💥 CLIENT STATE NOT SAVED: %s", e, exc_info=True)
