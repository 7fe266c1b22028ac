"""
Domain Layer Tests - Value Objects and Entities
"""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.entities.cart_entity import Cart, CartLineItem, ShippingPolicy
from src.domain.entities.points_ledger_entity import MAX_CREDITED_REFERENCES, PointsLedger
from src.domain.entities.product_entity import Product
from src.domain.entities.user_session_entity import ActivityCounters, UserSession
from src.domain.value_objects.money import Money
from src.domain.value_objects.payment_method import OrderStatus, PaymentMethod
from src.domain.value_objects.product_id import ProductId


class TestValueObjects:
    """Test domain value objects validation and behavior"""

    def test_money_rounds_half_up(self):
        assert Money.of("10.005").amount == Decimal("10.01")
        assert Money.of(0.1).amount == Decimal("0.10")

    def test_money_rejects_negative(self):
        with pytest.raises(ValueError):
            Money.of("-1")
        with pytest.raises(ValueError):
            Money.of("5") - Money.of("6")

    def test_money_arithmetic(self):
        total = Money.of("120") * 2 + Money.of("50")
        assert total == Money.of("290")
        assert total.to_wire() == "290.00"
        assert str(Money.of("1234.5")) == "$1,234.50"

    def test_money_floor_units(self):
        assert Money.of("290.99").floor_units() == 290
        assert Money.of("0.99").floor_units() == 0

    def test_money_currency_mismatch(self):
        with pytest.raises(ValueError):
            Money.of("1", "USD") + Money.of("1", "EUR")
        with pytest.raises(ValueError):
            assert Money.of("1", "USD") < Money.of("2", "EUR")

    def test_product_id(self):
        assert ProductId(42).value == "42"
        assert str(ProductId("abc")) == "abc"
        for value in ["", "   ", None]:
            with pytest.raises(ValueError):
                ProductId(value)

    def test_payment_method_parse(self):
        assert PaymentMethod.parse("card") is PaymentMethod.CARD
        assert PaymentMethod.parse(" Cash_On_Delivery ") is PaymentMethod.CASH_ON_DELIVERY
        with pytest.raises(ValueError):
            PaymentMethod.parse("bitcoin")

    def test_payment_method_behaviour(self):
        assert PaymentMethod.CARD.uses_hosted_payment is True
        assert PaymentMethod.CARD.initial_order_status is OrderStatus.PENDING
        for method in (PaymentMethod.PEER_TRANSFER, PaymentMethod.HOSTED_WALLET, PaymentMethod.CASH_ON_DELIVERY):
            assert method.uses_hosted_payment is False
            assert method.initial_order_status is OrderStatus.COMPLETED
        assert PaymentMethod.PEER_TRANSFER.label_key == "PAYMENT_METHOD_PEER_TRANSFER"


class TestProductEntity:
    """Test product entity"""

    def test_price_for_tier(self, tiered_product):
        assert tiered_product.price_for_tier(True) == Money.of("70")
        assert tiered_product.price_for_tier(False) == Money.of("100")

    def test_invalid_category(self, product_factory):
        with pytest.raises(ValueError):
            product_factory(category="boats")

    def test_empty_name(self, product_factory):
        with pytest.raises(ValueError):
            product_factory(name="  ")

    def test_from_api(self):
        product = Product.from_api(
            {
                "id": 7,
                "name": "Casco integral",
                "category": "motorcycles",
                "retailPrice": "199.99",
                "wholesalePrice": "150.00",
                "imageUrl": "/img/casco.png",
                "specs": {"talla": "M"},
            }
        )
        assert product.id == ProductId("7")
        assert product.retail_price == Money.of("199.99")
        assert product.wholesale_price == Money.of("150")
        assert product.image_url == "/img/casco.png"
        assert product.is_active is True
        assert product.to_dict()["retail_price"] == "199.99"


class TestCartEntity:
    """Test cart line items and totals"""

    def test_duplicate_add_merges(self, product):
        cart = Cart()
        cart.add_item(product, tier_is_wholesale=False)
        cart.add_item(product, tier_is_wholesale=False)
        assert len(cart) == 1
        assert cart.get_item(product.id).quantity == 2

    def test_wholesale_tier_price(self, tiered_product):
        cart = Cart()
        line = cart.add_item(tiered_product, tier_is_wholesale=True)
        assert line.unit_price == Money.of("70")

    def test_insertion_order_is_display_order(self, product, expensive_product, tiered_product):
        cart = Cart()
        for item in (expensive_product, product, tiered_product):
            cart.add_item(item, False)
        cart.add_item(expensive_product, False)
        assert [line.product_id.value for line in cart] == ["p-600", "p-1", "p-100"]

    def test_set_quantity_zero_removes(self, product):
        cart = Cart()
        cart.add_item(product, False)
        assert cart.set_quantity(product.id, 0) is None
        assert cart.is_empty()

    def test_set_quantity_replaces(self, product):
        cart = Cart()
        cart.add_item(product, False)
        cart.set_quantity(product.id, 7)
        assert cart.get_item(product.id).quantity == 7

    def test_set_quantity_absent_product_is_noop(self, product):
        cart = Cart()
        assert cart.set_quantity(ProductId("nope"), 3) is None
        assert cart.is_empty()

    def test_remove_absent_item(self, product):
        cart = Cart()
        assert cart.remove_item(product.id) is False

    def test_subtotal_matches_lines_after_operations(self, product, expensive_product, tiered_product):
        cart = Cart()
        cart.add_item(product, False)
        cart.add_item(expensive_product, False)
        cart.add_item(product, False)
        cart.set_quantity(expensive_product.id, 3)
        cart.add_item(tiered_product, True)
        cart.remove_item(tiered_product.id)
        cart.set_quantity(product.id, 5)

        expected = sum((line.unit_price.amount * line.quantity for line in cart), Decimal("0"))
        totals = cart.compute_totals()
        assert totals.subtotal.amount == expected
        assert totals.item_count == 8

    def test_empty_cart_totals(self):
        totals = Cart().compute_totals()
        assert totals.subtotal == Money.zero()
        assert totals.shipping == Money.zero()
        assert totals.total == Money.zero()

    def test_shipping_boundary(self):
        policy = ShippingPolicy.default()
        assert policy.shipping_for(Money.of("500"), has_items=True) == Money.zero()
        assert policy.shipping_for(Money.of("499.99"), has_items=True) == Money.of("50")

    def test_cod_scenario_totals(self, product):
        cart = Cart()
        cart.add_item(product, False)
        cart.add_item(product, False)
        totals = cart.compute_totals()
        assert totals.subtotal == Money.of("240")
        assert totals.shipping == Money.of("50")
        assert totals.total == Money.of("290")

    def test_free_shipping_scenario(self, expensive_product):
        cart = Cart()
        cart.add_item(expensive_product, False)
        totals = cart.compute_totals()
        assert totals.shipping == Money.zero()
        assert totals.total == Money.of("600")
        assert totals.has_free_shipping

    def test_custom_shipping_policy(self, product_factory):
        policy = ShippingPolicy(Money.of("100"), Money.of("15"))
        cart = Cart(shipping_policy=policy)
        cart.add_item(product_factory("cheap", retail="20", wholesale="10"), False)
        assert cart.compute_totals().total == Money.of("35")

    def test_serialization_keeps_lines(self, product, tiered_product):
        cart = Cart()
        cart.add_item(product, False)
        cart.add_item(tiered_product, True)
        cart.add_item(product, False)

        restored = Cart.from_list(cart.to_list())
        assert [(line.product_id.value, line.quantity, line.unit_price) for line in restored] == [
            ("p-1", 2, Money.of("120")),
            ("p-100", 1, Money.of("70")),
        ]

    def test_set_quantity_rejects_non_integers(self, product):
        cart = Cart()
        cart.add_item(product, False)
        with pytest.raises(ValueError):
            cart.set_quantity(product.id, 2.5)
        with pytest.raises(ValueError):
            cart.set_quantity(product.id, True)
        assert cart.get_item(product.id).quantity == 1
        assert cart.compute_totals().subtotal == Money.of("120")

    def test_line_item_requires_positive_quantity(self):
        with pytest.raises(ValueError):
            CartLineItem(ProductId("x"), "X", Money.of("1"), quantity=0)


class TestPointsLedger:
    """Test the points ledger"""

    def test_debit_floors_at_zero(self):
        ledger = PointsLedger(balance=10)
        assert ledger.debit(15) == 10
        assert ledger.balance == 0

    def test_negative_amounts_rejected(self):
        ledger = PointsLedger()
        with pytest.raises(ValueError):
            ledger.credit(-1)
        with pytest.raises(ValueError):
            ledger.debit(-1)
        with pytest.raises(ValueError):
            PointsLedger(balance=-5)

    def test_credit_with_reference_is_idempotent(self):
        ledger = PointsLedger()
        assert ledger.credit(290, reference="order:1") is True
        assert ledger.credit(290, reference="order:1") is False
        assert ledger.balance == 290
        assert ledger.has_credited("order:1")

    def test_restore(self):
        ledger = PointsLedger.restore(None, None)
        assert ledger.balance == 0
        ledger = PointsLedger.restore(40, ["order:9"])
        assert ledger.balance == 40
        assert ledger.has_credited("order:9")

    def test_remembered_references_are_capped(self):
        ledger = PointsLedger()
        for n in range(MAX_CREDITED_REFERENCES + 5):
            ledger.credit(1, reference=f"order:{n}")

        assert len(ledger.credited_references) == MAX_CREDITED_REFERENCES
        assert not ledger.has_credited("order:0")
        assert ledger.has_credited(f"order:{MAX_CREDITED_REFERENCES + 4}")
        assert ledger.balance == MAX_CREDITED_REFERENCES + 5

    def test_restore_trims_and_dedupes_references(self):
        references = [f"game:{n}" for n in range(MAX_CREDITED_REFERENCES + 10)] + ["game:0"]
        ledger = PointsLedger.restore(10, references)
        assert len(ledger.credited_references) == MAX_CREDITED_REFERENCES
        assert ledger.credited_references[-1] == f"game:{MAX_CREDITED_REFERENCES + 9}"


class TestUserSession:
    """Test the shopper session"""

    def test_anonymous_session(self):
        session = UserSession()
        assert session.user_id is None
        assert session.is_signed_in is False
        assert session.is_wholesale_tier is False

    def test_wholesale_tier_switch(self):
        session = UserSession()
        session.enter_wholesale_tier({"id": 12, "email": "taller@example.com"})
        assert session.user_id == "12"
        assert session.is_wholesale_tier is True

        session.leave_wholesale_tier()
        assert session.is_wholesale_tier is False
        assert session.user_id == "12"

    def test_has_visited_on(self):
        session = UserSession(last_visit_date=date(2024, 5, 1))
        assert session.has_visited_on(date(2024, 5, 1))
        assert not session.has_visited_on(date(2024, 5, 2))

    def test_activity_counters(self):
        session = UserSession()
        session.record_visit(date(2024, 5, 1))
        session.record_purchase()
        session.record_game()
        session.record_game()
        session.record_share()

        assert session.last_visit_date == date(2024, 5, 1)
        assert session.activity.to_dict() == {"visits": 1, "purchases": 1, "gamesPlayed": 2, "shareCount": 1}
        assert ActivityCounters.from_dict(session.activity.to_dict()) == session.activity

    def test_activity_counters_reject_bad_values(self):
        with pytest.raises(ValueError):
            ActivityCounters(visits=-1)
        with pytest.raises(ValueError):
            ActivityCounters.from_dict({"gamesPlayed": "many"})
