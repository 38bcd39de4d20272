"""Unit tests for the Cart aggregate and its lines."""

import pytest

from pos.domain.exceptions import InvalidAmount, LineNotFound, ValidationError
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import Money, Percent, Quantity


def _cart_with(*items: tuple[str, str, int]) -> Cart:
    """Helper: build a cart from (product_id, price, qty) tuples."""
    cart = Cart(register_id="R1")
    for product_id, price, qty in items:
        cart.add_item(product_id, f"Product {product_id}", Money.of(price), qty)
    return cart


class TestCartLine:

    def test_subtotal_without_discount(self):
        line = CartLine("1", "Widget", Quantity(3), Money.of("10.00"))
        assert line.line_subtotal == Money.of("30.00")

    def test_subtotal_with_line_discount(self):
        line = CartLine("2", "Gadget", Quantity(2), Money.of("5.00"), Percent.of("10"))
        assert line.line_subtotal == Money.of("9.00")
        assert line.line_discount_amount == Money.of("1.00")

    def test_subtotal_rounds_half_up(self):
        # 3 x 3.33 x 0.85 = 8.4915
        line = CartLine("3", "Thing", Quantity(3), Money.of("3.33"), Percent.of("15"))
        assert line.line_subtotal == Money.of("8.49")

    def test_full_discount_gives_zero(self):
        line = CartLine("4", "Freebie", Quantity(2), Money.of("4.00"), Percent.of("100"))
        assert line.line_subtotal == Money.zero()


class TestAddItem:

    def test_new_product_appends_line(self):
        cart = Cart(register_id="R1")
        line = cart.add_item("1", "Widget", Money.of("10.00"))
        assert line.quantity.value == 1
        assert [l.product_id for l in cart.lines] == ["1"]

    def test_re_adding_merges_quantity(self):
        cart = _cart_with(("1", "10.00", 2))
        line = cart.add_item("1", "Widget", Money.of("10.00"), 3)
        assert len(cart.lines) == 1
        assert line.quantity.value == 5
        assert line.line_subtotal == Money.of("50.00")

    def test_merge_keeps_original_position(self):
        cart = _cart_with(("1", "10.00", 1), ("2", "5.00", 1), ("3", "1.00", 1))
        cart.add_item("1", "Product 1", Money.of("10.00"))
        assert [l.product_id for l in cart.lines] == ["1", "2", "3"]

    def test_merge_keeps_price_snapshot(self):
        cart = _cart_with(("1", "10.00", 1))
        cart.add_item("1", "Product 1", Money.of("12.00"))
        assert cart.line_for("1").unit_price == Money.of("10.00")

    def test_zero_quantity_rejected(self):
        cart = Cart(register_id="R1")
        with pytest.raises(InvalidAmount, match="must be positive"):
            cart.add_item("1", "Widget", Money.of("10.00"), 0)
        assert cart.is_empty


class TestUpdateQuantity:

    def test_updates_quantity_and_subtotal(self):
        cart = _cart_with(("1", "10.00", 1))
        line = cart.update_quantity("1", 4)
        assert line is not None
        assert line.line_subtotal == Money.of("40.00")

    def test_zero_removes_line(self):
        cart = _cart_with(("1", "10.00", 1), ("2", "5.00", 1))
        assert cart.update_quantity("1", 0) is None
        assert [l.product_id for l in cart.lines] == ["2"]

    def test_negative_removes_line(self):
        cart = _cart_with(("1", "10.00", 1))
        cart.update_quantity("1", -2)
        assert cart.is_empty

    def test_absent_product_rejected(self):
        cart = _cart_with(("1", "10.00", 1))
        with pytest.raises(LineNotFound):
            cart.update_quantity("99", 2)


class TestRemoveItem:

    def test_removes_line(self):
        cart = _cart_with(("1", "10.00", 1), ("2", "5.00", 1))
        cart.remove_item("1")
        assert [l.product_id for l in cart.lines] == ["2"]

    def test_absent_product_raises_line_not_found(self):
        # Removing a product that is not in the cart is an error, not a no-op.
        cart = _cart_with(("1", "10.00", 1))
        with pytest.raises(LineNotFound, match="'99'"):
            cart.remove_item("99")
        assert len(cart.lines) == 1


class TestLineDiscountAndClear:

    def test_set_line_discount(self):
        cart = _cart_with(("2", "5.00", 2))
        cart.set_line_discount("2", Percent.of("10"))
        assert cart.line_for("2").line_subtotal == Money.of("9.00")

    def test_set_line_discount_on_absent_product(self):
        cart = Cart(register_id="R1")
        with pytest.raises(LineNotFound):
            cart.set_line_discount("1", Percent.of("10"))

    def test_new_cart_has_no_cart_discount(self):
        assert Cart(register_id="R1").cart_discount.is_zero

    def test_clear_empties_lines_customer_and_cart_discount(self):
        cart = _cart_with(("1", "10.00", 1))
        cart.attach_customer("C9")
        cart.set_cart_discount(Percent.of("5"))
        cart.clear()
        assert cart.is_empty
        assert cart.customer_id is None
        assert cart.cart_discount.is_zero


class TestReconstitution:

    def test_duplicate_product_lines_rejected(self):
        lines = [
            CartLine("1", "Widget", Quantity(1), Money.of("1.00")),
            CartLine("1", "Widget", Quantity(2), Money.of("1.00")),
        ]
        with pytest.raises(ValidationError, match="Duplicate line"):
            Cart(register_id="R1", lines=lines)
