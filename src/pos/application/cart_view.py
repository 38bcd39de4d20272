"""Maps a Cart plus a fresh pricing summary to a CartDTO."""

from __future__ import annotations

from pos.application.dto import CartDTO, CartLineDTO
from pos.domain.model.cart import Cart
from pos.domain.model.value_objects import Percent, TaxRate
from pos.domain.service import pricing_engine


def priced_cart_dto(cart: Cart, cart_discount: Percent, tax_rate: TaxRate) -> CartDTO:
    summary = pricing_engine.price(cart.lines, cart_discount, tax_rate)
    return CartDTO(
        register_id=cart.register_id,
        customer_id=cart.customer_id,
        items=[
            CartLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_discount=str(line.line_discount),
                line_subtotal=str(line.line_subtotal),
            )
            for line in cart.lines
        ],
        cart_discount=str(cart_discount),
        tax_rate=str(tax_rate),
        subtotal=str(summary.subtotal),
        discount_amount=str(summary.discount_amount),
        taxable_amount=str(summary.taxable_amount),
        tax_amount=str(summary.tax_amount),
        total=str(summary.total),
    )
