"""Integration tests for holding, resuming and discarding carts."""

import pytest

from pos.application.add_to_cart import AddToCartHandler
from pos.application.discard_held_cart import DiscardHeldCartHandler
from pos.application.hold_cart import HoldCartHandler
from pos.application.list_held_carts import ListHeldCartsHandler
from pos.application.resume_held_cart import ResumeHeldCartHandler
from pos.domain.exceptions import EmptyCart, EntityNotFoundError, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Percent
from tests.fakes import (
    FakeCartRepository,
    FakeHeldCartRepository,
    FakeProductRepository,
    FakeSettingsProvider,
)

REGISTER = "R1"


def _setup():
    cart_repo = FakeCartRepository()
    held_repo = FakeHeldCartRepository()
    settings = FakeSettingsProvider()
    products = FakeProductRepository([
        Product(id="1", name="Widget", price=Money.of("10.00")),
        Product(id="2", name="Gadget", price=Money.of("5.00")),
    ])
    add = AddToCartHandler(cart_repo, products, settings)
    return cart_repo, held_repo, settings, add


class TestHold:

    def test_hold_parks_cart_and_empties_register(self):
        cart_repo, held_repo, _, add = _setup()
        add.handle(REGISTER, "1", 2)
        cart_repo.get(REGISTER).attach_customer("C7")

        held_id = HoldCartHandler(cart_repo, held_repo).handle(REGISTER, note="forgot wallet")

        assert cart_repo.get(REGISTER).is_empty
        held = held_repo.get_by_id(held_id)
        assert held.note == "forgot wallet"
        assert held.cart.customer_id == "C7"
        assert [(l.product_id, l.quantity.value) for l in held.cart.lines] == [("1", 2)]

    def test_hold_empty_cart_rejected(self):
        cart_repo, held_repo, _, _ = _setup()
        with pytest.raises(EmptyCart):
            HoldCartHandler(cart_repo, held_repo).handle(REGISTER)

    def test_list_held(self):
        cart_repo, held_repo, _, add = _setup()
        hold = HoldCartHandler(cart_repo, held_repo)
        add.handle(REGISTER, "1")
        hold.handle(REGISTER, note="first")
        add.handle(REGISTER, "1")
        add.handle(REGISTER, "2")
        hold.handle(REGISTER, note="second")

        listed = ListHeldCartsHandler(held_repo).handle(REGISTER)
        assert [(h.note, h.line_count) for h in listed] == [("first", 1), ("second", 2)]


class TestResume:

    def test_resume_restores_lines_and_prices(self):
        cart_repo, held_repo, settings, add = _setup()
        add.handle(REGISTER, "1", 3)
        held_id = HoldCartHandler(cart_repo, held_repo).handle(REGISTER)

        dto = ResumeHeldCartHandler(cart_repo, held_repo, settings).handle(REGISTER, held_id)

        assert [i.product_id for i in dto.items] == ["1"]
        assert dto.subtotal == "$30.00"
        assert held_repo.get_by_id(held_id) is None

    def test_resume_keeps_cart_discount(self):
        cart_repo, held_repo, settings, add = _setup()
        add.handle(REGISTER, "1", 3)
        cart_repo.get(REGISTER).set_cart_discount(Percent.of("5"))
        held_id = HoldCartHandler(cart_repo, held_repo).handle(REGISTER)
        assert cart_repo.get(REGISTER).cart_discount.is_zero

        dto = ResumeHeldCartHandler(cart_repo, held_repo, settings).handle(REGISTER, held_id)
        assert dto.cart_discount == "5%"
        assert dto.discount_amount == "$1.50"

    def test_resume_into_busy_register_rejected(self):
        cart_repo, held_repo, settings, add = _setup()
        add.handle(REGISTER, "1")
        held_id = HoldCartHandler(cart_repo, held_repo).handle(REGISTER)
        add.handle(REGISTER, "2")

        with pytest.raises(ValidationError, match="before resuming"):
            ResumeHeldCartHandler(cart_repo, held_repo, settings).handle(REGISTER, held_id)
        assert held_repo.get_by_id(held_id) is not None
        assert [l.product_id for l in cart_repo.get(REGISTER).lines] == ["2"]

    def test_resume_unknown(self):
        cart_repo, held_repo, settings, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ResumeHeldCartHandler(cart_repo, held_repo, settings).handle(REGISTER, 99)


class TestDiscard:

    def test_discard(self):
        cart_repo, held_repo, _, add = _setup()
        add.handle(REGISTER, "1")
        held_id = HoldCartHandler(cart_repo, held_repo).handle(REGISTER)
        DiscardHeldCartHandler(held_repo).handle(held_id)
        assert held_repo.get_by_id(held_id) is None

    def test_discard_unknown(self):
        _, held_repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            DiscardHeldCartHandler(held_repo).handle(5)
