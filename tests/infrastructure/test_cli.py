"""End-to-end tests for the ``pos`` CLI against JSON files in tmp_path."""

import json

import pytest
from click.testing import CliRunner

from pos.domain.model.value_objects import Money
from pos.infrastructure import bootstrap
from pos.infrastructure.cli import main
from pos.infrastructure.persistence.json_cart_repository import JsonCartRepository
from pos.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("POS_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("POS_REGISTER_ID", "R1")
    monkeypatch.setenv("POS_BRANCH_ID", "B1")
    # leave structlog's global configuration alone
    monkeypatch.setattr(main, "configure_logging", lambda settings: None)
    bootstrap.settings.cache_clear()
    yield tmp_path / "data"
    bootstrap.settings.cache_clear()


def _pos(*args: str):
    return CliRunner().invoke(main.cli, list(args))


def _ok(*args: str):
    result = _pos(*args)
    assert result.exit_code == 0, result.output
    return result


def _ring_up_widgets(qty: str = "3") -> None:
    _ok("product", "add", "--name", "Widget", "--price", "10.00", "--sku", "W-100")
    _ok("cart", "add", "--product", "W-100", "--qty", qty)


class TestCheckoutCommand:

    def test_committed_sale_leaves_register_cart_empty(self, data_dir):
        _ring_up_widgets()
        _ok("checkout", "--method", "cash", "--paid", "50.00")

        assert JsonCartRepository(data_dir / "carts.json").get("R1").is_empty
        record = JsonTransactionRepository(data_dir / "transactions.json").get_by_id(1)
        assert record.total == Money.of("33.00")
        assert record.change_amount == Money.of("17.00")

    def test_rejected_sale_keeps_cart(self, data_dir):
        _ring_up_widgets()
        result = _pos("checkout", "--method", "card", "--paid", "20.00")

        assert result.exit_code != 0
        assert "less than total" in result.output
        cart = JsonCartRepository(data_dir / "carts.json").get("R1")
        assert [(l.product_id, l.quantity.value) for l in cart.lines] == [("1", 3)]

    def test_sub_cent_tender_rejected(self, data_dir):
        _ring_up_widgets()
        result = _pos("checkout", "--method", "cash", "--paid", "40.755")
        assert result.exit_code != 0
        assert "more than 2 decimal places" in result.output

    def test_store_wide_promotion_reaches_checkout(self, data_dir):
        (data_dir / "promotions.json").parent.mkdir(parents=True, exist_ok=True)
        (data_dir / "promotions.json").write_text(json.dumps([
            {"type": "percentage", "name": "Store-wide", "value": "5"},
        ]), encoding="utf-8")
        _ring_up_widgets()

        _ok("cart", "promote")
        _ok("checkout", "--method", "cash", "--paid", "50.00")

        # 30.00 less 5% = 28.50, plus 10% tax
        record = JsonTransactionRepository(data_dir / "transactions.json").get_by_id(1)
        assert record.discount_amount == Money.of("1.50")
        assert record.tax_amount == Money.of("2.85")
        assert record.total == Money.of("31.35")
