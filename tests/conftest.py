"""
Pytest configuration and shared fixtures.
"""
import pytest
from decimal import Decimal

from cart_summary.config import Settings
from cart_summary.core.interfaces import ITaxCalculator
from cart_summary.domain.entities import Cart
from cart_summary.domain.value_objects import LineItem, TaxResult


TAX_SERVICE_URL = "https://some-tax-service.com/request"


class FakeTaxCalculator(ITaxCalculator):
    """
    In-memory tax calculator that records every call.

    Replies with a fixed amount, or raises `error` when one is set.
    """

    def __init__(self, amount="0", error: Exception = None):
        self.amount = Decimal(amount)
        self.error = error
        self.calls = []

    async def calculate(self, subtotal, jurisdiction):
        self.calls.append((subtotal, jurisdiction))
        if self.error is not None:
            raise self.error
        return TaxResult(self.amount)


@pytest.fixture
def settings(monkeypatch):
    """Settings with a known tax-rate service, independent of any .env file"""
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("TAX_SERVICE_URL", TAX_SERVICE_URL)
    monkeypatch.setenv("TAX_SERVICE_TIMEOUT", "5.0")
    monkeypatch.setenv("TAXABLE_JURISDICTIONS", "CA")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    return Settings()


@pytest.fixture
def sample_items():
    """Three lines adding up to 300"""
    return [
        {"id": 1, "quantity": 4, "price": 50},
        {"id": 2, "quantity": 2, "price": 30},
        {"id": 3, "quantity": 1, "price": 40},
    ]


@pytest.fixture
def sample_cart(sample_items):
    return Cart.from_dicts(sample_items)


@pytest.fixture
def empty_cart():
    return Cart([])


@pytest.fixture
def line_item():
    return LineItem(item_id="sku_1", quantity=2, price=Decimal("9.99"))
