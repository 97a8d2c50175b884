"""
Tests for CartSummaryService.

The tax calculator is replaced by FakeTaxCalculator, so these tests never
perform I/O.
"""
import pytest
from decimal import Decimal

from cart_summary.clients.tax_client import TaxCalculator, TaxServiceUnavailableError
from cart_summary.services.cart_summary_service import CartSummaryService
from cart_summary.utils.tax_service_simulator import TaxServiceSimulator
from tests.conftest import FakeTaxCalculator


@pytest.mark.asyncio
async def test_get_tax_resolves_with_tax_amount(sample_cart):
    """Test that get_tax() returns the calculator's amount"""
    calculator = FakeTaxCalculator(amount="30")
    service = CartSummaryService(calculator)

    tax = await service.get_tax(sample_cart, "NY")

    assert tax == Decimal("30")


@pytest.mark.asyncio
async def test_get_tax_passes_subtotal_and_jurisdiction(sample_cart):
    """Test that the calculator is called once with the subtotal and jurisdiction"""
    calculator = FakeTaxCalculator(amount="30")

    await CartSummaryService(calculator).get_tax(sample_cart, "NY")

    assert calculator.calls == [(Decimal("300"), "NY")]


@pytest.mark.asyncio
async def test_summarize_combines_subtotal_and_tax(sample_cart):
    calculator = FakeTaxCalculator(amount="24.75")

    summary = await CartSummaryService(calculator).summarize(sample_cart, "CA")

    assert summary.subtotal == Decimal("300")
    assert summary.tax == Decimal("24.75")
    assert summary.total == Decimal("324.75")
    assert summary.jurisdiction == "CA"
    assert len(calculator.calls) == 1


@pytest.mark.asyncio
async def test_summarize_empty_cart(empty_cart):
    calculator = FakeTaxCalculator()

    summary = await CartSummaryService(calculator).summarize(empty_cart, "CA")

    assert summary.total == 0
    assert calculator.calls == [(Decimal("0"), "CA")]


@pytest.mark.asyncio
async def test_tax_errors_propagate(sample_cart):
    calculator = FakeTaxCalculator(error=TaxServiceUnavailableError("down", status_code=503))

    with pytest.raises(TaxServiceUnavailableError) as exc_info:
        await CartSummaryService(calculator).summarize(sample_cart, "CA")

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_summarize_with_http_tax_calculator(sample_cart, settings):
    """Test the full path: cart -> TaxCalculator -> simulated tax service"""
    simulator = TaxServiceSimulator(rate="0.10")

    async with simulator.client() as http_client:
        service = CartSummaryService(TaxCalculator(http_client, settings))
        summary = await service.summarize(sample_cart, "CA")

    assert summary.tax == Decimal("30")
    assert summary.total == Decimal("330")
    assert simulator.last_payload() == {"subtotal": 300}


@pytest.mark.asyncio
async def test_summarize_normalises_jurisdiction(sample_cart):
    """Test that the summary carries the stripped, upper-cased code"""
    calculator = FakeTaxCalculator(amount="30")

    summary = await CartSummaryService(calculator).summarize(sample_cart, " ca ")

    assert summary.jurisdiction == "CA"
    assert len(calculator.calls) == 1
