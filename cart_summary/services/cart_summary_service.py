"""
Cart summary service.

Combines a cart's subtotal with the tax for a jurisdiction to produce the
grand total shown at checkout.
"""
import logging
from decimal import Decimal

from cart_summary.core.interfaces import ITaxCalculator
from cart_summary.domain.entities import Cart, CartSummary


logger = logging.getLogger(__name__)


class CartSummaryService:
    """
    Service for summarising carts.

    Usage:
        service = CartSummaryService(tax_calculator)
        summary = await service.summarize(cart, "CA")
        print(summary.total)
    """

    def __init__(self, tax_calculator: ITaxCalculator):
        self.tax_calculator = tax_calculator

    async def get_tax(self, cart: Cart, jurisdiction: str) -> Decimal:
        """
        Get the tax owed on a cart.

        Makes exactly one call to the tax calculator with the cart subtotal.

        Raises:
            TaxServiceError: Propagated unchanged from the tax calculator
        """
        tax_result = await self.tax_calculator.calculate(cart.get_subtotal(), jurisdiction)
        return tax_result.amount

    async def summarize(self, cart: Cart, jurisdiction: str) -> CartSummary:
        """Compute subtotal, tax and total for a cart."""
        summary = CartSummary(
            subtotal=cart.get_subtotal(),
            tax=await self.get_tax(cart, jurisdiction),
            jurisdiction=(jurisdiction or "").strip().upper()
        )
        logger.info(
            f"Cart summarized - items: {len(cart)}, jurisdiction: {summary.jurisdiction}, "
            f"subtotal: {summary.subtotal}, tax: {summary.tax}, total: {summary.total}"
        )
        return summary
