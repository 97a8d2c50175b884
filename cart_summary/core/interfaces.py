"""
Core interfaces for cart summary calculation.

CartSummaryService depends on ITaxCalculator rather than on the HTTP-backed
TaxCalculator, so cart-level code can be exercised with an in-memory fake.
"""
from abc import ABC, abstractmethod
from decimal import Decimal

from cart_summary.domain.value_objects import TaxResult


class ITaxCalculator(ABC):
    """
    Interface for tax lookups.

    Implementations must:
    - Return TaxResult.zero() for non-taxable jurisdictions without any I/O
    - Resolve exactly once per call (return a result or raise)
    - Keep no mutable state shared between calls
    """

    @abstractmethod
    async def calculate(self, subtotal: Decimal, jurisdiction: str) -> TaxResult:
        """
        Calculate tax for a subtotal in a jurisdiction.

        Args:
            subtotal: Cart subtotal before tax
            jurisdiction: Jurisdiction code (e.g. state abbreviation "CA")

        Returns:
            TaxResult with the tax amount

        Raises:
            TaxServiceError: If a remote lookup was needed and failed
        """
        pass
