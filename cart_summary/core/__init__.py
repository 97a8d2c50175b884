"""Core module containing interfaces."""

from cart_summary.core.interfaces import ITaxCalculator

__all__ = ["ITaxCalculator"]
