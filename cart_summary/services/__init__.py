"""
Services package for business logic.
"""
from cart_summary.services.cart_summary_service import CartSummaryService

__all__ = ['CartSummaryService']
