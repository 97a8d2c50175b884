"""Tax-rate service clients"""
from cart_summary.clients.tax_client import (
    InvalidTaxResponseError,
    TaxCalculator,
    TaxServiceError,
    TaxServiceResponse,
    TaxServiceUnavailableError,
)

__all__ = [
    "TaxCalculator",
    "TaxServiceResponse",
    "TaxServiceError",
    "TaxServiceUnavailableError",
    "InvalidTaxResponseError",
]
