"""Cart subtotal and tax summary library."""
from cart_summary.version import __version__

__all__ = ["__version__"]
