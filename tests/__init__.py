"""
Tests for the cart summary library

Tests are organized by functionality:
- test_value_objects.py: LineItem, TaxRequest and TaxResult validation
- test_cart.py: Cart subtotal rules
- test_tax_client.py: TaxCalculator against a simulated tax-rate service
- test_cart_summary_service.py: Cart tax and totals with a fake calculator
- test_config.py: Settings loaded from environment variables
- test_summarize_cart_cli.py: Command line tool
"""
