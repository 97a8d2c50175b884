#!/usr/bin/env python3
"""
CLI tool to print a cart's subtotal, tax and total.

Usage:
    python -m cart_summary.cli.summarize_cart CART_JSON --jurisdiction CA
    python -m cart_summary.cli.summarize_cart CART_JSON --jurisdiction NY --json

CART_JSON is a file holding a list of line items:
    [{"id": 1, "quantity": 4, "price": 50}, {"id": 2, "quantity": 2, "price": 30}]

Examples:
    # Taxable jurisdiction - asks the tax-rate service
    python -m cart_summary.cli.summarize_cart cart.json --jurisdiction CA

    # Point at a different tax-rate service
    python -m cart_summary.cli.summarize_cart cart.json --jurisdiction CA --tax-url http://localhost:9000/request
"""
import asyncio
import copy
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import httpx

from cart_summary.clients.tax_client import TaxCalculator, TaxServiceError
from cart_summary.config import Settings, settings as default_settings
from cart_summary.domain.entities import Cart, CartSummary, DomainError
from cart_summary.services.cart_summary_service import CartSummaryService
from cart_summary.version import __version__

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_cart(cart_path: Path) -> Cart:
    """
    Read a JSON cart file.

    Raises:
        DomainError: If the file is not a JSON list of valid line items
        OSError: If the file can't be read
    """
    try:
        entries = json.loads(cart_path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DomainError(f"{cart_path} is not valid JSON: {e}") from e

    if not isinstance(entries, list):
        raise DomainError(f"{cart_path} must contain a JSON list of line items")

    return Cart.from_dicts(entries)


def print_summary(summary: CartSummary, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(summary.to_dict(), indent=2))
        return

    print("\n" + "="*40)
    print(f"Cart summary ({summary.jurisdiction})")
    print("="*40)
    print(f"  • Subtotal: {summary.subtotal}")
    print(f"  • Tax:      {summary.tax}")
    print(f"  • Total:    {summary.total}")
    print("="*40)


async def summarize_cart(
    cart_path: Path,
    jurisdiction: str,
    settings: Settings,
    as_json: bool = False,
    http_client: Optional[httpx.AsyncClient] = None
) -> int:
    """
    Load a cart, look up its tax and print the summary.

    Args:
        cart_path: Path of the JSON cart file
        jurisdiction: Jurisdiction code, e.g. "CA"
        settings: Settings holding the tax-rate service configuration
        as_json: Print a JSON object instead of the table
        http_client: Client to reuse (a new one is created and closed otherwise)

    Returns:
        Process exit code
    """
    try:
        cart = load_cart(cart_path)
    except (DomainError, OSError) as e:
        print(f"❌ Error reading cart: {e}", file=sys.stderr)
        return EXIT_FAILURE

    owns_client = http_client is None
    if owns_client:
        http_client = httpx.AsyncClient()

    try:
        service = CartSummaryService(TaxCalculator(http_client, settings))
        summary = await service.summarize(cart, jurisdiction)
    except TaxServiceError as e:
        print(f"❌ Error calculating tax: {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        if owns_client:
            await http_client.aclose()

    print_summary(summary, as_json=as_json)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Print subtotal, tax and total for a cart',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Taxable jurisdiction - asks the tax-rate service
  %(prog)s cart.json --jurisdiction CA

  # Non-taxable jurisdiction - no request is made
  %(prog)s cart.json --jurisdiction NY --json
        """
    )

    parser.add_argument(
        'cart',
        type=Path,
        help='JSON file with a list of {"id", "quantity", "price"} items'
    )

    parser.add_argument(
        '--jurisdiction', '-j',
        required=True,
        help='Jurisdiction code, e.g. CA'
    )

    parser.add_argument(
        '--tax-url',
        help='Tax-rate service endpoint (default: TAX_SERVICE_URL)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        dest='as_json',
        help='Print the summary as JSON'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[list] = None, settings: Settings = default_settings) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(settings.log_level)

    if args.tax_url:
        settings = copy.copy(settings)
        settings.tax_service_url = args.tax_url

    return asyncio.run(summarize_cart(
        cart_path=args.cart,
        jurisdiction=args.jurisdiction,
        settings=settings,
        as_json=args.as_json
    ))


if __name__ == '__main__':
    sys.exit(main())
