"""CLI entry point for EUR conversion.

Usage:
    python -m scripts.convert 100 USD --base-url http://localhost:8080 [--timeout 2.0] [--mock]
"""

import argparse
import logging
import os
import sys

from moneyexchange import DEFAULT_TIMEOUT, create_calculator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert an amount to EUR")
    parser.add_argument("amount", type=float, help="Amount to convert")
    parser.add_argument("currency", help="Source currency code (e.g. USD)")
    parser.add_argument(
        "--base-url",
        default=os.environ.get("RATES_API_URL"),
        help="Rate provider base URL (default: $RATES_API_URL)",
    )
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds"
    )
    parser.add_argument("--mock", action="store_true", help="Use mock rates (for testing)")
    args = parser.parse_args(argv)

    if not args.mock and not args.base_url:
        logger.error("RATES_API_URL not set. Pass --base-url or use --mock for testing.")
        return 1

    calculator = create_calculator(args.base_url, timeout=args.timeout, mock=args.mock)
    try:
        result = calculator.convert_to_euro(args.amount, args.currency)
    except ValueError as e:
        logger.error("Invalid conversion request: %s", e)
        return 1

    print(result.body)
    logger.info("Status: %d %s", result.status, result.status.phrase)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
