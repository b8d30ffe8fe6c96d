"""Money exchange: rate-provider client and EUR conversion."""

from moneyexchange.calculator import ExchangeCalculator
from moneyexchange.client import DEFAULT_TIMEOUT, HttpRateClient, MockRateClient, RateClient
from moneyexchange.exceptions import RateFormatError, RateProviderError, RateUnavailableError
from moneyexchange.types import ConversionRequest, ConversionResult


def create_calculator(
    base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT, mock: bool = False
) -> ExchangeCalculator:
    """Create an ExchangeCalculator.

    With mock=True the calculator answers from MockRateClient and base_url is
    ignored. Otherwise base_url is required.
    """
    if mock:
        return ExchangeCalculator(client=MockRateClient())
    if not base_url:
        raise ValueError("A rate provider base URL is required unless mock=True")
    return ExchangeCalculator(base_url, timeout=timeout)


__all__ = [
    "DEFAULT_TIMEOUT",
    "ExchangeCalculator",
    "RateClient",
    "HttpRateClient",
    "MockRateClient",
    "RateProviderError",
    "RateFormatError",
    "RateUnavailableError",
    "ConversionRequest",
    "ConversionResult",
    "create_calculator",
]
