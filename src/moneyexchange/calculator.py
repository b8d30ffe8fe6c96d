"""EUR conversion on top of a rate provider."""

import logging
from http import HTTPStatus

from moneyexchange.client import DEFAULT_TIMEOUT, HttpRateClient, RateClient
from moneyexchange.exceptions import RateFormatError, RateUnavailableError
from moneyexchange.types import ConversionRequest, ConversionResult

logger = logging.getLogger(__name__)

SUCCESS_TEMPLATE = "Exchanging {amount} {currency} at a rate of {rate} will give you {result} EUR"
SERVER_ERROR_BODY = "Ooops! There was an error on our side!"
GATEWAY_TIMEOUT_BODY = "The rate provider did not answer in time."


class ExchangeCalculator:
    """Converts an amount in some currency to EUR.

    Each conversion makes exactly one rate lookup and yields exactly one
    ConversionResult. Upstream failures never propagate to the caller:
    malformed answers become 500, unreachable or slow providers become 504.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: RateClient | None = None,
    ):
        if client is None:
            if not base_url:
                raise ValueError("Either base_url or client is required")
            client = HttpRateClient(base_url, timeout=timeout)
        self._client = client

    def convert_to_euro(self, amount: float, currency_code: str) -> ConversionResult:
        request = ConversionRequest(amount, currency_code)

        try:
            rate = self._client.fetch_rate(request.currency_code)
        except RateFormatError as e:
            logger.warning("Conversion of %s failed: %s", request.currency_code, e)
            return ConversionResult(HTTPStatus.INTERNAL_SERVER_ERROR, SERVER_ERROR_BODY)
        except RateUnavailableError as e:
            logger.warning("Conversion of %s failed: %s", request.currency_code, e)
            return ConversionResult(HTTPStatus.GATEWAY_TIMEOUT, GATEWAY_TIMEOUT_BODY)

        result = request.amount * rate
        return ConversionResult(
            HTTPStatus.OK,
            SUCCESS_TEMPLATE.format(
                amount=request.amount,
                currency=request.currency_code,
                rate=rate,
                result=result,
            ),
        )

    to_euro = convert_to_euro
