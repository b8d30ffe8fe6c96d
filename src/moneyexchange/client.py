"""Rate provider client with mock support."""

import logging
import math
import re
import time
from abc import ABC, abstractmethod

import requests

from moneyexchange.exceptions import RateFormatError, RateUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0
MAX_BODY_BYTES = 64

_RATE_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_rate(body: str) -> float:
    """Parse a plain-text rate body, e.g. "0.92\\n" -> 0.92.

    Only plain ASCII decimals are accepted ("0_92", "nan" and "inf" are not).
    Raises ValueError for anything that is not a finite, positive number.
    """
    text = body.strip()
    if not _RATE_PATTERN.fullmatch(text):
        raise ValueError(f"not a decimal number: {body!r}")
    rate = float(text)
    if not math.isfinite(rate) or rate <= 0:
        raise ValueError(f"not a usable rate: {body!r}")
    return rate


class RateClient(ABC):
    """Abstract interface for fetching a single EUR rate."""

    @abstractmethod
    def fetch_rate(self, currency_code: str) -> float:
        """Fetch the EUR rate for one unit of currency_code.

        Raises:
            RateFormatError: the provider answered, but not with a rate.
            RateUnavailableError: the provider could not be reached in time.
        """


class HttpRateClient(RateClient):
    """Plain-text rate provider reached at {base_url}/currencies/{code}.

    One GET per call, no retries. Stateless apart from the base URL and timeout.
    The timeout is a deadline for the whole call, body included: a provider
    that trickles its answer is cut off once the deadline passes, and bodies
    longer than MAX_BODY_BYTES are rejected without being read in full.
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def rate_url(self, currency_code: str) -> str:
        return f"{self._base_url}/currencies/{currency_code}"

    def fetch_rate(self, currency_code: str) -> float:
        url = self.rate_url(currency_code)
        logger.debug("GET %s (timeout %.1fs)", url, self._timeout)
        deadline = time.monotonic() + self._timeout

        try:
            resp = requests.get(
                url, headers={"Accept": "text/plain"}, timeout=self._timeout, stream=True
            )
        except requests.Timeout as e:
            raise RateUnavailableError(
                f"Rate provider timed out after {self._timeout}s: {url}", currency_code
            ) from e
        except requests.RequestException as e:
            raise RateUnavailableError(f"Rate provider unreachable: {e}", currency_code) from e

        try:
            if resp.status_code != requests.codes.ok:
                raise RateFormatError(
                    f"Rate provider returned HTTP {resp.status_code} for {url}", currency_code
                )
            body = self._read_body(resp, url, currency_code, deadline)
        finally:
            resp.close()

        try:
            return parse_rate(body.decode("ascii"))
        except ValueError as e:
            raise RateFormatError(f"Malformed rate for {currency_code}: {e}", currency_code) from e

    def _read_body(
        self, resp: requests.Response, url: str, currency_code: str, deadline: float
    ) -> bytes:
        body = bytearray()
        try:
            for chunk in resp.iter_content(chunk_size=1):
                if time.monotonic() > deadline:
                    raise RateUnavailableError(
                        f"Rate provider timed out after {self._timeout}s: {url}", currency_code
                    )
                body += chunk
                if len(body) > MAX_BODY_BYTES:
                    raise RateFormatError(
                        f"Rate body for {currency_code} exceeds {MAX_BODY_BYTES} bytes",
                        currency_code,
                    )
        except requests.RequestException as e:
            raise RateUnavailableError(
                f"Rate provider failed mid-response: {e}", currency_code
            ) from e
        return bytes(body)


class MockRateClient(RateClient):
    """Mock client returning fixed rates for testing."""

    MOCK_RATES = {
        "USD": 0.92,
        "GBP": 1.17,
        "CHF": 1.05,
        "EUR": 1.0,
    }

    def fetch_rate(self, currency_code: str) -> float:
        try:
            return self.MOCK_RATES[currency_code.upper()]
        except KeyError:
            raise RateFormatError(f"No mock rate for {currency_code}", currency_code) from None
