"""Rate provider failures."""


class RateProviderError(Exception):
    """Base exception for all rate provider errors."""

    def __init__(self, message: str, currency_code: str | None = None):
        self.message = message
        self.currency_code = currency_code
        super().__init__(self.message)


class RateFormatError(RateProviderError):
    """Raised when the provider answers with something that is not a rate."""


class RateUnavailableError(RateProviderError):
    """Raised when the provider cannot be reached or does not answer in time."""
