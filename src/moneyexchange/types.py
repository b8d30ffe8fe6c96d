"""Request and result types for conversions."""

import math
from dataclasses import dataclass
from http import HTTPStatus


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    currency_code: str

    def __post_init__(self):
        amount = float(self.amount)
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"Amount must be a positive number, got {self.amount!r}")
        code = str(self.currency_code).strip().upper()
        if len(code) != 3 or not (code.isascii() and code.isalpha()):
            raise ValueError(f"Currency code must be 3 letters, got {self.currency_code!r}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency_code", code)


@dataclass(frozen=True)
class ConversionResult:
    status: HTTPStatus
    body: str

    @property
    def ok(self) -> bool:
        return self.status == HTTPStatus.OK
