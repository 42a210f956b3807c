"""
Currency validator for vetter.

Parses locale-formatted amounts such as "$1,234.56", "€1.234,56" or
"1 234.56 ₽" into CurrencyValue records and checks them against amount
constraints.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from .core import Validator
from .types import (
    CURRENCY_FORMATS,
    CurrencyFormat,
    CurrencyValue,
    ErrorKind,
    Path,
    ValidationError,
    ValidationResult,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_DECIMAL_TAIL = re.compile(r"^[0-9]{1,2}$")
_PLAIN_AMOUNT = re.compile(r"^([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def parse_amount(text: str, fmt: CurrencyFormat) -> float:
    """
    Parse the numeric part of a currency string.

    Raises:
        ValueError: if the text is not a number in the format's notation
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    if fmt.thousands_separator:
        text = text.replace(fmt.thousands_separator, "")

    if fmt.decimal_separator == ",":
        # Only a last comma followed by 1-2 digits is a decimal comma
        idx = text.rfind(",")
        if idx != -1 and _DECIMAL_TAIL.match(text[idx + 1 :]):
            text = f"{text[:idx]}.{text[idx + 1:]}"

    if not _PLAIN_AMOUNT.match(text):
        raise ValueError("Invalid numeric format")

    amount = float(text)
    if not math.isfinite(amount):
        raise ValueError("Invalid numeric format")
    return -amount if negative else amount


def parse_currency(raw: str, fmt: CurrencyFormat) -> CurrencyValue:
    """
    Parse a currency string in the given format.

    The amount must carry the format's symbol glued to it ("$5", "5₽") or its
    code separated by one space ("USD 5", "5 RUB"), on the side given by
    symbol_placement.

    Raises:
        ValueError: with a message describing what is wrong
    """
    text = _WHITESPACE.sub(" ", raw).strip()

    if fmt.symbol_placement == "before":
        if text.startswith(fmt.symbol):
            marker = fmt.symbol
            numeric = text[len(fmt.symbol) :].strip()
        elif text.startswith(fmt.code + " "):
            marker = fmt.code
            numeric = text[len(fmt.code) + 1 :].strip()
        else:
            raise ValueError(f"Currency must start with {fmt.symbol} or {fmt.code}")
    else:
        if text.endswith(fmt.symbol):
            marker = fmt.symbol
            numeric = text[: len(text) - len(fmt.symbol)].strip()
        elif text.endswith(" " + fmt.code):
            marker = fmt.code
            numeric = text[: len(text) - len(fmt.code) - 1].strip()
        else:
            raise ValueError(f"Currency must end with {fmt.symbol} or {fmt.code}")

    amount = parse_amount(numeric, fmt)
    return CurrencyValue(amount=amount, currency=marker, original_string=raw)


class CurrencyValidator(Validator[CurrencyValue]):
    """
    Validate currency strings.

    A format must be selected before validating, otherwise every value fails
    with MISSING_FORMAT. Negative amounts are rejected unless
    allow_negative_amounts() is called.

    Usage:
        Schema.currency().usd().range(0, 1000)
        Schema.currency().eur().positive()
        Schema.currency().currency("zł", "PLN", symbol_placement="after", thousands_separator=" ")
    """

    def __init__(self) -> None:
        super().__init__()
        self.currency_format: CurrencyFormat | None = None
        self.min_amount: float | None = None
        self.max_amount: float | None = None
        self.allow_negative: bool = False

    def _check(self, value: Any, path: Path) -> ValidationResult[CurrencyValue]:
        if not isinstance(value, str):
            return self._fail(path, "Expected currency string", ErrorKind.INVALID_TYPE)

        fmt = self.currency_format
        if fmt is None:
            return self._fail(path, "Currency format not specified", ErrorKind.MISSING_FORMAT)

        try:
            parsed = parse_currency(value, fmt)
        except ValueError as e:
            logger.debug("Rejected %s amount at %r: %s", fmt.code, path, e)
            return self._fail(path, str(e), ErrorKind.INVALID_CURRENCY_FORMAT)

        errors: list[ValidationError] = []
        amount = parsed.amount

        if not self.allow_negative and amount < 0:
            errors.append(
                self._error(path, "Currency amount cannot be negative", ErrorKind.NEGATIVE_AMOUNT)
            )
        if self.min_amount is not None and amount < self.min_amount:
            errors.append(
                self._error(
                    path,
                    f"Amount must be at least {fmt.symbol}{self.min_amount}",
                    ErrorKind.MIN_AMOUNT,
                )
            )
        if self.max_amount is not None and amount > self.max_amount:
            errors.append(
                self._error(
                    path,
                    f"Amount must be at most {fmt.symbol}{self.max_amount}",
                    ErrorKind.MAX_AMOUNT,
                )
            )

        return ValidationResult.from_errors(errors, parsed)

    # -- formats --------------------------------------------------------------

    def usd(self) -> CurrencyValidator:
        self.currency_format = CURRENCY_FORMATS["USD"]
        return self

    def gbp(self) -> CurrencyValidator:
        self.currency_format = CURRENCY_FORMATS["GBP"]
        return self

    def eur(self) -> CurrencyValidator:
        self.currency_format = CURRENCY_FORMATS["EUR"]
        return self

    def rub(self) -> CurrencyValidator:
        self.currency_format = CURRENCY_FORMATS["RUB"]
        return self

    def currency(
        self,
        symbol: str,
        code: str,
        *,
        symbol_placement: str = "before",
        decimal_separator: str = ".",
        thousands_separator: str = ",",
        decimal_places: int = 2,
    ) -> CurrencyValidator:
        """
        Use a custom format.

        Raises:
            ValueError: for an unknown placement or separator
        """
        self.currency_format = CurrencyFormat(
            symbol=symbol,
            code=code,
            symbol_placement=symbol_placement,
            decimal_separator=decimal_separator,
            thousands_separator=thousands_separator,
            decimal_places=decimal_places,
        )
        return self

    # -- amounts --------------------------------------------------------------

    def min(self, amount: float) -> CurrencyValidator:
        self.min_amount = amount
        return self

    def max(self, amount: float) -> CurrencyValidator:
        self.max_amount = amount
        return self

    def range(self, min_amount: float, max_amount: float) -> CurrencyValidator:
        self.min_amount = min_amount
        self.max_amount = max_amount
        return self

    def positive(self) -> CurrencyValidator:
        """Require amount >= 0."""
        self.min_amount = 0
        return self

    def allow_negative_amounts(self) -> CurrencyValidator:
        self.allow_negative = True
        return self
