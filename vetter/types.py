"""
Type definitions for vetter.

Provides the result model (ValidationResult / ValidationError), the closed set
of error kinds, and the currency format descriptors used by the currency
validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, Iterable, Mapping, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Machine-checkable error codes attached to every ValidationError."""

    REQUIRED = "REQUIRED"
    INVALID_TYPE = "INVALID_TYPE"
    MIN_LENGTH = "MIN_LENGTH"
    MAX_LENGTH = "MAX_LENGTH"
    MIN_VALUE = "MIN_VALUE"
    MAX_VALUE = "MAX_VALUE"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    MIN_DATE = "MIN_DATE"
    MAX_DATE = "MAX_DATE"
    NOT_INTEGER = "NOT_INTEGER"
    UNION_MISMATCH = "UNION_MISMATCH"
    LITERAL_MISMATCH = "LITERAL_MISMATCH"
    MISSING_FORMAT = "MISSING_FORMAT"
    INVALID_CURRENCY_FORMAT = "INVALID_CURRENCY_FORMAT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    MIN_AMOUNT = "MIN_AMOUNT"
    MAX_AMOUNT = "MAX_AMOUNT"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    A single failed check.

    `path` addresses the failing field ("user.address.city", "[1].email");
    it is empty for errors at the root. `details` is only filled in by union
    validators: one tuple of errors per alternative, in declaration order.
    """

    path: str
    message: str
    code: ErrorKind
    details: tuple[tuple[ValidationError, ...], ...] = ()

    def __str__(self) -> str:
        where = self.path or "<root>"
        return f"{where}: {self.message} ({self.code.value})"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "path": self.path,
            "message": self.message,
            "code": self.code.value,
        }
        if self.details:
            out["details"] = [[e.to_dict() for e in group] for group in self.details]
        return out


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[T]):
    """
    Outcome of a validate() call.

    `success` is True iff `errors` is empty. `data` holds the validated value
    on success and is None otherwise; None on success means the value was
    absent and allowed to be (optional field).
    """

    success: bool
    data: T | None = None
    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def ok(cls, data: T | None = None) -> ValidationResult[T]:
        return cls(success=True, data=data, errors=())

    @classmethod
    def fail(cls, errors: Iterable[ValidationError]) -> ValidationResult[T]:
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed result needs at least one error")
        return cls(success=False, data=None, errors=errors)

    @classmethod
    def from_errors(
        cls, errors: Iterable[ValidationError], data: T | None = None
    ) -> ValidationResult[T]:
        """Succeed with `data` when `errors` is empty, fail otherwise."""
        errors = tuple(errors)
        if errors:
            return cls(success=False, data=None, errors=errors)
        return cls(success=True, data=data, errors=())

    def is_ok(self) -> bool:
        return self.success

    def is_err(self) -> bool:
        return not self.success

    def __bool__(self) -> bool:
        return self.success

    def raise_if_errors(self) -> None:
        """Raise SchemaValidationError if validation failed."""
        if not self.success:
            from .errors import SchemaValidationError

            raise SchemaValidationError(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "data": self.data,
            "errors": [e.to_dict() for e in self.errors],
        }


# =============================================================================
# Currency
# =============================================================================


@dataclass(frozen=True, slots=True)
class CurrencyFormat:
    """Textual grammar of one currency: marker placement and separators."""

    symbol: str
    code: str
    symbol_placement: str = "before"
    decimal_separator: str = "."
    thousands_separator: str = ","
    decimal_places: int = 2

    def __post_init__(self) -> None:
        if self.symbol_placement not in ("before", "after"):
            raise ValueError(
                f"symbol_placement must be 'before' or 'after', got {self.symbol_placement!r}"
            )
        if self.decimal_separator not in (".", ","):
            raise ValueError(
                f"decimal_separator must be '.' or ',', got {self.decimal_separator!r}"
            )
        if self.thousands_separator not in (",", ".", " ", ""):
            raise ValueError(
                f"Unsupported thousands_separator: {self.thousands_separator!r}"
            )


@dataclass(frozen=True, slots=True)
class CurrencyValue:
    """A parsed currency string."""

    amount: float
    currency: str
    original_string: str


CURRENCY_FORMATS: Mapping[str, CurrencyFormat] = MappingProxyType(
    {
        "USD": CurrencyFormat(
            symbol="$",
            code="USD",
            symbol_placement="before",
            decimal_separator=".",
            thousands_separator=",",
        ),
        "GBP": CurrencyFormat(
            symbol="£",
            code="GBP",
            symbol_placement="before",
            decimal_separator=".",
            thousands_separator=",",
        ),
        "EUR": CurrencyFormat(
            symbol="€",
            code="EUR",
            symbol_placement="before",
            decimal_separator=",",
            thousands_separator=".",
        ),
        "RUB": CurrencyFormat(
            symbol="₽",
            code="RUB",
            symbol_placement="after",
            decimal_separator=".",
            thousands_separator=" ",
        ),
    }
)


# Type aliases
Path = str
