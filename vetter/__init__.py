"""
Vetter - fluent schema validation for runtime data.

Usage:
    from vetter import Schema

    user = Schema.object({
        "name": Schema.string().min_length(2),
        "email": Schema.string().email(),
        "balance": Schema.currency().usd().allow_negative_amounts(),
        "born": Schema.date().ddmmyyyy("/").past().optional(),
    })

    result = user.validate(data)
    if not result.success:
        for error in result.errors:
            print(error.path, error.code, error.message)
"""

from .combinators import LiteralValidator, UnionValidator
from .containers import ArrayValidator, ObjectValidator
from .core import Validator, to_validator
from .currency import CurrencyValidator, parse_currency
from .dates import DateValidator
from .errors import SchemaValidationError
from .schema import Schema, to_pydantic
from .types import (
    CURRENCY_FORMATS,
    CurrencyFormat,
    CurrencyValue,
    ErrorKind,
    ValidationError,
    ValidationResult,
)
from .validators import BooleanValidator, NumberValidator, StringValidator

__all__ = [
    # Builder
    "Schema",
    "to_validator",
    "to_pydantic",
    # Result types
    "ValidationResult",
    "ValidationError",
    "ErrorKind",
    "SchemaValidationError",
    # Currency
    "CurrencyFormat",
    "CurrencyValue",
    "CURRENCY_FORMATS",
    "parse_currency",
    # Validators
    "Validator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "DateValidator",
    "CurrencyValidator",
    "ArrayValidator",
    "ObjectValidator",
    "LiteralValidator",
    "UnionValidator",
]
