"""
Scalar validators for vetter: strings, numbers and booleans.

Each constraint is checked independently; every failing constraint is
reported, not just the first.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .core import Validator
from .types import ErrorKind, Path, ValidationError, ValidationResult

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")
URL_PATTERN = re.compile(r"^https?://.+")


def check_length(length: int) -> int:
    if length < 0:
        raise ValueError(f"Length must be >= 0, got {length}")
    return length


def is_number(value: Any) -> bool:
    """True for int and float values; bool does not count as a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class StringValidator(Validator[str]):
    """
    Validate str values.

    Usage:
        Schema.string().min_length(2).max_length(50)
        Schema.string().pattern(r"^\\d{5}$")
        Schema.string().email()
    """

    def __init__(self) -> None:
        super().__init__()
        self.min_length_value: int | None = None
        self.max_length_value: int | None = None
        self.regex: re.Pattern[str] | None = None

    def _check(self, value: Any, path: Path) -> ValidationResult[str]:
        if not isinstance(value, str):
            return self._fail(path, "Expected string", ErrorKind.INVALID_TYPE)

        errors: list[ValidationError] = []

        if self.min_length_value is not None and len(value) < self.min_length_value:
            errors.append(
                self._error(
                    path,
                    f"String must be at least {self.min_length_value} characters",
                    ErrorKind.MIN_LENGTH,
                )
            )
        if self.max_length_value is not None and len(value) > self.max_length_value:
            errors.append(
                self._error(
                    path,
                    f"String must be at most {self.max_length_value} characters",
                    ErrorKind.MAX_LENGTH,
                )
            )
        if self.regex is not None and self.regex.search(value) is None:
            errors.append(
                self._error(
                    path,
                    "String does not match required pattern",
                    ErrorKind.PATTERN_MISMATCH,
                )
            )

        return ValidationResult.from_errors(errors, value)

    def min_length(self, length: int) -> StringValidator:
        self.min_length_value = check_length(length)
        return self

    def max_length(self, length: int) -> StringValidator:
        self.max_length_value = check_length(length)
        return self

    def pattern(self, regex: str | re.Pattern[str]) -> StringValidator:
        """Require a match of `regex` (searched, so anchor it with ^...$)."""
        self.regex = re.compile(regex) if isinstance(regex, str) else regex
        return self

    def email(self) -> StringValidator:
        """Require local-part@domain.tld."""
        self.regex = EMAIL_PATTERN
        self.custom_message = self.custom_message or "Invalid email format"
        return self

    def url(self) -> StringValidator:
        """Require an http:// or https:// URL."""
        self.regex = URL_PATTERN
        self.custom_message = self.custom_message or "Invalid URL format"
        return self


class NumberValidator(Validator[float]):
    """
    Validate int and float values (bool and NaN are rejected).

    Usage:
        Schema.number().min(0).max(150)
        Schema.number().integer().positive()
    """

    def __init__(self) -> None:
        super().__init__()
        self.min_value: float | None = None
        self.max_value: float | None = None
        self.require_integer: bool = False

    def _check(self, value: Any, path: Path) -> ValidationResult[float]:
        if not is_number(value) or (isinstance(value, float) and math.isnan(value)):
            return self._fail(path, "Expected number", ErrorKind.INVALID_TYPE)

        errors: list[ValidationError] = []

        if self.min_value is not None and value < self.min_value:
            errors.append(
                self._error(path, f"Number must be at least {self.min_value}", ErrorKind.MIN_VALUE)
            )
        if self.max_value is not None and value > self.max_value:
            errors.append(
                self._error(path, f"Number must be at most {self.max_value}", ErrorKind.MAX_VALUE)
            )
        if self.require_integer and isinstance(value, float) and not value.is_integer():
            errors.append(
                self._error(path, "Number must be an integer", ErrorKind.NOT_INTEGER)
            )

        return ValidationResult.from_errors(errors, value)

    def min(self, value: float) -> NumberValidator:
        self.min_value = value
        return self

    def max(self, value: float) -> NumberValidator:
        self.max_value = value
        return self

    def integer(self) -> NumberValidator:
        """Require a whole number (3 and 3.0 pass, 3.5 does not)."""
        self.require_integer = True
        return self

    def positive(self) -> NumberValidator:
        """Require value >= 0."""
        self.min_value = 0
        return self

    def negative(self) -> NumberValidator:
        """Require value <= 0."""
        self.max_value = 0
        return self


class BooleanValidator(Validator[bool]):
    """Validate bool values; truthy ints and strings are rejected."""

    def _check(self, value: Any, path: Path) -> ValidationResult[bool]:
        if not isinstance(value, bool):
            return self._fail(path, "Expected boolean", ErrorKind.INVALID_TYPE)
        return ValidationResult.ok(value)
