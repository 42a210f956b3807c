"""
Core validator contract for vetter.

Provides the abstract Validator base shared by every concrete validator, and
to_validator() for coercing plain Python values into validators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Generic, TypeVar

from .errors import SchemaValidationError
from .types import ErrorKind, Path, ValidationError, ValidationResult

T = TypeVar("T")
SelfV = TypeVar("SelfV", bound="Validator[Any]")


class Validator(ABC, Generic[T]):
    """
    Base class for all validators.

    Configuration methods mutate the instance and return it, so validators are
    built by chaining:

        Schema.string().min_length(2).optional().with_message("Bad name")

    Once built, a validator is only read during validate(); the same tree can
    be reused for any number of calls.
    """

    def __init__(self) -> None:
        self.is_optional: bool = False
        self.custom_message: str | None = None

    def validate(self, value: Any, path: Path = "") -> ValidationResult[T]:
        """
        Validate a value.

        None is the absent value: optional validators accept it with no data,
        required ones reject it with a single REQUIRED error. Anything else is
        handed to the type-specific check.
        """
        if value is None:
            if self.is_optional:
                return ValidationResult.ok(None)
            return ValidationResult.fail(
                [self._error(path, "Value is required", ErrorKind.REQUIRED)]
            )
        return self._check(value, path)

    def __call__(self, value: Any, path: Path = "") -> ValidationResult[T]:
        return self.validate(value, path)

    def parse(self, value: Any) -> T | None:
        """
        Validate and return the data, raising on failure.

        Raises:
            SchemaValidationError: carrying every collected error
        """
        result = self.validate(value)
        if not result.success:
            raise SchemaValidationError(result.errors)
        return result.data

    @abstractmethod
    def _check(self, value: Any, path: Path) -> ValidationResult[T]:
        """Type-specific validation of a present (non-None) value."""

    def optional(self: SelfV) -> SelfV:
        """Accept None (absent) as a valid value."""
        self.is_optional = True
        return self

    def with_message(self: SelfV, message: str) -> SelfV:
        """Use `message` for every error this validator emits."""
        self.custom_message = message
        return self

    def _error(self, path: Path, message: str, code: ErrorKind) -> ValidationError:
        return ValidationError(path=path, message=self.custom_message or message, code=code)

    def _fail(self, path: Path, message: str, code: ErrorKind) -> ValidationResult[T]:
        return ValidationResult.fail([self._error(path, message, code)])

    def __repr__(self) -> str:
        flags = " optional" if self.is_optional else ""
        return f"<{type(self).__name__}{flags}>"


def child_path(path: Path, key: str | int) -> Path:
    """Extend a path with an object key (".key") or array index ("[i]")."""
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def to_validator(v: Any) -> Validator[Any]:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        str / bool / float / datetime / date (the types) -> matching validator
        int (the type) -> number validator with the integer check
        dict -> object validator with recursive conversion
        [item] -> array validator over the converted item
        str / int / float / bool (values) -> literal validator
    """
    from .combinators import LiteralValidator
    from .containers import ArrayValidator, ObjectValidator
    from .dates import DateValidator
    from .validators import BooleanValidator, NumberValidator, StringValidator

    if isinstance(v, Validator):
        return v

    if isinstance(v, type):
        # bool before int: bool is a subclass of int
        if issubclass(v, bool):
            return BooleanValidator()
        if issubclass(v, int):
            return NumberValidator().integer()
        if issubclass(v, float):
            return NumberValidator()
        if issubclass(v, str):
            return StringValidator()
        if issubclass(v, (datetime, date)):
            return DateValidator()
        raise TypeError(f"No validator for type {v.__name__}")

    if isinstance(v, dict):
        return ObjectValidator({k: to_validator(val) for k, val in v.items()})

    if isinstance(v, list):
        if len(v) != 1:
            raise ValueError("List shorthand takes exactly one item validator")
        return ArrayValidator(to_validator(v[0]))

    if isinstance(v, (str, int, float)):
        return LiteralValidator(v)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
