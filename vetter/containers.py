"""
Container validators for vetter: arrays and objects.

Both always traverse every child and report all child errors, with paths
extended by "[index]" for array items and ".key" for object fields.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from .core import Validator, child_path, to_validator
from .types import ErrorKind, Path, ValidationError, ValidationResult
from .validators import check_length

logger = logging.getLogger(__name__)


class ArrayValidator(Validator[list]):
    """
    Validate lists (or tuples) whose items all match one validator.

    Absent items accepted by an optional item validator are left out of the
    validated list.

    Usage:
        Schema.array(Schema.string()).non_empty()
        Schema.array(Schema.number().integer()).max_length(10)
    """

    def __init__(self, items: Validator[Any]):
        super().__init__()
        if not isinstance(items, Validator):
            raise TypeError(f"Array item validator must be a Validator, got {type(items).__name__}")
        self.items = items
        self.min_length_value: int | None = None
        self.max_length_value: int | None = None

    def _check(self, value: Any, path: Path) -> ValidationResult[list]:
        if not isinstance(value, (list, tuple)):
            return self._fail(path, "Expected array", ErrorKind.INVALID_TYPE)

        errors: list[ValidationError] = []

        if self.min_length_value is not None and len(value) < self.min_length_value:
            errors.append(
                self._error(
                    path,
                    f"Array must have at least {self.min_length_value} items",
                    ErrorKind.MIN_LENGTH,
                )
            )
        if self.max_length_value is not None and len(value) > self.max_length_value:
            errors.append(
                self._error(
                    path,
                    f"Array must have at most {self.max_length_value} items",
                    ErrorKind.MAX_LENGTH,
                )
            )

        validated: list[Any] = []
        for i, item in enumerate(value):
            result = self.items.validate(item, child_path(path, i))
            if not result.success:
                errors.extend(result.errors)
            elif result.data is not None:
                validated.append(result.data)

        return ValidationResult.from_errors(errors, validated)

    def min_length(self, length: int) -> ArrayValidator:
        self.min_length_value = check_length(length)
        return self

    def max_length(self, length: int) -> ArrayValidator:
        self.max_length_value = check_length(length)
        return self

    def non_empty(self) -> ArrayValidator:
        """Require at least one item."""
        self.min_length_value = 1
        return self


class ObjectValidator(Validator[dict]):
    """
    Validate mappings against a schema of field validators.

    Fields are checked in schema order. Keys missing from the input are
    validated as None, so they fail unless their validator is optional.
    Keys in the input that the schema does not name are ignored and left out
    of the validated dict, as are optional fields that were absent.

    Usage:
        Schema.object({
            "name": Schema.string().min_length(2),
            "age": Schema.number().integer().optional(),
        })
    """

    def __init__(self, fields: Mapping[str, Validator[Any]]):
        super().__init__()
        for key, validator in fields.items():
            if not isinstance(validator, Validator):
                raise TypeError(
                    f"Field {key!r} must map to a Validator, got {type(validator).__name__}"
                )
        self.fields: dict[str, Validator[Any]] = dict(fields)

    def _check(self, value: Any, path: Path) -> ValidationResult[dict]:
        if not isinstance(value, Mapping):
            return self._fail(path, "Expected object", ErrorKind.INVALID_TYPE)

        errors: list[ValidationError] = []
        validated: dict[str, Any] = {}

        for key, validator in self.fields.items():
            result = validator.validate(value.get(key), child_path(path, key))
            if not result.success:
                errors.extend(result.errors)
            elif result.data is not None:
                validated[key] = result.data

        if logger.isEnabledFor(logging.DEBUG):
            ignored = [k for k in value if k not in self.fields]
            if ignored:
                logger.debug("Ignoring keys not in schema at %r: %s", path, ignored)

        return ValidationResult.from_errors(errors, validated)

    def partial(self) -> ObjectValidator:
        """
        Derive an object validator with every field made optional.

        Field validators are copied, so this validator is left unchanged.
        """
        return ObjectValidator(
            {key: copy.copy(v).optional() for key, v in self.fields.items()}
        )

    def extend(self, fields: Mapping[str, Any]) -> ObjectValidator:
        """Derive an object validator with extra (or replaced) fields."""
        merged = dict(self.fields)
        merged.update({key: to_validator(v) for key, v in fields.items()})
        return ObjectValidator(merged)

    def pick(self, *keys: str) -> ObjectValidator:
        """Derive an object validator with only the given fields."""
        missing = [k for k in keys if k not in self.fields]
        if missing:
            raise KeyError(f"Fields not in schema: {missing}")
        return ObjectValidator({k: self.fields[k] for k in keys})

    def omit(self, *keys: str) -> ObjectValidator:
        """Derive an object validator without the given fields."""
        return ObjectValidator({k: v for k, v in self.fields.items() if k not in keys})
