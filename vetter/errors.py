"""
Exceptions raised by vetter.

validate() never raises; these are for the strict entry points
(Validator.parse, ValidationResult.raise_if_errors).
"""

from __future__ import annotations

from typing import Iterable

from .types import ValidationError


class SchemaValidationError(ValueError):
    """Raised in strict mode when a value fails validation."""

    def __init__(self, errors: Iterable[ValidationError]):
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        messages = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Validation failed: {messages}")
