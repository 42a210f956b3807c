"""
Combinator validators for vetter: exact literals and unions.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Union

from .core import Validator
from .types import ErrorKind, Path, ValidationError, ValidationResult
from .validators import is_number

logger = logging.getLogger(__name__)

LiteralValue = Union[str, int, float, bool]


def strict_equal(a: Any, b: Any) -> bool:
    """
    Equality without cross-type coercion.

    "42" != 42 and True != 1, but 1 == 1.0.
    """
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


class LiteralValidator(Validator[Any]):
    """Accept exactly one value."""

    def __init__(self, value: LiteralValue):
        super().__init__()
        if not isinstance(value, (str, int, float)):
            raise TypeError(f"Literal must be a str, number or bool, got {type(value).__name__}")
        self.value = value

    def _check(self, value: Any, path: Path) -> ValidationResult[Any]:
        if not strict_equal(value, self.value):
            return self._fail(
                path, f"Expected literal value: {self.value!r}", ErrorKind.LITERAL_MISMATCH
            )
        return ValidationResult.ok(self.value)

    def __repr__(self) -> str:
        return f"<LiteralValidator {self.value!r}>"


class UnionValidator(Validator[Any]):
    """
    Accept a value matching any of several validators.

    Alternatives are tried in order and the first success is returned as is.
    When none match, a single UNION_MISMATCH error is reported; the errors of
    each alternative are kept in that error's `details`.
    """

    def __init__(self, alternatives: Sequence[Validator[Any]]):
        super().__init__()
        if not alternatives:
            raise ValueError("Union needs at least one alternative")
        for alt in alternatives:
            if not isinstance(alt, Validator):
                raise TypeError(
                    f"Union alternatives must be Validators, got {type(alt).__name__}"
                )
        self.alternatives: tuple[Validator[Any], ...] = tuple(alternatives)

    def _check(self, value: Any, path: Path) -> ValidationResult[Any]:
        details: list[tuple[ValidationError, ...]] = []

        for i, alt in enumerate(self.alternatives):
            result = alt.validate(value, path)
            if result.success:
                logger.debug("Union at %r matched alternative %d (%r)", path, i, alt)
                return result
            details.append(result.errors)

        logger.debug("Union at %r matched none of %d alternatives", path, len(details))
        error = ValidationError(
            path=path,
            message=self.custom_message or "Value does not match any of the expected types",
            code=ErrorKind.UNION_MISMATCH,
            details=tuple(details),
        )
        return ValidationResult.fail([error])
