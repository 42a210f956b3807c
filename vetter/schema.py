"""
Schema builder for vetter.

Provides the Schema facade, the supported way to construct validators, and
to_pydantic() for compiling object schemas into Pydantic models.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Literal
from typing import Optional as TypingOptional
from typing import Union

from pydantic import create_model

from .combinators import LiteralValidator, LiteralValue, UnionValidator
from .containers import ArrayValidator, ObjectValidator
from .core import Validator, to_validator
from .currency import CurrencyValidator
from .dates import DateValidator
from .validators import BooleanValidator, NumberValidator, StringValidator

logger = logging.getLogger(__name__)


class Schema:
    """
    Factory for validators. Every method returns a new, default-configured
    validator ready for chained configuration.

    Usage:
        user = Schema.object({
            "name": Schema.string().min_length(2),
            "email": Schema.string().email(),
            "role": Schema.union(Schema.literal("admin"), Schema.literal("user")),
            "tags": Schema.array(Schema.string()).non_empty(),
        })
        result = user.validate(data)
    """

    @staticmethod
    def string() -> StringValidator:
        return StringValidator()

    @staticmethod
    def number() -> NumberValidator:
        return NumberValidator()

    @staticmethod
    def boolean() -> BooleanValidator:
        return BooleanValidator()

    @staticmethod
    def date() -> DateValidator:
        return DateValidator()

    @staticmethod
    def currency() -> CurrencyValidator:
        return CurrencyValidator()

    @staticmethod
    def array(items: Any) -> ArrayValidator:
        """Items may be a validator or anything to_validator() accepts."""
        return ArrayValidator(to_validator(items))

    @staticmethod
    def object(fields: dict[str, Any]) -> ObjectValidator:
        """Field values may be validators or anything to_validator() accepts."""
        return ObjectValidator({key: to_validator(v) for key, v in fields.items()})

    @staticmethod
    def literal(value: LiteralValue) -> LiteralValidator:
        return LiteralValidator(value)

    @staticmethod
    def union(*alternatives: Any) -> UnionValidator:
        return UnionValidator([to_validator(alt) for alt in alternatives])


def to_pydantic(name: str, schema: ObjectValidator | dict[str, Any]) -> type:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: An object validator, or a dict of field validators

    Returns:
        A Pydantic BaseModel subclass. Required fields have no default,
        optional fields default to None. Nested objects become nested models.

    Usage:
        User = to_pydantic("User", Schema.object({
            "name": Schema.string(),
            "age": Schema.number().integer().optional(),
        }))
        user = User(name="Alice")
    """
    validator = to_validator(schema)
    if not isinstance(validator, ObjectValidator):
        raise TypeError("Schema must be an object validator")

    fields: dict[str, Any] = {}
    for key, v in validator.fields.items():
        field_type = _python_type(v, f"{name}_{key}")
        if v.is_optional:
            fields[key] = (TypingOptional[field_type], None)
        else:
            fields[key] = (field_type, ...)

    logger.debug("Compiled %s with fields %s", name, list(fields))
    return create_model(name, **fields)


def _python_type(v: Validator[Any], name: str) -> Any:
    """Map a validator to the Python type a Pydantic field should carry."""
    match v:
        case StringValidator() | CurrencyValidator():
            return str
        case NumberValidator(require_integer=True):
            return int
        case NumberValidator():
            return float
        case BooleanValidator():
            return bool
        case DateValidator():
            return datetime
        case LiteralValidator(value=value):
            return Literal[value]
        case ArrayValidator(items=items):
            return list[_python_type(items, f"{name}_item")]  # type: ignore[misc]
        case ObjectValidator():
            return to_pydantic(name, v)
        case UnionValidator(alternatives=alts):
            return Union[tuple(_python_type(a, f"{name}_{i}") for i, a in enumerate(alts))]

    return Any
