"""
Tests for vetter.types and vetter.errors.
"""

import pytest

from vetter import (
    CURRENCY_FORMATS,
    CurrencyFormat,
    ErrorKind,
    SchemaValidationError,
    ValidationError,
    ValidationResult,
)


class TestValidationResult:
    def test_ok(self):
        result = ValidationResult.ok("hello")
        assert result.success
        assert result.data == "hello"
        assert result.errors == ()
        assert result.is_ok()
        assert not result.is_err()
        assert bool(result)

    def test_ok_without_data(self):
        result = ValidationResult.ok()
        assert result.success
        assert result.data is None

    def test_fail(self):
        err = ValidationError("name", "Value is required", ErrorKind.REQUIRED)
        result = ValidationResult.fail([err])
        assert not result.success
        assert result.data is None
        assert result.errors == (err,)
        assert result.is_err()
        assert not bool(result)

    def test_fail_needs_errors(self):
        with pytest.raises(ValueError):
            ValidationResult.fail([])

    def test_from_errors(self):
        assert ValidationResult.from_errors([], 5) == ValidationResult.ok(5)
        err = ValidationError("", "Expected number", ErrorKind.INVALID_TYPE)
        failed = ValidationResult.from_errors([err], 5)
        assert not failed.success
        assert failed.data is None

    def test_raise_if_errors(self):
        ValidationResult.ok(1).raise_if_errors()

        err = ValidationError("age", "Number must be at least 0", ErrorKind.MIN_VALUE)
        with pytest.raises(SchemaValidationError) as exc_info:
            ValidationResult.fail([err]).raise_if_errors()
        assert exc_info.value.errors == (err,)
        assert "age: Number must be at least 0 (MIN_VALUE)" in str(exc_info.value)

    def test_to_dict(self):
        err = ValidationError("[0]", "Expected string", ErrorKind.INVALID_TYPE)
        assert ValidationResult.fail([err]).to_dict() == {
            "success": False,
            "data": None,
            "errors": [{"path": "[0]", "message": "Expected string", "code": "INVALID_TYPE"}],
        }


class TestValidationError:
    def test_str(self):
        err = ValidationError("user.email", "Invalid email format", ErrorKind.PATTERN_MISMATCH)
        assert str(err) == "user.email: Invalid email format (PATTERN_MISMATCH)"

    def test_str_root(self):
        err = ValidationError("", "Expected object", ErrorKind.INVALID_TYPE)
        assert str(err) == "<root>: Expected object (INVALID_TYPE)"

    def test_frozen(self):
        err = ValidationError("", "x", ErrorKind.REQUIRED)
        with pytest.raises(AttributeError):
            err.path = "other"  # type: ignore[misc]

    def test_details_in_dict(self):
        inner = ValidationError("", "Expected string", ErrorKind.INVALID_TYPE)
        err = ValidationError("", "no match", ErrorKind.UNION_MISMATCH, details=((inner,),))
        assert err.to_dict()["details"] == [[inner.to_dict()]]


class TestErrorKind:
    def test_closed_set(self):
        assert len(ErrorKind) == 19
        assert ErrorKind("MISSING_FORMAT") is ErrorKind.MISSING_FORMAT


class TestCurrencyFormats:
    def test_presets(self):
        assert set(CURRENCY_FORMATS) == {"USD", "GBP", "EUR", "RUB"}
        eur = CURRENCY_FORMATS["EUR"]
        assert eur.symbol == "€"
        assert eur.decimal_separator == ","
        assert eur.thousands_separator == "."
        rub = CURRENCY_FORMATS["RUB"]
        assert rub.symbol_placement == "after"
        assert rub.thousands_separator == " "
        assert all(f.decimal_places == 2 for f in CURRENCY_FORMATS.values())

    def test_presets_read_only(self):
        with pytest.raises(TypeError):
            CURRENCY_FORMATS["JPY"] = CurrencyFormat(symbol="¥", code="JPY")  # type: ignore[index]

    def test_bad_placement(self):
        with pytest.raises(ValueError):
            CurrencyFormat(symbol="$", code="USD", symbol_placement="middle")

    def test_bad_separator(self):
        with pytest.raises(ValueError):
            CurrencyFormat(symbol="$", code="USD", decimal_separator=";")
