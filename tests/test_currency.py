"""
Tests for vetter.currency.
"""

import pytest

from vetter import CURRENCY_FORMATS, CurrencyValue, ErrorKind, Schema, parse_currency
from vetter.currency import parse_amount


def codes(result):
    return [e.code for e in result.errors]


class TestFormatSelection:
    def test_missing_format(self):
        result = Schema.currency().validate("$5")
        assert codes(result) == [ErrorKind.MISSING_FORMAT]
        assert result.errors[0].message == "Currency format not specified"

    @pytest.mark.parametrize("value", [5, 5.0, True, ["$5"]])
    def test_invalid_type(self, value):
        result = Schema.currency().usd().validate(value)
        assert codes(result) == [ErrorKind.INVALID_TYPE]
        assert result.errors[0].message == "Expected currency string"

    def test_optional_without_format(self):
        assert Schema.currency().optional().validate(None).success

    def test_invalid_custom_format(self):
        with pytest.raises(ValueError):
            Schema.currency().currency("$", "USD", symbol_placement="middle")


class TestUSD:
    def test_symbol(self):
        result = Schema.currency().usd().validate("$1,234.56")
        assert result.success
        assert result.data == CurrencyValue(amount=1234.56, currency="$", original_string="$1,234.56")

    def test_code(self):
        result = Schema.currency().usd().validate("USD 1,234.56")
        assert result.data.amount == 1234.56
        assert result.data.currency == "USD"

    def test_whitespace(self):
        v = Schema.currency().usd()
        assert v.validate("$ 100").data.amount == 100
        assert v.validate("USD    1,000").data.amount == 1000
        result = v.validate("  $5.00  ")
        assert result.data.amount == 5
        assert result.data.original_string == "  $5.00  "

    def test_missing_marker(self):
        result = Schema.currency().usd().validate("1234.56")
        assert codes(result) == [ErrorKind.INVALID_CURRENCY_FORMAT]
        assert result.errors[0].message == "Currency must start with $ or USD"

    def test_code_needs_space(self):
        assert codes(Schema.currency().usd().validate("USD1234")) == [ErrorKind.INVALID_CURRENCY_FORMAT]

    def test_wrong_side(self):
        assert codes(Schema.currency().usd().validate("1234$")) == [ErrorKind.INVALID_CURRENCY_FORMAT]

    @pytest.mark.parametrize("value", ["$abc", "$", "$1e5", "$inf", "$1.2.3", "$1_000"])
    def test_bad_numbers(self, value):
        result = Schema.currency().usd().validate(value)
        assert codes(result) == [ErrorKind.INVALID_CURRENCY_FORMAT]
        assert result.errors[0].message == "Invalid numeric format"

    def test_overflowing_amount(self):
        result = Schema.currency().usd().validate("$" + "9" * 400)
        assert codes(result) == [ErrorKind.INVALID_CURRENCY_FORMAT]
        assert result.errors[0].message == "Invalid numeric format"


class TestOtherPresets:
    def test_gbp(self):
        result = Schema.currency().gbp().validate("£99.99")
        assert result.data.amount == 99.99
        assert result.data.currency == "£"

    def test_eur(self):
        v = Schema.currency().eur()
        assert v.validate("€1.234,56").data.amount == 1234.56
        assert v.validate("€12,5").data.amount == 12.5
        assert v.validate("EUR 1.000.000").data.amount == 1000000

    def test_eur_comma_needs_one_or_two_digits(self):
        assert codes(Schema.currency().eur().validate("€1,234")) == [ErrorKind.INVALID_CURRENCY_FORMAT]

    def test_rub(self):
        v = Schema.currency().rub()
        result = v.validate("1 234.56 ₽")
        assert result.data.amount == 1234.56
        assert result.data.currency == "₽"
        assert v.validate("1 234.56₽").data.amount == 1234.56
        assert v.validate("1234 RUB").data.currency == "RUB"

    def test_rub_marker_must_trail(self):
        result = Schema.currency().rub().validate("₽100")
        assert codes(result) == [ErrorKind.INVALID_CURRENCY_FORMAT]
        assert result.errors[0].message == "Currency must end with ₽ or RUB"

    def test_custom(self):
        v = Schema.currency().currency(
            "zł", "PLN", symbol_placement="after", decimal_separator=",", thousands_separator=" "
        )
        assert v.validate("1 234,50 zł").data.amount == 1234.5
        assert v.validate("10 PLN").data.currency == "PLN"

    def test_custom_empty_thousands_separator(self):
        v = Schema.currency().currency("$", "USD", thousands_separator="")
        assert v.validate("$1234.5").success
        assert codes(v.validate("$1,234.5")) == [ErrorKind.INVALID_CURRENCY_FORMAT]


class TestAmounts:
    def test_negative_rejected_by_default(self):
        result = Schema.currency().usd().validate("$-50")
        assert codes(result) == [ErrorKind.NEGATIVE_AMOUNT]
        assert result.errors[0].message == "Currency amount cannot be negative"

    def test_allow_negative(self):
        result = Schema.currency().usd().allow_negative_amounts().validate("$-50.25")
        assert result.data.amount == -50.25

    def test_min_max(self):
        v = Schema.currency().usd().min(10).max(100)
        assert v.validate("$10").success
        assert v.validate("$100.00").success
        low = v.validate("$5")
        assert codes(low) == [ErrorKind.MIN_AMOUNT]
        assert low.errors[0].message == "Amount must be at least $10"
        high = v.validate("$150")
        assert codes(high) == [ErrorKind.MAX_AMOUNT]
        assert high.errors[0].message == "Amount must be at most $100"

    def test_range(self):
        v = Schema.currency().eur().range(1, 2)
        assert v.validate("€1,50").success
        assert codes(v.validate("€2,01")) == [ErrorKind.MAX_AMOUNT]

    def test_checks_accumulate(self):
        result = Schema.currency().usd().min(10).validate("$-5")
        assert codes(result) == [ErrorKind.NEGATIVE_AMOUNT, ErrorKind.MIN_AMOUNT]

    def test_positive(self):
        v = Schema.currency().usd().allow_negative_amounts().positive()
        assert v.validate("$0").success
        assert codes(v.validate("$-1")) == [ErrorKind.MIN_AMOUNT]

    def test_parse_failure_skips_amount_checks(self):
        result = Schema.currency().usd().min(10).validate("$abc")
        assert codes(result) == [ErrorKind.INVALID_CURRENCY_FORMAT]


class TestParsers:
    def test_parse_currency(self):
        value = parse_currency("€1.234,56", CURRENCY_FORMATS["EUR"])
        assert value.amount == 1234.56
        assert value.currency == "€"

    def test_parse_currency_error(self):
        with pytest.raises(ValueError, match="must start with"):
            parse_currency("12", CURRENCY_FORMATS["GBP"])

    def test_parse_amount(self):
        assert parse_amount("-1,000.5", CURRENCY_FORMATS["USD"]) == -1000.5
        assert parse_amount(".5", CURRENCY_FORMATS["USD"]) == 0.5
        with pytest.raises(ValueError):
            parse_amount("", CURRENCY_FORMATS["USD"])
