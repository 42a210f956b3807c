"""
Date validator for vetter.

Accepts datetime/date objects, millisecond timestamps and strings. Strings can
be constrained to a format grammar built from the tokens DD, MM, YYYY and YY
joined by literal separators, or to ISO 8601. The shape of a formatted string
is checked before any parsing, and parsing is strict: "31/02/2023" is an
invalid date, it does not roll over into March.

All dates, inputs and bounds alike, are handled as timezone-aware UTC
datetimes. Naive values are taken to be UTC.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import MINYEAR, date, datetime, time, timezone
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .core import Validator
from .types import ErrorKind, Path, ValidationError, ValidationResult
from .validators import is_number

logger = logging.getLogger(__name__)

ISO8601 = "ISO8601"
ISO8601_PATTERN = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{3})?Z?$"
)

# Two-digit years below the pivot are 20xx, the rest 19xx
TWO_DIGIT_YEAR_PIVOT = 30

_TOKENS = re.compile(r"YYYY|YY|DD|MM", re.IGNORECASE)
_TOKEN_GROUPS = {
    "YYYY": ("year", r"[0-9]{4}"),
    "YY": ("short_year", r"[0-9]{2}"),
    "DD": ("day", r"[0-9]{2}"),
    "MM": ("month", r"[0-9]{2}"),
}

# Strings pydantic would read as Unix seconds
_NUMERIC_STRING = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")
_YEAR_STRING = re.compile(r"[0-9]{4}")

_datetime_adapter: TypeAdapter[datetime] = TypeAdapter(datetime)


@dataclass(frozen=True, slots=True)
class DateFormat:
    """A compiled date format: the pattern as written and its shape regex."""

    pattern: str
    regex: re.Pattern[str]

    @property
    def is_iso8601(self) -> bool:
        return self.pattern == ISO8601

    @property
    def has_year(self) -> bool:
        groups = self.regex.groupindex
        return "year" in groups or "short_year" in groups


def compile_format(pattern: str) -> DateFormat:
    """
    Build the shape regex for a pattern such as "DD/MM/YYYY".

    Tokens are matched case-insensitively; everything else is a literal.
    A token repeated in the pattern is only captured the first time.
    """
    parts: list[str] = []
    seen: set[str] = set()
    pos = 0
    for match in _TOKENS.finditer(pattern):
        parts.append(re.escape(pattern[pos : match.start()]))
        name, digits = _TOKEN_GROUPS[match.group().upper()]
        if name in seen:
            parts.append(digits)
        else:
            parts.append(f"(?P<{name}>{digits})")
            seen.add(name)
        pos = match.end()
    parts.append(re.escape(pattern[pos:]))
    return DateFormat(pattern=pattern, regex=re.compile("^" + "".join(parts) + "$"))


def expand_two_digit_year(year: int) -> int:
    """00-29 -> 2000-2029, 30-99 -> 1930-1999."""
    if year < TWO_DIGIT_YEAR_PIVOT:
        return 2000 + year
    return 1900 + year


def as_utc(value: datetime | date) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime."""
    if not isinstance(value, datetime):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iso_format(value: datetime) -> str:
    """Render as e.g. 2023-12-25T00:00:00.000Z."""
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_generic(text: str) -> datetime | None:
    """
    Parse an ISO 8601 style string, or return None.

    A bare four-digit year is January 1 of that year. Other number-like
    strings are rejected rather than read as timestamps.
    """
    stripped = text.strip()
    if _NUMERIC_STRING.fullmatch(stripped):
        if _YEAR_STRING.fullmatch(stripped) and int(stripped) >= MINYEAR:
            return datetime(int(stripped), 1, 1, tzinfo=timezone.utc)
        return None
    try:
        return as_utc(_datetime_adapter.validate_python(text))
    except (PydanticValidationError, OverflowError):
        return None


def from_timestamp(millis: float) -> datetime | None:
    """Milliseconds since the Unix epoch to a UTC datetime, or None."""
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


class DateValidator(Validator[datetime]):
    """
    Validate dates.

    Usage:
        Schema.date().past()
        Schema.date().ddmmyyyy("/").min(datetime(2000, 1, 1))
        Schema.date().iso8601()
    """

    def __init__(self) -> None:
        super().__init__()
        self.min_date: datetime | None = None
        self.max_date: datetime | None = None
        self.date_format: DateFormat | None = None

    def _check(self, value: Any, path: Path) -> ValidationResult[datetime]:
        parsed: datetime | None

        if isinstance(value, (datetime, date)):
            parsed = as_utc(value)
        elif isinstance(value, str):
            if self.date_format is not None:
                match = self.date_format.regex.fullmatch(value)
                if match is None:
                    return self._fail(
                        path,
                        f"Date must be in format {self.date_format.pattern}",
                        ErrorKind.INVALID_DATE_FORMAT,
                    )
                parsed = self._parse_formatted(value, match)
            else:
                parsed = parse_generic(value)
        elif is_number(value):
            parsed = from_timestamp(value)
        else:
            return self._fail(path, "Expected date", ErrorKind.INVALID_TYPE)

        if parsed is None:
            logger.debug("Unparseable date at %r: %r", path, value)
            return self._fail(path, "Invalid date", ErrorKind.INVALID_DATE)

        errors: list[ValidationError] = []

        if self.min_date is not None and parsed < self.min_date:
            errors.append(
                self._error(
                    path,
                    f"Date must be after {iso_format(self.min_date)}",
                    ErrorKind.MIN_DATE,
                )
            )
        if self.max_date is not None and parsed > self.max_date:
            errors.append(
                self._error(
                    path,
                    f"Date must be before {iso_format(self.max_date)}",
                    ErrorKind.MAX_DATE,
                )
            )

        return ValidationResult.from_errors(errors, parsed)

    def _parse_formatted(self, text: str, match: re.Match[str]) -> datetime | None:
        assert self.date_format is not None
        if self.date_format.is_iso8601:
            return parse_generic(text)

        # Missing day or month fields default to 1
        fields = match.groupdict()
        if fields.get("year") is not None:
            year = int(fields["year"])
        else:
            year = expand_two_digit_year(int(fields["short_year"]))
        month = int(fields.get("month") or 1)
        day = int(fields.get("day") or 1)

        try:
            return datetime(year, month, day, tzinfo=timezone.utc)
        except ValueError:
            return None

    # -- bounds ---------------------------------------------------------------

    def min(self, value: datetime | date) -> DateValidator:
        self.min_date = as_utc(value)
        return self

    def max(self, value: datetime | date) -> DateValidator:
        self.max_date = as_utc(value)
        return self

    def past(self) -> DateValidator:
        """Reject dates after the moment this is called."""
        self.max_date = datetime.now(timezone.utc)
        return self

    def future(self) -> DateValidator:
        """Reject dates before the moment this is called."""
        self.min_date = datetime.now(timezone.utc)
        return self

    # -- formats --------------------------------------------------------------

    def format(self, pattern: str) -> DateValidator:
        """
        Require strings shaped like `pattern`, e.g. "DD/MM/YYYY" or "MM-YYYY".

        Raises:
            ValueError: if the pattern has no YYYY or YY token
        """
        date_format = compile_format(pattern)
        if not date_format.has_year:
            raise ValueError(f"Date format must contain YYYY or YY, got {pattern!r}")
        self.date_format = date_format
        return self

    def ddmmyyyy(self, separator: str = "/") -> DateValidator:
        return self.format(f"DD{separator}MM{separator}YYYY")

    def mmddyyyy(self, separator: str = "/") -> DateValidator:
        return self.format(f"MM{separator}DD{separator}YYYY")

    def yyyymmdd(self, separator: str = "-") -> DateValidator:
        return self.format(f"YYYY{separator}MM{separator}DD")

    def ddmmyy(self, separator: str = "/") -> DateValidator:
        return self.format(f"DD{separator}MM{separator}YY")

    def mmddyy(self, separator: str = "/") -> DateValidator:
        return self.format(f"MM{separator}DD{separator}YY")

    def iso8601(self) -> DateValidator:
        """Require YYYY-MM-DDTHH:MM:SS with optional .mmm and Z."""
        self.date_format = DateFormat(pattern=ISO8601, regex=ISO8601_PATTERN)
        return self
