"""
Attendance sheet request model.

The request is the form submission as it arrives from the web form: a few
organisational labels, the employee name, an inclusive date range whose ends
may still be unset, the holidays to shade and the signing date.

Timestamps carrying a UTC offset (what a browser sends for a local-midnight
``Date``) are converted to Western Indonesia Time (WIB, UTC+7) before the
calendar date is taken. Naive timestamps and plain ``YYYY-MM-DD`` strings are
taken as they are.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

WIB = timezone(timedelta(hours=7), "WIB")


def _to_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(WIB)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"invalid ISO-8601 date: {value!r}") from None
        return _to_date(parsed)
    raise ValueError(f"unsupported date value: {value!r}")


class DateRange(BaseModel):
    """Inclusive date range; either end may be missing."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    start: Optional[date] = Field(None, alias="from")
    end: Optional[date] = Field(None, alias="to")

    @field_validator("start", "end", mode="before")
    @classmethod
    def reduce_to_date(cls, value):
        return _to_date(value)

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


class AttendanceRequest(BaseModel):
    """Form data for one attendance sheet.

    Fields accept both the camelCase keys sent by the form (``kategoriTLH``,
    ``dateRange: {from, to}``, ``dateSign``) and their snake_case names.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    kategori_tlh: str = Field("", alias="kategoriTLH")
    unit: str = ""
    direktorat: str = ""
    periode: str = ""
    nama: str = ""
    date_range: DateRange = Field(default_factory=DateRange, alias="dateRange")
    holidays: FrozenSet[date] = frozenset()
    date_sign: Optional[date] = Field(None, alias="dateSign")

    @field_validator("kategori_tlh", "unit", "direktorat", "periode", "nama", mode="before")
    @classmethod
    def text_or_empty(cls, value):
        return "" if value is None else str(value)

    @field_validator("date_range", mode="before")
    @classmethod
    def empty_range(cls, value):
        return DateRange() if value is None else value

    @field_validator("holidays", mode="before")
    @classmethod
    def holiday_dates(cls, value):
        if value is None:
            return frozenset()
        if isinstance(value, (str, bytes, dict)):
            raise ValueError("holidays must be a list of dates")
        try:
            items = list(value)
        except TypeError:
            raise ValueError("holidays must be a list of dates") from None
        return frozenset(day for day in map(_to_date, items) if day is not None)

    @field_validator("date_sign", mode="before")
    @classmethod
    def sign_date(cls, value):
        return _to_date(value)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AttendanceRequest":
        """Create a request from a form payload.

        Args:
            payload: Form payload

        Returns:
            AttendanceRequest

        Raises:
            ValidationError: If the payload is not an object or a value
                cannot be interpreted
        """
        if not isinstance(payload, dict):
            raise ValidationError("Request payload must be an object", field_value=payload)
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            field_name = ".".join(str(part) for part in first.get("loc", ()))
            raise ValidationError(
                f"Invalid value for {field_name or 'request'}: {first.get('msg')}",
                field_name=field_name or None,
                field_value=first.get("input"),
                cause=exc,
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the form payload shape."""
        def iso(value: Optional[date]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            "kategoriTLH": self.kategori_tlh,
            "unit": self.unit,
            "direktorat": self.direktorat,
            "periode": self.periode,
            "nama": self.nama,
            "dateRange": {
                "from": iso(self.date_range.start),
                "to": iso(self.date_range.end),
            },
            "holidays": sorted(day.isoformat() for day in self.holidays),
            "dateSign": iso(self.date_sign),
        }
