from __future__ import annotations

from datetime import date, datetime

from .errors import ValidationError

DateInput = date | str | None


def parse_due_date(value: DateInput) -> date | None:
    """Normalize a boundary date value to a calendar date.

    ``None`` and blank strings mean "no due date". Strings must start with a
    ``YYYY-MM-DD`` date; a trailing time part is dropped.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Unsupported due date value: {value!r}")

    text = value.strip()
    if not text:
        return None
    if len(text) > 10 and text[10] not in "T ":
        raise ValidationError(f"Invalid due date: {value!r}. Use YYYY-MM-DD.")
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise ValidationError(f"Invalid due date: {value!r}. Use YYYY-MM-DD.") from None


def format_due_date(value: date | None) -> str:
    # Matches the "Jan 5, 2024" style of the mobile list.
    if value is None:
        return ""
    return f"{value.strftime('%b')} {value.day}, {value.year}"
