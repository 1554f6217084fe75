import math
from datetime import date, datetime
from typing import Any, Optional, Union

Number = Union[int, float]


def to_number(value: Any, default: Number) -> Number:
    """Lenient query-parameter coercion: anything non-numeric falls back to `default`."""
    if value is None:
        return default
    # `?days=` means zero, not "use the default"
    if isinstance(value, str) and not value.strip():
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number) if number.is_integer() else number


def to_iso_timestamp(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def to_iso_day(value: Any) -> Optional[str]:
    # Oracle returns TRUNC(DATE) as a datetime at midnight
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]
