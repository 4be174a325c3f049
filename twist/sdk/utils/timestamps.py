"""Timestamp field conversion.

The API reports instants as epoch seconds in keys suffixed ``_ts``. After
camel-casing those keys end in ``Ts``; this module turns them into aware UTC
datetimes under the de-suffixed name.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

TIMESTAMP_SUFFIX = "Ts"
# Used instead of the bare name when the payload already has that key
COLLISION_SUFFIX = "Date"


def timestamp_to_datetime(timestamp: float) -> datetime:
    """Convert epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def _is_epoch(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def transform_timestamps(obj: Any) -> Any:
    """Recursively convert ``...Ts`` numeric fields to datetimes.

    ``{"postedTs": 1700000000}`` becomes ``{"posted": datetime(...)}``. When
    the object already holds ``posted`` the converted value lands under
    ``postedDate`` instead, so nothing is overwritten. Non-numeric ``...Ts``
    values are left untouched.
    """
    if isinstance(obj, list):
        return [transform_timestamps(item) for item in obj]
    if not isinstance(obj, dict):
        return obj

    result: dict[Any, Any] = {}
    for key, value in obj.items():
        if (
            isinstance(key, str)
            and len(key) > len(TIMESTAMP_SUFFIX)
            and key.endswith(TIMESTAMP_SUFFIX)
            and _is_epoch(value)
        ):
            try:
                converted = timestamp_to_datetime(value)
            except (OverflowError, ValueError, OSError):
                # Out of the platform range; keep the raw epoch
                result[key] = value
                continue
            base = key[: -len(TIMESTAMP_SUFFIX)]
            new_key = f"{base}{COLLISION_SUFFIX}" if base in obj else base
            result[new_key] = converted
        elif isinstance(value, dict | list):
            result[key] = transform_timestamps(value)
        else:
            result[key] = value
    return result


def datetime_to_timestamp(value: datetime) -> int:
    """Convert a datetime to whole epoch seconds for outbound parameters.

    Naive datetimes are interpreted as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
