"""Pure data-transform helpers."""

from .case_conversion import camel_case_keys, snake_case_keys
from .timestamps import datetime_to_timestamp, timestamp_to_datetime, transform_timestamps
from .url_helpers import get_full_twist_url, get_twist_url

__all__ = [
    "camel_case_keys",
    "datetime_to_timestamp",
    "get_full_twist_url",
    "get_twist_url",
    "snake_case_keys",
    "timestamp_to_datetime",
    "transform_timestamps",
]
