"""Recursive key conversion between wire naming and client naming.

The API speaks snake_case. Raw payloads handed back to callers use camelCase
keys, and the pydantic models map those back onto snake_case attributes via
aliases. Both the single-request path and the batch codec go through these
two functions so the conversion is identical everywhere.
"""

from __future__ import annotations

from typing import Any

from pydantic.alias_generators import to_camel, to_snake


def camel_case_keys(obj: Any) -> Any:
    """Return a copy of ``obj`` with every mapping key converted to camelCase."""
    if isinstance(obj, list):
        return [camel_case_keys(item) for item in obj]
    if isinstance(obj, dict):
        return {
            (to_camel(key) if isinstance(key, str) else key): camel_case_keys(value)
            for key, value in obj.items()
        }
    return obj


def snake_case_keys(obj: Any) -> Any:
    """Return a copy of ``obj`` with every mapping key converted to snake_case."""
    if isinstance(obj, list | tuple):
        return [snake_case_keys(item) for item in obj]
    if isinstance(obj, dict):
        return {
            (to_snake(key) if isinstance(key, str) else key): snake_case_keys(value)
            for key, value in obj.items()
        }
    return obj
