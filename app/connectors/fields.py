"""
app/connectors/fields.py

Explicit optional-field extraction for reshaping third-party JSON.
"""

from __future__ import annotations

import math
import re
from typing import Any

_TAG_PATTERN = re.compile(r"<.*?>")

UNKNOWN = "Unknown"


def dig(payload: Any, *path: str | int, default: Any = None) -> Any:
    """
    Walk nested dicts/lists by key or index, returning `default` on any miss.
    """

    current = payload
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        if current is None:
            return default
    return current


def text_field(payload: Any, *path: str | int, default: str = UNKNOWN) -> str:
    value = dig(payload, *path)
    if value is None or isinstance(value, (dict, list)):
        return default
    text = str(value).strip()
    return text if text else default


def number_field(payload: Any, *path: str | int, default: float | int = 0) -> float | int:
    value = dig(payload, *path)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return default
        if not math.isfinite(number):
            return default
        return int(number) if number.is_integer() else number
    return default


def int_field(payload: Any, *path: str | int, default: int = 0) -> int:
    return int(number_field(payload, *path, default=default))


def optional_number(payload: Any, *path: str | int) -> float | int | None:
    value = dig(payload, *path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def list_field(payload: Any, *path: str | int) -> list[Any]:
    value = dig(payload, *path)
    return value if isinstance(value, list) else []


def first_item(payload: Any, *path: str | int) -> dict[str, Any]:
    """
    First element of a list of objects, or an empty dict.
    """

    items = list_field(payload, *path) if path else (payload if isinstance(payload, list) else [])
    if items and isinstance(items[0], dict):
        return items[0]
    return {}


def truncate(text: str, limit: int) -> str:
    return text[:limit]


def strip_html(text: str) -> str:
    return _TAG_PATTERN.sub("", text).strip()
