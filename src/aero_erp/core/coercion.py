"""
Value coercion for resolved raw fields.

Every function here is total: whatever comes in, a value of the target type
comes out. Numbers are never negative, never NaN.
"""

import math
import re
from enum import Enum
from typing import Any, List, Mapping, Type

from aero_erp.core.resolver import is_blank


# Currency symbols and thousands separators seen in seller spreadsheets
_NUMBER_NOISE = re.compile(r"[\s$¥￥€£,，]")
_FIRST_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_LIST_SEPARATORS = re.compile(r"[,，、;；|]")


def _finite_or_zero(value: float) -> float:
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0.0
    return value


def to_number(value: Any) -> float:
    """
    Coerce a raw value into a finite, non-negative float.

    "$1,234.50" -> 1234.5, "¥99" -> 99.0, "10箱" -> 10.0, "abc" -> 0.0,
    None -> 0.0. Booleans are not quantities and map to 0.0.
    """
    if is_blank(value) or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
        return _finite_or_zero(number)

    if isinstance(value, str):
        cleaned = _NUMBER_NOISE.sub("", value)
        # "1_000" reads as 1, not as float()'s 1000
        if "_" not in cleaned:
            try:
                return _finite_or_zero(float(cleaned))
            except ValueError:
                pass
        # e.g. "12.5kg" or "10箱"
        match = _FIRST_NUMBER.search(cleaned)
        if match:
            return _finite_or_zero(float(match.group(0)))

    return 0.0


def to_int(value: Any) -> int:
    """Coerce to a non-negative integer (fractions truncated)."""
    return int(to_number(value))


def to_text(value: Any, default: str = "") -> str:
    """
    Render a scalar as text.

    Integral floats lose their ".0" so that a numeric SKU (12345.0 from a
    spreadsheet) reads back as "12345". Containers are not text.
    """
    if is_blank(value):
        return default
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else default
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # digit limit for int -> str
            return default
    return default


def to_string_list(value: Any) -> List[str]:
    """Accept a JSON list or a separated string ("Amazon, TikTok")."""
    if isinstance(value, (list, tuple)):
        items = [to_text(item) for item in value]
    elif isinstance(value, str):
        items = [part.strip() for part in _LIST_SEPARATORS.split(value)]
    else:
        return []
    return [item for item in items if item]


def to_choice(value: Any, allowed: Type[Enum], default: str) -> str:
    """Match value case-insensitively against an Enum's values."""
    text = to_text(value)
    if not text:
        return default
    lowered = text.lower()
    for member in allowed:
        if member.value.lower() == lowered:
            return member.value
    return default


def as_mapping(value: Any) -> Mapping:
    """Return value if it is a mapping, else an empty dict."""
    return value if isinstance(value, Mapping) else {}
