"""
Field Resolver

Finds a value in a loosely-shaped record given a prioritized list of
acceptable key names. Uploaded spreadsheets exported as JSON use whatever
headers the seller typed ("SKU编码", "Selling Price ($)", "sale_price"), so
lookups go through two passes:

1. Exact key match, in candidate order.
2. Normalized match: keys and candidates are lowercased and stripped of
   everything but ASCII letters, digits and CJK ideographs.

A value only counts when it is not None and not an empty string.
"""

import re
from typing import Any, Mapping, Sequence


_NOISE = re.compile(r"[^a-z0-9\u4e00-\u9fa5]")


class _Missing:
    """Sentinel for 'no candidate key produced a usable value'."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def is_blank(value: Any) -> bool:
    """True for None, MISSING and the empty string."""
    return value is None or value is MISSING or (isinstance(value, str) and value == "")


def normalize_key(key: Any) -> str:
    """Lowercase a key and drop punctuation, whitespace and symbols."""
    return _NOISE.sub("", str(key).lower())


def resolve_field(raw: Any, candidates: Sequence[str]) -> Any:
    """
    Return the first usable value for any of the candidate keys.

    Args:
        raw: The raw record. None or a non-mapping is treated as empty.
        candidates: Key names in priority order.

    Returns:
        The stored value (any type), or MISSING.

    Raises:
        ValueError: If no candidate keys are given
    """
    if not candidates:
        raise ValueError("resolve_field needs at least one candidate key")

    if not isinstance(raw, Mapping) or not raw:
        return MISSING

    # Pass 1: exact
    for key in candidates:
        if key in raw and not is_blank(raw[key]):
            return raw[key]

    # Pass 2: normalized
    normalized_keys = [(normalize_key(k), k) for k in raw.keys()]
    for candidate in candidates:
        target = normalize_key(candidate)
        if not target:
            continue
        for nkey, original in normalized_keys:
            if nkey == target and not is_blank(raw[original]):
                return raw[original]

    return MISSING
