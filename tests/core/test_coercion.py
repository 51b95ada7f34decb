"""Tests for value coercion."""

import math

import pytest
from aero_erp.core.coercion import to_choice, to_int, to_number, to_string_list, to_text
from aero_erp.core.resolver import MISSING
from aero_erp.core.schema import ProductStatus


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1,234.50", 1234.5),
        ("¥99", 99.0),
        ("￥ 12.5", 12.5),
        ("abc", 0.0),
        (None, 0.0),
        (MISSING, 0.0),
        ("", 0.0),
        (42, 42.0),
        (3.75, 3.75),
        ("10箱", 10.0),
        ("0.8kg", 0.8),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, "nan", "inf"])
def test_non_finite_collapses_to_zero(raw):
    assert to_number(raw) == 0.0


def test_negative_values_clamp_to_zero():
    assert to_number(-5) == 0.0
    assert to_number("-12.5") == 0.0


def test_booleans_and_containers_are_not_numbers():
    assert to_number(True) == 0.0
    assert to_number({"value": 3}) == 0.0
    assert to_number([1, 2]) == 0.0


def test_to_int_truncates():
    assert to_int("12.9") == 12
    assert to_int("1,200") == 1200
    assert isinstance(to_int(None), int)


def test_to_text():
    assert to_text("  A1 ") == "A1"
    assert to_text(12345.0) == "12345"
    assert to_text(12.5) == "12.5"
    assert to_text(7) == "7"
    assert to_text(None, "fallback") == "fallback"
    assert to_text("   ", "fallback") == "fallback"
    assert to_text({"nested": True}) == ""


def test_to_string_list():
    assert to_string_list(["Amazon US", "", None, "TikTok"]) == ["Amazon US", "TikTok"]
    assert to_string_list("Amazon, TikTok、Shopee") == ["Amazon", "TikTok", "Shopee"]
    assert to_string_list(None) == []
    assert to_string_list(5) == []


def test_to_choice_is_case_insensitive():
    assert to_choice("active", ProductStatus, "Draft") == "Active"
    assert to_choice("Published", ProductStatus, "Draft") == "Draft"
    assert to_choice(None, ProductStatus, "Draft") == "Draft"


def test_integer_too_large_for_float_is_zero():
    assert to_number(10 ** 400) == 0.0
    assert to_int(10 ** 400) == 0
    assert to_number("1" + "0" * 400) == 0.0


def test_underscore_digits_read_the_leading_number():
    assert to_number("1_000") == 1.0
    assert to_number("$2_500.75") == 2.0
