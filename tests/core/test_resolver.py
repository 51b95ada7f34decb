"""Tests for the field resolver."""

import pytest
from aero_erp.core.resolver import MISSING, is_blank, normalize_key, resolve_field


def test_exact_match_follows_candidate_order():
    """Candidate order decides, not the raw object's insertion order."""
    raw = {"销售价": "20", "price": "10"}
    assert resolve_field(raw, ["price", "销售价"]) == "10"
    assert resolve_field(raw, ["销售价", "price"]) == "20"


def test_exact_match_skips_blank_values():
    raw = {"sku": "", "msku": None, "item_no": "X-9"}
    assert resolve_field(raw, ["sku", "msku", "item_no"]) == "X-9"


def test_zero_and_false_are_usable_values():
    raw = {"stock": 0, "active": False}
    assert resolve_field(raw, ["stock"]) == 0
    assert resolve_field(raw, ["active"]) is False


def test_normalized_match_ignores_case_and_punctuation():
    raw = {"Selling Price ($)": "12.5", "Item-No.": "A-1"}
    assert resolve_field(raw, ["sellingprice"]) == "12.5"
    assert resolve_field(raw, ["item_no"]) == "A-1"


def test_normalized_match_keeps_cjk_characters():
    raw = {" SKU 编码 ": "A1"}
    assert resolve_field(raw, ["sku编码"]) == "A1"


def test_normalized_pass_only_after_exact_pass():
    """An exact hit on a lower-priority candidate wins over a fuzzy hit."""
    raw = {"Name ": "fuzzy", "title": "exact"}
    assert resolve_field(raw, ["name", "title"]) == "exact"


def test_normalized_match_skips_blank_values():
    raw = {"S.K.U": "", "sku ": "B2"}
    assert resolve_field(raw, ["SKU"]) == "B2"


def test_missing_when_nothing_matches():
    assert resolve_field({"foo": 1}, ["bar"]) is MISSING


@pytest.mark.parametrize("raw", [None, {}, [], "text", 42])
def test_non_mapping_or_empty_is_missing(raw):
    assert resolve_field(raw, ["sku"]) is MISSING


def test_empty_candidate_list_is_an_error():
    with pytest.raises(ValueError):
        resolve_field({"a": 1}, [])


def test_missing_is_falsy_and_blank():
    assert not MISSING
    assert is_blank(MISSING)
    assert is_blank(None)
    assert is_blank("")
    assert not is_blank(0)


def test_normalize_key():
    assert normalize_key("Box Length (cm)") == "boxlengthcm"
    assert normalize_key("头程运费/单价") == "头程运费单价"
    assert normalize_key("$/kg") == "kg"
