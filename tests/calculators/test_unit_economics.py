"""Tests for the unit-economics calculators."""

import pytest
from aero_erp.calculators.unit_economics import (
    chargeable_weight,
    days_of_stock,
    inventory_value,
    margin_percent,
    roi,
    stock_urgency,
    unit_freight_cost,
    unit_profit,
    volumetric_weight,
)
from aero_erp.core.normalizer import normalize_product


@pytest.fixture
def earbuds(backup_record):
    return normalize_product(backup_record)


def test_volumetric_weight():
    assert volumetric_weight(50, 40, 30) == pytest.approx(10.0)
    assert volumetric_weight(50, 40, 30, divisor=5000) == pytest.approx(12.0)
    assert volumetric_weight(50, 40, 30, divisor=0) == 0.0


def test_chargeable_weight_takes_the_larger(earbuds):
    # 10 kg volumetric vs 12 kg actual
    assert chargeable_weight(earbuds) == pytest.approx(12.0)

    light = normalize_product({"boxLength": 60, "boxWidth": 50, "boxHeight": 40, "boxWeight": 8})
    assert chargeable_weight(light) == pytest.approx(20.0)


def test_unit_freight_cost_from_carton(earbuds):
    # 12 kg / 100 units x 38 per kg
    assert unit_freight_cost(earbuds) == pytest.approx(4.56)
    assert unit_freight_cost(earbuds, rate=50) == pytest.approx(6.0)


def test_unit_freight_cost_without_carton_data():
    product = normalize_product({"unitWeight": 0.5, "logistics": {"shippingRate": 40}})
    assert unit_freight_cost(product) == pytest.approx(20.0)

    manual = normalize_product({
        "unitWeight": 0.5,
        "logistics": {"shippingRate": 40, "manualChargeableWeight": 0.8},
    })
    assert unit_freight_cost(manual) == pytest.approx(32.0)


def test_unit_profit_with_saved_costs(earbuds):
    econ = unit_profit(earbuds)

    assert econ.goods_cost == pytest.approx(6.25)
    assert econ.shipping_cost == pytest.approx(1.2)
    assert econ.platform_fee == pytest.approx(6.0)
    assert econ.total_cost == pytest.approx(17.75)
    assert econ.profit == pytest.approx(22.24)
    assert econ.margin_percent == pytest.approx(22.24 / 39.99 * 100)


def test_unit_profit_with_estimated_shipping_and_commission():
    product = normalize_product({
        "price": 20,
        "financials": {"costOfGoods": 72},
        "logistics": {"shippingRate": 36},
        "unitWeight": 0.2,
        "platformCommission": 15,
        "returnRate": 5,
    })
    econ = unit_profit(product)

    assert econ.goods_cost == pytest.approx(10.0)
    assert econ.shipping_cost == pytest.approx(1.0)
    assert econ.platform_fee == pytest.approx(3.0)
    assert econ.return_cost == pytest.approx(1.0)
    assert econ.profit == pytest.approx(5.0)
    assert econ.margin_percent == pytest.approx(25.0)


def test_defaulted_record_does_not_raise():
    econ = unit_profit(normalize_product({}))

    assert econ.profit == 0.0
    assert econ.margin_percent == 0.0
    assert days_of_stock(normalize_product({})) == 0


def test_inventory_value(earbuds):
    # (45 RMB + 1.2 USD x 7.2) x 420 units
    assert inventory_value(earbuds) == pytest.approx(22528.8)


def test_margin_and_roi_guards():
    assert margin_percent(0, 5) == 0.0
    assert margin_percent(200, 50) == pytest.approx(25.0)
    assert roi(300, 100) == pytest.approx(3.0)
    assert roi(5, 0) == 0.0


def test_days_of_stock(earbuds):
    assert days_of_stock(earbuds) == 30
    # Unknown daily sales count as one per day
    assert days_of_stock(normalize_product({"stock": 5})) == 5


@pytest.mark.parametrize("days, expected", [(0, "critical"), (6, "critical"), (7, "low"), (14, "low"), (15, "healthy")])
def test_stock_urgency(days, expected):
    assert stock_urgency(days) == expected
