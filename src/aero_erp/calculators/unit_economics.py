"""
Unit economics for canonical products.

Spreadsheet-style formulas used by the restock, SKU detail and finance views.
Inputs are normalized Products, so every field is a number; the formulas
still guard each division because defaulted records are mostly zeros.

Currency conventions:
- costOfGoods and logistics.shippingRate are RMB (purchase side)
- sellingPrice, shippingCost, fees and ad spend are USD (marketplace side)
"""

import math
from dataclasses import dataclass
from typing import Optional

from aero_erp.core import config
from aero_erp.core.config import VOLUMETRIC_DIVISOR
from aero_erp.core.schema import Product


CRITICAL_DAYS = 7
LOW_STOCK_DAYS = 15


@dataclass
class UnitEconomics:
    """Per-unit cost breakdown and profit, all USD."""
    selling_price: float
    goods_cost: float
    shipping_cost: float
    platform_fee: float
    return_cost: float
    ad_cost: float
    other_cost: float
    total_cost: float
    profit: float
    margin_percent: float


def _rate(product: Product) -> float:
    return product.exchangeRate if product.exchangeRate > 0 else config.DEFAULT_EXCHANGE_RATE


def volumetric_weight(length: float, width: float, height: float,
                      divisor: int = VOLUMETRIC_DIVISOR) -> float:
    """Dimensional weight in kg for a box measured in cm."""
    if divisor <= 0:
        return 0.0
    return (length * width * height) / divisor


def chargeable_weight(product: Product, divisor: int = VOLUMETRIC_DIVISOR) -> float:
    """Billable weight of one carton: the larger of volumetric and actual weight."""
    vol = volumetric_weight(product.boxLength, product.boxWidth, product.boxHeight, divisor)
    return max(vol, product.boxWeight)


def unit_freight_cost(product: Product, rate: Optional[float] = None,
                      divisor: int = VOLUMETRIC_DIVISOR) -> float:
    """
    First-leg freight per unit, in the shipping rate's currency (RMB).

    Carton data wins when present; otherwise the manual chargeable weight or
    the unit weight is billed directly.
    """
    per_kg = product.logistics.shippingRate if rate is None else rate
    if per_kg <= 0:
        return 0.0

    carton = chargeable_weight(product, divisor)
    if carton > 0:
        return (carton / (product.itemsPerBox or 1)) * per_kg

    weight = product.logistics.manualChargeableWeight or product.unitWeight
    return weight * per_kg


def margin_percent(revenue: float, profit: float) -> float:
    """Profit as a percentage of revenue; 0 when there is no revenue."""
    if revenue <= 0:
        return 0.0
    return (profit / revenue) * 100


def roi(gain: float, cost: float) -> float:
    """Return on investment as a multiple (gain / cost); 0 when cost is 0."""
    if cost <= 0:
        return 0.0
    return gain / cost


def unit_profit(product: Product) -> UnitEconomics:
    """Profit per unit sold at the product's selling price."""
    fin = product.financials
    rate = _rate(product)
    selling_price = fin.sellingPrice

    goods_cost = fin.costOfGoods / rate

    # A saved USD shipping cost wins over the weight x rate estimate
    shipping_cost = fin.shippingCost
    if shipping_cost <= 0:
        shipping_cost = unit_freight_cost(product) / rate

    platform_fee = fin.platformFee or selling_price * product.platformCommission / 100
    return_cost = selling_price * product.returnRate / 100

    total_cost = (goods_cost + shipping_cost + platform_fee + return_cost
                  + fin.adCost + fin.otherCost)
    profit = selling_price - total_cost

    return UnitEconomics(
        selling_price=selling_price,
        goods_cost=goods_cost,
        shipping_cost=shipping_cost,
        platform_fee=platform_fee,
        return_cost=return_cost,
        ad_cost=fin.adCost,
        other_cost=fin.otherCost,
        total_cost=total_cost,
        profit=profit,
        margin_percent=margin_percent(selling_price, profit),
    )


def inventory_value(product: Product) -> float:
    """Landed purchase value of the stock on hand, RMB."""
    rate = _rate(product)
    shipping_rmb = product.financials.shippingCost * rate
    if shipping_rmb <= 0:
        shipping_rmb = unit_freight_cost(product)
    return (product.financials.costOfGoods + shipping_rmb) * product.stock


def days_of_stock(product: Product) -> int:
    """Whole days the current stock lasts at the recorded daily sales."""
    daily = product.dailySales or 1
    return int(math.floor(product.stock / daily))


def stock_urgency(days: int) -> str:
    if days < CRITICAL_DAYS:
        return "critical"
    if days < LOW_STOCK_DAYS:
        return "low"
    return "healthy"
