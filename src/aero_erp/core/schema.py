"""
Canonical Product Schema

This module defines the record every import path normalizes into before the
data reaches the dashboard calculators (margin, chargeable weight, days of
stock).

Key Design Principles:
1. Every field is always present and always of its declared type
   (no None anywhere, numbers default to 0, text to "")
2. Field names keep the dashboard's camelCase keys so that a JSON backup
   can be imported again without drift
3. Nested blocks (financials, logistics) are complete records too
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Dict, Any
import json

from aero_erp.core.config import DEFAULT_EXCHANGE_RATE


# ============================================================================
# ENUMERATIONS
# ============================================================================

class ProductStatus(str, Enum):
    """Lifecycle tag of a catalog entry."""
    DRAFT = "Draft"
    ACTIVE = "Active"
    ARCHIVED = "Archived"


class Currency(str, Enum):
    """Listing currencies supported by the dashboard."""
    USD = "USD"
    EUR = "EUR"
    CNY = "CNY"
    JPY = "JPY"


class ShippingMethod(str, Enum):
    """First-leg freight method."""
    AIR = "Air"
    SEA = "Sea"
    RAIL = "Rail"


DEFAULT_SKU = "UNKNOWN"
DEFAULT_NAME = "Unnamed Product"
DEFAULT_CATEGORY = "General"
DEFAULT_LOGISTICS_STATUS = "Pending"


# ============================================================================
# SCHEMA DEFINITIONS
# ============================================================================

@dataclass
class Financials:
    """
    Per-unit money figures.

    costOfGoods and shippingCost are purchase-side values, sellingPrice is
    what the marketplace customer pays. All values are non-negative.
    """
    costOfGoods: float = 0.0
    shippingCost: float = 0.0
    otherCost: float = 0.0
    sellingPrice: float = 0.0
    platformFee: float = 0.0
    adCost: float = 0.0


@dataclass
class Logistics:
    """First-leg shipment details for the product's current restock."""
    method: str = ShippingMethod.SEA.value
    carrier: str = ""
    trackingNo: str = ""
    status: str = DEFAULT_LOGISTICS_STATUS
    origin: str = ""
    destination: str = ""
    etd: str = ""
    eta: str = ""
    shippingRate: float = 0.0            # per kg
    manualChargeableWeight: float = 0.0  # kg, overrides computed weight


@dataclass
class Product:
    """
    Canonical Product Record.

    Created only by the normalizer; each normalization yields a new,
    fully-populated instance.
    """
    # Identity
    id: str
    sku: str = DEFAULT_SKU

    # Descriptive
    name: str = DEFAULT_NAME
    description: str = ""
    category: str = DEFAULT_CATEGORY

    # Commercial
    price: float = 0.0
    currency: str = Currency.USD.value
    stock: int = 0

    status: str = ProductStatus.DRAFT.value

    # Media / relations
    imageUrl: str = ""
    marketplaces: List[str] = field(default_factory=list)

    # Provenance
    lastUpdated: str = ""

    # Free text
    note: str = ""
    supplier: str = ""

    # Nested blocks
    financials: Financials = field(default_factory=Financials)
    logistics: Logistics = field(default_factory=Logistics)

    # Packaging and restock planning
    unitWeight: float = 0.0
    boxLength: float = 0.0
    boxWidth: float = 0.0
    boxHeight: float = 0.0
    boxWeight: float = 0.0
    itemsPerBox: int = 0
    restockCartons: int = 0
    inboundId: str = ""
    dailySales: float = 0.0

    # Marketplace fees (percentages) and FX
    platformCommission: float = 0.0
    returnRate: float = 0.0
    exchangeRate: float = DEFAULT_EXCHANGE_RATE

    def to_dict(self) -> Dict[str, Any]:
        return dataclass_to_dict(self)


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def dataclass_to_dict(obj) -> Any:
    """Convert dataclass to dict, handling nested dataclasses"""
    if hasattr(obj, '__dataclass_fields__'):
        return {k: dataclass_to_dict(v) for k, v in asdict(obj).items()}
    elif isinstance(obj, list):
        return [dataclass_to_dict(item) for item in obj]
    elif isinstance(obj, dict):
        return {k: dataclass_to_dict(v) for k, v in obj.items()}
    return obj


def to_json(products: List[Product], indent: int = 2) -> str:
    """Convert a list of products to a JSON string"""
    return json.dumps(dataclass_to_dict(products), indent=indent, ensure_ascii=False)
