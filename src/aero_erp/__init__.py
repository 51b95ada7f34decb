"""
aero_erp - Catalog normalization toolkit for cross-border e-commerce sellers

Turns loosely-shaped product JSON (backups, spreadsheet exports, socket
messages, form saves) into canonical product records, with unit-economics
calculators and AI copywriting on top.
"""

__version__ = "1.0.0"

from aero_erp.core.config import validate_config, get_config_summary
from aero_erp.core.schema import Product, Financials, Logistics
from aero_erp.core.normalizer import (
    NoTabularDataError,
    normalize_batch,
    normalize_product,
)

__all__ = [
    "validate_config",
    "get_config_summary",
    "Product",
    "Financials",
    "Logistics",
    "NoTabularDataError",
    "normalize_batch",
    "normalize_product",
]
