"""Core infrastructure: configuration, schema, field resolution, normalization."""

from aero_erp.core.config import (
    validate_config,
    get_config_summary,
    ANTHROPIC_API_KEY,
    IMPORT_DEFAULT_METHOD,
    FORM_DEFAULT_METHOD,
    OUTPUT_DIR,
)
from aero_erp.core.schema import (
    Product,
    Financials,
    Logistics,
    ProductStatus,
    Currency,
    ShippingMethod,
)
from aero_erp.core.resolver import MISSING, resolve_field
from aero_erp.core.normalizer import (
    NoTabularDataError,
    normalize_batch,
    normalize_product,
    unwrap_records,
)

__all__ = [
    "validate_config",
    "get_config_summary",
    "ANTHROPIC_API_KEY",
    "IMPORT_DEFAULT_METHOD",
    "FORM_DEFAULT_METHOD",
    "OUTPUT_DIR",
    "Product",
    "Financials",
    "Logistics",
    "ProductStatus",
    "Currency",
    "ShippingMethod",
    "MISSING",
    "resolve_field",
    "NoTabularDataError",
    "normalize_batch",
    "normalize_product",
    "unwrap_records",
]
