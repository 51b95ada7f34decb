"""AI copywriting and free-text product capture."""

from aero_erp.extraction.copywriter import (
    create_client,
    extract_json_from_response,
    generate_product_description,
    optimize_product_title,
    suggest_product_fields,
)

__all__ = [
    "create_client",
    "extract_json_from_response",
    "generate_product_description",
    "optimize_product_title",
    "suggest_product_fields",
]
