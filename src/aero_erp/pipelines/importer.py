#!/usr/bin/env python3
"""
Catalog import paths.

Each dashboard entry point that brings product data in owns its own I/O and
hands the decoded JSON to the normalizer:

- import_file():           backup / spreadsheet export uploaded as .json
- import_text():           JSON pasted into the import box
- handle_socket_message(): text frame pushed by the sync server
- save_form():             a single record from the product editor

Imports default missing shipping methods to Sea, form saves to Air.

Usage:
    from aero_erp.pipelines.importer import import_file

    result = import_file("AERO_OS_BACKUP_2026-10-18.json")
    if result.success:
        print(f"Imported {result.count} products")
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from aero_erp.core.config import FORM_DEFAULT_METHOD, IMPORT_DEFAULT_METHOD
from aero_erp.core.normalizer import (
    NoTabularDataError, normalize_batch, normalize_product,
)
from aero_erp.core.schema import Product, to_json

logger = logging.getLogger(__name__)


# =============================================================================
# Result Types
# =============================================================================

@dataclass
class ImportResult:
    """Outcome of one import attempt."""
    success: bool
    source: str
    products: List[Product] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.products)

    def summary(self) -> str:
        if self.success:
            return f"Imported {self.count} product(s) from {self.source}"
        return f"Import from {self.source} failed: {self.error}"


# =============================================================================
# Import Paths
# =============================================================================

def _import_payload_text(text: str, source: str, default_method: str) -> ImportResult:
    if not text or not text.strip():
        logger.warning(f"Empty payload from {source}")
        return ImportResult(success=False, source=source, error="Payload is empty")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON from {source}: {e}")
        return ImportResult(success=False, source=source, error=f"Invalid JSON: {e}")

    try:
        products = normalize_batch(payload, default_method=default_method)
    except NoTabularDataError as e:
        logger.warning(f"No records in payload from {source}: {e}")
        return ImportResult(success=False, source=source, error=str(e))

    logger.info(f"Imported {len(products)} product(s) from {source}")
    return ImportResult(success=True, source=source, products=products)


def import_file(
    path: Union[str, Path],
    default_method: str = IMPORT_DEFAULT_METHOD,
) -> ImportResult:
    """
    Import a .json file.

    Args:
        path: Path to the JSON file
        default_method: Shipping method for records that carry none

    Returns:
        ImportResult (success=False for wrong extension, bad JSON or no records)

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Import file not found: {path}")

    if path.suffix.lower() != ".json":
        logger.warning(f"Rejected non-JSON import: {path}")
        return ImportResult(
            success=False,
            source=str(path),
            error=f"Unsupported file type '{path.suffix or 'unknown'}', please upload a .json file",
        )

    # utf-8-sig tolerates the BOM that spreadsheet tools like to write
    text = path.read_text(encoding="utf-8-sig")
    return _import_payload_text(text, str(path), default_method)


def import_text(text: str, default_method: str = IMPORT_DEFAULT_METHOD) -> ImportResult:
    """Import JSON pasted by the user."""
    return _import_payload_text(text, "paste", default_method)


def handle_socket_message(
    message: Union[str, bytes],
    default_method: str = IMPORT_DEFAULT_METHOD,
) -> ImportResult:
    """Import a text frame received from the sync server."""
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    return _import_payload_text(message, "socket", default_method)


def save_form(form: Mapping[str, Any], default_method: str = FORM_DEFAULT_METHOD) -> Product:
    """Normalize a product editor submission into a single record."""
    product = normalize_product(form, default_method=default_method)
    logger.info(f"Saved product {product.id} (SKU: {product.sku})")
    return product


# =============================================================================
# Store Helpers
# =============================================================================

def merge_by_id(existing: List[Product], incoming: List[Product]) -> List[Product]:
    """
    Upsert incoming records into an existing list.

    Records with a known id replace the existing entry in place; new records
    are prepended (newest first) in their incoming order.
    """
    incoming_by_id: Dict[str, Product] = {}
    for product in incoming:
        incoming_by_id[product.id] = product

    existing_ids = {p.id for p in existing}
    merged = [incoming_by_id.get(p.id, p) for p in existing]

    new_products = []
    seen = set()
    for product in incoming:
        if product.id in existing_ids or product.id in seen:
            continue
        seen.add(product.id)
        new_products.append(incoming_by_id[product.id])

    return new_products + merged


def save_products(products: List[Product], output_path: Union[str, Path]) -> str:
    """
    Write products to a JSON backup file.

    Returns:
        Path to the saved JSON file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(to_json(products))

    logger.info(f"Saved {len(products)} product(s) to: {output_path}")
    return str(output_path)
