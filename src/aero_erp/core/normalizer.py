"""
Product Normalizer

Transforms arbitrary decoded JSON (backup files, spreadsheet exports saved as
JSON, socket messages, pasted blobs, form payloads) into canonical Product
records for the dashboard calculators.

Usage:
    from aero_erp.core.normalizer import normalize_batch, normalize_product

    # Whole upload, import path (Sea default)
    products = normalize_batch(json.loads(text))

    # Single form save (Air default)
    product = normalize_product(form_data, default_method="Air")

Field-level problems never raise: missing, null, mistyped or malformed values
are replaced by safe defaults. The only failure is structural: a payload with
no array of records anywhere (NoTabularDataError).
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from aero_erp.core.coercion import (
    as_mapping, to_choice, to_int, to_number, to_string_list, to_text,
)
from aero_erp.core import config
from aero_erp.core.config import ID_PREFIX, IMPORT_DEFAULT_METHOD
from aero_erp.core.resolver import MISSING, resolve_field
from aero_erp.core.schema import (
    Currency, Financials, Logistics, Product, ProductStatus, ShippingMethod,
    DEFAULT_CATEGORY, DEFAULT_LOGISTICS_STATUS,
    DEFAULT_NAME, DEFAULT_SKU,
)

logger = logging.getLogger(__name__)


class NoTabularDataError(ValueError):
    """Raised when a payload contains no array of records to import."""
    pass


# ============================================================================
# ALIAS TABLES
# ============================================================================
# Order is priority: canonical key first, then common English spellings,
# then localized (CJK) spreadsheet headers.

FIELD_ALIASES: Dict[str, Sequence[str]] = {
    "id": ["id", "productId", "product_id", "sys_id", "编号"],
    "sku": ["sku", "SKU编码", "msku", "sellerSku", "seller_sku", "item_no",
            "itemNo", "model", "编码", "货号"],
    "name": ["name", "title", "productName", "product_name", "中文名称",
             "产品名称", "商品名称", "名称", "品名", "标题"],
    "description": ["description", "desc", "details", "产品描述", "描述"],
    "category": ["category", "productType", "product_type", "类目", "分类", "品类"],
    "price": ["price", "salePrice", "sale_price", "retailPrice", "retail_price",
              "listPrice", "msrp", "销售价", "售价", "定价", "标准价", "价格"],
    "currency": ["currency", "currencyCode", "currency_code", "币种"],
    "stock": ["stock", "qty", "quantity", "inventory", "on_hand", "available",
              "库存", "现有库存", "数量"],
    "status": ["status", "productStatus", "product_status", "状态"],
    "imageUrl": ["imageUrl", "image_url", "image", "img", "主图", "图片"],
    "marketplaces": ["marketplaces", "platforms", "channels", "站点", "平台"],
    "note": ["note", "notes", "remark", "remarks", "备注", "说明"],
    "supplier": ["supplier", "vendor", "factory", "供应商", "厂家"],
    "unitWeight": ["unitWeight", "unit_weight", "weight", "netWeight",
                   "单品重量", "净重", "重量"],
    "boxLength": ["boxLength", "box_length", "cartonLength", "箱长"],
    "boxWidth": ["boxWidth", "box_width", "cartonWidth", "箱宽"],
    "boxHeight": ["boxHeight", "box_height", "cartonHeight", "箱高"],
    "boxWeight": ["boxWeight", "box_weight", "gross_weight", "cartonWeight", "箱重"],
    "itemsPerBox": ["itemsPerBox", "items_per_box", "pcs_per_box", "per_box",
                    "装箱数", "每箱数量"],
    "restockCartons": ["restockCartons", "restock_cartons", "cartons", "ctns",
                       "box_count", "箱数"],
    "inboundId": ["inboundId", "inbound_id", "shipmentId", "shipment_id",
                  "po_no", "入库单号", "货件号", "批次"],
    "dailySales": ["dailySales", "daily_sales", "avgDailySales", "日均销量", "日销"],
    "platformCommission": ["platformCommission", "platform_commission",
                           "commission", "佣金"],
    "returnRate": ["returnRate", "return_rate", "退货率"],
    "exchangeRate": ["exchangeRate", "exchange_rate", "fxRate", "汇率"],
}

FINANCIAL_ALIASES: Dict[str, Sequence[str]] = {
    "costOfGoods": ["costOfGoods", "cost_of_goods", "cogs", "cost", "unitCost",
                    "unit_cost", "purchasePrice", "purchase_price",
                    "采购单价", "采购价", "含税单价", "进货价", "成本"],
    "shippingCost": ["shippingCost", "shipping_cost", "freightCost", "freight",
                     "头程运费单价", "运费单价", "头程单价", "运费", "头程", "物流费"],
    "otherCost": ["otherCost", "other_cost", "杂费"],
    "sellingPrice": ["sellingPrice", "selling_price"],
    "platformFee": ["platformFee", "platform_fee", "平台费"],
    "adCost": ["adCost", "ad_cost", "adCostPerUnit", "广告费", "广告"],
}

# Keys looked up inside a nested "logistics" mapping
LOGISTICS_ALIASES: Dict[str, Sequence[str]] = {
    "method": ["method", "shippingMethod", "运输方式"],
    "carrier": ["carrier", "forwarder", "承运商", "货代"],
    "trackingNo": ["trackingNo", "tracking_no", "trackingNumber", "物流单号"],
    "status": ["status", "物流状态"],
    "origin": ["origin", "from", "起运地"],
    "destination": ["destination", "to", "目的地"],
    "etd": ["etd", "shipDate", "发货日期"],
    "eta": ["eta", "arrivalDate", "预计到达"],
    "shippingRate": ["shippingRate", "shipping_rate", "rate", "运费单价"],
    "manualChargeableWeight": ["manualChargeableWeight", "chargeableWeight", "计费重"],
}

# Flat (top-level) spellings of the logistics fields. Bare "status" and
# "method" at top level belong to the product, not its shipment.
LOGISTICS_TOP_LEVEL_ALIASES: Dict[str, Sequence[str]] = {
    "method": ["shippingMethod", "shipping_method", "transportMethod", "运输方式"],
    "carrier": ["carrier", "forwarder", "承运商", "货代"],
    "trackingNo": ["trackingNo", "tracking_no", "trackingNumber", "物流单号"],
    "status": ["logisticsStatus", "shippingStatus", "物流状态"],
    "origin": ["origin", "起运地"],
    "destination": ["destination", "目的地"],
    "etd": ["etd", "发货日期"],
    "eta": ["eta", "预计到达"],
    "shippingRate": ["shippingRate", "shipping_rate", "freightRate", "kg_price"],
    "manualChargeableWeight": ["manualChargeableWeight", "chargeableWeight", "计费重"],
}

# Well-known wrapper keys for an array of records, checked in order
RECORD_LIST_KEYS = ("products", "items", "data", "rows", "records", "list", "产品", "商品")


# ============================================================================
# IDENTIFIERS AND TIMESTAMPS
# ============================================================================

def generate_product_id(prefix: str = ID_PREFIX) -> str:
    """Best-effort unique id for records that arrive without one."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _timestamp(now: Optional[datetime]) -> str:
    moment = now or datetime.now(timezone.utc)
    return moment.isoformat()


def _validate_method(default_method: str) -> str:
    method = to_choice(default_method, ShippingMethod, "")
    if not method:
        allowed = ", ".join(m.value for m in ShippingMethod)
        raise ValueError(f"Unknown shipping method: {default_method}. Must be one of {allowed}")
    return method


# ============================================================================
# SINGLE RECORD
# ============================================================================

def _field(raw: Mapping, name: str) -> Any:
    return resolve_field(raw, FIELD_ALIASES[name])


def _nested_or_top(nested: Mapping, raw: Mapping, nested_aliases: Sequence[str],
                   top_aliases: Sequence[str]) -> Any:
    value = resolve_field(nested, nested_aliases)
    if value is MISSING:
        value = resolve_field(raw, top_aliases)
    return value


def _build_financials(raw: Mapping, price: float) -> Financials:
    nested = as_mapping(raw.get("financials"))

    def money(key: str) -> float:
        aliases = FINANCIAL_ALIASES[key]
        return to_number(_nested_or_top(nested, raw, aliases, aliases))

    selling_price = money("sellingPrice")

    return Financials(
        costOfGoods=money("costOfGoods"),
        shippingCost=money("shippingCost"),
        otherCost=money("otherCost"),
        # Listing price stands in for a missing selling price
        sellingPrice=selling_price or price,
        platformFee=money("platformFee"),
        adCost=money("adCost"),
    )


def _build_logistics(raw: Mapping, default_method: str) -> Logistics:
    nested = as_mapping(raw.get("logistics"))

    def lookup(key: str) -> Any:
        return _nested_or_top(nested, raw, LOGISTICS_ALIASES[key], LOGISTICS_TOP_LEVEL_ALIASES[key])

    return Logistics(
        method=to_choice(lookup("method"), ShippingMethod, default_method),
        carrier=to_text(lookup("carrier")),
        trackingNo=to_text(lookup("trackingNo")),
        status=to_text(lookup("status"), DEFAULT_LOGISTICS_STATUS),
        origin=to_text(lookup("origin")),
        destination=to_text(lookup("destination")),
        etd=to_text(lookup("etd")),
        eta=to_text(lookup("eta")),
        shippingRate=to_number(lookup("shippingRate")),
        manualChargeableWeight=to_number(lookup("manualChargeableWeight")),
    )


def normalize_product(
    raw: Any,
    *,
    default_method: str = IMPORT_DEFAULT_METHOD,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Product:
    """
    Map one raw record to exactly one canonical Product.

    Args:
        raw: The raw record. Anything that is not a mapping is treated as {}.
        default_method: Shipping method when the record carries none
            ("Sea" for imports, "Air" for form saves)
        now: Normalization time; defaults to the current UTC time
        id_factory: Id generator for records without an id

    Returns:
        A fully-populated Product

    Raises:
        ValueError: If default_method is not a known shipping method
    """
    method = _validate_method(default_method)

    if not isinstance(raw, Mapping):
        logger.debug(f"Non-object record ({type(raw).__name__}) normalized with defaults")
        raw = {}

    price = to_number(_field(raw, "price"))

    raw_id = to_text(_field(raw, "id"))
    product_id = raw_id or (id_factory or generate_product_id)()

    exchange_rate = to_number(_field(raw, "exchangeRate")) or config.DEFAULT_EXCHANGE_RATE

    return Product(
        id=product_id,
        sku=to_text(_field(raw, "sku"), DEFAULT_SKU),
        name=to_text(_field(raw, "name"), DEFAULT_NAME),
        description=to_text(_field(raw, "description")),
        category=to_text(_field(raw, "category"), DEFAULT_CATEGORY),
        price=price,
        currency=to_choice(_field(raw, "currency"), Currency, Currency.USD.value),
        stock=to_int(_field(raw, "stock")),
        status=to_choice(_field(raw, "status"), ProductStatus, ProductStatus.DRAFT.value),
        imageUrl=to_text(_field(raw, "imageUrl")),
        marketplaces=to_string_list(_field(raw, "marketplaces")),
        lastUpdated=_timestamp(now),
        note=to_text(_field(raw, "note")),
        supplier=to_text(_field(raw, "supplier")),
        financials=_build_financials(raw, price),
        logistics=_build_logistics(raw, method),
        unitWeight=to_number(_field(raw, "unitWeight")),
        boxLength=to_number(_field(raw, "boxLength")),
        boxWidth=to_number(_field(raw, "boxWidth")),
        boxHeight=to_number(_field(raw, "boxHeight")),
        boxWeight=to_number(_field(raw, "boxWeight")),
        itemsPerBox=to_int(_field(raw, "itemsPerBox")),
        restockCartons=to_int(_field(raw, "restockCartons")),
        inboundId=to_text(_field(raw, "inboundId")),
        dailySales=to_number(_field(raw, "dailySales")),
        platformCommission=to_number(_field(raw, "platformCommission")),
        returnRate=to_number(_field(raw, "returnRate")),
        exchangeRate=exchange_rate,
    )


# ============================================================================
# BATCH
# ============================================================================

def unwrap_records(payload: Any) -> List[Any]:
    """
    Locate the array of raw records inside a decoded JSON payload.

    Tried in order:
    1. The payload itself is a list
    2. A list under a well-known key (products, items, data, rows, ...)
    3. The first value of the object that is a list

    Raises:
        NoTabularDataError: If no list is found
    """
    if isinstance(payload, list):
        return payload

    if isinstance(payload, Mapping):
        for key in RECORD_LIST_KEYS:
            value = payload.get(key)
            if isinstance(value, list):
                return value

        for value in payload.values():
            if isinstance(value, list):
                return value

    raise NoTabularDataError("No array data found in payload")


def normalize_batch(
    payload: Any,
    *,
    default_method: str = IMPORT_DEFAULT_METHOD,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> List[Product]:
    """
    Normalize every record of a decoded payload.

    Output order matches input order; records are not merged or de-duplicated.

    Raises:
        NoTabularDataError: If the payload holds no array of records
        ValueError: If default_method is not a known shipping method
    """
    records = unwrap_records(payload)
    products = [
        normalize_product(raw, default_method=default_method, now=now, id_factory=id_factory)
        for raw in records
    ]
    logger.info(f"Normalized {len(products)} product record(s)")
    return products


def normalize_json_text(
    text: str,
    *,
    default_method: str = IMPORT_DEFAULT_METHOD,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> List[Product]:
    """
    Decode JSON text and normalize it.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
        NoTabularDataError: If the decoded payload holds no array of records
    """
    payload = json.loads(text)
    return normalize_batch(payload, default_method=default_method, now=now, id_factory=id_factory)
