# src/models/catalog.py

"""Typed model of the bazaar feed payload, with parse and serialise.

The wire shape is::

    {"success": bool, "lastUpdated": int,
     "products": {id: {"product_id", "sell_summary", "buy_summary",
                       "quick_status"}}}

Every field is required.  Unknown keys are ignored.  Values are taken
as-is: there is no clamping or plausibility check, only shape checks.
Only ``pricePerUnit`` is converted to :class:`FixedPoint`; the quick
status prices stay floats.
"""

import json
from dataclasses import dataclass
from typing import Any

from src.errors import SchemaError
from src.models.fixed_point import FixedPoint

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class OrderLevel:
    """One price tier of a sell or buy order book."""

    quantity: int
    unit_price: FixedPoint
    order_count: int


@dataclass(frozen=True)
class QuickStatus:
    """Aggregate market stats the feed reports for a product."""

    product_id: str
    sell_price: float
    sell_volume: int
    sell_moving_week_volume: int
    sell_order_count: int
    buy_price: float
    buy_volume: int
    buy_moving_week_volume: int
    buy_order_count: int


@dataclass(frozen=True)
class Product:
    """A bazaar product with both order-book summaries."""

    id: str
    sell_orders: tuple[OrderLevel, ...]
    buy_orders: tuple[OrderLevel, ...]
    status: QuickStatus


@dataclass(frozen=True)
class CatalogSnapshot:
    """One complete capture of the bazaar feed."""

    ok: bool
    as_of_epoch_millis: int
    products: dict[str, Product]


# ── Field readers ─────────────────────────────────────────


def _field(obj: dict[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise SchemaError(f"Missing required field '{path}.{key}'")
    return obj[key]


def _object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(
            f"Expected object at '{path}', got {type(value).__name__}"
        )
    return value


def _array(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise SchemaError(
            f"Expected array at '{path}', got {type(value).__name__}"
        )
    return value


def _bool(obj: dict[str, Any], key: str, path: str) -> bool:
    value = _field(obj, key, path)
    if not isinstance(value, bool):
        raise SchemaError(f"Expected boolean at '{path}.{key}'")
    return value


def _str(obj: dict[str, Any], key: str, path: str) -> str:
    value = _field(obj, key, path)
    if not isinstance(value, str):
        raise SchemaError(f"Expected string at '{path}.{key}'")
    return value


def _float(obj: dict[str, Any], key: str, path: str) -> float:
    value = _field(obj, key, path)
    # bool is an int subclass; JSON true is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"Expected number at '{path}.{key}'")
    return float(value)


def _unsigned(
    obj: dict[str, Any], key: str, path: str, maximum: int = _U64_MAX,
) -> int:
    value = _field(obj, key, path)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"Expected integer at '{path}.{key}'")
    if not 0 <= value <= maximum:
        raise SchemaError(
            f"Integer at '{path}.{key}' does not fit "
            f"0..{maximum}: {value}"
        )
    return value


# ── Parsing ───────────────────────────────────────────────


def _parse_order_level(raw: Any, path: str) -> OrderLevel:
    obj = _object(raw, path)
    return OrderLevel(
        quantity=_unsigned(obj, "amount", path),
        unit_price=FixedPoint.from_float(
            _float(obj, "pricePerUnit", path)
        ),
        order_count=_unsigned(obj, "orders", path, _U32_MAX),
    )


def _parse_order_levels(
    obj: dict[str, Any], key: str, path: str,
) -> tuple[OrderLevel, ...]:
    levels = _array(_field(obj, key, path), f"{path}.{key}")
    return tuple(
        _parse_order_level(level, f"{path}.{key}[{i}]")
        for i, level in enumerate(levels)
    )


def _parse_quick_status(raw: Any, path: str) -> QuickStatus:
    obj = _object(raw, path)
    return QuickStatus(
        product_id=_str(obj, "productId", path),
        sell_price=_float(obj, "sellPrice", path),
        sell_volume=_unsigned(obj, "sellVolume", path),
        sell_moving_week_volume=_unsigned(obj, "sellMovingWeek", path),
        sell_order_count=_unsigned(obj, "sellOrders", path, _U32_MAX),
        buy_price=_float(obj, "buyPrice", path),
        buy_volume=_unsigned(obj, "buyVolume", path),
        buy_moving_week_volume=_unsigned(obj, "buyMovingWeek", path),
        buy_order_count=_unsigned(obj, "buyOrders", path, _U32_MAX),
    )


def _parse_product(raw: Any, path: str) -> Product:
    obj = _object(raw, path)
    return Product(
        id=_str(obj, "product_id", path),
        sell_orders=_parse_order_levels(obj, "sell_summary", path),
        buy_orders=_parse_order_levels(obj, "buy_summary", path),
        status=_parse_quick_status(
            _field(obj, "quick_status", path), f"{path}.quick_status"
        ),
    )


def parse_catalog(payload: Any) -> CatalogSnapshot:
    """Validate an untyped payload and build a :class:`CatalogSnapshot`.

    Raises:
        SchemaError: if a required field is absent or mistyped.
    """
    obj = _object(payload, "$")
    products_raw = _object(_field(obj, "products", "$"), "$.products")
    products = {
        key: _parse_product(value, f"$.products.{key}")
        for key, value in products_raw.items()
    }
    return CatalogSnapshot(
        ok=_bool(obj, "success", "$"),
        as_of_epoch_millis=_unsigned(obj, "lastUpdated", "$"),
        products=products,
    )


def parse_catalog_json(text: str | bytes) -> CatalogSnapshot:
    """Decode JSON text and parse it as a catalog."""
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Payload is not valid JSON: {exc}") from exc
    return parse_catalog(payload)


# ── Serialisation ─────────────────────────────────────────


def _order_level_to_dict(level: OrderLevel) -> dict[str, Any]:
    return {
        "amount": level.quantity,
        "pricePerUnit": level.unit_price.to_float(),
        "orders": level.order_count,
    }


def _quick_status_to_dict(status: QuickStatus) -> dict[str, Any]:
    return {
        "productId": status.product_id,
        "sellPrice": status.sell_price,
        "sellVolume": status.sell_volume,
        "sellMovingWeek": status.sell_moving_week_volume,
        "sellOrders": status.sell_order_count,
        "buyPrice": status.buy_price,
        "buyVolume": status.buy_volume,
        "buyMovingWeek": status.buy_moving_week_volume,
        "buyOrders": status.buy_order_count,
    }


def catalog_to_payload(snapshot: CatalogSnapshot) -> dict[str, Any]:
    """Serialise a snapshot back to the feed's wire shape.

    ``pricePerUnit`` is written as ``raw / 100`` so that parsing the
    result again yields the same raw units.
    """
    return {
        "success": snapshot.ok,
        "lastUpdated": snapshot.as_of_epoch_millis,
        "products": {
            key: {
                "product_id": product.id,
                "sell_summary": [
                    _order_level_to_dict(lvl) for lvl in product.sell_orders
                ],
                "buy_summary": [
                    _order_level_to_dict(lvl) for lvl in product.buy_orders
                ],
                "quick_status": _quick_status_to_dict(product.status),
            }
            for key, product in snapshot.products.items()
        },
    }
