"""Product catalog: loads, validates, and normalizes items for the look engine.

Supports two catalog sources:
- data/products.json: bundled storefront snapshot
- data/products_live.json: snapshot pulled from the catalog export by
  scripts/build_catalog_snapshot.py

The normalizer accepts the storefront's camelCase export as well as
snake_case rows and always produces a complete CatalogItem, so the engine
never hits missing keys.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from config import CATEGORIES_SET, CATEGORY_ALIASES, GENDER_ALIASES

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "name", "brand", "category")


class CatalogFormatError(ValueError):
    pass


@dataclass(frozen=True)
class CatalogItem:
    id: str
    name: str
    brand: str
    category: str
    price: float
    subcategory: str = ""
    stock_qty: int = 0
    in_stock: bool = False
    gender: str = "unisex"
    colors: Tuple[str, ...] = ()
    sizes: Tuple[str, ...] = ()
    styles: Tuple[str, ...] = ()
    occasions: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    gift_suitable: bool = False
    featured: bool = False
    images: Tuple[str, ...] = ()

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None


def _first(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def _as_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, Iterable):
        return ()
    return tuple(str(v).strip() for v in value if str(v).strip())


def _as_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN/inf prices would slip past every budget comparison.
    return number if math.isfinite(number) else 0.0


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def canonical_category(value: Any) -> str:
    """Map storefront category names onto apparel/accessory/footwear ('' if unknown)."""
    return CATEGORY_ALIASES.get(str(value or "").strip().lower(), "")


def normalize_catalog_item(raw: Mapping[str, Any]) -> CatalogItem:
    images = _as_tuple(_first(raw, "images", "image_urls", default=()))
    if not images and raw.get("image_url"):
        images = (str(raw["image_url"]),)

    gender_raw = str(raw.get("gender") or "").strip().lower()

    return CatalogItem(
        id=str(_first(raw, "id", "product_id", default="") or "").strip(),
        name=str(_first(raw, "name", "product_name", default="") or "").strip(),
        brand=str(raw.get("brand") or "").strip(),
        category=canonical_category(raw.get("category")),
        subcategory=str(raw.get("subcategory") or "").strip(),
        price=_as_float(raw.get("price")),
        stock_qty=_as_int(_first(raw, "stockQty", "stock_qty", default=0)),
        in_stock=bool(_first(raw, "inStock", "in_stock", default=False)),
        gender=GENDER_ALIASES.get(gender_raw, "unisex"),
        colors=tuple(c.lower() for c in _as_tuple(raw.get("colors"))),
        sizes=_as_tuple(raw.get("sizes")),
        styles=_as_tuple(_first(raw, "style", "styles", default=())),
        occasions=_as_tuple(raw.get("occasions")),
        tags=_as_tuple(raw.get("tags")),
        gift_suitable=bool(_first(raw, "giftSuitable", "gift_suitable", default=False)),
        featured=bool(raw.get("featured", False)),
        images=images,
    )


def _validate_item(raw: Mapping[str, Any], item: CatalogItem, index: int) -> List[str]:
    """Validate a raw row against the canonical schema. Returns list of warnings."""
    warnings = []
    name = item.name or f"item[{index}]"

    for key in _REQUIRED_FIELDS:
        if not getattr(item, key):
            warnings.append(f"{name}: missing required field '{key}'")

    if raw.get("category") and item.category not in CATEGORIES_SET:
        warnings.append(f"{name}: unknown category '{raw.get('category')}'")

    gender_raw = str(raw.get("gender") or "").strip().lower()
    if gender_raw and gender_raw not in GENDER_ALIASES:
        warnings.append(f"{name}: unknown gender '{gender_raw}'")

    if item.price <= 0:
        warnings.append(f"{name}: non-positive price {raw.get('price')!r}")

    return warnings


def normalize_catalog(rows: Iterable[Mapping[str, Any]]) -> List[CatalogItem]:
    items: List[CatalogItem] = []
    all_warnings: List[str] = []
    for i, raw in enumerate(rows):
        if not isinstance(raw, Mapping):
            all_warnings.append(f"item[{i}]: not an object")
            continue
        item = normalize_catalog_item(raw)
        all_warnings.extend(_validate_item(raw, item, i))
        items.append(item)

    # Non-blocking: invalid rows are ineligible downstream, not dropped here.
    if all_warnings:
        logger.warning("Catalog validation found %d issues:", len(all_warnings))
        for w in all_warnings[:20]:  # cap log output
            logger.warning("  - %s", w)

    return items


def read_catalog_file(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    rows = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise CatalogFormatError(f"Catalog must be a JSON list of products: {path}")
    return rows


def load_catalog(base_dir: Path, override: Optional[Path] = None) -> Tuple[List[CatalogItem], Path]:
    live_products_path = base_dir / "data" / "products_live.json"
    default_products_path = base_dir / "data" / "products.json"

    if override is not None:
        return normalize_catalog(read_catalog_file(override)), override

    chosen_path = default_products_path
    rows: List[Dict[str, Any]] = []

    if live_products_path.exists():
        live_rows = read_catalog_file(live_products_path)
        if live_rows:
            rows = live_rows
            chosen_path = live_products_path

    if not rows:
        rows = read_catalog_file(default_products_path)
        chosen_path = default_products_path

    return normalize_catalog(rows), chosen_path
