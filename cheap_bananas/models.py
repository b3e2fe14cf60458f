from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    notes: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Shop:
    id: str
    name: str
    notes: str | None = None


@dataclass(frozen=True)
class ProductEntry:
    """A single recorded price for a product at a shop."""

    id: str
    product_id: str
    price: float
    unit: str                              # canonical unit: kg, l or ks
    product_volume: float | None = None
    shop_id: str | None = None
    shop_name: str | None = None           # filled in by the API on filter
    date: str | None = None                # ISO 8601
    notes: str | None = None
