from __future__ import annotations

import logging
from dataclasses import dataclass

from .api_client import ApiError, PriceApiClient
from .models import ProductEntry
from .report import ComparisonReport, build_report
from .units import format_number, normalize_unit, parse_number, price_per_unit

logger = logging.getLogger(__name__)


class ComparisonError(ApiError):
    pass


@dataclass(frozen=True)
class RankedEntry:
    entry: ProductEntry
    volume: str | None    # normalized, None when the entry has no volume
    unit: str
    unit_price: str


def rank_entry(entry: ProductEntry) -> RankedEntry:
    price = format_number(entry.price)
    if entry.product_volume is None:
        return RankedEntry(entry=entry, volume=None, unit=entry.unit, unit_price=price)

    nq = normalize_unit(format_number(entry.product_volume), entry.unit)
    return RankedEntry(
        entry=entry,
        volume=nq.value,
        unit=nq.unit,
        unit_price=price_per_unit(price, nq.value),
    )


def _sort_key(r: RankedEntry) -> float:
    val = parse_number(r.unit_price)
    return val if val is not None else r.entry.price


def rank_entries(entries: list[ProductEntry]) -> list[RankedEntry]:
    """Cheapest unit price first; entries without a volume rank by raw price."""
    return sorted((rank_entry(e) for e in entries), key=_sort_key)


def compare_product(client: PriceApiClient, name: str) -> ComparisonReport:
    products = client.filter_products(name=name)
    if not products:
        raise ComparisonError("No product found with the given name.")
    product = products[0]
    if len(products) > 1:
        logger.info("%d products match %r, using %s", len(products), name, product.id)

    entries = client.filter_product_entries(product_id=product.id)
    return build_report(product, rank_entries(entries))
