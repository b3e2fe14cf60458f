from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from .models import Product

if TYPE_CHECKING:
    from .compare import RankedEntry


@dataclass
class EntryRow:
    rank: int
    id: str
    shop: str | None
    price: float
    volume: str | None
    unit: str
    unit_price: str
    date: str | None
    notes: str | None


@dataclass
class ComparisonReport:
    timestamp: str
    product_id: str
    product_name: str
    total: int
    rows: list[EntryRow]

    def cheapest(self) -> EntryRow | None:
        return self.rows[0] if self.rows else None

    def summary_text(self) -> str:
        lines = [
            f"Product: {self.product_name}  ({self.product_id})",
            f"Entries: {self.total}",
            "",
        ]
        if not self.rows:
            lines.append("  No price entries recorded.")
        for row in self.rows:
            size = f"{row.volume} {row.unit}" if row.volume is not None else row.unit
            lines.append(f"  {row.rank}. {row.shop or 'N/A'}  {row.price}  ({size})")
            lines.append(f"     unit price: {row.unit_price}/{row.unit}  notes: {row.notes or 'N/A'}  id: {row.id}")
        return "\n".join(lines)

    def write_json(self, path: str = "artifacts/compare_report.json") -> str:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(asdict(self), indent=2))
        return str(out)


def build_report(product: Product, ranked: list["RankedEntry"]) -> ComparisonReport:
    rows = [
        EntryRow(
            rank=i,
            id=r.entry.id,
            shop=r.entry.shop_name or r.entry.shop_id,
            price=r.entry.price,
            volume=r.volume,
            unit=r.unit,
            unit_price=r.unit_price,
            date=r.entry.date,
            notes=r.entry.notes,
        )
        for i, r in enumerate(ranked, 1)
    ]
    return ComparisonReport(
        timestamp=datetime.now(timezone.utc).isoformat(),
        product_id=product.id,
        product_name=product.name,
        total=len(rows),
        rows=rows,
    )
