from __future__ import annotations

import logging
from typing import Any

import requests

from .http import HttpClient
from .models import Product, ProductEntry, Shop
from .payload import SubmitRequest

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DuplicateShopError(ApiError):
    pass


def _opt_str(val: Any) -> str | None:
    return str(val) if val is not None else None


def _opt_float(val: Any) -> float | None:
    return float(val) if isinstance(val, (int, float)) and not isinstance(val, bool) else None


class PriceApiClient:
    """Client for the price REST API (products, shops, product entries)."""

    def __init__(self, *, api_url: str, timeout_s: float = 30.0, http: HttpClient | None = None):
        self.http = http or HttpClient(base_url=api_url, timeout_s=timeout_s)

    # --- create ---

    def submit(self, request: SubmitRequest) -> str:
        data = self._post_json(request.path, request.body)
        _id = data.get("id") if isinstance(data, dict) else None
        if not _id:
            raise ApiError(f"API did not return an id for {request.path}: {data!r}")
        logger.info("Created %s id=%s", request.path.strip("/"), _id)
        return str(_id)

    def create_product(self, body: dict[str, Any]) -> str:
        return self.submit(SubmitRequest("/products", body))

    def create_shop(self, body: dict[str, Any]) -> str:
        return self.submit(SubmitRequest("/shops", body))

    def create_product_entry(self, body: dict[str, Any]) -> str:
        return self.submit(SubmitRequest("/product-entries", body))

    def create_shop_unique(self, body: dict[str, Any]) -> str:
        name = str(body.get("name") or "")
        for shop in self.filter_shops(name=name):
            if shop.name.strip().lower() == name.strip().lower():
                raise DuplicateShopError(f"Shop already exists: {shop.name} ({shop.id})")
        return self.create_shop(body)

    # --- filter ---

    def filter_products(self, **filters: Any) -> list[Product]:
        out: list[Product] = []
        for row in self._get_rows("/products/filter", filters):
            _id = row.get("id")
            nm = row.get("name")
            if _id and nm:
                out.append(
                    Product(
                        id=str(_id),
                        name=str(nm),
                        notes=_opt_str(row.get("notes")),
                        tags=[str(t) for t in (row.get("tags") or [])],
                    )
                )
        return out

    def filter_shops(self, **filters: Any) -> list[Shop]:
        out: list[Shop] = []
        for row in self._get_rows("/shops/filter", filters):
            _id = row.get("id")
            nm = row.get("name")
            if _id and nm:
                out.append(Shop(id=str(_id), name=str(nm), notes=_opt_str(row.get("notes"))))
        return out

    def filter_product_entries(self, **filters: Any) -> list[ProductEntry]:
        out: list[ProductEntry] = []
        for row in self._get_rows("/product-entries/filter", filters):
            _id = row.get("id")
            price = _opt_float(row.get("price"))
            if not _id or price is None:
                logger.warning("Skipping malformed product entry: %r", row)
                continue
            out.append(
                ProductEntry(
                    id=str(_id),
                    product_id=str(row.get("product_id") or ""),
                    price=price,
                    unit=str(row.get("unit") or ""),
                    product_volume=_opt_float(row.get("product_volume")),
                    shop_id=_opt_str(row.get("shop_id")),
                    shop_name=_opt_str(row.get("shop_name")),
                    date=_opt_str(row.get("date")),
                    notes=_opt_str(row.get("notes")),
                )
            )
        return out

    # --- delete ---

    def delete_product_entry(self, entry_id: str) -> None:
        path = f"/product-entries/{entry_id}"
        resp = self.http.delete(path)
        self._check(resp, path)
        logger.info("Deleted product entry id=%s", entry_id)

    # --- plumbing ---

    def _get_rows(self, path: str, filters: dict[str, Any]) -> list[dict[str, Any]]:
        params = {k: v for k, v in filters.items() if v is not None}
        resp = self.http.get(path, params=params)
        self._check(resp, path)
        data = self._decode(resp, path)
        if not isinstance(data, list):
            raise ApiError(f"Expected a list from {path}, got {type(data).__name__}")
        return [row for row in data if isinstance(row, dict)]

    def _post_json(self, path: str, body: dict[str, Any]) -> Any:
        resp = self.http.post(path, json=body)
        self._check(resp, path)
        return self._decode(resp, path)

    @staticmethod
    def _check(resp: requests.Response, path: str) -> None:
        if resp.status_code >= 400:
            raise ApiError(
                f"API error {resp.status_code} for {path}: {resp.text[:500]}",
                status_code=resp.status_code,
            )

    @staticmethod
    def _decode(resp: requests.Response, path: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Failed to decode JSON from API for {path}: {e}") from e
