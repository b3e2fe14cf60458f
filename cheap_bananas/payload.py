from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
from typing import Any

from .modes import Mode
from .sentinel import is_sentinel, resolve_sentinels
from .units import canonical_unit, canonical_units, normalize_unit, parse_number


@dataclass(frozen=True)
class SubmitRequest:
    path: str
    body: dict[str, Any]


def _at(values: list[str], idx: int) -> str:
    return values[idx] if idx < len(values) else ""


def missing_required(mode: Mode, values: list[str]) -> list[str]:
    """Labels of required fields left empty. A '_' placeholder counts as filled."""
    return [mode.fields[i].label for i in mode.required_indices() if not _at(values, i)]


def validate(mode: Mode, values: list[str]) -> list[str]:
    errors: list[str] = []
    if missing_required(mode, values):
        errors.append(f"Please fill in all required fields for {mode.label}.")

    if mode.key == "productEntry":
        price = _at(values, 1)
        if price and not is_sentinel(price):
            p = parse_number(price)
            if p is None or p <= 0:
                errors.append(f"Price must be a positive number, got {price!r}.")

        volume = _at(values, 2)
        if volume and not is_sentinel(volume):
            v = parse_number(volume)
            if v is None or v <= 0:
                errors.append(f"Product volume must be a positive number, got {volume!r}.")

        unit = _at(values, 3)
        if unit and canonical_unit(unit) not in canonical_units():
            known = ", ".join(canonical_units())
            errors.append(f"Unit must be one of {known} (or convertible to one), got {unit!r}.")

    return errors


def _number_or_text(raw: str) -> float | str:
    num = parse_number(raw)
    return raw if num is None else num


def _product_entry_body(values: list[str], today: _date) -> dict[str, Any]:
    product_id, price, volume, unit, shop_id, day, notes = (_at(values, i) for i in range(7))

    body: dict[str, Any] = {"product_id": product_id, "price": _number_or_text(price)}

    if volume:
        nq = normalize_unit(volume, unit)
        body["product_volume"] = _number_or_text(nq.value)
        unit = nq.unit
    body["unit"] = canonical_unit(unit)

    if shop_id:
        body["shop_id"] = shop_id
    body["date"] = day if day and not is_sentinel(day) else today.isoformat()
    if notes:
        body["notes"] = notes
    return body


def _product_body(values: list[str]) -> dict[str, Any]:
    name, notes, tags = (_at(values, i) for i in range(3))
    body: dict[str, Any] = {"name": name}
    if notes:
        body["notes"] = notes
    if tags:
        body["tags"] = [t.strip() for t in tags.split(",")]
    return body


def _shop_body(values: list[str]) -> dict[str, Any]:
    name, notes = _at(values, 0), _at(values, 1)
    body: dict[str, Any] = {"name": name}
    if notes:
        body["notes"] = notes
    return body


def build_request(mode: Mode, values: list[str], *, today: _date | None = None) -> SubmitRequest:
    """Assemble the API body for ``mode`` from positional field values.

    Empty optional fields are left out of the body; '_' placeholders
    survive assembly and come out as None after sentinel resolution.
    """
    if mode.key == "productEntry":
        body = _product_entry_body(values, today or _date.today())
    elif mode.key == "product":
        body = _product_body(values)
    elif mode.key == "shop":
        body = _shop_body(values)
    else:
        raise ValueError(f"No request layout for mode {mode.key!r}")

    return SubmitRequest(path=mode.path, body=resolve_sentinels(body))
