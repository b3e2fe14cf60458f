from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class ConversionRule:
    to: str
    factor: float


@dataclass(frozen=True)
class NormalizedQuantity:
    value: str
    unit: str


CONVERSIONS: MappingProxyType[str, ConversionRule] = MappingProxyType({
    "g": ConversionRule("kg", 0.001),
    "kg": ConversionRule("kg", 1),
    "mg": ConversionRule("kg", 0.000001),
    "l": ConversionRule("l", 1),
    "ml": ConversionRule("l", 0.001),
    "hl": ConversionRule("l", 100),
    "ks": ConversionRule("ks", 1),
})

# Leading decimal prefix, e.g. "10", "0.5", ".5", "1e3", "10g" -> 10
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def canonical_units() -> list[str]:
    """Distinct target units of the conversion table, in table order."""
    out: list[str] = []
    for rule in CONVERSIONS.values():
        if rule.to not in out:
            out.append(rule.to)
    return out


def canonical_unit(unit: str) -> str:
    """Target unit for ``unit``; unknown symbols come back unchanged."""
    rule = CONVERSIONS.get(unit)
    return rule.to if rule is not None else unit


def parse_number(text: str) -> float | None:
    """Parse the leading decimal number of ``text``; None if there is none."""
    if not isinstance(text, str):
        return None
    m = _NUMBER_RE.match(text)
    if not m:
        return None
    val = float(m.group(1))
    if not math.isfinite(val):
        return None
    return val


def format_number(val: float) -> str:
    """Shortest round-trip text for ``val``.

    Same text as JavaScript's Number#toString: integral values drop the
    fractional part ("50", not "50.0"), magnitudes in [1e-6, 1e21) are
    written positionally, anything else as "5e-7" / "1e+21".
    """
    val = float(val)
    if val == 0:
        return "0"
    txt = repr(val)
    if abs(val) < 1e-6 or abs(val) >= 1e21:
        mantissa, exp = txt.split("e")
        e = int(exp)
        return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    if val.is_integer():
        return str(int(val))
    if "e" in txt:
        txt = format(Decimal(txt), "f")
    return txt


def normalize_unit(value: str, unit: str) -> NormalizedQuantity:
    num = parse_number(value)
    if num is None or not unit:
        return NormalizedQuantity(value, unit)
    rule = CONVERSIONS.get(unit)
    if rule is None:
        return NormalizedQuantity(value, unit)
    return NormalizedQuantity(format_number(num * rule.factor), rule.to)


def price_per_unit(price: str, volume: str) -> str:
    p = parse_number(price)
    v = parse_number(volume)
    if p is None or v is None or v == 0:
        return price
    return format_number(p / v)
