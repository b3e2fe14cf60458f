from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Field:
    label: str
    required: bool = False
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class Mode:
    key: str
    label: str
    path: str  # API endpoint the assembled body is POSTed to
    fields: tuple[Field, ...] = field(default_factory=tuple)

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def required_indices(self) -> list[int]:
        return [i for i, f in enumerate(self.fields) if f.required]

    def placeholder(self) -> str:
        return "Type: " + " ".join(f.label.lower() for f in self.fields)


_SHOPS = ("tesco", "lidl", "albert", "billa")
_PRODUCTS = ("banana", "bread", "butter", "beans")

PRODUCT_ENTRY = Mode(
    key="productEntry",
    label="Product Entry",
    path="/product-entries",
    fields=(
        Field("Product ID", required=True),
        Field("Price", required=True),
        Field("Product Volume"),
        Field("Unit", required=True, suggestions=("kg", "l", "ks")),
        Field("Shop ID", suggestions=_SHOPS),
        Field("Date"),
        Field("Notes"),
    ),
)

PRODUCT = Mode(
    key="product",
    label="Product",
    path="/products",
    fields=(
        Field("Name", required=True, suggestions=_PRODUCTS),
        Field("Notes"),
        Field("Tags"),
    ),
)

SHOP = Mode(
    key="shop",
    label="Shop",
    path="/shops",
    fields=(
        Field("Name", required=True, suggestions=_SHOPS),
        Field("Notes"),
    ),
)

MODES: tuple[Mode, ...] = (PRODUCT_ENTRY, PRODUCT, SHOP)


def get_mode(key: str) -> Mode:
    for m in MODES:
        if m.key == key:
            return m
    known = ", ".join(m.key for m in MODES)
    raise KeyError(f"Unknown mode {key!r} (expected one of: {known})")
