"""Domain models for sales order entry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CountryPrice:
    price: float
    effective_date: str


@dataclass(frozen=True)
class CountryCost:
    cost: float
    effective_date: str


@dataclass(frozen=True)
class Product:
    """A sellable catalog entry with per-country pricing."""

    code: str
    description: str
    dimension: str
    category: str
    subcategory: str
    price_by_country: dict[str, CountryPrice] = field(default_factory=dict)
    cost_by_country: dict[str, CountryCost] = field(default_factory=dict)

    def price_for(self, country: str) -> float:
        """Return the listed price for a country, 0 when it has none."""
        entry = self.price_by_country.get(country)
        if entry is None:
            return 0
        return entry.price


@dataclass
class ProductDraft:
    """Fields of the quick "create product" panel on the order screen."""

    code: str = ""
    description: str = ""
    dimension: str = ""
    category: str = ""
    subcategory: str = ""


@dataclass
class Customer:
    identification: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    reference: str = ""
    country: str = ""
    state: str = ""
    city: str = ""


@dataclass
class OrderLine:
    """One product entry within an order."""

    id: str
    code: str
    description: str
    quantity: int = 1
    unit_price: float = 0
    discount: float = 0
    negotiated_discount: bool = False
    total: float = 0


@dataclass
class LineDraft:
    """Transient line-entry fields, kept apart from the committed lines."""

    product: Product | None = None
    quantity: int = 1
    unit_price: float = 0
    discount: float = 0
    negotiated_discount: bool = False


@dataclass
class PartialPayment:
    id: str
    amount: float = 0
    date: str = ""


@dataclass
class Order:
    order_date: str = ""
    order_number: str = ""
    order_type: str = "immediate"
    seller: str = ""
    sales_channel: str = ""
    payment_method: str = ""
    carrier: str = ""
    delivery_date: str = ""
    lines: list[OrderLine] = field(default_factory=list)
    partial_payments: list[PartialPayment] = field(default_factory=list)


@dataclass
class SalesData:
    """The in-progress customer + order record of one form session."""

    customer: Customer = field(default_factory=Customer)
    order: Order = field(default_factory=Order)


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str


@dataclass
class ProductRecord:
    """A row of the managed product table."""

    code: str
    name: str
    category: str
    sub_category: str = ""
    size_type: str = ""
    dimensions: str = ""
    price_venezuela: float | None = None
    price_colombia_usd: float | None = None
    price_el_salvador: float | None = None
    id: str | None = None


@dataclass(frozen=True)
class SavedSalesOrder:
    """Saved sales order metadata."""

    order_id: str
    created_at: str
    order_number: str
    total: float
    status: str
