"""Order line entry: draft fields, committed lines and their totals."""

from __future__ import annotations

from typing import Callable

from sales_app.clock import Clock
from sales_app.data import find_product
from sales_app.models import LineDraft, OrderLine

_TOTAL_FIELDS = {"quantity", "unit_price", "discount"}
_EDITABLE_FIELDS = _TOTAL_FIELDS | {"negotiated_discount"}
_NUMERIC_CASTS = {"quantity": int, "unit_price": float, "discount": float}


def line_total(quantity: float, unit_price: float, discount: float) -> float:
    """quantity x unit price, less the percent discount."""
    return quantity * unit_price * (1 - discount / 100)


def parse_numeric_entry(field: str, raw: str) -> float | None:
    """Parse a typed quantity, unit price or discount.

    A blank entry falls back to the draft default. Unparseable text gives None.
    """
    cast = _NUMERIC_CASTS[field]
    if not raw.strip():
        return getattr(LineDraft(), field)
    try:
        return cast(raw)
    except ValueError:
        return None


class OrderLineManager:
    """Adds, edits and removes the lines of one order.

    `lines` is the order's own list and is mutated in place. The draft
    holds the entry fields for the next line and is reset after each add.
    """

    def __init__(self, lines: list[OrderLine], country: Callable[[], str], clock: Clock) -> None:
        self.lines = lines
        self._country = country
        self._clock = clock
        self.draft = LineDraft()

    def select(self, code: str) -> None:
        product = find_product(code)
        country = self._country()
        if product is None or not country:
            return
        self.draft.product = product
        self.draft.unit_price = product.price_for(country)

    def add(self) -> OrderLine | None:
        draft = self.draft
        if draft.product is None:
            return None

        line = OrderLine(
            id=self._clock.next_id(),
            code=draft.product.code,
            description=draft.product.description,
            quantity=draft.quantity,
            unit_price=draft.unit_price,
            discount=draft.discount,
            negotiated_discount=draft.negotiated_discount,
            total=line_total(draft.quantity, draft.unit_price, draft.discount),
        )
        self.lines.append(line)
        self.draft = LineDraft()
        return line

    def get(self, line_id: str) -> OrderLine | None:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    def update(self, line_id: str, field: str, value: object) -> None:
        if field not in _EDITABLE_FIELDS:
            raise ValueError(f"order line field must be one of {sorted(_EDITABLE_FIELDS)}")
        line = self.get(line_id)
        if line is None:
            return
        setattr(line, field, value)
        if field in _TOTAL_FIELDS:
            line.total = line_total(line.quantity, line.unit_price, line.discount)

    def remove(self, line_id: str) -> None:
        self.lines[:] = [line for line in self.lines if line.id != line_id]

    @property
    def total(self) -> float:
        return sum(line.total for line in self.lines)
