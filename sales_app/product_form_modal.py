"""Create / edit product modal screen."""

from __future__ import annotations

from dataclasses import replace

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Static

from sales_app.models import ProductRecord

_TEXT_FIELDS = (
    ("code", "Code *"),
    ("name", "Name *"),
    ("category", "Category *"),
    ("sub_category", "Subcategory"),
    ("size_type", "Size"),
    ("dimensions", "Dimensions"),
)

_PRICE_FIELDS = (
    ("price_venezuela", "Price Venezuela"),
    ("price_colombia_usd", "Price Colombia (USD)"),
    ("price_el_salvador", "Price El Salvador"),
)


class ProductFormModal(ModalScreen[ProductRecord | None]):
    """Collect product fields; dismisses with the record or None on cancel."""

    CSS = """
    ProductFormModal {
        align: center middle;
        background: $background 60%;
    }

    #product-dialog {
        width: 64;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
        overflow-y: auto;
    }

    #product-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #product-error {
        color: #ffb3b3;
        margin: 1 0;
    }

    #product-help {
        color: #dddddd;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, record: ProductRecord | None = None) -> None:
        super().__init__()
        self.record = record
        self.error = ""

    def compose(self) -> ComposeResult:
        record = self.record
        title = "Edit product" if record is not None else "New product"
        with Container(id="product-dialog"):
            yield Static(title, id="product-title")
            for name, label in _TEXT_FIELDS:
                yield Label(label)
                value = (getattr(record, name) or "") if record else ""
                yield Input(value, id=f"product-{name}")
            for name, label in _PRICE_FIELDS:
                price = getattr(record, name) if record else None
                yield Label(label)
                yield Input("" if price is None else f"{price:g}", type="number", id=f"product-{name}")
            yield Static(id="product-error")
            yield Static("Ctrl+S save. Esc cancel.", id="product-help")

    def action_cancel(self) -> None:
        self.dismiss(None)

    def action_save(self) -> None:
        values = {name: self.query_one(f"#product-{name}", Input).value.strip() for name, _ in _TEXT_FIELDS}
        if not values["code"] or not values["name"] or not values["category"]:
            self._show_error("Code, name and category are required.")
            return

        prices: dict[str, float | None] = {}
        for name, label in _PRICE_FIELDS:
            raw = self.query_one(f"#product-{name}", Input).value.strip()
            if not raw:
                prices[name] = None
                continue
            try:
                prices[name] = float(raw)
            except ValueError:
                self._show_error(f"{label} must be a number.")
                return
            if prices[name] < 0:
                self._show_error(f"{label} cannot be negative.")
                return

        if self.record is not None:
            self.dismiss(replace(self.record, **values, **prices))
        else:
            self.dismiss(ProductRecord(**values, **prices))

    def _show_error(self, message: str) -> None:
        self.error = message
        self.query_one("#product-error", Static).update(message)
