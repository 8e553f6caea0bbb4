"""Product management screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Button, DataTable, Footer, Header, Input, Static

from sales_app.debug_log import log_debug
from sales_app.models import ProductRecord
from sales_app.persistence import delete_product, insert_product, list_products, update_product
from sales_app.product_form_modal import ProductFormModal
from sales_app.rendering import product_row

_COLUMNS = (
    "Code",
    "Name",
    "Category",
    "Subcategory",
    "Size",
    "Dimensions",
    "Venezuela",
    "Colombia",
    "El Salvador",
)


class ProductsScreen(Screen):
    """List, search, create, edit and delete managed products."""

    CSS = """
    #products-title {
        text-style: bold;
        padding: 0 1;
    }

    #products-search {
        margin: 1 0;
    }

    #products-table {
        height: 1fr;
    }

    #products-actions {
        height: auto;
    }

    #products-status {
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("f3", "new_product", "New", priority=True),
        Binding("f4", "edit_product", "Edit", priority=True),
        Binding("f9", "delete_product", "Delete", priority=True),
        Binding("escape", "back", "Back to sales"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.records: list[ProductRecord] = []
        self.search = ""
        self._pending_delete_id: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("Product management", id="products-title")
        yield Input(placeholder="Search products...", id="products-search")
        yield DataTable(cursor_type="row", zebra_stripes=True, id="products-table")
        with Horizontal(id="products-actions"):
            yield Button("New product", variant="primary", id="products-new")
            yield Button("Edit", id="products-edit")
            yield Button("Delete", variant="error", id="products-delete")
            yield Button("Back", id="products-back")
        yield Static(id="products-status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#products-table", DataTable).add_columns(*_COLUMNS)
        self._reload()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "products-search":
            return
        self.search = event.value.strip()
        self._reload()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            "products-new": self.action_new_product,
            "products-edit": self.action_edit_product,
            "products-delete": self.action_delete_product,
            "products-back": self.action_back,
        }
        action = actions.get(event.button.id or "")
        if action is not None:
            action()

    def action_back(self) -> None:
        self.app.pop_screen()

    def action_new_product(self) -> None:
        self._pending_delete_id = None
        self.app.push_screen(ProductFormModal(), callback=self._on_product_saved)

    def action_edit_product(self) -> None:
        self._pending_delete_id = None
        record = self._selected_record()
        if record is None:
            self._set_status("Select a product to edit")
            return
        self.app.push_screen(ProductFormModal(record), callback=self._on_product_saved)

    def action_delete_product(self) -> None:
        record = self._selected_record()
        if record is None or record.id is None:
            self._set_status("Select a product to delete")
            return

        if self._pending_delete_id != record.id:
            self._pending_delete_id = record.id
            self._set_status(f"Delete {record.code}? Press Delete again to confirm.")
            return

        self._pending_delete_id = None
        try:
            delete_product(record.id)
        except Exception as exc:
            log_debug(f"product_delete_failed id={record.id} error={exc!r}")
            self._set_status("Could not delete the product.")
            return
        self._set_status(f"Product {record.code} deleted")
        self._reload()

    def _on_product_saved(self, record: ProductRecord | None) -> None:
        if record is None:
            return
        try:
            if record.id is None:
                insert_product(record)
            else:
                update_product(record)
        except Exception as exc:
            log_debug(f"product_save_failed code={record.code!r} error={exc!r}")
            self._set_status("Could not save the product.")
            return
        self._set_status(f"Product {record.code} saved")
        self._reload()

    def _selected_record(self) -> ProductRecord | None:
        table = self.query_one("#products-table", DataTable)
        if not self.records:
            return None
        idx = table.cursor_row
        if not (0 <= idx < len(self.records)):
            return None
        return self.records[idx]

    def _reload(self) -> None:
        table = self.query_one("#products-table", DataTable)
        try:
            self.records = list_products(self.search)
        except Exception as exc:
            log_debug(f"product_list_failed error={exc!r}")
            self.records = []
            self._set_status("Could not load products.")
            return

        table.clear()
        for record in self.records:
            table.add_row(*product_row(record), key=record.id)
        if not self.records:
            self._set_status("No products found" if self.search else "No products registered")

    def _set_status(self, message: str) -> None:
        self.query_one("#products-status", Static).update(message)
