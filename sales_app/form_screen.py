"""Multi-step sales form screen."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Checkbox, ContentSwitcher, Footer, Header, Input, Label, Select, Static

from sales_app.constant import ORDER_TYPES, PAYMENT_METHODS, SALES_CHANNELS
from sales_app.data import CATALOG, COUNTRIES, search_catalog
from sales_app.debug_log import log_debug
from sales_app.form import SalesForm
from sales_app.lines import line_total, parse_numeric_entry
from sales_app.models import OrderLine, PartialPayment
from sales_app.persistence import save_sales_order
from sales_app.rendering import format_money, format_step_bar, format_totals, render_review

_CUSTOMER_TEXT_FIELDS = (
    ("identification", "Identification *", "Enter the identification number"),
    ("name", "Full name *", "Enter the full name"),
    ("email", "Email *", "customer@example.com"),
    ("phone", "Phone *", "+58 414 123-4567"),
    ("address", "Address *", "Enter the full address"),
    ("reference", "Reference (optional)", "Nearby landmark"),
)

_PRODUCT_DRAFT_FIELDS = ("code", "description", "dimension", "category", "subcategory")


def _options(choices: dict[str, str]) -> list[tuple[str, str]]:
    return [(label, value) for value, label in choices.items()]


def _parse(value: str, cast: Callable[[str], float]) -> float | None:
    try:
        return cast(value)
    except ValueError:
        return None


def _field_error(name: str) -> Static:
    return Static(id=f"error-{name}", classes="field-error")


class LineRow(Horizontal):
    """Editable row for one committed order line."""

    def __init__(self, line: OrderLine) -> None:
        super().__init__(id=f"line-row-{line.id}", classes="entry-row")
        self.line = line

    def compose(self) -> ComposeResult:
        line = self.line
        yield Static(f"{line.code} - {line.description}", classes="entry-label")
        yield Input(str(line.quantity), type="integer", id=f"line-quantity-{line.id}", classes="entry-number")
        yield Input(f"{line.unit_price:g}", type="number", id=f"line-unit_price-{line.id}", classes="entry-number")
        yield Input(f"{line.discount:g}", type="number", id=f"line-discount-{line.id}", classes="entry-number")
        yield Static(format_money(line.total), id=f"line-total-{line.id}", classes="entry-total")
        yield Button("Remove", variant="error", id=f"line-remove-{line.id}")


class PaymentRow(Horizontal):
    """Editable row for one partial payment."""

    def __init__(self, payment: PartialPayment) -> None:
        super().__init__(id=f"payment-row-{payment.id}", classes="entry-row")
        self.payment = payment

    def compose(self) -> ComposeResult:
        payment = self.payment
        yield Input(f"{payment.amount:g}", type="number", id=f"payment-amount-{payment.id}", classes="entry-number")
        yield Input(payment.date, placeholder="YYYY-MM-DD", id=f"payment-date-{payment.id}", classes="entry-date")
        yield Button("Remove", variant="error", id=f"payment-remove-{payment.id}")


class SalesFormScreen(Screen):
    """Customer -> order/products -> review, driven by a `SalesForm`."""

    CSS = """
    #step-bar {
        padding: 0 1;
        margin-bottom: 1;
    }

    .step-pane {
        height: 1fr;
        padding: 0 1;
    }

    .section-title {
        text-style: bold;
        margin: 1 0;
    }

    .field-error {
        color: #ffb3b3;
        height: auto;
    }

    .entry-row {
        height: auto;
    }

    .entry-label {
        width: 1fr;
        padding: 1 1;
    }

    .entry-number {
        width: 14;
    }

    .entry-date {
        width: 16;
    }

    .entry-total {
        width: 16;
        padding: 1 1;
    }

    #search-results, #draft-total, #totals {
        padding: 0 1;
        height: auto;
    }

    #nav {
        height: auto;
        padding: 0 1;
    }

    #status {
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("f7", "retreat", "Back", priority=True),
        Binding("f8", "advance", "Next", priority=True),
        Binding("ctrl+s", "submit", "Submit", priority=True),
    ]

    def __init__(self, form: SalesForm) -> None:
        super().__init__()
        self.form = form

    def compose(self) -> ComposeResult:
        customer = self.form.customer
        order = self.form.order
        yield Header()
        yield Static(id="step-bar")
        with ContentSwitcher(initial=f"step-{self.form.step}", id="steps"):
            with VerticalScroll(id="step-1", classes="step-pane"):
                yield Static("Enter the customer's information", classes="section-title")
                for name, label, placeholder in _CUSTOMER_TEXT_FIELDS:
                    yield Label(label)
                    yield Input(getattr(customer, name), placeholder=placeholder, id=f"customer-{name}")
                    yield _field_error(name)
                yield Label("Country *")
                yield Select([(country, country) for country in COUNTRIES], prompt="Select country", id="customer-country")
                yield _field_error("country")
                yield Label("State/Department *")
                yield Select([], prompt="Select state", id="customer-state")
                yield _field_error("state")
                yield Label("City *")
                yield Select([], prompt="Select city", id="customer-city")
                yield _field_error("city")

            with VerticalScroll(id="step-2", classes="step-pane"):
                yield Static("Configure the order details", classes="section-title")
                yield Label("Seller *")
                yield Input(order.seller, placeholder="Seller name", id="order-seller")
                yield _field_error("seller")
                yield Label("Sales channel *")
                yield Select(_options(SALES_CHANNELS), prompt="Select channel", id="order-sales_channel")
                yield _field_error("sales_channel")
                yield Label("Payment method *")
                yield Select(_options(PAYMENT_METHODS), prompt="Select payment method", id="order-payment_method")
                yield _field_error("payment_method")
                yield Label("Carrier (optional)")
                yield Input(order.carrier, placeholder="Carrier name", id="order-carrier")
                yield Label("Order date *")
                yield Input(order.order_date, placeholder="YYYY-MM-DD", id="order-order_date")
                yield _field_error("order_date")
                yield Label("Order number")
                yield Static(order.order_number or "-", id="order-number")
                yield Label("Order type *")
                yield Select(
                    _options(ORDER_TYPES),
                    allow_blank=False,
                    value=order.order_type,
                    id="order-order_type",
                )
                yield _field_error("order_type")
                yield Label("Delivery date")
                yield Input(order.delivery_date, placeholder="YYYY-MM-DD", id="order-delivery_date")

                yield Static("Search product", classes="section-title")
                yield Input(placeholder="Code or description", id="product-search")
                yield Static(id="search-results")

                yield Static("New product", classes="section-title")
                for name in _PRODUCT_DRAFT_FIELDS:
                    yield Input(placeholder=name.capitalize(), id=f"new-product-{name}")
                yield Button("Create product", id="create-product")

                yield Static("Add product to order", classes="section-title")
                yield Select(
                    [(f"{product.code} - {product.description}", product.code) for product in CATALOG],
                    prompt="Select product",
                    id="draft-product",
                )
                with Horizontal(classes="entry-row"):
                    yield Input("1", type="integer", placeholder="Quantity", id="draft-quantity", classes="entry-number")
                    yield Input("0", type="number", placeholder="Unit price", id="draft-unit_price", classes="entry-number")
                    yield Input("0", type="number", placeholder="Discount %", id="draft-discount", classes="entry-number")
                    yield Checkbox("Negotiated discount", id="draft-negotiated_discount")
                yield Static(id="draft-total")
                yield Button("Add product", variant="primary", id="add-line")

                yield Static("Order lines", classes="section-title")
                yield Vertical(id="lines")
                yield _field_error("lines")

                yield Static("Partial payments", classes="section-title")
                yield Button("Add payment", id="add-payment")
                yield Vertical(id="payments")
                yield _field_error("partial_payments")
                yield Static(id="totals")

            with VerticalScroll(id="step-3", classes="step-pane"):
                yield Static("Review the information before confirming", classes="section-title")
                yield Static(id="review")

        with Horizontal(id="nav"):
            yield Button("Back", id="back")
            yield Button("Next", variant="primary", id="next")
            yield Button("Submit", variant="success", id="submit")
        yield Static(id="status")
        yield Footer()

    async def on_mount(self) -> None:
        await self._rebuild_lines()
        await self._rebuild_payments()
        self._refresh_search("")
        self._refresh_all()

    def on_input_changed(self, event: Input.Changed) -> None:
        widget_id = event.input.id or ""
        value = event.value

        if widget_id.startswith("customer-"):
            self.form.set_customer_field(widget_id.removeprefix("customer-"), value)
            self._refresh_errors()
            return

        if widget_id.startswith("order-"):
            self.form.set_order_field(widget_id.removeprefix("order-"), value)
            self._refresh_errors()
            return

        if widget_id == "product-search":
            self._refresh_search(value)
            return

        if widget_id.startswith("new-product-"):
            setattr(self.form.product_draft, widget_id.removeprefix("new-product-"), value)
            return

        if widget_id.startswith("draft-"):
            self._update_draft(widget_id.removeprefix("draft-"), value)
            return

        if widget_id.startswith("line-"):
            _, field, line_id = widget_id.split("-", 2)
            parsed = _parse(value, int if field == "quantity" else float)
            if parsed is None:
                return
            self.form.lines.update(line_id, field, parsed)
            line = self.form.lines.get(line_id)
            if line is not None:
                try:
                    self.query_one(f"#line-total-{line_id}", Static).update(format_money(line.total))
                except NoMatches:
                    pass
            self._refresh_totals()
            return

        if widget_id.startswith("payment-"):
            _, field, payment_id = widget_id.split("-", 2)
            if field == "amount":
                parsed = _parse(value, float)
                if parsed is None:
                    return
                self.form.payments.update(payment_id, "amount", parsed)
            else:
                self.form.payments.update(payment_id, "date", value)
            self._refresh_totals()

    def on_select_changed(self, event: Select.Changed) -> None:
        widget_id = event.select.id or ""
        value = event.value if isinstance(event.value, str) else ""

        if widget_id == "customer-country":
            self.form.set_customer_field("country", value)
            self._set_select_options("#customer-state", self.form.available_states)
            self._set_select_options("#customer-city", [])
        elif widget_id == "customer-state":
            self.form.set_customer_field("state", value)
            self._set_select_options("#customer-city", self.form.available_cities)
        elif widget_id == "customer-city":
            self.form.set_customer_field("city", value)
        elif widget_id.startswith("order-"):
            self.form.set_order_field(widget_id.removeprefix("order-"), value)
        elif widget_id == "draft-product" and value:
            self.form.lines.select(value)
            if self.form.lines.draft.product is not None:
                self.query_one("#draft-unit_price", Input).value = f"{self.form.lines.draft.unit_price:g}"
            self._refresh_draft_total()
        self._refresh_errors()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox.id == "draft-negotiated_discount":
            self.form.lines.draft.negotiated_discount = event.value

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        widget_id = event.button.id or ""

        if widget_id == "back":
            self.action_retreat()
        elif widget_id == "next":
            self.action_advance()
        elif widget_id == "submit":
            self.action_submit()
        elif widget_id == "create-product":
            self._create_product()
        elif widget_id == "add-line":
            await self._add_line()
        elif widget_id == "add-payment":
            self.form.payments.add()
            await self._rebuild_payments()
            self._refresh_totals()
        elif widget_id.startswith("line-remove-"):
            self.form.lines.remove(widget_id.removeprefix("line-remove-"))
            await self._rebuild_lines()
            self._refresh_totals()
        elif widget_id.startswith("payment-remove-"):
            self.form.payments.remove(widget_id.removeprefix("payment-remove-"))
            await self._rebuild_payments()
            self._refresh_totals()

    def action_advance(self) -> None:
        if self.form.advance():
            self._set_status("")
        else:
            self._set_status("Please fix the highlighted fields" if self.form.errors else "")
        self._refresh_all()

    def action_retreat(self) -> None:
        self.form.retreat()
        self._set_status("")
        self._refresh_all()

    def action_submit(self) -> None:
        if self.form.step != 3:
            self._set_status("Review the sale before submitting")
            return
        try:
            saved = self.form.submit(save_sales_order)
        except Exception as exc:
            log_debug(f"submit_failed order_number={self.form.order.order_number} error={exc!r}")
            self._set_status("Could not register the sale. Please try again.")
            return

        if saved is None:
            self._set_status("Please fix the highlighted fields")
            self._refresh_errors()
            return

        self.notify(f"Sale registered: {saved.order_number}")
        self.app.switch_screen(SalesFormScreen(self.form))

    def _update_draft(self, field: str, value: str) -> None:
        draft = self.form.lines.draft
        parsed = parse_numeric_entry(field, value)
        if parsed is None:
            return
        setattr(draft, field, parsed)
        self._refresh_draft_total()

    def _create_product(self) -> None:
        draft = self.form.product_draft
        if not draft.code or not draft.description:
            self._set_status("Code and description are required to create a product")
            return
        code = draft.code
        self.form.create_product()
        for name in _PRODUCT_DRAFT_FIELDS:
            self.query_one(f"#new-product-{name}", Input).value = ""
        self._set_status(f"Product {code} noted (not added to the catalog)")

    async def _add_line(self) -> None:
        line = self.form.lines.add()
        if line is None:
            self._set_status("Select a product first (the customer's country sets the price)")
            return

        self.query_one("#draft-product", Select).clear()
        self.query_one("#draft-quantity", Input).value = "1"
        self.query_one("#draft-unit_price", Input).value = "0"
        self.query_one("#draft-discount", Input).value = "0"
        self.query_one("#draft-negotiated_discount", Checkbox).value = False
        self.form.errors.pop("lines", None)
        await self._rebuild_lines()
        self._set_status(f"Added {line.code}")
        self._refresh_totals()
        self._refresh_errors()

    async def _rebuild_lines(self) -> None:
        container = self.query_one("#lines", Vertical)
        await container.remove_children()
        if self.form.order.lines:
            await container.mount(*(LineRow(line) for line in self.form.order.lines))

    async def _rebuild_payments(self) -> None:
        container = self.query_one("#payments", Vertical)
        await container.remove_children()
        if self.form.order.partial_payments:
            await container.mount(*(PaymentRow(payment) for payment in self.form.order.partial_payments))

    def _set_select_options(self, selector: str, values: list[str]) -> None:
        self.query_one(selector, Select).set_options([(value, value) for value in values])

    def _set_status(self, message: str) -> None:
        try:
            self.query_one("#status", Static).update(message)
        except NoMatches:
            return

    def _refresh_all(self) -> None:
        self.query_one("#step-bar", Static).update(format_step_bar(self.form.step))
        self.query_one("#steps", ContentSwitcher).current = f"step-{self.form.step}"
        self.query_one("#order-number", Static).update(self.form.order.order_number or "-")
        self.query_one("#back", Button).disabled = self.form.step == 1
        self.query_one("#next", Button).disabled = self.form.step == 3
        self.query_one("#submit", Button).disabled = self.form.step != 3
        if self.form.step == 3:
            self.query_one("#review", Static).update(render_review(self.form))
        self._refresh_errors()
        self._refresh_draft_total()
        self._refresh_totals()

    def _refresh_errors(self) -> None:
        for widget in self.query(".field-error").results(Static):
            name = (widget.id or "").removeprefix("error-")
            widget.update(self.form.errors.get(name, ""))

    def _refresh_draft_total(self) -> None:
        draft = self.form.lines.draft
        total = line_total(draft.quantity, draft.unit_price, draft.discount)
        self.query_one("#draft-total", Static).update(f"Line total: {format_money(total)}")

    def _refresh_totals(self) -> None:
        self.query_one("#totals", Static).update(format_totals(self.form))

    def _refresh_search(self, term: str) -> None:
        results = search_catalog(term)
        if not results:
            self.query_one("#search-results", Static).update("No products found")
            return
        lines = [f"{product.code}  {product.description}  ({product.category})" for product in results]
        self.query_one("#search-results", Static).update("\n".join(lines))
