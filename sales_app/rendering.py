"""Rendering helpers for step headers, totals and the review summary."""

from __future__ import annotations

from rich.text import Text

from sales_app.constant import ORDER_TYPES, PAYMENT_METHODS, SALES_CHANNELS, STEP_TITLES
from sales_app.form import LAST_STEP, SalesForm
from sales_app.models import ProductRecord


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"


def step_style(step: int, current: int) -> str:
    """Return a consistent style for done / current / pending steps."""
    if step == current:
        return "bold #ffffff on #2f6db5"
    if step < current:
        return "bold #0b1f0f on #5fbf72"
    return "dim"


def format_step_bar(current: int) -> Text:
    text = Text()
    for step, title in STEP_TITLES.items():
        if step > 1:
            text.append("  ›  ", style="dim")
        text.append(f" {step} ", style=step_style(step, current))
        text.append(f" {title}")
    text.append(f"\nStep {current} of {LAST_STEP}", style="dim")
    return text


def format_totals(form: SalesForm) -> Text:
    text = Text()
    text.append("Order total: ", style="bold")
    text.append(format_money(form.order_total))
    text.append("   Partial payments: ", style="bold")
    text.append(format_money(form.total_partial_payments))
    text.append("   Remaining: ", style="bold")
    remaining = form.amount_remaining
    text.append(format_money(remaining), style="bold #ffb3b3" if remaining < 0 else "")
    return text


def format_price_cell(price: float | None) -> str:
    if price is None:
        return "-"
    return f"${price:g}"


def product_row(record: ProductRecord) -> tuple[str, ...]:
    """Cells of one row in the product management table."""
    return (
        record.code,
        record.name,
        record.category,
        record.sub_category or "-",
        record.size_type or "-",
        record.dimensions or "-",
        format_price_cell(record.price_venezuela),
        format_price_cell(record.price_colombia_usd),
        format_price_cell(record.price_el_salvador),
    )


def _section(text: Text, title: str) -> None:
    if text.plain:
        text.append("\n\n")
    text.append(title, style="bold underline")


def _field(text: Text, label: str, value: str) -> None:
    text.append(f"\n{label}: ", style="bold")
    text.append(value or "-")


def render_review(form: SalesForm) -> Text:
    """Read-only summary of the whole sales record."""
    customer = form.customer
    order = form.order
    text = Text()

    _section(text, "Customer")
    _field(text, "Identification", customer.identification)
    _field(text, "Name", customer.name)
    _field(text, "Email", customer.email)
    _field(text, "Phone", customer.phone)
    _field(text, "Address", customer.address)
    _field(text, "Reference", customer.reference)
    _field(text, "Country", customer.country)
    _field(text, "State/Department", customer.state)
    _field(text, "City", customer.city)

    _section(text, "Order")
    _field(text, "Seller", order.seller)
    _field(text, "Sales channel", SALES_CHANNELS.get(order.sales_channel, order.sales_channel))
    _field(text, "Payment method", PAYMENT_METHODS.get(order.payment_method, order.payment_method))
    _field(text, "Carrier", order.carrier)
    _field(text, "Order date", order.order_date)
    _field(text, "Order number", order.order_number)
    _field(text, "Order type", ORDER_TYPES.get(order.order_type, order.order_type))
    _field(text, "Delivery date", order.delivery_date)

    _section(text, "Products")
    for line in order.lines:
        text.append(f"\n{line.code}  {line.description}  ")
        text.append(f"{line.quantity} x {format_money(line.unit_price)}")
        if line.discount:
            text.append(f"  -{line.discount:g}%")
            if line.negotiated_discount:
                text.append(" (negotiated)", style="italic")
        text.append(f"  = {format_money(line.total)}", style="bold")

    if order.partial_payments:
        _section(text, "Partial payments")
        for payment in order.partial_payments:
            text.append(f"\n{payment.date}  {format_money(payment.amount)}")

    text.append("\n\n")
    text.append_text(format_totals(form))
    return text
