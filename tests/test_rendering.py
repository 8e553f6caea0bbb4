"""Tests for rendering helpers."""

from rich.text import Text

from conftest import fill_order
from sales_app.models import ProductRecord
from sales_app.rendering import (
    format_money,
    format_price_cell,
    format_step_bar,
    format_totals,
    product_row,
    render_review,
)


def test_format_money():
    assert format_money(1234.5) == "$1,234.50"
    assert format_money(-55) == "$-55.00"


def test_step_bar_marks_current_step():
    bar = format_step_bar(2)
    assert isinstance(bar, Text)
    assert "Step 2 of 3" in bar.plain
    assert "Products / Services" in bar.plain


def test_totals_text(filled_form):
    filled_form.advance()
    fill_order(filled_form)
    filled_form.payments.update(filled_form.payments.add().id, "amount", 200)
    plain = format_totals(filled_form).plain
    assert "Order total: $150.00" in plain
    assert "Partial payments: $200.00" in plain
    assert "Remaining: $-50.00" in plain


def test_review_lists_everything(filled_form):
    filled_form.advance()
    fill_order(filled_form)
    filled_form.lines.update(filled_form.order.lines[0].id, "discount", 10)
    filled_form.lines.update(filled_form.order.lines[0].id, "negotiated_discount", True)
    filled_form.advance()

    plain = render_review(filled_form).plain

    assert "Ana Pérez" in plain
    assert "Baruta" in plain
    assert "Physical store" in plain
    assert "Cash" in plain
    assert "Immediate" in plain
    assert filled_form.order.order_number in plain
    assert "PROD001" in plain
    assert "-10% (negotiated)" in plain
    assert "= $135.00" in plain
    assert "Partial payments:" in plain


def test_product_row_placeholders():
    row = product_row(ProductRecord(code="C-1", name="Colchon", category="Hogar", price_venezuela=380))
    assert row == ("C-1", "Colchon", "Hogar", "-", "-", "-", "$380", "-", "-")


def test_price_cell_shows_zero_price():
    assert format_price_cell(0.0) == "$0"
    assert format_price_cell(None) == "-"
    row = product_row(ProductRecord(code="C-2", name="Almohada", category="Hogar", price_colombia_usd=0.0))
    assert row[7] == "$0"
