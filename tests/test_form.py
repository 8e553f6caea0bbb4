"""Tests for the three-step sales form."""

import re

import pytest

from conftest import fill_customer, fill_order
from sales_app.data import find_product
from sales_app.models import SavedSalesOrder

ORDER_NUMBER_RE = re.compile(r"^(VE|CO|SV|XX)-\d{6}$")


def _fake_save(sales_data):
    return SavedSalesOrder(
        order_id="abc",
        created_at="2026-10-19T00:00:00+00:00",
        order_number=sales_data.order.order_number,
        total=sum(line.total for line in sales_data.order.lines),
        status="SAVED",
    )


def test_new_session_defaults(form):
    assert form.step == 1
    assert form.errors == {}
    assert form.order.order_date == "2026-10-19"
    assert form.order.order_type == "immediate"
    assert form.order.order_number == ""


@pytest.mark.parametrize(
    "field",
    ["identification", "name", "email", "phone", "address", "city"],
)
def test_advance_blocked_by_missing_customer_field(filled_form, field):
    filled_form.set_customer_field(field, "")
    assert filled_form.advance() is False
    assert filled_form.step == 1
    assert field in filled_form.errors
    assert filled_form.order.order_number == ""


def test_advance_blocked_for_empty_customer(form):
    assert form.advance() is False
    assert form.step == 1
    assert set(form.errors) == {
        "identification",
        "name",
        "email",
        "phone",
        "address",
        "country",
        "state",
        "city",
    }


def test_advance_to_review_generates_order_number_once(filled_form, clock):
    assert filled_form.advance() is True
    assert filled_form.step == 2
    assert filled_form.errors == {}
    number = filled_form.order.order_number
    assert ORDER_NUMBER_RE.match(number)
    assert number == "VE-123456"

    fill_order(filled_form)
    clock.current_ms += 1_111
    assert filled_form.advance() is True
    assert filled_form.step == 3
    assert filled_form.order.order_number == number

    assert filled_form.advance() is False
    assert filled_form.step == 3
    assert filled_form.order.order_number == number


@pytest.mark.parametrize(
    ("country", "state", "city", "prefix"),
    [
        ("Colombia", "Antioquia", "Bello", "CO"),
        ("El Salvador", "La Paz", "Olocuilta", "SV"),
        ("Atlantis", "Deep", "Reef", "XX"),
    ],
)
def test_order_number_prefix_follows_country(form, country, state, city, prefix):
    fill_customer(form, country=country, state=state, city=city)
    form.advance()
    assert form.order.order_number.startswith(f"{prefix}-")
    assert ORDER_NUMBER_RE.match(form.order.order_number)


def test_retreat_and_readvance_keeps_number_unless_country_changes(filled_form, clock):
    filled_form.advance()
    number = filled_form.order.order_number

    clock.current_ms += 5
    filled_form.retreat()
    filled_form.advance()
    assert filled_form.order.order_number == number

    filled_form.retreat()
    fill_customer(filled_form, country="Colombia", state="Huila", city="Neiva")
    filled_form.advance()
    assert filled_form.order.order_number == "CO-123461"


def test_advance_blocked_by_invalid_order(filled_form):
    filled_form.advance()
    assert filled_form.advance() is False
    assert filled_form.step == 2
    assert {"seller", "sales_channel", "payment_method", "lines"} <= set(filled_form.errors)


def test_retreat(filled_form):
    assert filled_form.retreat() is False
    assert filled_form.step == 1
    filled_form.advance()
    assert filled_form.retreat() is True
    assert filled_form.step == 1


def test_retreat_skips_validation(filled_form):
    filled_form.advance()
    fill_order(filled_form)
    filled_form.advance()
    filled_form.set_order_field("seller", "")
    assert filled_form.retreat() is True
    assert filled_form.step == 2


def test_country_change_resets_state_and_city(filled_form):
    filled_form.set_customer_field("country", "Venezuela")
    assert filled_form.customer.state == ""
    assert filled_form.customer.city == ""


def test_state_change_resets_city_only(filled_form):
    filled_form.set_customer_field("state", "Zulia")
    assert filled_form.customer.country == "Venezuela"
    assert filled_form.customer.city == ""
    assert filled_form.available_cities == ["Maracaibo", "Cabimas", "Ciudad Ojeda"]


def test_available_states(form):
    assert form.available_states == []
    form.set_customer_field("country", "Colombia")
    assert "Cundinamarca" in form.available_states


def test_editing_a_field_clears_its_error(form):
    form.advance()
    assert "name" in form.errors
    form.set_customer_field("name", "Jo")
    assert "name" not in form.errors
    assert "email" in form.errors


def test_unknown_field_rejected(form):
    with pytest.raises(ValueError):
        form.set_customer_field("nickname", "x")
    with pytest.raises(ValueError):
        form.set_order_field("lines", "x")


def test_totals_and_remaining(filled_form):
    lines = filled_form.lines
    lines.select("PROD001")
    lines.draft.quantity = 2
    lines.draft.unit_price = 100
    lines.add()
    lines.select("PROD002")
    lines.draft.unit_price = 50
    lines.draft.discount = 10
    lines.add()
    assert filled_form.order_total == pytest.approx(245)

    for amount in (100, 45):
        filled_form.payments.update(filled_form.payments.add().id, "amount", amount)
    assert filled_form.total_partial_payments == 145
    assert filled_form.amount_remaining == pytest.approx(100)

    filled_form.payments.update(filled_form.payments.add().id, "amount", 200)
    assert filled_form.amount_remaining == pytest.approx(-100)


def test_line_selection_uses_customer_country(form):
    form.lines.select("PROD001")
    assert form.lines.draft.product is None
    form.set_customer_field("country", "El Salvador")
    form.lines.select("PROD001")
    assert form.lines.draft.unit_price == 160


def test_create_product_is_a_logged_stub(form, debug_log_file):
    form.product_draft.code = "PROD900"
    form.product_draft.description = "Almohada"
    form.create_product()
    assert form.product_draft.code == ""
    assert "create_product_stub code='PROD900'" in debug_log_file.read_text()
    assert find_product("PROD900") is None


def test_submit_only_from_review(filled_form):
    assert filled_form.submit(_fake_save) is None
    assert filled_form.step == 1


def test_submit_saves_and_starts_new_session(filled_form):
    filled_form.advance()
    fill_order(filled_form)
    filled_form.advance()
    number = filled_form.order.order_number

    saved = filled_form.submit(_fake_save)

    assert saved.order_number == number
    assert saved.total == 150
    assert filled_form.step == 1
    assert filled_form.customer.name == ""
    assert filled_form.order.lines == []
    assert filled_form.lines.lines is filled_form.order.lines


def test_submit_failure_keeps_session(filled_form):
    filled_form.advance()
    fill_order(filled_form)
    filled_form.advance()

    def broken_save(_):
        raise RuntimeError("store offline")

    with pytest.raises(RuntimeError):
        filled_form.submit(broken_save)
    assert filled_form.step == 3
    assert filled_form.order.lines


def test_submit_revalidates(filled_form):
    filled_form.advance()
    fill_order(filled_form)
    filled_form.advance()
    filled_form.lines.remove(filled_form.order.lines[0].id)

    assert filled_form.submit(_fake_save) is None
    assert "lines" in filled_form.errors
    assert filled_form.step == 3
