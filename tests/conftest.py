"""Pytest fixtures for sales_app tests."""

from pathlib import Path

import pytest

from sales_app import debug_log, persistence
from sales_app.clock import Clock
from sales_app.form import SalesForm


class FakeClock(Clock):
    """Clock frozen at a settable millisecond timestamp."""

    def __init__(self, now_ms: int = 1_760_000_123_456, today: str = "2026-10-19") -> None:
        super().__init__()
        self.current_ms = now_ms
        self.current_day = today

    def now_ms(self) -> int:
        return self.current_ms

    def today(self) -> str:
        return self.current_day


@pytest.fixture(autouse=True)
def debug_log_file(tmp_path, monkeypatch):
    """Keep debug events out of /tmp during tests."""
    path = tmp_path / "debug.log"
    monkeypatch.setattr(debug_log, "DEBUG_LOG_PATH", str(path))
    return path


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "data" / "sales.db"
    monkeypatch.setattr(persistence, "DB_PATH", str(path))
    persistence.bootstrap_schema()
    return Path(path)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def form(clock):
    return SalesForm(clock=clock)


def fill_customer(form: SalesForm, country: str = "Venezuela", state: str = "Miranda", city: str = "Baruta") -> None:
    form.set_customer_field("identification", "V-12345678")
    form.set_customer_field("name", "Ana Pérez")
    form.set_customer_field("email", "ana@example.com")
    form.set_customer_field("phone", "+58 414 123-4567")
    form.set_customer_field("address", "Av. Principal 10")
    form.set_customer_field("country", country)
    form.set_customer_field("state", state)
    form.set_customer_field("city", city)


def fill_order(form: SalesForm) -> None:
    form.set_order_field("seller", "Luis")
    form.set_order_field("sales_channel", "store")
    form.set_order_field("payment_method", "cash")
    form.lines.select("PROD001")
    form.lines.add()


@pytest.fixture
def filled_form(form):
    fill_customer(form)
    return form
