"""Tests for partial payments."""

import pytest

from conftest import FakeClock
from sales_app.payments import PartialPaymentManager


@pytest.fixture
def manager():
    return PartialPaymentManager([], clock=FakeClock(today="2026-10-19"))


def test_add_defaults(manager):
    payment = manager.add()
    assert payment.amount == 0
    assert payment.date == "2026-10-19"
    assert manager.payments == [payment]


def test_ids_are_unique(manager):
    assert manager.add().id != manager.add().id


def test_update_amount_and_date(manager):
    payment = manager.add()
    manager.update(payment.id, "amount", 75.5)
    manager.update(payment.id, "date", "2026-11-01")
    assert payment.amount == 75.5
    assert payment.date == "2026-11-01"


def test_update_rejects_other_fields(manager):
    payment = manager.add()
    with pytest.raises(ValueError):
        manager.update(payment.id, "id", "x")


def test_remove(manager):
    first = manager.add()
    second = manager.add()
    manager.remove(first.id)
    assert manager.payments == [second]


def test_remaining_after_payments(manager):
    for amount in (100, 45):
        manager.update(manager.add().id, "amount", amount)
    assert manager.total == 145
    assert manager.remaining(245) == 100


def test_overpayment_goes_negative(manager):
    for amount in (200, 100):
        manager.update(manager.add().id, "amount", amount)
    assert manager.remaining(245) == -55
