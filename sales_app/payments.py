"""Scheduled partial payments toward an order."""

from __future__ import annotations

from sales_app.clock import Clock
from sales_app.models import PartialPayment

_EDITABLE_FIELDS = {"amount", "date"}


class PartialPaymentManager:
    """Edits the order's partial payment list in place."""

    def __init__(self, payments: list[PartialPayment], clock: Clock) -> None:
        self.payments = payments
        self._clock = clock

    def add(self) -> PartialPayment:
        payment = PartialPayment(id=self._clock.next_id(), amount=0, date=self._clock.today())
        self.payments.append(payment)
        return payment

    def update(self, payment_id: str, field: str, value: object) -> None:
        if field not in _EDITABLE_FIELDS:
            raise ValueError(f"partial payment field must be one of {sorted(_EDITABLE_FIELDS)}")
        for payment in self.payments:
            if payment.id == payment_id:
                setattr(payment, field, value)
                return

    def remove(self, payment_id: str) -> None:
        self.payments[:] = [payment for payment in self.payments if payment.id != payment_id]

    @property
    def total(self) -> float:
        return sum(payment.amount for payment in self.payments)

    def remaining(self, order_total: float) -> float:
        """Amount still owed. Goes negative on overpayment."""
        return order_total - self.total
