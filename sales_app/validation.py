"""Customer and order checks run before a step may advance.

Both checks are pure: they never raise for bad input and never touch the
form. The result maps a first-level field name to a single message; when
a field fails more than one check the last message recorded wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sales_app.constant import ORDER_TYPES
from sales_app.models import Customer, Order

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def _required(errors: dict[str, str], name: str, value: str, message: str) -> None:
    if len(value) < 1:
        errors[name] = message


def validate_customer(customer: Customer) -> ValidationResult:
    """Check a customer record. `reference` is optional."""
    errors: dict[str, str] = {}
    _required(errors, "identification", customer.identification, "Identification is required")
    if len(customer.name) < 2:
        errors["name"] = "Name must be at least 2 characters"
    if not _EMAIL_RE.match(customer.email):
        errors["email"] = "Email is not valid"
    _required(errors, "phone", customer.phone, "Phone is required")
    _required(errors, "address", customer.address, "Address is required")
    _required(errors, "country", customer.country, "Country is required")
    _required(errors, "state", customer.state, "State/department is required")
    _required(errors, "city", customer.city, "City is required")
    return ValidationResult(errors)


def validate_order(order: Order) -> ValidationResult:
    """Check an order record.

    Carrier and delivery date are optional for every order type, and
    partial payments are not compared against the order total.
    """
    errors: dict[str, str] = {}
    _required(errors, "order_date", order.order_date, "Order date is required")
    if order.order_type not in ORDER_TYPES:
        errors["order_type"] = "Order type is required"
    _required(errors, "seller", order.seller, "Seller is required")
    _required(errors, "sales_channel", order.sales_channel, "Sales channel is required")
    _required(errors, "payment_method", order.payment_method, "Payment method is required")

    if not order.lines:
        errors["lines"] = "Add at least one product"
    for line in order.lines:
        if line.quantity < 1:
            errors["lines"] = f"{line.code}: quantity must be at least 1"
        if line.unit_price < 0:
            errors["lines"] = f"{line.code}: unit price cannot be negative"
        if not 0 <= line.discount <= 100:
            errors["lines"] = f"{line.code}: discount must be between 0 and 100"

    for payment in order.partial_payments:
        if payment.amount < 0:
            errors["partial_payments"] = "Partial payment amounts cannot be negative"

    return ValidationResult(errors)
