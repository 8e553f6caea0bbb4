"""Three-step sales form: customer, order/products, review."""

from __future__ import annotations

from dataclasses import fields
from typing import Callable

from sales_app.clock import Clock
from sales_app.config import ORDER_NUMBER_SUFFIX_DIGITS
from sales_app.data import cities_for, country_prefix, states_for
from sales_app.debug_log import log_debug
from sales_app.lines import OrderLineManager
from sales_app.models import Customer, Order, ProductDraft, SalesData, SavedSalesOrder
from sales_app.payments import PartialPaymentManager
from sales_app.validation import validate_customer, validate_order

FIRST_STEP = 1
LAST_STEP = 3

_CUSTOMER_FIELDS = {f.name for f in fields(Customer)}
_ORDER_FIELDS = {f.name for f in fields(Order)} - {"lines", "partial_payments"}


class SalesForm:
    """Owns one form session's sales data and its step progression.

    Step 1 -> 2 requires a valid customer, step 2 -> 3 a valid order.
    Step 3 is terminal; `submit` is the separate explicit action that ends
    the session.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or Clock()
        self._start_session()

    def _start_session(self) -> None:
        self.step = FIRST_STEP
        self.errors: dict[str, str] = {}
        self.sales_data = SalesData(order=Order(order_date=self.clock.today()))
        self.product_draft = ProductDraft()
        self.lines = OrderLineManager(
            self.sales_data.order.lines,
            country=lambda: self.sales_data.customer.country,
            clock=self.clock,
        )
        self.payments = PartialPaymentManager(self.sales_data.order.partial_payments, clock=self.clock)

    @property
    def customer(self) -> Customer:
        return self.sales_data.customer

    @property
    def order(self) -> Order:
        return self.sales_data.order

    def advance(self) -> bool:
        """Move one step forward if the current step validates."""
        if self.step == FIRST_STEP:
            result = validate_customer(self.customer)
            if not result.ok:
                self.errors = dict(result.errors)
                log_debug(f"advance_blocked step=1 fields={sorted(result.errors)}")
                return False
            self.errors = {}
            self._assign_order_number()
            self.step = 2
            log_debug(f"advance step=2 order_number={self.order.order_number}")
            return True

        if self.step == 2:
            result = validate_order(self.order)
            if not result.ok:
                self.errors = dict(result.errors)
                log_debug(f"advance_blocked step=2 fields={sorted(result.errors)}")
                return False
            self.errors = {}
            self.step = LAST_STEP
            log_debug("advance step=3")
            return True

        return False

    def retreat(self) -> bool:
        if self.step <= FIRST_STEP:
            return False
        self.step -= 1
        return True

    def _assign_order_number(self) -> None:
        prefix = country_prefix(self.customer.country)
        # Keep an existing number unless the customer moved to another country.
        if self.order.order_number.startswith(f"{prefix}-"):
            return
        suffix = str(self.clock.now_ms())[-ORDER_NUMBER_SUFFIX_DIGITS:]
        self.order.order_number = f"{prefix}-{suffix}"

    def set_customer_field(self, name: str, value: str) -> None:
        if name not in _CUSTOMER_FIELDS:
            raise ValueError(f"Unknown customer field: {name}")
        setattr(self.customer, name, value)
        if name == "country":
            self.customer.state = ""
            self.customer.city = ""
        elif name == "state":
            self.customer.city = ""
        self.errors.pop(name, None)

    def set_order_field(self, name: str, value: str) -> None:
        if name not in _ORDER_FIELDS:
            raise ValueError(f"Unknown order field: {name}")
        setattr(self.order, name, value)
        self.errors.pop(name, None)

    @property
    def available_states(self) -> list[str]:
        return states_for(self.customer.country)

    @property
    def available_cities(self) -> list[str]:
        return cities_for(self.customer.country, self.customer.state)

    @property
    def order_total(self) -> float:
        return self.lines.total

    @property
    def total_partial_payments(self) -> float:
        return self.payments.total

    @property
    def amount_remaining(self) -> float:
        return self.payments.remaining(self.order_total)

    def create_product(self) -> None:
        """Quick product creation from the order screen.

        Nothing is stored and the catalog is left as is; the entered fields
        are logged and cleared.
        """
        draft = self.product_draft
        log_debug(
            f"create_product_stub code={draft.code!r} description={draft.description!r} "
            f"category={draft.category!r} subcategory={draft.subcategory!r} dimension={draft.dimension!r}"
        )
        self.product_draft = ProductDraft()

    def submit(self, save: Callable[[SalesData], SavedSalesOrder]) -> SavedSalesOrder | None:
        """Hand the reviewed sales data to `save` and start a new session.

        Returns None without saving (and keeps the session) unless the form
        is on the review step with both records valid. Errors raised by
        `save` propagate and leave the session untouched.
        """
        if self.step != LAST_STEP:
            return None
        for result in (validate_customer(self.customer), validate_order(self.order)):
            if not result.ok:
                self.errors = dict(result.errors)
                log_debug(f"submit_blocked fields={sorted(result.errors)}")
                return None

        saved = save(self.sales_data)
        log_debug(f"submit order_number={saved.order_number} order_id={saved.order_id} total={saved.total}")
        self._start_session()
        return saved

    def reset(self) -> None:
        self._start_session()
