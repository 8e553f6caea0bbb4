"""Main Textual app class."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from sales_app.auth import AuthService
from sales_app.clock import Clock
from sales_app.debug_log import log_debug
from sales_app.form import SalesForm
from sales_app.form_screen import SalesFormScreen
from sales_app.login_modal import LoginModal
from sales_app.models import User
from sales_app.persistence import bootstrap_schema
from sales_app.products_screen import ProductsScreen


class SalesOrderApp(App):
    """Sales registration behind a login gate, with a product manager."""

    TITLE = "Boxi Sleep"
    SUB_TITLE = "Sales registration"

    BINDINGS = [
        Binding("f2", "open_products", "Products", priority=True),
        Binding("f12", "logout", "Log out", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, auth: AuthService | None = None, clock: Clock | None = None) -> None:
        super().__init__()
        clock = clock or Clock()
        self.auth = auth or AuthService(clock=clock)
        self.form = SalesForm(clock=clock)
        log_debug("app_init")

    def on_mount(self) -> None:
        try:
            bootstrap_schema()
        except Exception as exc:
            log_debug(f"bootstrap_failed error={exc!r}")
            self.notify("Storage is unavailable; sales cannot be saved.", severity="error")

        self.push_screen(SalesFormScreen(self.form))
        user = self.auth.restore()
        if user is None:
            self._require_login()
        else:
            self._on_login(user)

    def action_open_products(self) -> None:
        if not isinstance(self.screen, SalesFormScreen):
            return
        self.push_screen(ProductsScreen())

    async def action_logout(self) -> None:
        if not isinstance(self.screen, SalesFormScreen):
            return
        log_debug(f"logout user_id={self.auth.user.id if self.auth.user else None}")
        self.auth.logout()
        self.form.reset()
        self.sub_title = self.SUB_TITLE
        await self.switch_screen(SalesFormScreen(self.form))
        self._require_login()

    def _require_login(self) -> None:
        self.push_screen(LoginModal(self.auth), callback=self._on_login)

    def _on_login(self, user: User | None) -> None:
        if user is None:
            return
        self.sub_title = f"Sales registration · {user.name}"
        log_debug(f"session_ready user_id={user.id}")
