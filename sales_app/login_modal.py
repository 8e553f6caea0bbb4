"""Login / register modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from sales_app.auth import AuthService
from sales_app.models import User


class LoginModal(ModalScreen[User]):
    """Blocks the app until a user signs in or registers."""

    CSS = """
    LoginModal {
        align: center middle;
        background: $background 60%;
    }

    #login-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #login-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #login-error {
        color: #ffb3b3;
        margin: 1 0;
    }

    #login-help {
        color: #dddddd;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "toggle_register", "Login / Register", priority=True),
    ]

    def __init__(self, auth: AuthService) -> None:
        super().__init__()
        self.auth = auth
        self.registering = False
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="login-dialog"):
            yield Static("Boxi Sleep Login", id="login-title")
            yield Input(placeholder="Full name", id="login-name")
            yield Input(placeholder="you@email.com", id="login-email")
            yield Input(placeholder="Password", password=True, id="login-password")
            yield Static(id="login-error")
            yield Static(id="login-help")

    def on_mount(self) -> None:
        self._refresh_content()
        self.query_one("#login-email", Input).focus()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        await self._confirm()

    def action_toggle_register(self) -> None:
        if self.auth.is_loading:
            return
        self.registering = not self.registering
        self.error = ""
        self._refresh_content()

    async def _confirm(self) -> None:
        if self.auth.is_loading:
            return
        email = self.query_one("#login-email", Input).value.strip()
        password = self.query_one("#login-password", Input).value
        name = self.query_one("#login-name", Input).value.strip()

        if not email or not password or (self.registering and not name):
            self.error = "Please fill in all fields"
            self._refresh_content()
            return

        self.error = "Creating account..." if self.registering else "Signing in..."
        self._refresh_content()

        if self.registering:
            ok = await self.auth.register(email, password, name)
            failure = "Could not create the account. The email may already be registered."
        else:
            ok = await self.auth.login(email, password)
            failure = "Invalid credentials. Try admin@boxisleep.com / admin123"

        if ok and self.auth.user is not None:
            self.dismiss(self.auth.user)
            return

        self.error = failure
        self._refresh_content()

    def _refresh_content(self) -> None:
        self.query_one("#login-title", Static).update("Create account" if self.registering else "Boxi Sleep Login")
        self.query_one("#login-name", Input).display = self.registering
        self.query_one("#login-error", Static).update(self.error)
        mode = "sign in" if self.registering else "create an account"
        self.query_one("#login-help", Static).update(f"Enter to confirm. Ctrl+R to {mode}. Ctrl+Q to quit.")
