"""Headless smoke tests for the Textual app."""

import pytest

from sales_app.auth import AuthService, SessionFile, UserStore
from sales_app.form_screen import SalesFormScreen
from sales_app.login_modal import LoginModal
from sales_app.models import User
from sales_app.products_screen import ProductsScreen
from sales_app.sales_order_app import SalesOrderApp


@pytest.fixture
def session(tmp_path):
    return SessionFile(str(tmp_path / "user.json"))


def _app(session, clock):
    auth = AuthService(store=UserStore(), session=session, delay=0, clock=clock)
    return SalesOrderApp(auth=auth, clock=clock)


async def test_login_gate_shown_without_session(db_path, session, clock):
    app = _app(session, clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, LoginModal)


async def test_restored_session_skips_login(db_path, session, clock):
    session.save(User(id="1", email="admin@boxisleep.com", name="Administrador"))
    app = _app(session, clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, SalesFormScreen)
        assert "Administrador" in app.sub_title


async def test_next_on_empty_customer_stays_on_first_step(db_path, session, clock):
    session.save(User(id="1", email="admin@boxisleep.com", name="Administrador"))
    app = _app(session, clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("f8")
        await pilot.pause()
        assert app.form.step == 1
        assert "name" in app.form.errors


async def test_products_screen_opens_and_closes(db_path, session, clock):
    session.save(User(id="1", email="admin@boxisleep.com", name="Administrador"))
    app = _app(session, clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("f2")
        await pilot.pause()
        assert isinstance(app.screen, ProductsScreen)
        await pilot.press("escape")
        await pilot.pause()
        assert isinstance(app.screen, SalesFormScreen)


async def test_f12_logs_out_and_shows_login(db_path, session, clock):
    session.save(User(id="1", email="admin@boxisleep.com", name="Administrador"))
    app = _app(session, clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("f12")
        await pilot.pause()
        assert isinstance(app.screen, LoginModal)
        assert app.auth.user is None
        assert session.load() is None
