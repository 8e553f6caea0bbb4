"""Entry point for the sales order Textual app."""

from __future__ import annotations

from sales_app.sales_order_app import SalesOrderApp


def main() -> None:
    """Run the Textual application."""
    SalesOrderApp().run()


if __name__ == "__main__":
    main()
