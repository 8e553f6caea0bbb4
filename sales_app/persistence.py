"""SQLite persistence for submitted sales orders and the managed product table."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from sales_app.config import DB_PATH
from sales_app.lines import line_total
from sales_app.models import ProductRecord, SalesData, SavedSalesOrder

_PRODUCT_COLUMNS = (
    "code",
    "name",
    "category",
    "sub_category",
    "size_type",
    "dimensions",
    "price_venezuela",
    "price_colombia_usd",
    "price_el_salvador",
)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _connect() -> sqlite3.Connection:
    db_file = Path(DB_PATH)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def bootstrap_schema() -> None:
    """Create persistence schema if it does not already exist."""
    with _connect() as conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS sales_orders (
                id TEXT PRIMARY KEY,
                created_at TEXT NOT NULL,
                order_number TEXT NOT NULL,
                order_date TEXT NOT NULL,
                order_type TEXT NOT NULL,
                seller TEXT NOT NULL,
                sales_channel TEXT NOT NULL,
                payment_method TEXT NOT NULL,
                carrier TEXT,
                delivery_date TEXT,
                customer_identification TEXT NOT NULL,
                customer_name TEXT NOT NULL,
                customer_email TEXT NOT NULL,
                customer_phone TEXT NOT NULL,
                customer_address TEXT NOT NULL,
                customer_reference TEXT,
                customer_country TEXT NOT NULL,
                customer_state TEXT NOT NULL,
                customer_city TEXT NOT NULL,
                total REAL NOT NULL,
                status TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS sales_order_lines (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT NOT NULL,
                line_index INTEGER NOT NULL,
                product_code TEXT NOT NULL,
                description TEXT NOT NULL,
                quantity INTEGER NOT NULL,
                unit_price REAL NOT NULL,
                discount REAL NOT NULL,
                negotiated_discount INTEGER NOT NULL,
                total REAL NOT NULL,
                FOREIGN KEY(order_id) REFERENCES sales_orders(id) ON DELETE CASCADE
            );

            CREATE TABLE IF NOT EXISTS sales_order_payments (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT NOT NULL,
                amount REAL NOT NULL,
                payment_date TEXT NOT NULL,
                FOREIGN KEY(order_id) REFERENCES sales_orders(id) ON DELETE CASCADE
            );

            CREATE TABLE IF NOT EXISTS products (
                id TEXT PRIMARY KEY,
                code TEXT NOT NULL UNIQUE,
                name TEXT NOT NULL,
                category TEXT NOT NULL,
                sub_category TEXT,
                size_type TEXT,
                dimensions TEXT,
                price_venezuela REAL,
                price_colombia_usd REAL,
                price_el_salvador REAL
            );

            CREATE INDEX IF NOT EXISTS idx_sales_order_lines_order_id_line
                ON sales_order_lines(order_id, line_index);

            CREATE INDEX IF NOT EXISTS idx_sales_order_payments_order_id
                ON sales_order_payments(order_id);
            """
        )


def save_sales_order(sales_data: SalesData) -> SavedSalesOrder:
    """Persist a reviewed sales order and return saved order metadata."""
    customer = sales_data.customer
    order = sales_data.order
    if not order.lines:
        raise ValueError("Cannot save a sales order without lines")

    order_id = uuid4().hex
    created_at = _utc_now_iso()
    total = sum(line_total(line.quantity, line.unit_price, line.discount) for line in order.lines)

    with _connect() as conn:
        with conn:
            conn.execute(
                """
                INSERT INTO sales_orders (
                    id, created_at, order_number, order_date, order_type, seller, sales_channel,
                    payment_method, carrier, delivery_date, customer_identification, customer_name,
                    customer_email, customer_phone, customer_address, customer_reference,
                    customer_country, customer_state, customer_city, total, status
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 'SAVED')
                """,
                (
                    order_id,
                    created_at,
                    order.order_number,
                    order.order_date,
                    order.order_type,
                    order.seller,
                    order.sales_channel,
                    order.payment_method,
                    order.carrier or None,
                    order.delivery_date or None,
                    customer.identification,
                    customer.name,
                    customer.email,
                    customer.phone,
                    customer.address,
                    customer.reference or None,
                    customer.country,
                    customer.state,
                    customer.city,
                    total,
                ),
            )

            for idx, line in enumerate(order.lines):
                conn.execute(
                    """
                    INSERT INTO sales_order_lines (
                        order_id, line_index, product_code, description, quantity,
                        unit_price, discount, negotiated_discount, total
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        order_id,
                        idx,
                        line.code,
                        line.description,
                        line.quantity,
                        line.unit_price,
                        line.discount,
                        int(line.negotiated_discount),
                        line.total,
                    ),
                )

            for payment in order.partial_payments:
                conn.execute(
                    "INSERT INTO sales_order_payments (order_id, amount, payment_date) VALUES (?, ?, ?)",
                    (order_id, payment.amount, payment.date),
                )

    return SavedSalesOrder(
        order_id=order_id,
        created_at=created_at,
        order_number=order.order_number,
        total=total,
        status="SAVED",
    )


def _row_to_product(row: tuple) -> ProductRecord:
    return ProductRecord(id=row[0], **dict(zip(_PRODUCT_COLUMNS, row[1:])))


def list_products(search: str = "") -> list[ProductRecord]:
    """Products ordered by category, filtered on name, code or category."""
    columns = ", ".join(("id",) + _PRODUCT_COLUMNS)
    with _connect() as conn:
        if search:
            pattern = f"%{search.lower()}%"
            rows = conn.execute(
                f"""
                SELECT {columns} FROM products
                WHERE lower(name) LIKE ? OR lower(code) LIKE ? OR lower(category) LIKE ?
                ORDER BY category ASC, code ASC
                """,
                (pattern, pattern, pattern),
            ).fetchall()
        else:
            rows = conn.execute(f"SELECT {columns} FROM products ORDER BY category ASC, code ASC").fetchall()
    return [_row_to_product(row) for row in rows]


def _product_values(record: ProductRecord) -> tuple:
    return tuple(getattr(record, column) for column in _PRODUCT_COLUMNS)


def insert_product(record: ProductRecord) -> ProductRecord:
    """Insert a product and return it with its new id."""
    if not record.code or not record.name or not record.category:
        raise ValueError("Product code, name and category are required")
    product_id = uuid4().hex
    placeholders = ", ".join("?" for _ in range(len(_PRODUCT_COLUMNS) + 1))
    with _connect() as conn:
        with conn:
            conn.execute(
                f"INSERT INTO products (id, {', '.join(_PRODUCT_COLUMNS)}) VALUES ({placeholders})",
                (product_id, *_product_values(record)),
            )
    record.id = product_id
    return record


def update_product(record: ProductRecord) -> None:
    if record.id is None:
        raise ValueError("Cannot update a product without an id")
    assignments = ", ".join(f"{column} = ?" for column in _PRODUCT_COLUMNS)
    with _connect() as conn:
        with conn:
            conn.execute(
                f"UPDATE products SET {assignments} WHERE id = ?",
                (*_product_values(record), record.id),
            )


def delete_product(product_id: str) -> None:
    with _connect() as conn:
        with conn:
            conn.execute("DELETE FROM products WHERE id = ?", (product_id,))
