from decimal import Decimal, ROUND_HALF_UP
import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import BigInteger, Integer, event
from sqlalchemy.engine import Engine

# Use BigInteger in production but fall back to Integer for SQLite
BIGINT = BigInteger().with_variant(Integer, "sqlite")

TWOPLACES = Decimal("0.01")

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE RESTRICT/CASCADE unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def to_money(value) -> Decimal:
    return Decimal(str(value)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def money_str(value):
    """Render a money value as a fixed two-decimal string for JSON."""
    if value is None:
        return None
    return str(to_money(value))


def iso(value):
    return value.isoformat() if value is not None else None


# Re-export common models for convenience
from .product import Product  # noqa: E402,F401
from .cart import Cart, CartItem  # noqa: E402,F401
from .order import Order, OrderItem, ORDER_STATUSES, PAYMENT_STATUSES  # noqa: E402,F401
