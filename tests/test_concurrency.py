"""Simultaneous requests against a file-backed SQLite database.

Each worker thread runs in its own app context, so each gets its own
scoped session and its own connection from the pool.
"""
import threading
from decimal import Decimal

import pytest

from app import create_app
from app.config import TestingConfig
from app.services.cart import CartService
from app.services.checkout import CheckoutService
from app.services.errors import EmptyCart
from models import db
from models.cart import CartItem
from models.order import Order, OrderItem
from models.product import Product

ADDRESS = {'street': '1 Loop Rd', 'city': 'Springfield'}
WORKERS = 6


@pytest.fixture()
def file_app(tmp_path):
    config = type('FileDbTestingConfig', (TestingConfig,), {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'shop.db'}",
    })
    app = create_app(config)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


def run_together(app, count, work):
    """Start ``count`` threads at once and collect each one's outcome."""
    barrier = threading.Barrier(count)
    outcomes = [None] * count

    def worker(index):
        with app.app_context():
            barrier.wait()
            try:
                work()
                outcomes[index] = 'ok'
            except Exception as e:
                outcomes[index] = type(e).__name__
            finally:
                db.session.remove()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    return outcomes


def seed(app):
    with app.app_context():
        product = Product(name='Widget', price=Decimal('10.00'))
        db.session.add(product)
        db.session.commit()
        cart = CartService(db.session).create_cart()
        return cart.session_id, product.id


def test_simultaneous_checkouts_place_one_order(file_app):
    sid, pid = seed(file_app)
    with file_app.app_context():
        CartService(db.session).add_item(sid, pid, 2)

    outcomes = run_together(
        file_app, WORKERS,
        lambda: CheckoutService(db.session).checkout(sid, ADDRESS, 'card'),
    )

    assert outcomes.count('ok') == 1
    assert outcomes.count(EmptyCart.__name__) == WORKERS - 1
    with file_app.app_context():
        assert Order.query.count() == 1
        assert OrderItem.query.count() == 1
        assert CartItem.query.count() == 0
        assert Order.query.one().total_amount == Decimal('20.00')


def test_simultaneous_adds_converge_to_summed_quantity(file_app):
    sid, pid = seed(file_app)

    outcomes = run_together(
        file_app, WORKERS,
        lambda: CartService(db.session).add_item(sid, pid, 1),
    )

    assert outcomes == ['ok'] * WORKERS
    with file_app.app_context():
        lines = CartItem.query.all()
        assert [ci.quantity for ci in lines] == [WORKERS]
