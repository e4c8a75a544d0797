import os
import sys
from decimal import Decimal

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')

from models import db
from models.product import Product


@pytest.fixture(scope='session')
def app_instance():
    from app import create_app
    from app.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite:///:memory:',
    )
    return app


@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


def _create_product(name, price, **kwargs):
    product = Product(name=name, price=Decimal(price), description=kwargs.pop("description", name), **kwargs)
    db.session.add(product)
    db.session.commit()
    return product.id


@pytest.fixture()
def make_product(app):
    return _create_product


@pytest.fixture()
def products(app):
    """Two products priced 10.00 and 5.00, keyed 'a' and 'b'."""
    return {
        "a": _create_product("Widget A", "10.00", category="Widgets", stock=3),
        "b": _create_product("Widget B", "5.00", category="Widgets"),
    }


@pytest.fixture()
def session_id(client):
    resp = client.post('/api/cart')
    assert resp.status_code == 200
    return resp.get_json()['sessionId']
