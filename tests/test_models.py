import pytest
from sqlalchemy import delete, inspect
from sqlalchemy.exc import IntegrityError

from models import db
from models.cart import Cart, CartItem
from models.product import Product


def _cart_with_line(product_id, session_id='models-sess'):
    cart = Cart(session_id=session_id)
    db.session.add(cart)
    db.session.flush()
    db.session.add(CartItem(cart_id=cart.id, product_id=product_id, quantity=1))
    db.session.commit()
    return cart


def test_product_in_cart_cannot_be_deleted(app, products):
    _cart_with_line(products['a'])
    with pytest.raises(IntegrityError):
        db.session.execute(delete(Product).where(Product.id == products['a']))
        db.session.commit()
    db.session.rollback()
    assert db.session.get(Product, products['a']) is not None


def test_one_line_per_cart_and_product(app, products):
    cart = _cart_with_line(products['a'])
    db.session.add(CartItem(cart_id=cart.id, product_id=products['a'], quantity=2))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_cart_item_unique_constraint_declared(app):
    uniques = inspect(db.engine).get_unique_constraints('cart_item')
    assert any(set(u['column_names']) == {'cart_id', 'product_id'} for u in uniques)


def test_deleting_cart_removes_its_lines(app, products):
    cart = _cart_with_line(products['b'])
    db.session.delete(cart)
    db.session.commit()
    assert CartItem.query.count() == 0


def test_product_to_dict_uses_string_price(app, make_product):
    pid = make_product('Cable', '19.90', category='Accessories')
    data = db.session.get(Product, pid).to_dict()
    assert data['price'] == '19.90'
    assert data['category'] == 'Accessories'
    assert data['stock'] == 0
