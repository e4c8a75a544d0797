import logging
import uuid
from typing import Optional

from sqlalchemy import select, update, delete
from sqlalchemy.orm import selectinload, joinedload
from sqlalchemy.sql import func

from models.cart import Cart, CartItem
from models.product import Product
from app.services.errors import NotFound, ValidationError
from app.utils.db import transactional

logger = logging.getLogger(__name__)


def _dialect_insert(dialect_name):
    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
        return insert
    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
        return insert
    return None


class CartService:
    """Session-scoped carts and their line items."""

    def __init__(self, session):
        self.session = session

    def create_cart(self, session_id: Optional[str] = None) -> Cart:
        cart = Cart(session_id=session_id or str(uuid.uuid4()))
        with transactional("Failed to create cart", session=self.session):
            self.session.add(cart)
        logger.info({"event": "cart.created", "cartId": cart.id, "sessionId": cart.session_id})
        return cart

    def get_cart(self, session_id: str) -> Cart:
        cart = self.session.execute(
            select(Cart)
            .where(Cart.session_id == session_id)
            .options(selectinload(Cart.items).joinedload(CartItem.product))
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
        if cart is None:
            raise NotFound("Cart not found")
        return cart

    def _locked_cart(self, session_id: str) -> Cart:
        cart = self.session.execute(
            select(Cart).where(Cart.session_id == session_id).with_for_update()
        ).scalar_one_or_none()
        if cart is None:
            raise NotFound("Cart not found")
        return cart

    def add_item(self, session_id: str, product_id: int, quantity: int) -> Cart:
        """Add ``quantity`` units of a product, merging with an existing line.

        The increment is computed by the database, so two requests adding
        the same product at once both land.
        """
        try:
            quantity = int(quantity)
        except (TypeError, ValueError):
            raise ValidationError("Quantity must be a whole number") from None
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")
        with transactional("Failed to add item to cart", session=self.session):
            cart = self._locked_cart(session_id)
            if self.session.get(Product, product_id) is None:
                raise NotFound("Product not found")
            self._merge_quantity(cart.id, product_id, quantity)
        logger.info({
            "event": "cart.item_added",
            "cartId": cart.id,
            "productId": product_id,
            "quantity": quantity,
        })
        return self.get_cart(session_id)

    def _merge_quantity(self, cart_id, product_id, quantity):
        insert = _dialect_insert(self.session.get_bind().dialect.name)
        if insert is not None:
            stmt = insert(CartItem).values(cart_id=cart_id, product_id=product_id, quantity=quantity)
            stmt = stmt.on_conflict_do_update(
                index_elements=[CartItem.cart_id, CartItem.product_id],
                set_={
                    "quantity": CartItem.quantity + stmt.excluded.quantity,
                    "updated_at": func.now(),
                },
            )
            self.session.execute(stmt)
            return
        result = self.session.execute(
            update(CartItem)
            .where(CartItem.cart_id == cart_id, CartItem.product_id == product_id)
            .values(quantity=CartItem.quantity + quantity)
            .execution_options(synchronize_session=False)
        )
        if not result.rowcount:
            self.session.add(CartItem(cart_id=cart_id, product_id=product_id, quantity=quantity))

    def remove_item(self, session_id: str, product_id: int) -> int:
        with transactional("Failed to remove item from cart", session=self.session):
            cart = self._locked_cart(session_id)
            removed = self.session.execute(
                delete(CartItem)
                .where(CartItem.cart_id == cart.id, CartItem.product_id == product_id)
                .execution_options(synchronize_session=False)
            ).rowcount
        logger.info({
            "event": "cart.item_removed",
            "cartId": cart.id,
            "productId": product_id,
            "removed": removed,
        })
        return removed
