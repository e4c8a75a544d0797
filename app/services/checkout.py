"""Turn a live cart into an immutable order."""

import logging
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import select, delete
from sqlalchemy.orm import joinedload

from models import to_money
from models.cart import Cart, CartItem
from models.order import Order, OrderItem
from app.metrics import CHECKOUT_COUNTER
from app.services.errors import EmptyCart, ShopError
from app.utils.db import transactional

logger = logging.getLogger(__name__)


def cart_total(items) -> Decimal:
    """Sum ``price * quantity`` over cart lines in line id order."""
    total = Decimal("0.00")
    for ci in sorted(items, key=lambda ci: ci.id):
        total += to_money(ci.product.price) * ci.quantity
    return to_money(total)


class CheckoutService:
    def __init__(self, session):
        self.session = session

    def checkout(self, session_id: str, shipping_address: Dict[str, Any], payment_method: str) -> Order:
        """Place an order for everything in the cart and empty the cart.

        The cart row is locked for the duration of the transaction, so a
        second checkout of the same cart waits and then finds it empty.
        The order, its items and the cart clearing commit together or not
        at all; on failure the cart is left as it was.
        """
        try:
            with transactional("Checkout failed", session=self.session):
                order, item_count = self._place_order(session_id, shipping_address, payment_method)
        except ShopError as e:
            CHECKOUT_COUNTER.labels(type(e).__name__).inc()
            raise
        except Exception:
            CHECKOUT_COUNTER.labels("error").inc()
            raise
        CHECKOUT_COUNTER.labels("success").inc()
        logger.info({
            "event": "order.created",
            "orderId": order.id,
            "totalAmount": str(order.total_amount),
            "itemCount": item_count,
        })
        return order

    def _place_order(self, session_id, shipping_address, payment_method):
        cart = self.session.execute(
            select(Cart).where(Cart.session_id == session_id).with_for_update()
        ).scalar_one_or_none()
        if cart is None:
            raise EmptyCart()

        items = list(
            self.session.execute(
                select(CartItem)
                .where(CartItem.cart_id == cart.id)
                .options(joinedload(CartItem.product))
                .order_by(CartItem.id)
                .execution_options(populate_existing=True)
            ).scalars()
        )
        if not items:
            raise EmptyCart()

        order = Order(
            session_id=session_id,
            total_amount=cart_total(items),
            shipping_address=shipping_address,
            payment_method=payment_method,
            status="pending",
            payment_status="pending",
        )
        self.session.add(order)
        self.session.flush()

        for ci in items:
            self.session.add(
                OrderItem(
                    order_id=order.id,
                    product_id=ci.product_id,
                    quantity=ci.quantity,
                    price=to_money(ci.product.price),
                )
            )

        cleared = self.session.execute(
            delete(CartItem)
            .where(CartItem.cart_id == cart.id, CartItem.id.in_([ci.id for ci in items]))
            .execution_options(synchronize_session=False)
        ).rowcount
        if cleared != len(items):
            # another request drained the cart after we read it
            raise EmptyCart("Cart changed during checkout")
        self.session.expire(cart, ["items"])
        return order, len(items)
