from sqlalchemy import select
from sqlalchemy.orm import selectinload, joinedload

from models.order import Order, OrderItem
from app.services.errors import NotFound


class OrderService:
    """Read-only access to placed orders."""

    def __init__(self, session):
        self.session = session

    def get_order(self, order_id) -> Order:
        order = self.session.execute(
            select(Order)
            .where(Order.id == order_id)
            .options(selectinload(Order.items).joinedload(OrderItem.product))
        ).scalar_one_or_none()
        if order is None:
            raise NotFound("Order not found")
        return order
