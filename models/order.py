from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from models import db, BIGINT, money_str, iso

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "cancelled")
PAYMENT_STATUSES = ("pending", "completed", "failed")


class Order(db.Model):
    __tablename__ = "order"
    __table_args__ = (
        db.Index("ix_order_session_id", "session_id"),
    )

    id = Column(BIGINT, primary_key=True)
    session_id = Column(String(64), nullable=False)
    user_id = Column(BIGINT, nullable=True)
    status = Column(db.Enum(*ORDER_STATUSES, name="order_status"), nullable=False, default="pending")
    total_amount = Column(Numeric(10, 2), nullable=False)
    shipping_address = Column(JSON, nullable=False)
    payment_method = Column(String(50), nullable=False)
    payment_status = Column(db.Enum(*PAYMENT_STATUSES, name="payment_status"), nullable=False, default="pending")
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    items = db.relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="select",
    )

    def to_dict(self, include_items=True):
        data = {
            "id": self.id,
            "sessionId": self.session_id,
            "userId": self.user_id,
            "status": self.status,
            "totalAmount": money_str(self.total_amount),
            "shippingAddress": self.shipping_address,
            "paymentMethod": self.payment_method,
            "paymentStatus": self.payment_status,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
        if include_items:
            data["OrderItems"] = [oi.to_dict() for oi in self.items]
        return data


class OrderItem(db.Model):
    __tablename__ = "order_item"

    id = Column(BIGINT, primary_key=True)
    order_id = Column(BIGINT, ForeignKey("order.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(BIGINT, ForeignKey("product.id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # unit price at time of purchase
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    order = db.relationship("Order", back_populates="items")
    product = db.relationship("Product")

    def to_dict(self):
        return {
            "id": self.id,
            "orderId": self.order_id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "price": money_str(self.price),
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
            "Product": self.product.to_dict() if self.product is not None else None,
        }
