from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from models import db, BIGINT, iso


class Cart(db.Model):
    __tablename__ = "cart"

    id = Column(BIGINT, primary_key=True)
    session_id = Column(String(64), nullable=False, unique=True)
    user_id = Column(BIGINT, nullable=True)  # reserved for future accounts
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    items = db.relationship(
        "CartItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.id",
        lazy="select",
    )

    def to_dict(self, include_items=True):
        data = {
            "id": self.id,
            "sessionId": self.session_id,
            "userId": self.user_id,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
        if include_items:
            data["CartItems"] = [ci.to_dict() for ci in self.items]
        return data


class CartItem(db.Model):
    __tablename__ = "cart_item"
    __table_args__ = (
        db.UniqueConstraint("cart_id", "product_id", name="uq_cart_item_cart_product"),
    )

    id = Column(BIGINT, primary_key=True)
    cart_id = Column(BIGINT, ForeignKey("cart.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(BIGINT, ForeignKey("product.id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    cart = db.relationship("Cart", back_populates="items")
    product = db.relationship("Product")

    def to_dict(self):
        return {
            "id": self.id,
            "cartId": self.cart_id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
            "Product": self.product.to_dict() if self.product is not None else None,
        }
