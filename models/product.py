from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime
from sqlalchemy.sql import func
from models import db, BIGINT, money_str, iso


class Product(db.Model):
    __tablename__ = "product"

    id = Column(BIGINT, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    image = Column(String(500), nullable=True)
    category = Column(String(100), nullable=True)
    stock = Column(Integer, nullable=False, default=0)  # advisory, never decremented
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": money_str(self.price),
            "image": self.image,
            "category": self.category,
            "stock": self.stock,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
