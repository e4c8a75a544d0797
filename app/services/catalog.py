from typing import List

from sqlalchemy import select

from models.product import Product
from app.services.errors import NotFound


class CatalogService:
    """Read access to the product catalog."""

    def __init__(self, session):
        self.session = session

    def list_products(self) -> List[Product]:
        return list(self.session.execute(select(Product).order_by(Product.id)).scalars())

    def get_product(self, product_id) -> Product:
        product = self.session.get(Product, product_id)
        if product is None:
            raise NotFound("Product not found")
        return product
