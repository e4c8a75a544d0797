import logging
from flask import Blueprint, jsonify
from models import db
from app.services.catalog import CatalogService
from app.version import API_PREFIX

catalog_bp = Blueprint("catalog", __name__, url_prefix=f"{API_PREFIX}/products")
logger = logging.getLogger(__name__)


@catalog_bp.route("", methods=["GET"])
def list_products():
    """List the catalog.
    ---
    tags: [Catalog]
    responses:
      200:
        description: Every product, ordered by id. Prices are decimal strings.
    """
    products = CatalogService(db.session).list_products()
    logger.info({"event": "products.retrieved", "count": len(products)})
    return jsonify([p.to_dict() for p in products]), 200


@catalog_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id):
    """Fetch one product.
    ---
    tags: [Catalog]
    parameters:
      - {name: product_id, in: path, type: integer, required: true}
    responses:
      200: {description: The product}
      404: {description: No such product}
    """
    product = CatalogService(db.session).get_product(product_id)
    return jsonify(product.to_dict()), 200
