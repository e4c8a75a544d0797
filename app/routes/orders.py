import logging
from flask import Blueprint, jsonify
from models import db
from app.services.orders import OrderService
from app.version import API_PREFIX

orders_bp = Blueprint("orders", __name__, url_prefix=f"{API_PREFIX}/orders")


@orders_bp.route("/<int:order_id>", methods=["GET"])
def get_order(order_id):
    """Show an order with its items and their products.
    ---
    tags: [Orders]
    parameters:
      - {name: order_id, in: path, type: integer, required: true}
    responses:
      200: {description: Order with OrderItems}
      404: {description: Order not found}
    """
    order = OrderService(db.session).get_order(order_id)
    logging.getLogger(__name__).info({"event": "order.retrieved", "orderId": order.id})
    return jsonify(order.to_dict()), 200
