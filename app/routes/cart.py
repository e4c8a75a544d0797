from flask import Blueprint, request, jsonify
from models import db
from app.services.cart import CartService
from app.schemas import AddCartItemRequest
from app.utils import validate_schema
from app.version import API_PREFIX

cart_bp = Blueprint("cart", __name__, url_prefix=f"{API_PREFIX}/cart")


@cart_bp.route("", methods=["POST"])
def create_cart():
    """Open a new cart.
    ---
    tags: [Cart]
    responses:
      200:
        description: The new cart id and its session id
    """
    cart = CartService(db.session).create_cart()
    return jsonify({"cartId": cart.id, "sessionId": cart.session_id}), 200


@cart_bp.route("/<session_id>", methods=["GET"])
def get_cart(session_id):
    """Show a cart with its items and their products.
    ---
    tags: [Cart]
    parameters:
      - {name: session_id, in: path, type: string, required: true}
    responses:
      200: {description: Cart with CartItems}
      404: {description: Cart not found}
    """
    cart = CartService(db.session).get_cart(session_id)
    return jsonify(cart.to_dict()), 200


@cart_bp.route("/<session_id>/items", methods=["POST"])
@validate_schema(AddCartItemRequest)
def add_item(session_id):
    """Add a product to the cart, merging with an existing line.
    ---
    tags: [Cart]
    parameters:
      - {name: session_id, in: path, type: string, required: true}
      - name: body
        in: body
        required: true
        schema:
          type: object
          required: [productId]
          properties:
            productId: {type: integer}
            quantity: {type: integer, minimum: 1, default: 1}
    responses:
      200: {description: The updated cart}
      400: {description: Invalid body}
      404: {description: Cart or product not found}
    """
    data = request.validated_data
    cart = CartService(db.session).add_item(session_id, data.product_id, data.quantity)
    return jsonify(cart.to_dict()), 200


@cart_bp.route("/<session_id>/items/<int:product_id>", methods=["DELETE"])
def remove_item(session_id, product_id):
    """Remove a product from the cart. Absent products are a no-op.
    ---
    tags: [Cart]
    parameters:
      - {name: session_id, in: path, type: string, required: true}
      - {name: product_id, in: path, type: integer, required: true}
    responses:
      200: {description: Item removed}
      404: {description: Cart not found}
    """
    CartService(db.session).remove_item(session_id, product_id)
    return jsonify({"message": "Item removed from cart"}), 200
