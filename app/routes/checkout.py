from flask import Blueprint, request, jsonify, current_app
from flask_limiter.util import get_remote_address
from extensions import limiter
from models import db, money_str
from app.services.checkout import CheckoutService
from app.schemas import CheckoutRequest
from app.utils import validate_schema
from app.version import API_PREFIX

checkout_bp = Blueprint("checkout", __name__, url_prefix=API_PREFIX)


@checkout_bp.route("/checkout", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["CHECKOUT_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many checkouts from this IP",
)
@validate_schema(CheckoutRequest)
def checkout():
    """Place an order from the cart.
    ---
    tags: [Checkout]
    parameters:
      - name: body
        in: body
        required: true
        schema:
          type: object
          required: [sessionId, shippingAddress, paymentMethod]
          properties:
            sessionId: {type: string}
            shippingAddress: {type: object}
            paymentMethod: {type: string}
    responses:
      200: {description: "{orderId, totalAmount, status}"}
      400: {description: Cart is empty or body invalid}
      429: {description: Rate limited}
    """
    data = request.validated_data
    order = CheckoutService(db.session).checkout(
        data.session_id, data.shipping_address, data.payment_method
    )
    return jsonify({
        "orderId": order.id,
        "totalAmount": money_str(order.total_amount),
        "status": order.status,
    }), 200
