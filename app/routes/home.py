import logging
from flask import Blueprint, jsonify

home_bp = Blueprint("home", __name__)


@home_bp.route("/", methods=["GET"])
def index():
    logging.getLogger(__name__).info("Home route accessed")
    return jsonify({"message": "Welcome to Simple Shop API"}), 200


@home_bp.route("/health", methods=["GET"])
def health():
    return {"status": "ok"}, 200
