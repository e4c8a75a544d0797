from app.routes import (
    home_bp,
    catalog_bp,
    cart_bp,
    checkout_bp,
    orders_bp,
)


def register_api(app):
    """Register the shop blueprints."""
    app.register_blueprint(home_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(checkout_bp)
    app.register_blueprint(orders_bp)
