"""Demo catalog seeding.

``reset_and_seed`` drops every table before repopulating it. It is meant
for local development and demos only and is refused in production unless
explicitly allowed (see ``app.cli`` and ``ProductionConfig``).
"""

import logging
from decimal import Decimal

from models import db
from models.cart import Cart
from models.product import Product

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "8c85c569-a597-4a15-9436-32e7270ed42c"

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w=600&q=80"

CATALOG = [
    {"name": "iPhone 15 Pro", "description": "Latest iPhone", "price": "999.00", "category": "iPhone",
     "image": _UNSPLASH.format("photo-1509395176047-4a66953fd231")},
    {"name": "iPad Pro", "description": "Powerful iPad", "price": "799.00", "category": "iPad",
     "image": _UNSPLASH.format("photo-1515378791036-0648a3ef77b2")},
    {"name": "MacBook Air", "description": "Lightweight laptop", "price": "1199.00", "category": "Mac",
     "image": _UNSPLASH.format("photo-1517336714731-489689fd1ca8")},
    {"name": "Apple Watch", "description": "Smart watch", "price": "399.00", "category": "Watch",
     "image": _UNSPLASH.format("photo-1516574187841-cb9cc2ca948b")},
    {"name": "AirPods Pro", "description": "Wireless earbuds", "price": "249.00", "category": "AirPods",
     "image": _UNSPLASH.format("photo-1511367461989-f85a21fda167")},
    {"name": "iPhone 15", "description": "Affordable iPhone", "price": "799.00", "category": "iPhone",
     "image": _UNSPLASH.format("photo-1511707171634-5f897ff02aa9")},
    {"name": "iPad Air", "description": "Lightweight iPad", "price": "599.00", "category": "iPad",
     "image": _UNSPLASH.format("photo-1465101046530-73398c7f28ca")},
    {"name": "MacBook Pro", "description": "High performance laptop", "price": "1999.00", "category": "Mac",
     "image": _UNSPLASH.format("photo-1517336714731-489689fd1ca8")},
    {"name": "Apple Watch SE", "description": "Affordable smart watch", "price": "279.00", "category": "Watch",
     "image": _UNSPLASH.format("photo-1465101046530-73398c7f28ca")},
    {"name": "AirPods Max", "description": "Premium over-ear headphones", "price": "549.00", "category": "AirPods",
     "image": _UNSPLASH.format("photo-1517841905240-472988babdf9")},
]


def seed_catalog(session, default_session_id=DEFAULT_SESSION_ID):
    """Insert the demo products and the default cart. Does NOT commit."""
    session.add_all(
        Product(
            name=p["name"],
            description=p["description"],
            price=Decimal(p["price"]),
            category=p["category"],
            image=p["image"],
        )
        for p in CATALOG
    )
    if default_session_id:
        session.add(Cart(session_id=default_session_id))
    return len(CATALOG)


def reset_and_seed(default_session_id=DEFAULT_SESSION_ID):
    """Drop and recreate every table, then seed. Needs an app context."""
    db.drop_all()
    db.create_all()
    logger.info("Database reset")
    try:
        count = seed_catalog(db.session, default_session_id)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Error seeding database")
        raise
    logger.info({"event": "catalog.seeded", "products": count, "defaultSessionId": default_session_id})
    return count
