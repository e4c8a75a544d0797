from .cart import AddCartItemRequest
from .checkout import CheckoutRequest

__all__ = ["AddCartItemRequest", "CheckoutRequest"]
