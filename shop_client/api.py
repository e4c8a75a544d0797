"""Thin HTTP client for the shop API with timing and structured logs."""

import logging
import time
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ApiService:
    def __init__(self, base_url: str = "http://localhost:3000/api", session: Optional[requests.Session] = None,
                 timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_with_trace(self, endpoint: str, method: str = "GET", json: Optional[Dict[str, Any]] = None,
                         headers: Optional[Dict[str, str]] = None) -> Any:
        """Call ``endpoint`` and return the decoded JSON body.

        Every call is logged with its duration. Non-2xx answers and
        transport failures raise ``ApiError``.
        """
        started = time.perf_counter()
        fields = {"endpoint": endpoint, "method": method}
        try:
            response = self.session.request(
                method,
                f"{self.base_url}{endpoint}",
                json=json,
                headers={"Content-Type": "application/json", **(headers or {})},
                timeout=self.timeout,
            )
            if not response.ok:
                raise ApiError(f"HTTP error! status: {response.status_code}", response.status_code)
            data = response.json()
        except (ApiError, requests.RequestException, ValueError) as e:
            logger.error(
                {
                    "message": "API request failed",
                    "error": str(e),
                    **fields,
                    "duration": f"{(time.perf_counter() - started) * 1000:.2f}ms",
                }
            )
            if isinstance(e, ApiError):
                raise
            raise ApiError(str(e)) from e
        logger.info(
            {
                "message": "API request completed",
                **fields,
                "duration": f"{(time.perf_counter() - started) * 1000:.2f}ms",
                "status": response.status_code,
            }
        )
        return data

    # Products
    def get_products(self):
        return self.fetch_with_trace("/products")

    def get_product_by_id(self, product_id):
        return self.fetch_with_trace(f"/products/{product_id}")

    # Cart
    def create_cart(self):
        return self.fetch_with_trace("/cart", method="POST")

    def get_cart(self, session_id):
        return self.fetch_with_trace(f"/cart/{session_id}")

    def add_to_cart(self, session_id, product_id, quantity=1):
        return self.fetch_with_trace(
            f"/cart/{session_id}/items",
            method="POST",
            json={"productId": product_id, "quantity": quantity},
        )

    def remove_cart_item(self, session_id, product_id):
        return self.fetch_with_trace(f"/cart/{session_id}/items/{product_id}", method="DELETE")

    # Orders
    def create_order(self, session_id, shipping_info, payment_method):
        return self.fetch_with_trace(
            "/checkout",
            method="POST",
            json={"sessionId": session_id, "shippingAddress": shipping_info, "paymentMethod": payment_method},
        )

    def get_order(self, order_id):
        return self.fetch_with_trace(f"/orders/{order_id}")
