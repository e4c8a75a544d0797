from .api import ApiService, ApiError

__all__ = ["ApiService", "ApiError"]
