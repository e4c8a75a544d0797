from functools import wraps
from flask import request
from pydantic import ValidationError
from .responses import validation_error_response


def validate_schema(schema):
    """Decorator to validate request JSON against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            payload = request.get_json(silent=True)
            try:
                obj = schema.model_validate(payload if payload is not None else {})
            except ValidationError as ve:
                details = ve.errors(include_url=False, include_input=False, include_context=False)
                return validation_error_response(details)
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
