import logging
from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from app.services.errors import ShopError, StoreError, ValidationError
from app.utils.responses import error, internal_error_response, validation_error_response

errors_bp = Blueprint("errors_bp", __name__)
logger = logging.getLogger(__name__)


def _context(e):
    return {
        "error": type(e).__name__,
        "method": request.method,
        "path": request.path,
    }


@errors_bp.app_errorhandler(ShopError)
def handle_shop_error(e):
    if isinstance(e, StoreError):
        logger.error({"event": "request.failed", **_context(e), "detail": e.message})
        return internal_error_response()
    logger.warning({"event": "request.rejected", **_context(e), "detail": e.message})
    if isinstance(e, ValidationError) and e.details:
        return validation_error_response(e.details, message=e.message)
    return error(e.message, status=e.status_code)


@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    msg = e.description or getattr(e, "name", "HTTP Error")
    if e.code and e.code >= 500:
        logger.error({"event": "request.failed", **_context(e), "code": e.code})
    return error(msg, status=e.code, code=e.code)


@errors_bp.app_errorhandler(SQLAlchemyError)
def handle_store_failure(e):
    logger.exception({"event": "request.failed", **_context(e)})
    return internal_error_response()


@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logger.exception({"event": "request.failed", **_context(e)})
    return internal_error_response()
