# --- shop/errors.py ---
from flask import jsonify
from werkzeug.exceptions import HTTPException

from .utils.api import api_error


class ShopError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class DuplicateEmail(ShopError):
    status_code = 400
    message = "This email is already registered."


class InvalidCredentials(ShopError):
    status_code = 401
    message = "Invalid email or password"


class NotFound(ShopError):
    status_code = 404
    message = "Product not found"


class EmptyCart(ShopError):
    status_code = 400
    message = "Cart is empty"


class InvalidRequest(ShopError):
    status_code = 400
    message = "Invalid request"


class StorageError(ShopError):
    """Any failure of the underlying store. Never retried."""
    status_code = 500
    message = "Server error"


def register_error_handlers(app):
    @app.errorhandler(ShopError)
    def handle_shop_error(e: ShopError):
        return jsonify(api_error(e.message)), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        # routing errors (404/405) and unhandled exceptions wrapped as 500
        return jsonify(api_error(e.description)), e.code
