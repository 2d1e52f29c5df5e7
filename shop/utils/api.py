# --- shop/utils/api.py ---
from flask import jsonify


def api_error(message, data=None):
    return {
        "status": False,
        "message": message,
        **(data or {}),
    }


def ok(data, status=200):
    r = jsonify(data); r.status_code = status; return r
