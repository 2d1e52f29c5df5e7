# shop/utils/net.py
from flask import request

from ..errors import InvalidRequest


def get_json_object():
    """Request body as a dict; an absent or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidRequest("JSON object expected")
    return data
