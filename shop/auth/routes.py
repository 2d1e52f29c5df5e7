from flask import current_app

from . import bp
from ..utils.api import ok
from ..utils.net import get_json_object


def _accounts():
    return current_app.extensions["shop"].accounts


@bp.post("/register")
def register():
    data = get_json_object()
    user = _accounts().register(data.get("email"), data.get("password"))
    return ok({"email": user.email, "id": user.id}, 201)


@bp.post("/login")
def login():
    data = get_json_object()
    user = _accounts().login(data.get("email"), data.get("password"))
    return ok({"message": "Login successful", "email": user.email})
