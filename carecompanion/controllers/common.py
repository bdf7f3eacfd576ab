# carecompanion/controllers/common.py
from flask import request
from flask_jwt_extended import get_jwt_identity

from carecompanion.errors import InvalidInput, Unauthenticated
from carecompanion.helpers import parse_datetime
from carecompanion.services.user_service import get_user


def current_user_id():
    """Id of the authenticated caller; the token must name an existing user."""
    identity = get_jwt_identity()
    if not identity or get_user(str(identity)) is None:
        raise Unauthenticated("User not found")
    return str(identity)


def json_body():
    return request.get_json(silent=True)


def datetime_arg(name):
    raw = request.args.get(name)
    if not raw:
        return None
    try:
        return parse_datetime(raw)
    except ValueError:
        raise InvalidInput({name: "must be an ISO-8601 date-time"})
