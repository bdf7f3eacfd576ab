from flask import current_app, jsonify
from flask_jwt_extended import create_access_token, jwt_required

from carecompanion.controllers.common import current_user_id, json_body
from carecompanion.errors import InvalidInput, Unauthenticated
from carecompanion.services import firebase_service
from carecompanion.services.user_service import get_user, upsert_user


def login():
    """
    Exchange an identity-provider ID token for an API access token.
    Body: { "idToken": "..." }
    """
    data = json_body()
    if not isinstance(data, dict):
        raise InvalidInput({"_body": "Request body must be a JSON object"})
    id_token = data.get("idToken")
    if id_token is not None and not isinstance(id_token, str):
        raise InvalidInput({"idToken": "must be a string"})
    id_token = (id_token or "").strip()
    if not id_token:
        raise InvalidInput({"idToken": "This field is required"})

    claims = firebase_service.verify_id_token(id_token)
    if not claims or not claims.get("uid"):
        raise Unauthenticated("Invalid identity token")

    user = upsert_user(**firebase_service.claims_to_profile(claims))
    access_token = create_access_token(identity=user.id)
    current_app.logger.info("User %s signed in", user.id)

    return jsonify({
        "success": True,
        "message": "Login successful",
        "user": user.to_dict(),
        "access_token": access_token,
    }), 200


@jwt_required()
def get_current_user():
    return jsonify(get_user(current_user_id()).to_dict()), 200
