# carecompanion/routes/auth_routes.py
from flask import Blueprint
from carecompanion.controllers import auth_controller

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

auth_bp.route("/login", methods=["POST"])(auth_controller.login)
auth_bp.route("/user", methods=["GET"])(auth_controller.get_current_user)
