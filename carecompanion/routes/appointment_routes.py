# carecompanion/routes/appointment_routes.py
from flask import Blueprint
from carecompanion.controllers import appointment_controller

appointments_bp = Blueprint("appointments", __name__, url_prefix="/api/appointments")

appointments_bp.route("", methods=["POST"])(appointment_controller.create_appointment)
appointments_bp.route("", methods=["GET"])(appointment_controller.list_appointments)
appointments_bp.route("/upcoming", methods=["GET"])(appointment_controller.upcoming_appointments)
appointments_bp.route("/<appointment_id>", methods=["GET"])(appointment_controller.get_appointment)
appointments_bp.route("/<appointment_id>", methods=["PATCH"])(appointment_controller.update_appointment)
