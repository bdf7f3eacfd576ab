# carecompanion/routes/medication_routes.py
from flask import Blueprint
from carecompanion.controllers import medication_controller

medications_bp = Blueprint("medications", __name__, url_prefix="/api/medications")

medications_bp.route("", methods=["POST"])(medication_controller.create_medication)
medications_bp.route("", methods=["GET"])(medication_controller.list_medications)
medications_bp.route("/today", methods=["GET"])(medication_controller.todays_medications)
medications_bp.route("/<medication_id>", methods=["GET"])(medication_controller.get_medication)
medications_bp.route("/<medication_id>", methods=["PATCH"])(medication_controller.update_medication)
medications_bp.route("/<medication_id>", methods=["DELETE"])(medication_controller.delete_medication)

# Schedules hang off their medication
medications_bp.route("/<medication_id>/schedules", methods=["POST"])(medication_controller.create_schedule)
medications_bp.route("/<medication_id>/schedules", methods=["GET"])(medication_controller.list_schedules)


medication_logs_bp = Blueprint("medication_logs", __name__, url_prefix="/api/medication-logs")

medication_logs_bp.route("", methods=["POST"])(medication_controller.create_medication_log)
medication_logs_bp.route("", methods=["GET"])(medication_controller.list_medication_logs)
medication_logs_bp.route("/<log_id>", methods=["GET"])(medication_controller.get_medication_log)
medication_logs_bp.route("/<log_id>", methods=["PATCH"])(medication_controller.update_medication_log)
