from flask import jsonify
from flask_jwt_extended import jwt_required

from carecompanion.controllers.common import current_user_id, datetime_arg, json_body
from carecompanion.helpers import utcnow
from carecompanion.services import medication_service
from carecompanion.validation import medication_log_shape, medication_shape, schedule_shape


# Medications
@jwt_required()
def create_medication():
    user_id = current_user_id()
    fields = medication_shape.load(json_body())
    medication = medication_service.create_medication(user_id, fields)
    return jsonify(medication.to_dict()), 201


@jwt_required()
def list_medications():
    medications = medication_service.get_medications_by_user_id(current_user_id())
    return jsonify([m.to_dict() for m in medications]), 200


@jwt_required()
def todays_medications():
    """Active medications with today's dose status."""
    return jsonify(medication_service.get_todays_medications(current_user_id(), utcnow())), 200


@jwt_required()
def get_medication(medication_id):
    medication = medication_service.get_medication(current_user_id(), medication_id)
    return jsonify(medication.to_dict()), 200


@jwt_required()
def update_medication(medication_id):
    user_id = current_user_id()
    fields = medication_shape.load(json_body(), partial=True)
    medication = medication_service.update_medication(user_id, medication_id, fields)
    return jsonify(medication.to_dict()), 200


@jwt_required()
def delete_medication(medication_id):
    medication_service.delete_medication(current_user_id(), medication_id)
    return jsonify({"success": True, "message": "Medication deleted successfully"}), 200


# Schedules
@jwt_required()
def create_schedule(medication_id):
    user_id = current_user_id()
    fields = schedule_shape.load(json_body())
    schedule = medication_service.create_medication_schedule(user_id, medication_id, fields)
    return jsonify(schedule.to_dict()), 201


@jwt_required()
def list_schedules(medication_id):
    schedules = medication_service.get_schedules_by_medication_id(current_user_id(), medication_id)
    return jsonify([s.to_dict() for s in schedules]), 200


# Dose logs
@jwt_required()
def create_medication_log():
    user_id = current_user_id()
    fields = medication_log_shape.load(json_body())
    log = medication_service.create_medication_log(user_id, fields)
    return jsonify(log.to_dict()), 201


@jwt_required()
def list_medication_logs():
    user_id = current_user_id()
    logs = medication_service.get_medication_logs_by_user_id(
        user_id, datetime_arg("startDate"), datetime_arg("endDate")
    )
    return jsonify([log.to_dict(include_medication=True) for log in logs]), 200


@jwt_required()
def get_medication_log(log_id):
    log = medication_service.get_medication_log(current_user_id(), log_id)
    return jsonify(log.to_dict(include_medication=True)), 200


@jwt_required()
def update_medication_log(log_id):
    user_id = current_user_id()
    fields = medication_log_shape.load(json_body(), partial=True)
    log = medication_service.update_medication_log(user_id, log_id, fields)
    return jsonify(log.to_dict()), 200
