from flask import jsonify
from flask_jwt_extended import jwt_required

from carecompanion.controllers.common import current_user_id, json_body
from carecompanion.helpers import utcnow
from carecompanion.services import appointment_service
from carecompanion.validation import appointment_shape


@jwt_required()
def create_appointment():
    user_id = current_user_id()
    fields = appointment_shape.load(json_body())
    appointment = appointment_service.create_appointment(user_id, fields)
    return jsonify(appointment.to_dict()), 201


@jwt_required()
def list_appointments():
    appointments = appointment_service.get_appointments_by_user_id(current_user_id())
    return jsonify([a.to_dict() for a in appointments]), 200


@jwt_required()
def upcoming_appointments():
    appointments = appointment_service.get_upcoming_appointments(current_user_id(), utcnow())
    return jsonify([a.to_dict() for a in appointments]), 200


@jwt_required()
def get_appointment(appointment_id):
    appointment = appointment_service.get_appointment(current_user_id(), appointment_id)
    return jsonify(appointment.to_dict()), 200


@jwt_required()
def update_appointment(appointment_id):
    user_id = current_user_id()
    fields = appointment_shape.load(json_body(), partial=True)
    appointment = appointment_service.update_appointment(user_id, appointment_id, fields)
    return jsonify(appointment.to_dict()), 200
