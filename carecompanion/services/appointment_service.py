# carecompanion/services/appointment_service.py
from carecompanion.models import Appointment
from carecompanion.services import policies, storage


def create_appointment(owner_id, fields):
    return storage.insert(Appointment(user_id=owner_id, **fields))


def get_appointment(owner_id, appointment_id):
    return storage.first_or_raise(
        policies.owned(Appointment, owner_id).filter(Appointment.id == appointment_id),
        "Appointment not found",
    )


def get_appointments_by_user_id(owner_id):
    return policies.owned(Appointment, owner_id).order_by(Appointment.appointment_date.desc()).all()


def get_upcoming_appointments(owner_id, now):
    return policies.upcoming_appointments(owner_id, now).all()


def update_appointment(owner_id, appointment_id, fields):
    return storage.apply_updates(get_appointment(owner_id, appointment_id), fields)
