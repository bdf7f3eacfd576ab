# carecompanion/services/medication_service.py
"""Medications, their schedules and their dose logs, scoped to one owner."""
from datetime import time

from flask import current_app

from carecompanion.errors import InvalidInput, NotFound
from carecompanion.models import Medication, MedicationLog, MedicationSchedule
from carecompanion.services import policies, storage


# ---------------------------------------------------------------------------
# Medications
# ---------------------------------------------------------------------------
def create_medication(owner_id, fields):
    medication = storage.insert(Medication(user_id=owner_id, **fields))
    current_app.logger.info("Medication %s created for user %s", medication.id, owner_id)
    return medication


def get_medication(owner_id, medication_id):
    """Fetch one medication, inactive ones included."""
    return storage.first_or_raise(
        policies.owned(Medication, owner_id).filter(Medication.id == medication_id),
        "Medication not found",
    )


def get_medications_by_user_id(owner_id):
    return policies.active_medications(owner_id).all()


def update_medication(owner_id, medication_id, fields):
    medication = get_medication(owner_id, medication_id)

    start = fields.get("start_date", medication.start_date)
    end = fields.get("end_date", medication.end_date)
    if start and end and end < start:
        raise InvalidInput({"endDate": "must not be before startDate"})

    return storage.apply_updates(medication, fields)


def delete_medication(owner_id, medication_id):
    medication = storage.deactivate(get_medication(owner_id, medication_id))
    current_app.logger.info("Medication %s deactivated", medication_id)
    return medication


# ---------------------------------------------------------------------------
# Schedules
# ---------------------------------------------------------------------------
def create_medication_schedule(owner_id, medication_id, fields):
    medication = get_medication(owner_id, medication_id)
    return storage.insert(MedicationSchedule(medication_id=medication.id, **fields))


def get_schedules_by_medication_id(owner_id, medication_id):
    medication = get_medication(owner_id, medication_id)
    return (
        MedicationSchedule.query.filter_by(medication_id=medication.id)
        .order_by(MedicationSchedule.scheduled_time.asc())
        .all()
    )


# ---------------------------------------------------------------------------
# Dose logs
# ---------------------------------------------------------------------------
def create_medication_log(owner_id, fields):
    medication_id = fields.get("medication_id")
    medication = policies.owned(Medication, owner_id).filter(Medication.id == medication_id).first()
    if medication is None or not medication.is_active:
        raise NotFound("Medication not found")
    return storage.insert(MedicationLog(**fields))


def get_medication_log(owner_id, log_id):
    return storage.first_or_raise(
        policies.owned_medication_logs(owner_id).filter(MedicationLog.id == log_id),
        "Medication log not found",
    )


def get_medication_logs_by_user_id(owner_id, start=None, end=None):
    return policies.medication_logs_in_range(owner_id, start, end).all()


def update_medication_log(owner_id, log_id, fields):
    return storage.apply_updates(get_medication_log(owner_id, log_id), fields)


# ---------------------------------------------------------------------------
# Today's status
# ---------------------------------------------------------------------------
def _default_dose_time():
    return time.fromisoformat(current_app.config["DOSE_DEFAULT_TIME"])


def get_todays_medications(owner_id, now):
    """Active medications with a dose status derived from today's log rows."""
    config = current_app.config
    offset = config["DOSE_TIMEZONE_OFFSET_MINUTES"]
    day_start, day_end = policies.day_bounds(now, offset)

    medications = get_medications_by_user_id(owner_id)
    logs_by_medication = {}
    for log in policies.medication_logs_in_range(owner_id, day_start, day_end):
        logs_by_medication.setdefault(log.medication_id, []).append(log)

    results = []
    for medication in medications:
        doses = policies.dose_times(
            [s.scheduled_time for s in medication.schedules], now, _default_dose_time(), offset
        )
        summary = policies.derive_dose_status(
            doses,
            logs_by_medication.get(medication.id, []),
            now,
            due_lead_minutes=config["DOSE_DUE_LEAD_MINUTES"],
            overdue_after_minutes=config["DOSE_OVERDUE_AFTER_MINUTES"],
        )
        results.append({"medication": medication.to_dict(), **summary})
    return results
