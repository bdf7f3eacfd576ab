# carecompanion/services/policies.py
"""Scoping and selection rules applied on top of raw storage.

Query builders here never commit; they only decide *which* rows a caller
may see and in what order. The dose status helpers are pure functions.
"""
from datetime import datetime, time, timedelta

from sqlalchemy import func

from carecompanion.models import Appointment, HealthGoal, HealthMetric, HealthTip, Medication, MedicationLog

UPCOMING_LIMIT = 5


# ---------------------------------------------------------------------------
# Ownership scoping
# ---------------------------------------------------------------------------
def owned(model, owner_id):
    """Rows of a user-owned model belonging to ``owner_id``."""
    return model.query.filter(model.user_id == owner_id)


def owned_medication_logs(owner_id):
    """Logs are scoped through their medication; the log has no user id."""
    return MedicationLog.query.join(Medication, MedicationLog.medication_id == Medication.id).filter(
        Medication.user_id == owner_id
    )


def active_only(query, model):
    return query.filter(model.is_active.is_(True))


# ---------------------------------------------------------------------------
# Selection policies
# ---------------------------------------------------------------------------
def active_medications(owner_id):
    return active_only(owned(Medication, owner_id), Medication).order_by(Medication.created_at.desc())


def active_health_goals(owner_id):
    return active_only(owned(HealthGoal, owner_id), HealthGoal).order_by(HealthGoal.created_at.desc())


def medication_logs_in_range(owner_id, start=None, end=None):
    """Inclusive [start, end] window on scheduled_date, newest first."""
    query = owned_medication_logs(owner_id)
    if start is not None:
        query = query.filter(MedicationLog.scheduled_date >= start)
    if end is not None:
        query = query.filter(MedicationLog.scheduled_date <= end)
    return query.order_by(MedicationLog.scheduled_date.desc())


def health_metrics(owner_id, metric_type=None):
    query = owned(HealthMetric, owner_id)
    if metric_type:
        query = query.filter(HealthMetric.type == metric_type)
    return query.order_by(HealthMetric.recorded_at.desc())


def latest_health_metric(owner_id, metric_type):
    # Ties on recorded_at fall back to insertion order; beyond that the order is unspecified.
    return (
        owned(HealthMetric, owner_id)
        .filter(HealthMetric.type == metric_type)
        .order_by(HealthMetric.recorded_at.desc(), HealthMetric.created_at.desc())
        .limit(1)
    )


def upcoming_appointments(owner_id, now, limit=UPCOMING_LIMIT):
    return (
        owned(Appointment, owner_id)
        .filter(Appointment.appointment_date >= now, Appointment.status == "scheduled")
        .order_by(Appointment.appointment_date.asc())
        .limit(limit)
    )


def active_health_tips():
    return HealthTip.query.filter(HealthTip.is_active.is_(True)).order_by(HealthTip.created_at.desc())


def random_health_tip():
    # Not persisted: consecutive calls may return different tips.
    return HealthTip.query.filter(HealthTip.is_active.is_(True)).order_by(func.random()).limit(1)


# ---------------------------------------------------------------------------
# Dose status
# ---------------------------------------------------------------------------
def day_bounds(now, offset_minutes=0):
    """Start and end (inclusive) of the calendar day containing ``now``.

    ``now`` is naive UTC; ``offset_minutes`` moves the day boundary to the
    user's local midnight. Bounds are returned in naive UTC.
    """
    offset = timedelta(minutes=offset_minutes)
    local = now + offset
    start = datetime.combine(local.date(), time.min) - offset
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def dose_times(schedule_times, now, default_time, offset_minutes=0):
    """Today's dose datetimes (naive UTC) for local schedule times of day."""
    offset = timedelta(minutes=offset_minutes)
    local_date = (now + offset).date()
    times = sorted(schedule_times) or [default_time]
    return [datetime.combine(local_date, t) - offset for t in times]


def derive_dose_status(doses, todays_logs, now, due_lead_minutes=30, overdue_after_minutes=60):
    """Status of a medication for today, from today's log rows.

    ``doses`` are the day's dose datetimes; ``todays_logs`` are the
    medication's logs whose scheduled_date falls on the same day. Only
    ``taken`` logs resolve a dose; a pending ``snoozed`` log defers it.
    """
    taken = [log for log in todays_logs if log.status == "taken"]
    summary = {"scheduledCount": len(doses), "takenCount": len(taken), "nextDoseAt": None}

    if len(taken) >= len(doses):
        summary["status"] = "taken"
        return summary

    next_dose = doses[len(taken)]
    summary["nextDoseAt"] = next_dose.isoformat()

    snoozed_until = [
        log.scheduled_date for log in todays_logs if log.status == "snoozed" and log.scheduled_date > now
    ]
    if snoozed_until:
        summary["status"] = "upcoming"
        summary["nextDoseAt"] = max(snoozed_until).isoformat()
        return summary

    if now < next_dose - timedelta(minutes=due_lead_minutes):
        summary["status"] = "upcoming"
    elif now <= next_dose + timedelta(minutes=overdue_after_minutes):
        summary["status"] = "due"
    else:
        summary["status"] = "overdue"
    return summary
