# carecompanion/validation.py
"""Request payload shapes derived from the model columns.

A shape knows, for one model, which camelCase keys a client may send, which
of them are required on create and how to coerce each one. Server-managed
columns (id, timestamps) and owner columns are never taken from the client.
"""
from datetime import time

from sqlalchemy import Boolean, DateTime, Integer, String, Text, Time
from sqlalchemy import inspect as sa_inspect

from carecompanion.errors import InvalidInput
from carecompanion.helpers import camelize, parse_datetime
from carecompanion.models import (
    APPOINTMENT_STATUSES,
    LOG_STATUSES,
    Appointment,
    HealthGoal,
    HealthMetric,
    Medication,
    MedicationLog,
    MedicationSchedule,
)
from carecompanion.vitals import validate_value

SERVER_MANAGED = ("id", "created_at", "updated_at")


def _coerce(column, raw):
    col_type = column.type

    if isinstance(col_type, Boolean):
        if not isinstance(raw, bool):
            raise ValueError("must be a boolean")
        return raw

    if isinstance(col_type, Integer):
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError("must be an integer")
        return raw

    if isinstance(col_type, DateTime):
        try:
            return parse_datetime(raw)
        except (TypeError, ValueError):
            raise ValueError("must be an ISO-8601 date-time")

    if isinstance(col_type, Time):
        if isinstance(raw, time):
            return raw
        if not isinstance(raw, str):
            raise ValueError("must be a time of day (HH:MM)")
        try:
            return time.fromisoformat(raw.strip())
        except ValueError:
            raise ValueError("must be a time of day (HH:MM)")

    if isinstance(col_type, (String, Text)):
        if not isinstance(raw, str):
            raise ValueError("must be a string")
        length = getattr(col_type, "length", None)
        if length and len(raw) > length:
            raise ValueError(f"must be at most {length} characters")
        return raw

    return raw


class PayloadShape:
    def __init__(self, model, owner=None, immutable=(), choices=None, checks=()):
        self.model = model
        self.owner = owner
        self.immutable = set(immutable)
        self.choices = choices or {}
        self.checks = list(checks)

        skipped = set(SERVER_MANAGED)
        if owner:
            skipped.add(owner)

        self.columns = {}
        self.required = set()
        for column in sa_inspect(model).columns:
            if column.key in skipped:
                continue
            self.columns[camelize(column.key)] = column
            if not column.nullable and column.default is None and column.server_default is None:
                self.required.add(column.key)

    def load(self, data, partial=False):
        """Validate ``data`` and return a dict keyed by model attribute.

        Raises InvalidInput with a {wireField: reason} map on any violation.
        """
        if not isinstance(data, dict):
            raise InvalidInput({"_body": "Request body must be a JSON object"})

        errors = {}
        values = {}
        for wire, column in self.columns.items():
            if partial and column.key in self.immutable:
                continue
            if wire not in data:
                if not partial and column.key in self.required:
                    errors[wire] = "This field is required"
                continue

            raw = data[wire]
            if raw is None:
                if not column.nullable:
                    errors[wire] = "This field may not be null"
                else:
                    values[column.key] = None
                continue

            try:
                value = _coerce(column, raw)
            except ValueError as e:
                errors[wire] = str(e)
                continue

            if column.key in self.required and isinstance(value, str) and not value.strip():
                errors[wire] = "This field may not be blank"
                continue

            allowed = self.choices.get(column.key)
            if allowed and value not in allowed:
                errors[wire] = f"must be one of: {', '.join(allowed)}"
                continue

            values[column.key] = value

        if not errors:
            for check in self.checks:
                errors.update(check(values) or {})

        if errors:
            raise InvalidInput(errors)
        return values


def _date_order(values):
    start, end = values.get("start_date"), values.get("end_date")
    if start and end and end < start:
        return {"endDate": "must not be before startDate"}
    return None


def _positive_duration(values):
    duration = values.get("duration")
    if duration is not None and duration <= 0:
        return {"duration": "must be a positive number of minutes"}
    return None


def _metric_value(values):
    if "value" not in values:
        return None
    message = validate_value(values.get("type"), values["value"])
    if message:
        return {"value": message}
    return None


medication_shape = PayloadShape(Medication, owner="user_id", checks=[_date_order])
schedule_shape = PayloadShape(MedicationSchedule, owner="medication_id")
medication_log_shape = PayloadShape(
    MedicationLog, immutable=("medication_id",), choices={"status": LOG_STATUSES}
)
health_metric_shape = PayloadShape(HealthMetric, owner="user_id", checks=[_metric_value])
health_goal_shape = PayloadShape(HealthGoal, owner="user_id")
appointment_shape = PayloadShape(
    Appointment, owner="user_id", choices={"status": APPOINTMENT_STATUSES}, checks=[_positive_duration]
)
