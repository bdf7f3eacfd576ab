# carecompanion/vitals.py
"""Known vital-sign types.

Metric values stay free text in the database; for the known types this
module checks the text the same way the entry form does and turns it into a
structured reading for API consumers.
"""
import re

BLOOD_PRESSURE_RE = re.compile(r"^(\d{2,3})/(\d{2,3})$")

# type -> default unit, accepted numeric range, integer-only flag
VITAL_TYPES = {
    "blood_pressure": {"unit": "mmHg", "range": None},
    "heart_rate": {"unit": "bpm", "range": (30, 200), "integer": True},
    "weight": {"unit": "lbs", "range": (50, 1000)},
    "temperature": {"unit": "°F", "range": (90, 110)},
}

_MESSAGES = {
    "blood_pressure": "Please enter blood pressure as systolic/diastolic (e.g., 120/80).",
    "heart_rate": "Please enter a valid heart rate between 30 and 200 bpm.",
    "weight": "Please enter a valid weight between 50 and 1000 lbs.",
    "temperature": "Please enter a valid temperature between 90 and 110°F.",
}


def parse_reading(metric_type, value):
    """Return a structured reading for known types, or None if it doesn't parse."""
    if metric_type not in VITAL_TYPES or value is None:
        return None
    text = str(value).strip()

    if metric_type == "blood_pressure":
        match = BLOOD_PRESSURE_RE.match(text)
        if not match:
            return None
        return {"systolic": int(match.group(1)), "diastolic": int(match.group(2))}

    vital = VITAL_TYPES[metric_type]
    try:
        number = int(text) if vital.get("integer") else float(text)
    except ValueError:
        return None
    return {"value": number}


def validate_value(metric_type, value):
    """Return an error message for an unacceptable value, else None."""
    if value is None or not str(value).strip():
        return "Please enter a value for your vital sign."
    if metric_type not in VITAL_TYPES:
        return None

    reading = parse_reading(metric_type, value)
    if reading is None:
        return _MESSAGES[metric_type]

    bounds = VITAL_TYPES[metric_type]["range"]
    if bounds is not None:
        low, high = bounds
        if not low <= reading["value"] <= high:
            return _MESSAGES[metric_type]
    return None
