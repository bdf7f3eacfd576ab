# carecompanion/services/storage.py
"""Generic persistence steps shared by the per-entity services."""
from flask import current_app
from sqlalchemy.exc import IntegrityError

from carecompanion.errors import ConstraintViolation, NotFound
from carecompanion.extensions import db
from carecompanion.helpers import utcnow


def commit():
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        current_app.logger.warning("Integrity error on commit: %s", e.orig)
        raise ConstraintViolation("Referenced record does not exist or value already taken")


def insert(instance):
    db.session.add(instance)
    commit()
    return instance


def first_or_raise(query, message):
    instance = query.first()
    if instance is None:
        raise NotFound(message)
    return instance


def apply_updates(instance, fields):
    """Set only the supplied attributes; updated_at always moves."""
    for key, value in fields.items():
        setattr(instance, key, value)
    if hasattr(instance, "updated_at"):
        instance.updated_at = utcnow()
    commit()
    return instance


def deactivate(instance):
    """Soft delete; repeated calls keep the row inactive."""
    instance.is_active = False
    instance.updated_at = utcnow()
    commit()
    return instance
