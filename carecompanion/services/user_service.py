# carecompanion/services/user_service.py
from flask import current_app

from carecompanion.extensions import db
from carecompanion.models import User
from carecompanion.services import storage


def get_user(user_id):
    return db.session.get(User, user_id)


def upsert_user(user_id, email=None, first_name=None, last_name=None, profile_image_url=None):
    """Insert the user or refresh their profile from identity-provider claims."""
    user = get_user(user_id)
    if user is None:
        user = User(id=user_id)
        db.session.add(user)
        current_app.logger.info("Creating user %s", user_id)

    storage.apply_updates(
        user,
        {
            "email": (email or "").lower().strip() or None,
            "first_name": first_name,
            "last_name": last_name,
            "profile_image_url": profile_image_url,
        },
    )
    return user


def delete_user(user_id):
    """Hard delete; every owned row goes with it."""
    user = get_user(user_id)
    if user is None:
        return False
    db.session.delete(user)
    storage.commit()
    current_app.logger.info("Deleted user %s and owned records", user_id)
    return True
