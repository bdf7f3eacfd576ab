import firebase_admin
from firebase_admin import auth, credentials
from flask import current_app


def _ensure_initialized():
    # Initialize Firebase Admin only once
    if not firebase_admin._apps:
        cred_path = current_app.config["FIREBASE_CREDENTIALS_PATH"]
        firebase_admin.initialize_app(credentials.Certificate(cred_path))
        current_app.logger.info("Firebase Admin initialized")


def verify_id_token(token):
    """Return the decoded claims for a Firebase ID token, or None if it fails."""
    try:
        _ensure_initialized()
        return auth.verify_id_token(token)
    except Exception:
        current_app.logger.warning("Firebase ID token verification failed", exc_info=True)
        return None


def claims_to_profile(claims):
    """Map decoded Firebase claims onto User columns."""
    full_name = (claims.get("name") or "").strip()
    first_name, _, last_name = full_name.partition(" ")
    return {
        "user_id": claims["uid"],
        "email": claims.get("email"),
        "first_name": first_name or None,
        "last_name": last_name or None,
        "profile_image_url": claims.get("picture"),
    }
