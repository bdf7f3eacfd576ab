# carecompanion/routes/status_routes.py
from flask import Blueprint, current_app
from sqlalchemy import text
from carecompanion.extensions import db

status_bp = Blueprint("status", __name__)


@status_bp.route("/health")
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Database health check failed")
        return {"success": False, "message": "Database connection failed", "database": "unavailable"}, 503
    return {"success": True, "message": "OK", "database": "connected"}, 200
