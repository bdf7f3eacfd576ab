# carecompanion/__init__.py
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import CareCompanionError, InternalError
from .extensions import db, jwt, migrate


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    CORS(app,
         origins=app.config["CORS_ORIGINS"],
         supports_credentials=True,
         methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
         allow_headers=["Content-Type", "Authorization", "X-Requested-With"])

    _register_error_handlers(app)

    from . import models  # noqa: F401  (register tables on the metadata)
    from .cli import register_commands
    from .routes.appointment_routes import appointments_bp
    from .routes.auth_routes import auth_bp
    from .routes.health_routes import health_goals_bp, health_metrics_bp, health_tips_bp
    from .routes.medication_routes import medication_logs_bp, medications_bp
    from .routes.status_routes import status_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(medications_bp)
    app.register_blueprint(medication_logs_bp)
    app.register_blueprint(health_metrics_bp)
    app.register_blueprint(health_goals_bp)
    app.register_blueprint(health_tips_bp)
    app.register_blueprint(appointments_bp)
    app.register_blueprint(status_bp)

    register_commands(app)

    return app


def _register_error_handlers(app):
    @app.errorhandler(CareCompanionError)
    def handle_domain_error(e):
        if e.status_code >= 500:
            app.logger.error("Request failed: %s", e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return jsonify(success=False, message=e.description), e.code
        db.session.rollback()
        app.logger.exception("Unhandled error")
        error = InternalError()
        return jsonify(error.to_dict()), error.status_code

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"success": False, "message": "Token expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(err_msg):
        return jsonify({"success": False, "message": f"Invalid token: {err_msg}"}), 401

    @jwt.unauthorized_loader
    def missing_token_callback(err_msg):
        return jsonify({"success": False, "message": f"Missing token: {err_msg}"}), 401
