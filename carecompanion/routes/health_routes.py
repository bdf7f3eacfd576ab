# carecompanion/routes/health_routes.py
from flask import Blueprint
from carecompanion.controllers import health_controller

health_metrics_bp = Blueprint("health_metrics", __name__, url_prefix="/api/health-metrics")

health_metrics_bp.route("", methods=["POST"])(health_controller.create_health_metric)
health_metrics_bp.route("", methods=["GET"])(health_controller.list_health_metrics)
health_metrics_bp.route("/latest/<metric_type>", methods=["GET"])(health_controller.latest_health_metric)


health_goals_bp = Blueprint("health_goals", __name__, url_prefix="/api/health-goals")

health_goals_bp.route("", methods=["POST"])(health_controller.create_health_goal)
health_goals_bp.route("", methods=["GET"])(health_controller.list_health_goals)
health_goals_bp.route("/<goal_id>", methods=["GET"])(health_controller.get_health_goal)
health_goals_bp.route("/<goal_id>", methods=["PATCH"])(health_controller.update_health_goal)
health_goals_bp.route("/<goal_id>", methods=["DELETE"])(health_controller.delete_health_goal)


# No auth: tips are public content
health_tips_bp = Blueprint("health_tips", __name__, url_prefix="/api/health-tips")

health_tips_bp.route("", methods=["GET"])(health_controller.list_health_tips)
health_tips_bp.route("/daily", methods=["GET"])(health_controller.daily_health_tip)
