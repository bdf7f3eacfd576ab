from flask import jsonify, request
from flask_jwt_extended import jwt_required

from carecompanion.controllers.common import current_user_id, json_body
from carecompanion.services import health_service
from carecompanion.validation import health_goal_shape, health_metric_shape


# Health metrics
@jwt_required()
def create_health_metric():
    user_id = current_user_id()
    fields = health_metric_shape.load(json_body())
    metric = health_service.create_health_metric(user_id, fields)
    return jsonify(metric.to_dict()), 201


@jwt_required()
def list_health_metrics():
    metric_type = (request.args.get("type") or "").strip() or None
    metrics = health_service.get_health_metrics_by_user_id(current_user_id(), metric_type)
    return jsonify([m.to_dict() for m in metrics]), 200


@jwt_required()
def latest_health_metric(metric_type):
    metric = health_service.get_latest_health_metric_by_type(current_user_id(), metric_type)
    return jsonify(metric.to_dict() if metric else None), 200


# Health goals
@jwt_required()
def create_health_goal():
    user_id = current_user_id()
    fields = health_goal_shape.load(json_body())
    goal = health_service.create_health_goal(user_id, fields)
    return jsonify(goal.to_dict()), 201


@jwt_required()
def list_health_goals():
    goals = health_service.get_health_goals_by_user_id(current_user_id())
    return jsonify([g.to_dict() for g in goals]), 200


@jwt_required()
def get_health_goal(goal_id):
    goal = health_service.get_health_goal(current_user_id(), goal_id)
    return jsonify(goal.to_dict()), 200


@jwt_required()
def update_health_goal(goal_id):
    user_id = current_user_id()
    fields = health_goal_shape.load(json_body(), partial=True)
    goal = health_service.update_health_goal(user_id, goal_id, fields)
    return jsonify(goal.to_dict()), 200


@jwt_required()
def delete_health_goal(goal_id):
    health_service.delete_health_goal(current_user_id(), goal_id)
    return jsonify({"success": True, "message": "Health goal deleted successfully"}), 200


# Health tips (public)
def list_health_tips():
    return jsonify([t.to_dict() for t in health_service.get_active_health_tips()]), 200


def daily_health_tip():
    tip = health_service.get_daily_health_tip()
    return jsonify(tip.to_dict() if tip else None), 200
