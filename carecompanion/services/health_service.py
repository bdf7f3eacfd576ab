# carecompanion/services/health_service.py
from flask import current_app

from carecompanion.models import HealthGoal, HealthMetric, HealthTip
from carecompanion.services import policies, storage


# Health metrics
def create_health_metric(owner_id, fields):
    return storage.insert(HealthMetric(user_id=owner_id, **fields))


def get_health_metrics_by_user_id(owner_id, metric_type=None):
    return policies.health_metrics(owner_id, metric_type).all()


def get_latest_health_metric_by_type(owner_id, metric_type):
    return policies.latest_health_metric(owner_id, metric_type).first()


# Health goals
def create_health_goal(owner_id, fields):
    return storage.insert(HealthGoal(user_id=owner_id, **fields))


def get_health_goal(owner_id, goal_id):
    return storage.first_or_raise(
        policies.owned(HealthGoal, owner_id).filter(HealthGoal.id == goal_id),
        "Health goal not found",
    )


def get_health_goals_by_user_id(owner_id):
    return policies.active_health_goals(owner_id).all()


def update_health_goal(owner_id, goal_id, fields):
    return storage.apply_updates(get_health_goal(owner_id, goal_id), fields)


def delete_health_goal(owner_id, goal_id):
    goal = storage.deactivate(get_health_goal(owner_id, goal_id))
    current_app.logger.info("Health goal %s deactivated", goal_id)
    return goal


# Health tips
def get_active_health_tips():
    return policies.active_health_tips().all()


def get_daily_health_tip():
    return policies.random_health_tip().first()


def create_health_tip(**fields):
    return storage.insert(HealthTip(**fields))
