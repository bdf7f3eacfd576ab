from sqlalchemy import true
from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow


class HealthGoal(db.Model):
    __tablename__ = "health_goals"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(db.String(128), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    target_value = db.Column(db.String(60), nullable=True)
    current_value = db.Column(db.String(60), nullable=True)
    frequency = db.Column(db.String(30), nullable=False)  # daily/weekly/monthly
    is_active = db.Column(db.Boolean, nullable=False, default=True, server_default=true())

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user = db.relationship("User", back_populates="health_goals")

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "description": self.description,
            "targetValue": self.target_value,
            "currentValue": self.current_value,
            "frequency": self.frequency,
            "isActive": self.is_active,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
