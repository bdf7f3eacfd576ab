from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow
from carecompanion.vitals import parse_reading


class HealthMetric(db.Model):
    __tablename__ = "health_metrics"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(db.String(128), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    type = db.Column(db.String(40), nullable=False)    # blood_pressure, heart_rate, weight, temperature, ...
    value = db.Column(db.String(60), nullable=False)   # text so "120/80" fits
    unit = db.Column(db.String(20), nullable=False)
    recorded_at = db.Column(db.DateTime, nullable=False)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    user = db.relationship("User", back_populates="health_metrics")

    __table_args__ = (db.Index("ix_health_metrics_user_type_recorded", "user_id", "type", "recorded_at"),)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "type": self.type,
            "value": self.value,
            "reading": parse_reading(self.type, self.value),
            "unit": self.unit,
            "recordedAt": isoformat(self.recorded_at),
            "notes": self.notes,
            "createdAt": isoformat(self.created_at),
        }
