from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow


class MedicationSchedule(db.Model):
    __tablename__ = "medication_schedules"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    medication_id = db.Column(
        db.String(36), db.ForeignKey("medications.id", ondelete="CASCADE"), nullable=False, index=True
    )
    scheduled_time = db.Column(db.Time(timezone=False), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    medication = db.relationship("Medication", back_populates="schedules")

    def to_dict(self):
        return {
            "id": self.id,
            "medicationId": self.medication_id,
            "scheduledTime": self.scheduled_time.strftime("%H:%M:%S") if self.scheduled_time else None,
            "createdAt": isoformat(self.created_at),
        }
