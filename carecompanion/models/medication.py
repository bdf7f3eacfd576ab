from sqlalchemy import true
from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow


class Medication(db.Model):
    __tablename__ = "medications"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(db.String(128), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = db.Column(db.String(120), nullable=False)
    dosage = db.Column(db.String(60), nullable=False)       # e.g., "10mg"
    frequency = db.Column(db.String(60), nullable=False)    # e.g., daily/twice_daily/weekly
    instructions = db.Column(db.Text, nullable=True)

    start_date = db.Column(db.DateTime, nullable=False)
    end_date = db.Column(db.DateTime, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, server_default=true())

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user = db.relationship("User", back_populates="medications")
    schedules = db.relationship(
        "MedicationSchedule",
        back_populates="medication",
        order_by="MedicationSchedule.scheduled_time",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )
    logs = db.relationship(
        "MedicationLog", back_populates="medication", cascade="all,delete-orphan", passive_deletes=True
    )

    __table_args__ = (db.Index("ix_medications_user_active", "user_id", "is_active"),)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "instructions": self.instructions,
            "startDate": isoformat(self.start_date),
            "endDate": isoformat(self.end_date),
            "isActive": self.is_active,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
