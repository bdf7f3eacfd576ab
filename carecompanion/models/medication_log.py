from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow

LOG_STATUSES = ("taken", "missed", "snoozed")


class MedicationLog(db.Model):
    """One dose event; exists whether or not the dose was actually taken."""

    __tablename__ = "medication_logs"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    medication_id = db.Column(
        db.String(36), db.ForeignKey("medications.id", ondelete="CASCADE"), nullable=False, index=True
    )

    scheduled_date = db.Column(db.DateTime, nullable=False, index=True)
    taken_at = db.Column(db.DateTime, nullable=True)
    status = db.Column(db.String(20), nullable=False)  # taken | missed | snoozed
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    medication = db.relationship("Medication", back_populates="logs")

    def to_dict(self, include_medication=False):
        data = {
            "id": self.id,
            "medicationId": self.medication_id,
            "scheduledDate": isoformat(self.scheduled_date),
            "takenAt": isoformat(self.taken_at),
            "status": self.status,
            "notes": self.notes,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
        if include_medication:
            data["medication"] = self.medication.to_dict() if self.medication else None
        return data
