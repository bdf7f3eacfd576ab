from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow

APPOINTMENT_STATUSES = ("scheduled", "completed", "cancelled")


class Appointment(db.Model):
    __tablename__ = "appointments"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(db.String(128), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    doctor_name = db.Column(db.String(120), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    appointment_date = db.Column(db.DateTime, nullable=False, index=True)
    duration = db.Column(db.Integer, nullable=False, default=30, server_default="30")  # minutes
    status = db.Column(db.String(20), nullable=False, default="scheduled", server_default="scheduled")
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user = db.relationship("User", back_populates="appointments")

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "description": self.description,
            "doctorName": self.doctor_name,
            "location": self.location,
            "appointmentDate": isoformat(self.appointment_date),
            "duration": self.duration,
            "status": self.status,
            "notes": self.notes,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
