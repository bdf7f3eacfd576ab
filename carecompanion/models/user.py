from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(128), primary_key=True, default=generate_id)
    email = db.Column(db.String(255), unique=True, index=True, nullable=True)
    first_name = db.Column(db.String(80), nullable=True)
    last_name = db.Column(db.String(80), nullable=True)
    profile_image_url = db.Column(db.String(512), nullable=True)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    medications = db.relationship(
        "Medication", back_populates="user", cascade="all,delete-orphan", passive_deletes=True
    )
    health_metrics = db.relationship(
        "HealthMetric", back_populates="user", cascade="all,delete-orphan", passive_deletes=True
    )
    health_goals = db.relationship(
        "HealthGoal", back_populates="user", cascade="all,delete-orphan", passive_deletes=True
    )
    appointments = db.relationship(
        "Appointment", back_populates="user", cascade="all,delete-orphan", passive_deletes=True
    )

    @property
    def name(self):
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) or None

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "name": self.name,
            "profileImageUrl": self.profile_image_url,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
