from sqlalchemy import true
from carecompanion.extensions import db
from carecompanion.helpers import generate_id, isoformat, utcnow


class HealthTip(db.Model):
    """Curated content, shared by every user."""

    __tablename__ = "health_tips"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(60), nullable=False)
    author_name = db.Column(db.String(120), nullable=False)
    author_credentials = db.Column(db.String(120), nullable=False)
    image_url = db.Column(db.String(512), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, server_default=true())

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "authorName": self.author_name,
            "authorCredentials": self.author_credentials,
            "imageUrl": self.image_url,
            "isActive": self.is_active,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
