"""Study session record model."""

from datetime import datetime

from bloomwell import db
from bloomwell.models.entries import StudySession


class StudyRecord(db.Model):
    """Stored study session for a user."""

    __tablename__ = "study_records"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)

    subject = db.Column(db.String(100), nullable=False)
    started_at = db.Column(
        db.DateTime, default=datetime.utcnow, nullable=False, index=True
    )
    duration_minutes = db.Column(db.Integer, nullable=False)
    completed = db.Column(db.Boolean, default=False, nullable=False)

    def to_entry(self) -> StudySession:
        return StudySession(
            subject=self.subject,
            started_at=self.started_at,
            duration_minutes=self.duration_minutes,
            completed=bool(self.completed),
        )

    def to_dict(self) -> dict:
        """Convert study record to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "subject": self.subject,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "duration_minutes": self.duration_minutes,
            "completed": self.completed,
        }

    def __repr__(self) -> str:
        return f"<StudyRecord {self.id}: {self.subject} {self.duration_minutes}m>"
