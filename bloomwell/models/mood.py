"""Mood record model."""

from datetime import datetime

from bloomwell import db
from bloomwell.models.entries import MoodEntry, utc_today


class MoodRecord(db.Model):
    """Stored mood check-in for a user."""

    __tablename__ = "mood_records"
    __table_args__ = (
        db.UniqueConstraint("user_id", "entry_date", name="uq_mood_user_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)

    entry_date = db.Column(db.Date, default=utc_today, nullable=False, index=True)

    # Mood on scale 1-5, energy on scale 1-100
    mood_level = db.Column(db.Integer, nullable=False)  # 1=very low, 5=great
    energy_level = db.Column(db.Integer, nullable=False)

    notes = db.Column(db.String(500), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    MOOD_LABELS = {1: "Very Low", 2: "Low", 3: "Neutral", 4: "Good", 5: "Great"}

    @property
    def mood_label(self) -> str:
        """Get mood label."""
        return self.MOOD_LABELS.get(self.mood_level, "Unknown")

    def to_entry(self) -> MoodEntry:
        return MoodEntry(
            date=self.entry_date,
            mood_level=self.mood_level,
            energy_level=self.energy_level,
            notes=self.notes or "",
        )

    def to_dict(self) -> dict:
        """Convert mood record to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.entry_date.isoformat() if self.entry_date else None,
            "mood_level": self.mood_level,
            "mood_label": self.mood_label,
            "energy_level": self.energy_level,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<MoodRecord {self.id}: mood={self.mood_level}, energy={self.energy_level}>"
