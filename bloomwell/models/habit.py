"""Habit record model."""

from datetime import datetime

from bloomwell import db
from bloomwell.models.entries import HabitEntry, utc_today


class HabitRecord(db.Model):
    """Daily completion count for one of a user's habits."""

    __tablename__ = "habit_records"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)

    habit_name = db.Column(db.String(100), nullable=False)
    entry_date = db.Column(db.Date, default=utc_today, nullable=False, index=True)

    completed = db.Column(db.Integer, default=0, nullable=False)
    target = db.Column(db.Integer, default=1, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_entry(self) -> HabitEntry:
        return HabitEntry(
            habit_name=self.habit_name,
            date=self.entry_date,
            completed=self.completed,
            target=self.target,
        )

    def to_dict(self) -> dict:
        """Convert habit record to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "habit_name": self.habit_name,
            "date": self.entry_date.isoformat() if self.entry_date else None,
            "completed": self.completed,
            "target": self.target,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<HabitRecord {self.id}: {self.habit_name} {self.completed}/{self.target}>"
