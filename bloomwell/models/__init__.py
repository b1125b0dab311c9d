"""Database models and entry types."""

from bloomwell.models.entries import (
    HabitEntry,
    MoodEntry,
    StudySession,
    WellnessSeries,
    utc_today,
)
from bloomwell.models.habit import HabitRecord
from bloomwell.models.mood import MoodRecord
from bloomwell.models.study import StudyRecord

__all__ = [
    "MoodEntry",
    "HabitEntry",
    "StudySession",
    "WellnessSeries",
    "MoodRecord",
    "HabitRecord",
    "StudyRecord",
    "utc_today",
]
