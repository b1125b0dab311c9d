"""Immutable wellness entries consumed by the analyzers."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone


def utc_today() -> date:
    """Current calendar date in UTC, the day report windows are measured in."""
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class MoodEntry:
    """One day's mood check-in."""

    date: date
    mood_level: int  # 1-5
    energy_level: int  # 1-100
    notes: str = ""


@dataclass(frozen=True)
class HabitEntry:
    """Completion count for one habit on one day."""

    habit_name: str
    date: date
    completed: int
    target: int

    @property
    def is_met(self) -> bool:
        return self.completed >= self.target


@dataclass(frozen=True)
class StudySession:
    """A single study session."""

    subject: str
    started_at: datetime
    duration_minutes: int
    completed: bool

    @property
    def date(self) -> date:
        return self.started_at.date()


@dataclass(frozen=True)
class WellnessSeries:
    """The three entry series for one user and window."""

    mood: tuple[MoodEntry, ...] = field(default_factory=tuple)
    habits: tuple[HabitEntry, ...] = field(default_factory=tuple)
    study: tuple[StudySession, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Callers may hand in lists; keep our own immutable copies
        object.__setattr__(self, "mood", tuple(self.mood))
        object.__setattr__(self, "habits", tuple(self.habits))
        object.__setattr__(self, "study", tuple(self.study))

    def data_quality(self) -> dict:
        """Entry counts per series."""
        return {
            "mood_entries": len(self.mood),
            "habit_entries": len(self.habits),
            "study_entries": len(self.study),
        }
