"""Sources of per-user entry series."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from bloomwell import db
from bloomwell.errors import DataSourceError
from bloomwell.models import (
    HabitRecord,
    MoodRecord,
    StudyRecord,
    WellnessSeries,
)


class WellnessDataSource(ABC):
    """Supplies a user's mood, habit and study series for a day window."""

    @abstractmethod
    def load_series(self, user_id: str, days: int, now: datetime) -> WellnessSeries:
        """Return the three series already restricted to [now - days, now]."""


class SQLAlchemyDataSource(WellnessDataSource):
    """Reads entry series from the record tables."""

    def __init__(self, session=None):
        self.session = session or db.session

    def load_series(self, user_id: str, days: int, now: datetime) -> WellnessSeries:
        start = now - timedelta(days=days)
        start_date, end_date = start.date(), now.date()
        # Record timestamps are stored naive UTC
        start_ts = start.replace(tzinfo=None)
        end_ts = now.replace(tzinfo=None)

        try:
            mood = (
                self.session.query(MoodRecord)
                .filter(
                    MoodRecord.user_id == user_id,
                    MoodRecord.entry_date >= start_date,
                    MoodRecord.entry_date <= end_date,
                )
                .order_by(MoodRecord.entry_date, MoodRecord.id)
                .all()
            )
            habits = (
                self.session.query(HabitRecord)
                .filter(
                    HabitRecord.user_id == user_id,
                    HabitRecord.entry_date >= start_date,
                    HabitRecord.entry_date <= end_date,
                )
                .order_by(HabitRecord.entry_date, HabitRecord.id)
                .all()
            )
            study = (
                self.session.query(StudyRecord)
                .filter(
                    StudyRecord.user_id == user_id,
                    StudyRecord.started_at >= start_ts,
                    StudyRecord.started_at <= end_ts,
                )
                .order_by(StudyRecord.started_at, StudyRecord.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise DataSourceError(
                f"Failed to load wellness series: {e}",
                operation="load_series",
                user_id=user_id,
            ) from e

        return WellnessSeries(
            mood=[record.to_entry() for record in mood],
            habits=[record.to_entry() for record in habits],
            study=[record.to_entry() for record in study],
        )
