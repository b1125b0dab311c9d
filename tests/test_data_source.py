"""Tests for the SQLAlchemy-backed data source."""

from datetime import date, datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from bloomwell import db
from bloomwell.errors import DataSourceError
from bloomwell.models import HabitRecord, MoodRecord, StudyRecord
from bloomwell.services import SQLAlchemyDataSource

NOW = datetime(2025, 9, 15, 12, 0, tzinfo=timezone.utc)


class TestSQLAlchemyDataSource:
    """Test cases for SQLAlchemyDataSource.load_series."""

    def test_filters_by_user_and_window(self, app):
        """Only the user's entries inside [now - days, now] are returned."""
        db.session.add_all(
            [
                MoodRecord(user_id="u1", entry_date=date(2025, 9, 10), mood_level=4, energy_level=70),
                MoodRecord(user_id="u1", entry_date=date(2025, 9, 8), mood_level=2, energy_level=30),
                MoodRecord(user_id="u1", entry_date=date(2025, 9, 7), mood_level=5, energy_level=90),
                MoodRecord(user_id="u2", entry_date=date(2025, 9, 10), mood_level=1, energy_level=10),
                HabitRecord(user_id="u1", habit_name="Rest", entry_date=date(2025, 9, 14), completed=1, target=1),
                HabitRecord(user_id="u1", habit_name="Rest", entry_date=date(2025, 8, 30), completed=1, target=1),
                StudyRecord(user_id="u1", subject="Physics", started_at=datetime(2025, 9, 14, 9, 0), duration_minutes=30, completed=True),
                StudyRecord(user_id="u1", subject="Physics", started_at=datetime(2025, 9, 8, 11, 0), duration_minutes=30, completed=True),
            ]
        )
        db.session.commit()

        series = SQLAlchemyDataSource().load_series("u1", 7, NOW)

        # Window starts 2025-09-08 12:00
        assert [entry.date for entry in series.mood] == [date(2025, 9, 8), date(2025, 9, 10)]
        assert [entry.mood_level for entry in series.mood] == [2, 4]
        assert len(series.habits) == 1
        assert series.habits[0].habit_name == "Rest"
        assert [s.started_at for s in series.study] == [datetime(2025, 9, 14, 9, 0)]

    def test_returns_entries_in_date_order(self, app):
        """Entries recorded out of order come back chronologically."""
        for day, level in [(12, 3), (10, 1), (11, 2)]:
            db.session.add(
                MoodRecord(user_id="u1", entry_date=date(2025, 9, day), mood_level=level, energy_level=50)
            )
        db.session.commit()

        series = SQLAlchemyDataSource().load_series("u1", 30, NOW)
        assert [entry.mood_level for entry in series.mood] == [1, 2, 3]

    def test_converts_records_to_entries(self, app):
        db.session.add(
            StudyRecord(
                user_id="u1",
                subject="Literature",
                started_at=datetime(2025, 9, 14, 20, 15),
                duration_minutes=45,
                completed=False,
            )
        )
        db.session.commit()

        session = SQLAlchemyDataSource().load_series("u1", 30, NOW).study[0]
        assert session.subject == "Literature"
        assert session.duration_minutes == 45
        assert session.completed is False
        assert session.date == date(2025, 9, 14)

    def test_database_errors_are_wrapped(self):
        """SQLAlchemy failures surface as DataSourceError with context."""

        class BrokenSession:
            def query(self, *args):
                raise OperationalError("SELECT", {}, Exception("database is locked"))

        with pytest.raises(DataSourceError) as exc_info:
            SQLAlchemyDataSource(session=BrokenSession()).load_series("u1", 30, NOW)

        assert exc_info.value.operation == "load_series"
        assert exc_info.value.user_id == "u1"


class TestMoodRecord:
    """Test cases for mood record storage."""

    def test_one_check_in_per_user_per_day(self, app):
        """The table itself rejects a second mood row for the same day."""
        db.session.add(MoodRecord(user_id="u1", entry_date=date(2025, 9, 10), mood_level=4, energy_level=70))
        db.session.commit()

        db.session.add(MoodRecord(user_id="u1", entry_date=date(2025, 9, 10), mood_level=2, energy_level=30))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_same_day_for_different_users(self, app):
        db.session.add_all(
            [
                MoodRecord(user_id="u1", entry_date=date(2025, 9, 10), mood_level=4, energy_level=70),
                MoodRecord(user_id="u2", entry_date=date(2025, 9, 10), mood_level=2, energy_level=30),
            ]
        )
        db.session.commit()
        assert MoodRecord.query.count() == 2
