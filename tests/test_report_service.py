"""Tests for wellness report assembly."""

from datetime import date, datetime, timedelta, timezone

import pytest

from bloomwell.errors import DataSourceError
from bloomwell.models import HabitEntry, MoodEntry, StudySession, WellnessSeries
from bloomwell.services import (
    HabitAnalyzer,
    MoodAnalyzer,
    StudyAnalyzer,
    WellnessDataSource,
    WellnessReportService,
    build_report,
)

NOW = datetime(2025, 9, 15, 12, 0, tzinfo=timezone.utc)


class StaticDataSource(WellnessDataSource):
    """Returns a fixed series and remembers what it was asked for."""

    def __init__(self, series=None, error=None):
        self.series = series or WellnessSeries()
        self.error = error
        self.calls = []

    def load_series(self, user_id, days, now):
        self.calls.append((user_id, days, now))
        if self.error:
            raise self.error
        return self.series


def sample_series():
    start = date(2025, 9, 8)
    return WellnessSeries(
        mood=[
            MoodEntry(start + timedelta(days=i), level, 60)
            for i, level in enumerate([5, 4, 3, 2, 1])
        ],
        habits=[
            HabitEntry("Hydration", start, completed=4, target=8),
            HabitEntry("Hydration", start + timedelta(days=1), completed=8, target=8),
            HabitEntry("Rest", start, completed=1, target=1),
        ],
        study=[
            StudySession("Physics", datetime(2025, 9, 9, 10, 0), 40, True),
            StudySession("Physics", datetime(2025, 9, 10, 16, 0), 20, False),
        ],
    )


class TestBuildReport:
    """Test cases for build_report."""

    def test_all_empty_series(self):
        """Empty input gives neutral insights and no recommendations."""
        report = build_report("test_user_1", WellnessSeries(), 30, NOW)
        assert report["insights"] == {
            "mood": MoodAnalyzer.empty(),
            "habits": HabitAnalyzer.empty(),
            "study": StudyAnalyzer.empty(),
        }
        assert report["recommendations"] == []
        assert report["data_quality"] == {
            "mood_entries": 0,
            "habit_entries": 0,
            "study_entries": 0,
        }

    def test_analysis_period_uses_clock_not_entries(self):
        """The window runs from now - days to now in calendar dates."""
        report = build_report("test_user_1", sample_series(), 30, NOW)
        assert report["analysis_period"] == {
            "days": 30,
            "start_date": "2025-08-16",
            "end_date": "2025-09-15",
        }
        assert report["generated_at"] == NOW.isoformat()

    def test_sections_and_counts(self):
        """Each series feeds its own section and count."""
        report = build_report("test_user_1", sample_series(), 7, NOW)
        assert report["user_id"] == "test_user_1"
        assert report["insights"]["mood"]["trend"] == "declining"
        assert report["insights"]["habits"]["needs_attention"] == "Hydration"
        assert report["insights"]["study"]["best_study_hour"] == 10
        assert report["data_quality"] == {
            "mood_entries": 5,
            "habit_entries": 3,
            "study_entries": 2,
        }

    def test_recommendations_follow_insights(self):
        """Recommendations are derived from the assembled insights."""
        report = build_report("test_user_1", sample_series(), 7, NOW)
        recommendations = report["recommendations"]
        assert "declining" in recommendations[0]
        assert any("'Hydration'" in text for text in recommendations)
        assert any("10:00" in text for text in recommendations)

    def test_same_inputs_same_report(self):
        """Assembly is a pure function of its inputs."""
        first = build_report("test_user_1", sample_series(), 30, NOW)
        second = build_report("test_user_1", sample_series(), 30, NOW)
        assert first == second


class TestWellnessReportService:
    """Test cases for WellnessReportService.create_report."""

    def test_default_window(self):
        """Reports cover 30 days unless told otherwise."""
        source = StaticDataSource()
        report = WellnessReportService(source).create_report("test_user_1", now=NOW)
        assert source.calls == [("test_user_1", 30, NOW)]
        assert report["analysis_period"]["days"] == 30

    def test_uses_current_time(self):
        """Without an explicit clock the current UTC time is used."""
        source = StaticDataSource()
        report = WellnessReportService(source).create_report("test_user_1", days=7)
        today = datetime.now(timezone.utc).date()
        assert report["analysis_period"]["end_date"] in (
            today.isoformat(),
            (today + timedelta(days=1)).isoformat(),
        )

    def test_data_source_error_propagates_unchanged(self):
        """Upstream failures abort the report and reach the caller as-is."""
        error = DataSourceError("db down", operation="load_series", user_id="u1")
        service = WellnessReportService(StaticDataSource(error=error))

        with pytest.raises(DataSourceError) as exc_info:
            service.create_report("u1", now=NOW)
        assert exc_info.value is error

    def test_other_source_errors_propagate(self):
        """Unexpected data source errors are not swallowed either."""
        service = WellnessReportService(StaticDataSource(error=RuntimeError("boom")))
        with pytest.raises(RuntimeError):
            service.create_report("u1", now=NOW)

    def test_rejects_empty_window(self):
        """The window must be at least one day."""
        with pytest.raises(ValueError):
            WellnessReportService(StaticDataSource()).create_report("u1", days=0)

    def test_data_source_must_implement_load_series(self):
        """A source without load_series cannot be constructed."""

        class Incomplete(WellnessDataSource):
            pass

        with pytest.raises(TypeError):
            Incomplete()
