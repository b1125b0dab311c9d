"""Wellness report assembly."""

from datetime import datetime, timedelta, timezone

import structlog

from bloomwell.errors import DataSourceError
from bloomwell.models.entries import WellnessSeries
from bloomwell.services.data_source import WellnessDataSource
from bloomwell.services.habit_analyzer import HabitAnalyzer
from bloomwell.services.mood_analyzer import MoodAnalyzer
from bloomwell.services.recommendations import generate_recommendations
from bloomwell.services.study_analyzer import StudyAnalyzer

logger = structlog.get_logger()

DEFAULT_DAYS = 30


def build_report(
    user_id: str, series: WellnessSeries, days: int, now: datetime
) -> dict:
    """Assemble a report from already-loaded series."""
    insights = {
        "mood": MoodAnalyzer.analyze(series.mood),
        "habits": HabitAnalyzer.analyze(series.habits),
        "study": StudyAnalyzer.analyze(series.study),
    }

    return {
        "user_id": user_id,
        "analysis_period": {
            "days": days,
            "start_date": (now - timedelta(days=days)).date().isoformat(),
            "end_date": now.date().isoformat(),
        },
        "insights": insights,
        "recommendations": generate_recommendations(
            insights["mood"], insights["habits"], insights["study"]
        ),
        "generated_at": now.isoformat(),
        "data_quality": series.data_quality(),
    }


class WellnessReportService:
    """Loads a user's series and turns them into a wellness report."""

    def __init__(self, data_source: WellnessDataSource):
        self.data_source = data_source

    def create_report(
        self, user_id: str, days: int = DEFAULT_DAYS, now: datetime | None = None
    ) -> dict:
        """
        Generate a report for the last `days` days.

        Data source failures are logged and re-raised as they are; no partial
        report is produced.
        """
        if days < 1:
            raise ValueError("days must be positive")
        if now is None:
            now = datetime.now(timezone.utc)

        try:
            series = self.data_source.load_series(user_id, days, now)
        except DataSourceError as e:
            logger.error(
                "report_data_unavailable",
                operation=e.operation,
                user_id=user_id,
                error=str(e),
            )
            raise

        report = build_report(user_id, series, days, now)

        logger.info(
            "report_generated",
            user_id=user_id,
            days=days,
            recommendations=len(report["recommendations"]),
            **report["data_quality"],
        )
        return report
