"""Business logic services."""

from bloomwell.services.data_source import SQLAlchemyDataSource, WellnessDataSource
from bloomwell.services.habit_analyzer import HabitAnalyzer
from bloomwell.services.mood_analyzer import MoodAnalyzer
from bloomwell.services.recommendations import generate_recommendations
from bloomwell.services.report_exporter import ReportExporter
from bloomwell.services.report_service import WellnessReportService, build_report
from bloomwell.services.study_analyzer import StudyAnalyzer

__all__ = [
    "MoodAnalyzer",
    "HabitAnalyzer",
    "StudyAnalyzer",
    "generate_recommendations",
    "build_report",
    "WellnessReportService",
    "ReportExporter",
    "WellnessDataSource",
    "SQLAlchemyDataSource",
]
