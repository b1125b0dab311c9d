"""Structured (JSON) and flat (CSV) report exports."""

import csv
import io
import json
import logging
import os
import tempfile
from datetime import date, datetime, timezone
from pathlib import Path

from werkzeug.utils import secure_filename

from bloomwell.errors import ReportExportError

logger = logging.getLogger(__name__)

CSV_HEADER = ["metric_name", "value", "category"]

# (insight section, insight key, row name, row category)
CSV_METRICS = [
    ("mood", "average", "mood_average", "mood"),
    ("mood", "trend", "mood_trend", "mood"),
    ("mood", "trend_slope", "mood_trend_slope", "mood"),
    ("mood", "volatility", "mood_volatility", "mood"),
    ("mood", "best_weekday", "mood_best_weekday", "mood"),
    ("mood", "worst_weekday", "mood_worst_weekday", "mood"),
    ("mood", "average_energy", "average_energy", "mood"),
    ("habits", "overall_completion_rate", "habit_completion_rate", "habits"),
    # Neutral form when the window has no habit entries
    ("habits", "completion_rate", "habit_completion_rate", "habits"),
    ("habits", "most_consistent_habit", "most_consistent_habit", "habits"),
    ("habits", "needs_attention", "habit_needs_attention", "habits"),
    ("study", "total_sessions", "study_total_sessions", "study"),
    ("study", "total_minutes", "study_total_minutes", "study"),
    ("study", "completion_rate", "study_completion_rate", "study"),
    ("study", "avg_duration", "avg_study_duration", "study"),
    ("study", "best_study_hour", "best_study_hour", "study"),
]


def _quoted(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


class ReportExporter:
    """Serializes reports and writes them to disk."""

    def __init__(self, export_dir: str | os.PathLike = "."):
        self.export_dir = Path(export_dir)

    # -- encodings --

    @staticmethod
    def to_json(report: dict) -> str:
        """Full nested report as indented JSON."""
        return json.dumps(report, indent=2, ensure_ascii=False)

    @staticmethod
    def to_csv(report: dict) -> str:
        """
        Flat metric table.

        One row per scalar metric present in the report, then one row per
        recommendation. Recommendation text is always quoted.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        insights = report.get("insights", {})
        for section, key, name, category in CSV_METRICS:
            values = insights.get(section) or {}
            if key not in values:
                continue
            value = values[key]
            writer.writerow([name, "" if value is None else value, category])

        for index, recommendation in enumerate(report.get("recommendations", []), 1):
            buffer.write(
                f"recommendation_{index},{_quoted(recommendation)},recommendations\n"
            )

        return buffer.getvalue()

    # -- files --

    def default_path(self, report: dict, extension: str, today: date | None = None) -> Path:
        """wellness_report_<user>_<YYYY-MM-DD>.<ext> inside the export dir."""
        if today is None:
            today = datetime.now(timezone.utc).date()
        user_part = secure_filename(str(report["user_id"])) or "user"
        return self.export_dir / f"wellness_report_{user_part}_{today.isoformat()}.{extension}"

    def export_json(self, report: dict, output_path: str | os.PathLike | None = None) -> Path:
        path = Path(output_path) if output_path else self.default_path(report, "json")
        return self._write(report, path, self.to_json(report), "export_json")

    def export_csv(self, report: dict, output_path: str | os.PathLike | None = None) -> Path:
        path = Path(output_path) if output_path else self.default_path(report, "csv")
        return self._write(report, path, self.to_csv(report), "export_csv")

    def _write(self, report: dict, path: Path, content: str, operation: str) -> Path:
        """Write content next to path, then rename it into place."""
        user_id = report.get("user_id")
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(f"{operation} failed for user {user_id} at {path}: {e}")
            raise ReportExportError(
                f"Could not write report to {path}: {e}",
                operation=operation,
                user_id=user_id,
                path=str(path),
            ) from e

        logger.info(f"Wellness report for user {user_id} exported to {path}")
        return path
