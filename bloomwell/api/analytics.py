"""Wellness analytics API endpoints."""

from flask import Response, current_app, request

from bloomwell.api import api_bp
from bloomwell.services import ReportExporter, SQLAlchemyDataSource, WellnessReportService
from bloomwell.utils import parse_int, success_response, validation_error

EXPORT_MIMETYPES = {
    "json": "application/json",
    "csv": "text/csv",
}


def _window_days() -> int:
    """Read and bound the ?days= query parameter."""
    return parse_int(
        request.args.get("days", current_app.config["DEFAULT_ANALYSIS_DAYS"]),
        "days",
        minimum=1,
        maximum=current_app.config["MAX_ANALYSIS_DAYS"],
    )


def _create_report(user_id: str) -> dict:
    service = WellnessReportService(SQLAlchemyDataSource())
    return service.create_report(user_id, days=_window_days())


@api_bp.route("/analytics/<user_id>", methods=["GET"])
def get_wellness_report(user_id: str):
    """
    Get a wellness report for a user.

    Query params:
    - days: analysis window in days (default 30)
    """
    return success_response({"report": _create_report(user_id)})


@api_bp.route("/analytics/<user_id>/export", methods=["GET"])
def export_wellness_report(user_id: str):
    """
    Download a wellness report.

    Query params:
    - format: json (default) or csv
    - days: analysis window in days (default 30)
    """
    export_format = request.args.get("format", "json").lower()
    if export_format not in EXPORT_MIMETYPES:
        return validation_error({"format": "Format must be one of: json, csv"})

    report = _create_report(user_id)
    exporter = ReportExporter(current_app.config["REPORT_EXPORT_DIR"])

    if export_format == "csv":
        content = exporter.to_csv(report)
    else:
        content = exporter.to_json(report)

    filename = exporter.default_path(report, export_format).name
    return Response(
        content,
        mimetype=EXPORT_MIMETYPES[export_format],
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
