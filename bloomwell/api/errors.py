"""Error handlers mapping engine failures to JSON responses."""

import structlog
from flask import request
from werkzeug.exceptions import NotFound

from bloomwell.errors import DataSourceError, ReportExportError
from bloomwell.utils import ValidationFailed, error_response, not_found, validation_error

logger = structlog.get_logger()


def register_error_handlers(app):
    """Attach JSON error handlers to the app."""

    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        return validation_error(error.to_details())

    @app.errorhandler(DataSourceError)
    def handle_data_source_error(error):
        logger.error("data_source_error", **error.to_dict(), error=str(error))
        return error_response(
            "DATA_SOURCE_UNAVAILABLE",
            "Wellness data could not be loaded",
            error.to_dict(),
            status_code=503,
        )

    @app.errorhandler(ReportExportError)
    def handle_export_error(error):
        logger.error("report_export_error", **error.to_dict(), error=str(error))
        return error_response(
            "EXPORT_FAILED", "Report export failed", error.to_dict(), status_code=500
        )

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        if request.path.startswith("/api/"):
            return not_found("API endpoint not found")
        return error
