"""Study session API endpoints."""

from datetime import datetime, timezone

from flask import request

from bloomwell import db
from bloomwell.api import api_bp
from bloomwell.models import StudyRecord
from bloomwell.utils import (
    parse_datetime,
    parse_int,
    success_response,
    validation_error,
)


@api_bp.route("/users/<user_id>/study", methods=["POST"])
def create_study_record(user_id: str):
    """
    Record a study session.

    Request body:
    {
        "subject": "Mathematics",
        "started_at": "2025-09-01T09:30:00",  // optional, defaults to now (UTC)
        "duration_minutes": 45,
        "completed": true
    }
    """
    data = request.get_json(silent=True)

    if not data:
        return validation_error({"body": "Request body is required"})

    subject = str(data.get("subject") or "").strip()
    if not subject:
        return validation_error({"subject": "Subject is required"})

    completed = data.get("completed", False)
    if not isinstance(completed, bool):
        return validation_error({"completed": "Completed must be true or false"})

    started_at = parse_datetime(
        data.get("started_at"), "started_at", default=datetime.utcnow()
    )

    if started_at.tzinfo is not None:
        started_at = started_at.astimezone(timezone.utc)

    record = StudyRecord(
        user_id=user_id,
        subject=subject[:100],
        # Stored as naive UTC
        started_at=started_at.replace(tzinfo=None),
        duration_minutes=parse_int(
            data.get("duration_minutes"), "duration_minutes", minimum=1
        ),
        completed=completed,
    )

    db.session.add(record)
    db.session.commit()

    return success_response({"study_session": record.to_dict()}, status_code=201)
