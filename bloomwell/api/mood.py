"""Mood API endpoints."""

from flask import request
from sqlalchemy.exc import IntegrityError

from bloomwell import db
from bloomwell.api import api_bp
from bloomwell.models import MoodRecord, utc_today
from bloomwell.utils import (
    conflict,
    parse_date,
    parse_int,
    success_response,
    validation_error,
)


@api_bp.route("/users/<user_id>/mood", methods=["POST"])
def create_mood_record(user_id: str):
    """
    Record the mood check-in for a day.

    Request body:
    {
        "date": "2025-09-01",   // optional, defaults to today (UTC)
        "mood_level": 3,        // 1-5
        "energy_level": 70,     // 1-100
        "notes": "Optional note"
    }
    """
    data = request.get_json(silent=True)

    if not data:
        return validation_error({"body": "Request body is required"})

    entry_date = parse_date(data.get("date"), "date", default=utc_today())
    mood_level = parse_int(data.get("mood_level"), "mood_level", 1, 5)
    energy_level = parse_int(data.get("energy_level"), "energy_level", 1, 100)

    notes = data.get("notes")
    if notes is not None and not isinstance(notes, str):
        return validation_error({"notes": "Notes must be text"})

    # Check-ins are immutable, one per day
    existing = MoodRecord.query.filter_by(user_id=user_id, entry_date=entry_date).first()
    if existing:
        return conflict(f"Mood already recorded for {entry_date.isoformat()}")

    record = MoodRecord(
        user_id=user_id,
        entry_date=entry_date,
        mood_level=mood_level,
        energy_level=energy_level,
        notes=notes[:500] if notes else None,
    )

    db.session.add(record)
    try:
        db.session.commit()
    except IntegrityError:
        # A concurrent request recorded the same day first
        db.session.rollback()
        return conflict(f"Mood already recorded for {entry_date.isoformat()}")

    return success_response({"mood": record.to_dict()}, status_code=201)
