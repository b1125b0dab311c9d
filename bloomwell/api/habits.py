"""Habit API endpoints."""

from flask import request

from bloomwell import db
from bloomwell.api import api_bp
from bloomwell.models import HabitRecord, utc_today
from bloomwell.utils import parse_date, parse_int, success_response, validation_error


@api_bp.route("/users/<user_id>/habits", methods=["POST"])
def create_habit_record(user_id: str):
    """
    Record a habit's completion for a day.

    Request body:
    {
        "habit_name": "Hydration",
        "date": "2025-09-01",   // optional, defaults to today (UTC)
        "completed": 6,
        "target": 8
    }
    """
    data = request.get_json(silent=True)

    if not data:
        return validation_error({"body": "Request body is required"})

    habit_name = str(data.get("habit_name") or "").strip()
    if not habit_name:
        return validation_error({"habit_name": "Habit name is required"})
    if len(habit_name) > 100:
        return validation_error({"habit_name": "Habit name is too long"})

    record = HabitRecord(
        user_id=user_id,
        habit_name=habit_name,
        entry_date=parse_date(data.get("date"), "date", default=utc_today()),
        completed=parse_int(data.get("completed", 0), "completed", minimum=0),
        target=parse_int(data.get("target", 1), "target", minimum=1),
    )

    db.session.add(record)
    db.session.commit()

    return success_response({"habit": record.to_dict()}, status_code=201)
