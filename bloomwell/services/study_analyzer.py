"""Study session performance analysis."""

from collections.abc import Sequence

from bloomwell.models.entries import StudySession


class StudyAnalyzer:
    """Service for computing study insights over a window."""

    @staticmethod
    def empty() -> dict:
        """Neutral insight for a window without study sessions."""
        return {
            "total_sessions": 0,
            "total_minutes": 0,
            "avg_duration": 0,
            "completion_rate": 0,
            "best_study_hour": None,
            "hourly_patterns": {},
            "subject_performance": {},
        }

    @classmethod
    def analyze(cls, sessions: Sequence[StudySession]) -> dict:
        """Compute study insights."""
        if not sessions:
            return cls.empty()

        total_sessions = len(sessions)
        total_minutes = sum(session.duration_minutes for session in sessions)
        completed = sum(1 for session in sessions if session.completed)

        hourly = cls._bucket(sessions, lambda session: session.started_at.hour)
        subjects = cls._bucket(sessions, lambda session: session.subject)

        return {
            "total_sessions": total_sessions,
            "total_minutes": total_minutes,
            "avg_duration": round(total_minutes / total_sessions, 1),
            "completion_rate": round(completed / total_sessions, 3),
            "best_study_hour": cls.best_hour(hourly),
            # JSON object keys are strings; keep them that way here too
            "hourly_patterns": {str(hour): stats for hour, stats in hourly.items()},
            "subject_performance": subjects,
        }

    @staticmethod
    def best_hour(hourly: dict[int, dict]) -> int | None:
        """
        Hour with the highest completed/sessions ratio.

        Hours are checked in ascending order and only a strictly better ratio
        replaces the current pick, so ties go to the earliest hour. Returns
        None when no session in any hour was completed.
        """
        best = None
        best_rate = 0.0
        for hour, stats in hourly.items():
            rate = stats["completed"] / stats["sessions"]
            if rate > best_rate:
                best, best_rate = hour, rate
        return best

    @staticmethod
    def _bucket(sessions: Sequence[StudySession], key) -> dict:
        buckets: dict = {}
        for session in sessions:
            stats = buckets.setdefault(
                key(session), {"sessions": 0, "completed": 0, "total_duration": 0}
            )
            stats["sessions"] += 1
            stats["total_duration"] += session.duration_minutes
            if session.completed:
                stats["completed"] += 1

        return {name: buckets[name] for name in sorted(buckets)}
