"""Habit completion and streak analysis."""

from collections.abc import Sequence

from bloomwell.models.entries import HabitEntry


def current_streak(entries: Sequence[HabitEntry]) -> int:
    """Length of the trailing run of entries that met their target."""
    streak = 0
    for entry in reversed(entries):
        if not entry.is_met:
            break
        streak += 1
    return streak


def longest_streak(entries: Sequence[HabitEntry]) -> int:
    """Length of the longest run of entries that met their target."""
    longest = run = 0
    for entry in entries:
        run = run + 1 if entry.is_met else 0
        longest = max(longest, run)
    return longest


class HabitAnalyzer:
    """Service for computing habit insights over a window."""

    @staticmethod
    def empty() -> dict:
        """Neutral insight for a window without habit entries."""
        return {"completion_rate": 0, "streaks": {}, "patterns": {}}

    @staticmethod
    def group_by_habit(entries: Sequence[HabitEntry]) -> dict[str, list[HabitEntry]]:
        """Group entries by habit name (sorted), each group in date order."""
        groups: dict[str, list[HabitEntry]] = {}
        for entry in entries:
            groups.setdefault(entry.habit_name, []).append(entry)

        return {
            name: sorted(groups[name], key=lambda entry: entry.date)
            for name in sorted(groups)
        }

    @classmethod
    def analyze(cls, entries: Sequence[HabitEntry]) -> dict:
        """
        Compute habit insights.

        Per-habit rates count days where completed >= target; the overall rate
        is weighted by quantity (sum of completed over sum of target).
        """
        if not entries:
            return cls.empty()

        completion_rates = {}
        streaks = {}
        longest_streaks = {}

        for name, habit_entries in cls.group_by_habit(entries).items():
            met = sum(1 for entry in habit_entries if entry.is_met)
            completion_rates[name] = round(met / len(habit_entries), 3)
            streaks[name] = current_streak(habit_entries)
            longest_streaks[name] = longest_streak(habit_entries)

        total_completed = sum(entry.completed for entry in entries)
        total_target = sum(entry.target for entry in entries)
        overall = total_completed / total_target if total_target > 0 else 0

        # Habits are iterated in name order, so ties go to the first name
        ranked = list(completion_rates.items())
        most_consistent = max(ranked, key=lambda item: item[1])[0]
        needs_attention = min(ranked, key=lambda item: item[1])[0]

        return {
            "overall_completion_rate": round(overall, 3),
            "individual_completion_rates": completion_rates,
            "current_streaks": streaks,
            "longest_streaks": longest_streaks,
            "most_consistent_habit": most_consistent,
            "needs_attention": needs_attention,
        }
