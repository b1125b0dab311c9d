"""Mood trend and variability analysis."""

import math
from collections.abc import Sequence

from bloomwell.models.entries import MoodEntry

# Monday..Sunday, used to keep weekday output and tie-breaks reproducible
WEEKDAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def calculate_trend(values: Sequence[float]) -> float:
    """
    Least-squares slope of values against their 0-based index.

    Raises ValueError for fewer than two points, where the slope is undefined.
    """
    n = len(values)
    if n < 2:
        raise ValueError("trend needs at least two points")

    sum_x = sum(range(n))
    sum_y = sum(values)
    sum_xy = sum(x * y for x, y in enumerate(values))
    sum_xx = sum(x * x for x in range(n))

    return (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)


class MoodAnalyzer:
    """Service for computing mood insights over a window."""

    IMPROVING_THRESHOLD = 0.05
    DECLINING_THRESHOLD = -0.05

    @staticmethod
    def empty() -> dict:
        """Neutral insight for a window without mood entries."""
        return {"average": 0, "trend": "no_data", "volatility": 0}

    @classmethod
    def trend_label(cls, slope: float) -> str:
        if slope > cls.IMPROVING_THRESHOLD:
            return "improving"
        if slope < cls.DECLINING_THRESHOLD:
            return "declining"
        return "stable"

    @classmethod
    def analyze(cls, entries: Sequence[MoodEntry]) -> dict:
        """
        Compute mood insights.

        Entries are taken in the order given; that order is the time axis for
        the trend slope. A single entry has no slope and is reported as stable.
        """
        if not entries:
            return cls.empty()

        levels = [entry.mood_level for entry in entries]
        n = len(levels)
        average = sum(levels) / n

        slope = calculate_trend(levels) if n >= 2 else 0.0

        variance = sum((level - average) ** 2 for level in levels) / n
        volatility = math.sqrt(variance)

        weekday_patterns = cls.weekday_patterns(entries)
        ranked = list(weekday_patterns.items())

        # max/min keep the first of equal values, i.e. the earliest weekday
        best_weekday = max(ranked, key=lambda item: item[1])[0]
        worst_weekday = min(ranked, key=lambda item: item[1])[0]

        average_energy = sum(entry.energy_level for entry in entries) / n

        return {
            "average": round(average, 2),
            "trend": cls.trend_label(slope),
            "trend_slope": round(slope, 4),
            "volatility": round(volatility, 2),
            "best_weekday": best_weekday,
            "worst_weekday": worst_weekday,
            "weekday_patterns": weekday_patterns,
            "average_energy": round(average_energy, 2),
        }

    @staticmethod
    def weekday_patterns(entries: Sequence[MoodEntry]) -> dict[str, float]:
        """Mean mood per weekday name, Monday first, present days only."""
        by_weekday: dict[int, list[int]] = {}
        for entry in entries:
            by_weekday.setdefault(entry.date.weekday(), []).append(entry.mood_level)

        return {
            WEEKDAYS[day]: sum(levels) / len(levels)
            for day, levels in sorted(by_weekday.items())
        }
