"""Rule-based wellness recommendations."""

MOOD_VOLATILITY_LIMIT = 1.5
HABIT_COMPLETION_TARGET = 0.7
STUDY_COMPLETION_TARGET = 0.8


def generate_recommendations(
    mood: dict | None, habits: dict | None, study: dict | None
) -> list[str]:
    """
    Build recommendations from the three insight sections.

    Every rule is checked in turn and may add one line; a missing section
    skips its rules.
    """
    recommendations = []

    if mood:
        if mood.get("trend") == "declining":
            recommendations.append(
                "Your mood has been declining recently. Consider incorporating "
                "more mindfulness practices or reaching out for support."
            )
        if mood.get("volatility", 0) > MOOD_VOLATILITY_LIMIT:
            recommendations.append(
                "Your mood shows high variability. Maintaining consistent sleep "
                "and exercise routines may help stabilize your emotional well-being."
            )

    if habits:
        overall = habits.get("overall_completion_rate")
        if overall is not None and overall < HABIT_COMPLETION_TARGET:
            recommendations.append(
                "Your habit completion rate is below 70%. Consider reducing the "
                "number of habits or making them smaller and more achievable."
            )
        if habits.get("needs_attention"):
            recommendations.append(
                f"Your '{habits['needs_attention']}' habit needs attention. "
                "Consider pairing it with an existing strong habit or adjusting "
                "the difficulty."
            )

    if study:
        best_hour = study.get("best_study_hour")
        if best_hour is not None and study.get("completion_rate", 0) < STUDY_COMPLETION_TARGET:
            recommendations.append(
                f"You perform best during {best_hour}:00. Try scheduling more "
                "important study sessions during this time."
            )

    return recommendations
