from typing import Optional

from models.quiz_models import Difficulty, UserPerformance

DIFFICULTY_LEVELS = ("beginner", "intermediate", "advanced")


def adjust_difficulty(
    requested: Difficulty,
    user_performance: Optional[UserPerformance],
    adaptive: bool,
) -> Difficulty:
    """
    Shift the requested difficulty one step based on the user's average score.

    Promotion and demotion thresholds differ per level; comparisons are strict,
    so an average of exactly 80 keeps a beginner at beginner.
    """
    if not adaptive or user_performance is None:
        return requested

    score = user_performance.average_score or 0
    if score > 80 and requested == "beginner":
        return "intermediate"
    elif score > 85 and requested == "intermediate":
        return "advanced"
    elif score < 60 and requested == "intermediate":
        return "beginner"
    elif score < 70 and requested == "advanced":
        return "intermediate"
    return requested


def estimate_difficulty(average_ratio: float) -> Difficulty:
    """Map an average score ratio (0-1) to the level a learner should practice at."""
    if average_ratio >= 0.8:
        return "advanced"
    elif average_ratio >= 0.6:
        return "intermediate"
    return "beginner"
