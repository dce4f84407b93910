from app.core.reducers import round_half_up
from app.core.summaries import ActivitySummary

BASE_SCORE = 50.0
ACTIVITY_POINTS_PER_ENTRY = 2.0
ACTIVITY_POINTS_CAP = 20.0
COMPLETION_RATE_WEIGHT = 0.3
COMPLETION_POINTS_CAP = 30.0


def _clamp_score(value: float) -> int:
    return int(max(0, min(100, round_half_up(value))))


def compute_wellness_score(activity: ActivitySummary, completion_rate: float) -> int:
    """Heuristic composite score in [0, 100] from activity volume and goal completion."""
    activity_points = min(activity.total_activities * ACTIVITY_POINTS_PER_ENTRY, ACTIVITY_POINTS_CAP)
    completion_points = min(completion_rate * COMPLETION_RATE_WEIGHT, COMPLETION_POINTS_CAP)
    return _clamp_score(BASE_SCORE + activity_points + completion_points)
