import logging
from datetime import date, datetime, timezone
from typing import Optional

from app.core.record_store import WINDOW_DAYS, RecordStore, window_bounds
from app.core.recommendations import SummaryBundle, generate_recommendations
from app.core.reducers import (
    reduce_activity,
    reduce_goals,
    reduce_nutrition,
    reduce_sleep,
    reduce_wellbeing,
)
from app.core.scoring import compute_wellness_score
from app.core.summaries import InsightResult, InsightWindow

logger = logging.getLogger("uvicorn.error")


class UserNotFoundError(LookupError):
    def __init__(self, user_id: int):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_user_insights(
    store: RecordStore,
    user_id: int,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
) -> InsightResult:
    """Aggregate a user's trailing-window records into one insight result.

    ``today`` anchors the window and defaults to the date of ``now``, which in
    turn defaults to the current UTC time. Goals are read without a window.

    Raises ``UserNotFoundError`` for an unknown user. Store failures
    (``StoreUnavailableError``) propagate unchanged; no partial result is
    returned.
    """
    timestamp = now or _utc_now()
    anchor = today or timestamp.date()

    user = store.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    start, end = window_bounds(anchor)
    activity = reduce_activity(store.fetch_activity(user_id, start, end))
    nutrition = reduce_nutrition(store.fetch_nutrition(user_id, start, end))
    wellbeing = reduce_wellbeing(store.fetch_wellbeing(user_id, start, end))
    sleep = reduce_sleep(store.fetch_sleep(user_id, start, end))
    goals = reduce_goals(store.fetch_goals(user_id))

    wellness_score = compute_wellness_score(activity, goals.completion_rate)
    recommendations = generate_recommendations(
        SummaryBundle(activity=activity, nutrition=nutrition, wellbeing=wellbeing, sleep=sleep, goals=goals)
    )
    logger.info(
        "insights_generated user_id=%s window=%s..%s activities=%s goals=%s score=%s recommendations=%s",
        user_id,
        start.isoformat(),
        end.isoformat(),
        activity.total_activities,
        goals.total_goals,
        wellness_score,
        len(recommendations),
    )
    return InsightResult(
        user=user,
        window=InsightWindow(start=start, end=end, days=WINDOW_DAYS),
        activity_summary=activity,
        nutrition_summary=nutrition,
        wellbeing_summary=wellbeing,
        sleep_summary=sleep,
        goal_progress=goals,
        wellness_score=wellness_score,
        recommendations=recommendations,
        generated_at=timestamp,
    )
