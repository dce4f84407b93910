import math
from collections import Counter
from statistics import mean
from typing import Iterable, Optional, Sequence

from app.core.record_store import WINDOW_DAYS
from app.core.records import (
    ActivityRecord,
    GoalRecord,
    GoalStatus,
    Intensity,
    MealType,
    NutritionRecord,
    SleepRecord,
    WellbeingRecord,
)
from app.core.summaries import (
    ActivitySummary,
    GoalProgressSummary,
    NutritionSummary,
    SleepSummary,
    WellbeingSummary,
)

TOP_EMOTIONS = 3

INTENSITY_ORDINALS: dict[Intensity, int] = {
    Intensity.low: 1,
    Intensity.moderate: 2,
    Intensity.high: 3,
}
ORDINAL_INTENSITIES: dict[int, Intensity] = {value: key for key, value in INTENSITY_ORDINALS.items()}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _avg(values: Iterable[Optional[float]]) -> Optional[float]:
    data = [float(v) for v in values if v is not None]
    if not data:
        return None
    return float(mean(data))


def _most_common(labels: Iterable[str], limit: int) -> list[str]:
    # Counter.most_common keeps insertion order for equal counts.
    return [label for label, _ in Counter(labels).most_common(limit)]


def _average_intensity(records: Sequence[ActivityRecord]) -> Optional[Intensity]:
    ordinal = _avg(INTENSITY_ORDINALS[r.intensity] for r in records if r.intensity is not None)
    if ordinal is None:
        return None
    return ORDINAL_INTENSITIES[round_half_up(ordinal)]


def reduce_activity(records: Sequence[ActivityRecord]) -> ActivitySummary:
    most_common = _most_common((r.activity_type for r in records), 1)
    return ActivitySummary(
        total_activities=len(records),
        total_calories_burned=sum(float(r.calories_burned) for r in records if r.calories_burned is not None),
        total_duration=sum(r.duration_minutes for r in records if r.duration_minutes is not None),
        most_common_activity=(most_common[0] if most_common else None),
        average_intensity=_average_intensity(records),
    )


def reduce_nutrition(records: Sequence[NutritionRecord], window_days: int = WINDOW_DAYS) -> NutritionSummary:
    total_calories = sum(float(r.calories) for r in records if r.calories is not None)
    distribution = {meal.value: 0 for meal in MealType}
    for record in records:
        if record.meal_type is not None:
            distribution[record.meal_type.value] += 1
    return NutritionSummary(
        total_entries=len(records),
        total_calories=total_calories,
        # Divides by the window length, not by the number of logged days.
        average_calories_per_day=round_half_up(total_calories / window_days),
        meal_distribution=distribution,
    )


def reduce_wellbeing(records: Sequence[WellbeingRecord]) -> WellbeingSummary:
    emotions = (emotion for r in records for emotion in (r.emotions or []))
    return WellbeingSummary(
        total_entries=len(records),
        average_mood=_avg(r.mood_rating for r in records),
        average_stress=_avg(r.stress_level for r in records),
        average_energy=_avg(r.energy_level for r in records),
        common_emotions=_most_common(emotions, TOP_EMOTIONS),
    )


def reduce_sleep(records: Sequence[SleepRecord]) -> SleepSummary:
    durations = [r.duration_hours for r in records if r.duration_hours is not None]
    average_duration = _avg(durations)
    return SleepSummary(
        total_entries=len(records),
        duration_entries=len(durations),
        average_duration=(average_duration if average_duration is not None else 0.0),
        average_quality=_avg(r.quality_rating for r in records),
    )


def goal_completion_rate(total_goals: int, completed_goals: int) -> float:
    if total_goals <= 0:
        return 0.0
    return completed_goals / total_goals * 100.0


def reduce_goals(goals: Sequence[GoalRecord]) -> GoalProgressSummary:
    total = len(goals)
    completed = sum(1 for g in goals if g.status == GoalStatus.completed)
    average_progress = _avg(g.progress_percentage for g in goals)
    return GoalProgressSummary(
        total_goals=total,
        active_goals=sum(1 for g in goals if g.status == GoalStatus.active),
        completed_goals=completed,
        average_progress=(average_progress if average_progress is not None else 0.0),
        completion_rate=goal_completion_rate(total, completed),
        goals=list(goals),
    )
