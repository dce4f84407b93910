from dataclasses import dataclass
from typing import Callable

from app.core.records import Intensity
from app.core.summaries import (
    ActivitySummary,
    GoalProgressSummary,
    NutritionSummary,
    SleepSummary,
    WellbeingSummary,
)


@dataclass(frozen=True)
class SummaryBundle:
    activity: ActivitySummary
    nutrition: NutritionSummary
    wellbeing: WellbeingSummary
    sleep: SleepSummary
    goals: GoalProgressSummary


@dataclass(frozen=True)
class RecommendationRule:
    key: str
    predicate: Callable[[SummaryBundle], bool]
    message: str


MIN_MONTHLY_ACTIVITIES = 10
MIN_DAILY_CALORIES = 1200
LOW_MOOD_THRESHOLD = 5.0
HIGH_STRESS_THRESHOLD = 7.0
MIN_SLEEP_HOURS = 7.0
LOW_GOAL_PROGRESS_PCT = 50.0


def _low_mood(s: SummaryBundle) -> bool:
    return s.wellbeing.average_mood is not None and s.wellbeing.average_mood < LOW_MOOD_THRESHOLD


def _high_stress(s: SummaryBundle) -> bool:
    return s.wellbeing.average_stress is not None and s.wellbeing.average_stress > HIGH_STRESS_THRESHOLD


def _short_sleep(s: SummaryBundle) -> bool:
    # average_duration is 0 when no duration was logged.
    return s.sleep.duration_entries > 0 and s.sleep.average_duration < MIN_SLEEP_HOURS


def _stalled_goals(s: SummaryBundle) -> bool:
    return s.goals.average_progress < LOW_GOAL_PROGRESS_PCT and s.goals.active_goals > 0


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        key="activity_frequency",
        predicate=lambda s: s.activity.total_activities < MIN_MONTHLY_ACTIVITIES,
        message="Try to increase your activity frequency. Aim for at least 3-4 activities per week.",
    ),
    RecommendationRule(
        key="activity_intensity",
        predicate=lambda s: s.activity.average_intensity == Intensity.low,
        message="Consider incorporating more moderate or high-intensity activities for better fitness gains.",
    ),
    RecommendationRule(
        key="nutrition_intake",
        predicate=lambda s: s.nutrition.average_calories_per_day < MIN_DAILY_CALORIES,
        message=(
            "Your calorie intake appears low. "
            "Consider consulting with a nutritionist about adequate daily nutrition."
        ),
    ),
    RecommendationRule(
        key="mood_support",
        predicate=_low_mood,
        message=(
            "Your mood scores suggest you might benefit from stress management techniques "
            "or speaking with a counselor."
        ),
    ),
    RecommendationRule(
        key="stress_relief",
        predicate=_high_stress,
        message="High stress levels detected. Consider meditation, exercise, or relaxation techniques.",
    ),
    RecommendationRule(
        key="sleep_hygiene",
        predicate=_short_sleep,
        message="Aim for 7-9 hours of sleep per night for optimal health and recovery.",
    ),
    RecommendationRule(
        key="goal_setting",
        predicate=lambda s: s.goals.active_goals == 0,
        message="Setting specific health and wellness goals can help you stay motivated and track progress.",
    ),
    RecommendationRule(
        key="goal_milestones",
        predicate=_stalled_goals,
        message="Break down your goals into smaller, achievable milestones to maintain momentum.",
    ),
)


def matching_rules(summaries: SummaryBundle) -> list[RecommendationRule]:
    return [rule for rule in RECOMMENDATION_RULES if rule.predicate(summaries)]


def generate_recommendations(summaries: SummaryBundle) -> list[str]:
    return [rule.message for rule in matching_rules(summaries)]
