from datetime import date

from app.core.recommendations import (
    RECOMMENDATION_RULES,
    SummaryBundle,
    generate_recommendations,
    matching_rules,
)
from app.core.records import Intensity, SleepRecord
from app.core.reducers import reduce_goals, reduce_nutrition, reduce_sleep, reduce_wellbeing
from app.core.summaries import (
    ActivitySummary,
    GoalProgressSummary,
    NutritionSummary,
    SleepSummary,
    WellbeingSummary,
)

MESSAGES = {rule.key: rule.message for rule in RECOMMENDATION_RULES}


def _bundle(
    activity: ActivitySummary = None,
    nutrition: NutritionSummary = None,
    wellbeing: WellbeingSummary = None,
    sleep: SleepSummary = None,
    goals: GoalProgressSummary = None,
) -> SummaryBundle:
    return SummaryBundle(
        activity=activity or ActivitySummary(total_activities=12, average_intensity=Intensity.moderate),
        nutrition=nutrition or NutritionSummary(total_entries=60, average_calories_per_day=2000, meal_distribution={}),
        wellbeing=wellbeing or WellbeingSummary(total_entries=5, average_mood=7, average_stress=4, average_energy=6),
        sleep=sleep or SleepSummary(total_entries=20, duration_entries=20, average_duration=7.5, average_quality=4),
        goals=goals or GoalProgressSummary(total_goals=2, active_goals=1, completed_goals=1, average_progress=80),
    )


def _keys(bundle: SummaryBundle) -> list[str]:
    return [rule.key for rule in matching_rules(bundle)]


def test_healthy_summaries_produce_no_recommendations() -> None:
    assert generate_recommendations(_bundle()) == []


def test_empty_data_recommendations() -> None:
    bundle = SummaryBundle(
        activity=ActivitySummary(),
        nutrition=reduce_nutrition([]),
        wellbeing=reduce_wellbeing([]),
        sleep=reduce_sleep([]),
        goals=reduce_goals([]),
    )
    assert _keys(bundle) == ["activity_frequency", "nutrition_intake", "goal_setting"]


def test_activity_thresholds() -> None:
    assert "activity_frequency" in _keys(_bundle(activity=ActivitySummary(total_activities=9)))
    assert "activity_frequency" not in _keys(_bundle(activity=ActivitySummary(total_activities=10)))
    low = ActivitySummary(total_activities=15, average_intensity=Intensity.low)
    assert _keys(_bundle(activity=low)) == ["activity_intensity"]


def test_nutrition_threshold() -> None:
    low = NutritionSummary(total_entries=30, average_calories_per_day=1199, meal_distribution={})
    enough = NutritionSummary(total_entries=30, average_calories_per_day=1200, meal_distribution={})
    assert _keys(_bundle(nutrition=low)) == ["nutrition_intake"]
    assert _keys(_bundle(nutrition=enough)) == []


def test_mood_and_stress_thresholds() -> None:
    strained = WellbeingSummary(total_entries=3, average_mood=4.9, average_stress=7.1)
    assert _keys(_bundle(wellbeing=strained)) == ["mood_support", "stress_relief"]
    borderline = WellbeingSummary(total_entries=3, average_mood=5, average_stress=7)
    assert _keys(_bundle(wellbeing=borderline)) == []


def test_zero_mood_is_a_real_reading() -> None:
    assert _keys(_bundle(wellbeing=WellbeingSummary(total_entries=1, average_mood=0))) == ["mood_support"]


def test_sleep_rule_requires_logged_duration() -> None:
    short = SleepSummary(total_entries=4, duration_entries=4, average_duration=6.9)
    assert _keys(_bundle(sleep=short)) == ["sleep_hygiene"]
    assert _keys(_bundle(sleep=SleepSummary(total_entries=0, average_duration=0))) == []


def test_quality_only_sleep_does_not_trigger_duration_rule() -> None:
    summary = reduce_sleep([SleepRecord(log_date=date(2026, 3, 30), quality_rating=4)])
    assert summary.duration_entries == 0
    assert summary.average_duration == 0
    assert _keys(_bundle(sleep=summary)) == []


def test_goal_rules() -> None:
    none_active = GoalProgressSummary(total_goals=1, active_goals=0, completed_goals=1, average_progress=100)
    assert _keys(_bundle(goals=none_active)) == ["goal_setting"]
    stalled = GoalProgressSummary(total_goals=2, active_goals=2, average_progress=49.9)
    assert _keys(_bundle(goals=stalled)) == ["goal_milestones"]
    stalled_but_paused = GoalProgressSummary(total_goals=1, active_goals=0, average_progress=10)
    assert _keys(_bundle(goals=stalled_but_paused)) == ["goal_setting"]


def test_all_rules_keep_declaration_order() -> None:
    bundle = _bundle(
        activity=ActivitySummary(total_activities=2, average_intensity=Intensity.low),
        nutrition=NutritionSummary(total_entries=1, average_calories_per_day=300, meal_distribution={}),
        wellbeing=WellbeingSummary(total_entries=2, average_mood=3, average_stress=9),
        sleep=SleepSummary(total_entries=2, duration_entries=2, average_duration=5.0),
        goals=GoalProgressSummary(total_goals=1, active_goals=1, average_progress=10),
    )
    first = generate_recommendations(bundle)
    assert first == [
        MESSAGES["activity_frequency"],
        MESSAGES["activity_intensity"],
        MESSAGES["nutrition_intake"],
        MESSAGES["mood_support"],
        MESSAGES["stress_relief"],
        MESSAGES["sleep_hygiene"],
        MESSAGES["goal_milestones"],
    ]
    assert generate_recommendations(bundle) == first


def test_rule_keys_are_unique() -> None:
    keys = [rule.key for rule in RECOMMENDATION_RULES]
    assert len(keys) == len(set(keys)) == 8
