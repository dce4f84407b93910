from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from app.core.records import GoalRecord, Intensity, UserRef


class ActivitySummary(BaseModel):
    total_activities: int = 0
    total_calories_burned: float = 0.0
    total_duration: int = 0
    most_common_activity: Optional[str] = None
    average_intensity: Optional[Intensity] = None


class NutritionSummary(BaseModel):
    total_entries: int = 0
    total_calories: float = 0.0
    average_calories_per_day: int = 0
    meal_distribution: dict[str, int]


class WellbeingSummary(BaseModel):
    total_entries: int = 0
    average_mood: Optional[float] = None
    average_stress: Optional[float] = None
    average_energy: Optional[float] = None
    common_emotions: list[str] = []


class SleepSummary(BaseModel):
    total_entries: int = 0
    duration_entries: int = 0
    # 0 when no durations were logged, unlike the wellbeing ratings.
    average_duration: float = 0.0
    average_quality: Optional[float] = None


class GoalProgressSummary(BaseModel):
    total_goals: int = 0
    active_goals: int = 0
    completed_goals: int = 0
    average_progress: float = 0.0
    completion_rate: float = 0.0
    goals: list[GoalRecord] = []


class InsightWindow(BaseModel):
    start: date
    end: date
    days: int


class InsightResult(BaseModel):
    user: UserRef
    window: InsightWindow
    activity_summary: ActivitySummary
    nutrition_summary: NutritionSummary
    wellbeing_summary: WellbeingSummary
    sleep_summary: SleepSummary
    goal_progress: GoalProgressSummary
    wellness_score: int
    recommendations: list[str]
    generated_at: datetime
