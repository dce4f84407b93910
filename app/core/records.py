from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Intensity(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class GoalCategory(str, Enum):
    fitness = "fitness"
    nutrition = "nutrition"
    wellness = "wellness"
    sleep = "sleep"
    personal = "personal"


class GoalStatus(str, Enum):
    active = "active"
    completed = "completed"
    paused = "paused"
    cancelled = "cancelled"


class UserRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


class ActivityRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    log_date: date
    activity_type: str
    duration_minutes: Optional[int] = None
    intensity: Optional[Intensity] = None
    calories_burned: Optional[float] = Field(default=None, ge=0)


class NutritionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    log_date: date
    food_item: str
    meal_type: Optional[MealType] = None
    calories: Optional[float] = None
    macros: Optional[dict[str, float]] = None


class WellbeingRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    log_date: date
    mood_rating: Optional[int] = None
    stress_level: Optional[int] = None
    energy_level: Optional[int] = None
    emotions: Optional[list[str]] = None


class SleepRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    log_date: date
    duration_hours: Optional[float] = None
    quality_rating: Optional[int] = None


class GoalRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: GoalCategory
    title: str
    description: Optional[str] = None
    status: GoalStatus = GoalStatus.active
    progress_percentage: float = Field(default=0.0, ge=0, le=100)
    target_value: Optional[float] = None
    target_unit: Optional[str] = None
    target_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
