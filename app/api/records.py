from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.api.users import get_user_or_404
from app.core.records import Intensity, MealType
from app.db.models import ActivityData, NutritionData, SleepData, WellbeingData
from app.db.session import get_db

router = APIRouter(prefix="/users", tags=["records"])


class ActivityWriteRequest(BaseModel):
    log_date: Optional[date] = None
    activity_type: str = Field(min_length=1, max_length=128)
    duration_minutes: Optional[int] = Field(default=None, ge=0, le=1440)
    intensity: Optional[Intensity] = None
    calories_burned: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = Field(default=None, max_length=1200)


class ActivityItem(BaseModel):
    id: int
    log_date: date
    activity_type: str
    duration_minutes: Optional[int] = None
    intensity: Optional[Intensity] = None
    calories_burned: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime


class NutritionWriteRequest(BaseModel):
    log_date: Optional[date] = None
    meal_type: Optional[MealType] = None
    food_item: str = Field(min_length=1, max_length=255)
    quantity: Optional[str] = Field(default=None, max_length=128)
    calories: Optional[float] = Field(default=None, ge=0)
    macros: Optional[dict[str, float]] = None
    notes: Optional[str] = Field(default=None, max_length=1200)


class NutritionItem(BaseModel):
    id: int
    log_date: date
    meal_type: Optional[MealType] = None
    food_item: str
    quantity: Optional[str] = None
    calories: Optional[float] = None
    macros: Optional[dict[str, float]] = None
    notes: Optional[str] = None
    created_at: datetime


class WellbeingWriteRequest(BaseModel):
    log_date: Optional[date] = None
    mood_rating: Optional[int] = Field(default=None, ge=1, le=10)
    stress_level: Optional[int] = Field(default=None, ge=1, le=10)
    energy_level: Optional[int] = Field(default=None, ge=1, le=10)
    emotions: Optional[list[str]] = None
    notes: Optional[str] = Field(default=None, max_length=1200)


class WellbeingItem(BaseModel):
    id: int
    log_date: date
    mood_rating: Optional[int] = None
    stress_level: Optional[int] = None
    energy_level: Optional[int] = None
    emotions: Optional[list[str]] = None
    notes: Optional[str] = None
    created_at: datetime


class SleepWriteRequest(BaseModel):
    log_date: Optional[date] = None
    bedtime: Optional[datetime] = None
    wake_time: Optional[datetime] = None
    duration_hours: Optional[float] = Field(default=None, ge=0, le=24)
    quality_rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = Field(default=None, max_length=1200)


class SleepItem(BaseModel):
    id: int
    log_date: date
    bedtime: Optional[datetime] = None
    wake_time: Optional[datetime] = None
    duration_hours: Optional[float] = None
    quality_rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime


class ActivityListResponse(BaseModel):
    items: list[ActivityItem]


class NutritionListResponse(BaseModel):
    items: list[NutritionItem]


class WellbeingListResponse(BaseModel):
    items: list[WellbeingItem]


class SleepListResponse(BaseModel):
    items: list[SleepItem]


def _today() -> date:
    return datetime.now(timezone.utc).date()


def _clean_emotions(emotions: Optional[list[str]]) -> Optional[list[str]]:
    if emotions is None:
        return None
    return [item.strip() for item in emotions if item.strip()]


def _list_rows(db: Session, model, user_id: int, from_date: Optional[date], to_date: Optional[date]) -> list:
    get_user_or_404(db, user_id)
    query = db.query(model).filter(model.user_id == user_id)
    if from_date:
        query = query.filter(model.log_date >= from_date)
    if to_date:
        query = query.filter(model.log_date <= to_date)
    return query.order_by(model.log_date.desc(), model.id.desc()).all()


def _save(db: Session, row):
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.post("/{user_id}/activity", response_model=ActivityItem, status_code=status.HTTP_201_CREATED)
def create_activity(user_id: int, payload: ActivityWriteRequest, db: Session = Depends(get_db)) -> ActivityItem:
    get_user_or_404(db, user_id)
    row = _save(
        db,
        ActivityData(
            user_id=user_id,
            log_date=payload.log_date or _today(),
            activity_type=payload.activity_type.strip(),
            duration_minutes=payload.duration_minutes,
            intensity=(payload.intensity.value if payload.intensity else None),
            calories_burned=payload.calories_burned,
            notes=payload.notes,
        ),
    )
    return ActivityItem.model_validate(row, from_attributes=True)


@router.get("/{user_id}/activity", response_model=ActivityListResponse)
def list_activity(
    user_id: int,
    from_date: Optional[date] = Query(default=None, alias="from"),
    to_date: Optional[date] = Query(default=None, alias="to"),
    db: Session = Depends(get_db),
) -> ActivityListResponse:
    rows = _list_rows(db, ActivityData, user_id, from_date, to_date)
    return ActivityListResponse(items=[ActivityItem.model_validate(row, from_attributes=True) for row in rows])


@router.post("/{user_id}/nutrition", response_model=NutritionItem, status_code=status.HTTP_201_CREATED)
def create_nutrition(
    user_id: int, payload: NutritionWriteRequest, db: Session = Depends(get_db)
) -> NutritionItem:
    get_user_or_404(db, user_id)
    row = _save(
        db,
        NutritionData(
            user_id=user_id,
            log_date=payload.log_date or _today(),
            meal_type=(payload.meal_type.value if payload.meal_type else None),
            food_item=payload.food_item.strip(),
            quantity=payload.quantity,
            calories=payload.calories,
            macros=payload.macros,
            notes=payload.notes,
        ),
    )
    return NutritionItem.model_validate(row, from_attributes=True)


@router.get("/{user_id}/nutrition", response_model=NutritionListResponse)
def list_nutrition(
    user_id: int,
    from_date: Optional[date] = Query(default=None, alias="from"),
    to_date: Optional[date] = Query(default=None, alias="to"),
    db: Session = Depends(get_db),
) -> NutritionListResponse:
    rows = _list_rows(db, NutritionData, user_id, from_date, to_date)
    return NutritionListResponse(items=[NutritionItem.model_validate(row, from_attributes=True) for row in rows])


@router.post("/{user_id}/wellbeing", response_model=WellbeingItem, status_code=status.HTTP_201_CREATED)
def create_wellbeing(
    user_id: int, payload: WellbeingWriteRequest, db: Session = Depends(get_db)
) -> WellbeingItem:
    get_user_or_404(db, user_id)
    row = _save(
        db,
        WellbeingData(
            user_id=user_id,
            log_date=payload.log_date or _today(),
            mood_rating=payload.mood_rating,
            stress_level=payload.stress_level,
            energy_level=payload.energy_level,
            emotions=_clean_emotions(payload.emotions),
            notes=payload.notes,
        ),
    )
    return WellbeingItem.model_validate(row, from_attributes=True)


@router.get("/{user_id}/wellbeing", response_model=WellbeingListResponse)
def list_wellbeing(
    user_id: int,
    from_date: Optional[date] = Query(default=None, alias="from"),
    to_date: Optional[date] = Query(default=None, alias="to"),
    db: Session = Depends(get_db),
) -> WellbeingListResponse:
    rows = _list_rows(db, WellbeingData, user_id, from_date, to_date)
    return WellbeingListResponse(items=[WellbeingItem.model_validate(row, from_attributes=True) for row in rows])


@router.post("/{user_id}/sleep", response_model=SleepItem, status_code=status.HTTP_201_CREATED)
def create_sleep(user_id: int, payload: SleepWriteRequest, db: Session = Depends(get_db)) -> SleepItem:
    get_user_or_404(db, user_id)
    row = _save(
        db,
        SleepData(
            user_id=user_id,
            log_date=payload.log_date or _today(),
            bedtime=payload.bedtime,
            wake_time=payload.wake_time,
            duration_hours=payload.duration_hours,
            quality_rating=payload.quality_rating,
            notes=payload.notes,
        ),
    )
    return SleepItem.model_validate(row, from_attributes=True)


@router.get("/{user_id}/sleep", response_model=SleepListResponse)
def list_sleep(
    user_id: int,
    from_date: Optional[date] = Query(default=None, alias="from"),
    to_date: Optional[date] = Query(default=None, alias="to"),
    db: Session = Depends(get_db),
) -> SleepListResponse:
    rows = _list_rows(db, SleepData, user_id, from_date, to_date)
    return SleepListResponse(items=[SleepItem.model_validate(row, from_attributes=True) for row in rows])
