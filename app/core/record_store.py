from datetime import date, timedelta
from typing import Optional, Protocol

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.records import (
    ActivityRecord,
    GoalRecord,
    NutritionRecord,
    SleepRecord,
    UserRef,
    WellbeingRecord,
)
from app.db.models import ActivityData, Goal, NutritionData, SleepData, User, WellbeingData

WINDOW_DAYS = 30


class StoreUnavailableError(RuntimeError):
    def __init__(self, category: str, message: str):
        super().__init__(message)
        self.category = category


def window_bounds(today: date, days: int = WINDOW_DAYS) -> tuple[date, date]:
    """Inclusive (start, end) dates of the trailing window ending on ``today``."""
    return today - timedelta(days=days), today


def _validated(record_cls: type[BaseModel], rows: list, category: str) -> list:
    try:
        return [record_cls.model_validate(row) for row in rows]
    except ValidationError as exc:
        raise StoreUnavailableError(category, f"invalid stored row: {exc}") from exc


class RecordStore(Protocol):
    def get_user(self, user_id: int) -> Optional[UserRef]:
        ...

    def fetch_activity(self, user_id: int, start: date, end: date) -> list[ActivityRecord]:
        ...

    def fetch_nutrition(self, user_id: int, start: date, end: date) -> list[NutritionRecord]:
        ...

    def fetch_wellbeing(self, user_id: int, start: date, end: date) -> list[WellbeingRecord]:
        ...

    def fetch_sleep(self, user_id: int, start: date, end: date) -> list[SleepRecord]:
        ...

    def fetch_goals(self, user_id: int) -> list[GoalRecord]:
        ...


class SqlRecordStore:
    """Reads records through a SQLAlchemy session, most recent first."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _windowed(self, model, user_id: int, start: date, end: date) -> list:
        try:
            return (
                self.db.query(model)
                .filter(model.user_id == user_id, model.log_date >= start, model.log_date <= end)
                .order_by(model.log_date.desc(), model.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(model.__tablename__, str(exc)) from exc

    def get_user(self, user_id: int) -> Optional[UserRef]:
        try:
            user = self.db.get(User, user_id)
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("users", str(exc)) from exc
        if user is None:
            return None
        return UserRef.model_validate(user)

    def fetch_activity(self, user_id: int, start: date, end: date) -> list[ActivityRecord]:
        rows = self._windowed(ActivityData, user_id, start, end)
        return _validated(ActivityRecord, rows, ActivityData.__tablename__)

    def fetch_nutrition(self, user_id: int, start: date, end: date) -> list[NutritionRecord]:
        rows = self._windowed(NutritionData, user_id, start, end)
        return _validated(NutritionRecord, rows, NutritionData.__tablename__)

    def fetch_wellbeing(self, user_id: int, start: date, end: date) -> list[WellbeingRecord]:
        rows = self._windowed(WellbeingData, user_id, start, end)
        return _validated(WellbeingRecord, rows, WellbeingData.__tablename__)

    def fetch_sleep(self, user_id: int, start: date, end: date) -> list[SleepRecord]:
        rows = self._windowed(SleepData, user_id, start, end)
        return _validated(SleepRecord, rows, SleepData.__tablename__)

    def fetch_goals(self, user_id: int) -> list[GoalRecord]:
        try:
            rows = (
                self.db.query(Goal)
                .filter(Goal.user_id == user_id)
                .order_by(Goal.created_at.desc(), Goal.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(Goal.__tablename__, str(exc)) from exc
        return _validated(GoalRecord, rows, Goal.__tablename__)
