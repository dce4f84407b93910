from datetime import date, timedelta
from pathlib import Path
from typing import Any, Callable, Optional
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.record_store import StoreUnavailableError
from app.core.records import UserRef
from app.db.models import ActivityData, Goal, NutritionData, SleepData, User, WellbeingData
from app.db.session import SessionLocal, configure_database, create_tables

TODAY = date(2026, 3, 31)


class FailingRecordStore:
    """Resolves the user, then fails the first category fetch."""

    def __init__(self, user: Optional[UserRef] = None) -> None:
        self.user = user or UserRef(id=1, name="Store Down", email="down@test.com")

    def get_user(self, user_id: int) -> Optional[UserRef]:
        return self.user if user_id == self.user.id else None

    def _fail(self, *args: Any) -> list:
        raise StoreUnavailableError("activity_data", "simulated connection reset")

    fetch_activity = _fail
    fetch_nutrition = _fail
    fetch_wellbeing = _fail
    fetch_sleep = _fail
    fetch_goals = _fail


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    db_path = tmp_path_factory.mktemp("db") / "wellness_test.db"
    configure_database(str(db_path))
    create_tables()
    return db_path


@pytest.fixture(scope="session")
def app(test_db_path: Path):
    from app.main import app as fastapi_app

    return fastapi_app


@pytest.fixture
def client(app):
    app.dependency_overrides = {}
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides = {}


@pytest.fixture
def db_session(test_db_path: Path):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def create_user(db_session: Session) -> Callable[..., User]:
    def _create_user(name: str = "Test User") -> User:
        user = User(name=name, email=f"user_{uuid4().hex[:10]}@test.com")
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


def _days_ago(days: int) -> date:
    return TODAY - timedelta(days=days)


@pytest.fixture
def seed_activity(db_session: Session):
    def _seed(user_id: int, days_ago: int = 1, **fields: Any) -> ActivityData:
        fields.setdefault("activity_type", "running")
        row = ActivityData(user_id=user_id, log_date=_days_ago(days_ago), **fields)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _seed


@pytest.fixture
def seed_nutrition(db_session: Session):
    def _seed(user_id: int, days_ago: int = 1, **fields: Any) -> NutritionData:
        fields.setdefault("food_item", "oatmeal")
        row = NutritionData(user_id=user_id, log_date=_days_ago(days_ago), **fields)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _seed


@pytest.fixture
def seed_wellbeing(db_session: Session):
    def _seed(user_id: int, days_ago: int = 1, **fields: Any) -> WellbeingData:
        row = WellbeingData(user_id=user_id, log_date=_days_ago(days_ago), **fields)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _seed


@pytest.fixture
def seed_sleep(db_session: Session):
    def _seed(user_id: int, days_ago: int = 1, **fields: Any) -> SleepData:
        row = SleepData(user_id=user_id, log_date=_days_ago(days_ago), **fields)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _seed


@pytest.fixture
def seed_goal(db_session: Session):
    def _seed(user_id: int, **fields: Any) -> Goal:
        fields.setdefault("category", "fitness")
        fields.setdefault("title", "Run a 5k")
        row = Goal(user_id=user_id, **fields)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _seed


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def failing_store() -> FailingRecordStore:
    return FailingRecordStore()
