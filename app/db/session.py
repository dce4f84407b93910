import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.db.models import Base

# SQLite file holding users, logged records and goals.
DB_PATH = os.getenv("DB_PATH", "./data/wellness.db")


def _sqlite_engine(db_path: str) -> Engine:
    Path(db_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    # Request sessions are handed across FastAPI's threadpool.
    return create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})


engine = _sqlite_engine(DB_PATH)
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def configure_database(db_path: str) -> None:
    global DB_PATH, engine
    DB_PATH = db_path
    engine = _sqlite_engine(db_path)
    SessionLocal.configure(bind=engine)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
