from fastapi import FastAPI

from app.api.goals import router as goals_router
from app.api.insights import router as insights_router
from app.api.records import router as records_router
from app.api.users import router as users_router
from app.db.session import create_tables

app = FastAPI(title="Wellness Insights")


@app.on_event("startup")
def on_startup() -> None:
    create_tables()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api")
def api_root() -> dict[str, str]:
    return {"service": "Wellness Insights API", "status": "ok"}


app.include_router(users_router)
app.include_router(records_router)
app.include_router(goals_router)
app.include_router(insights_router)
