import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.users import get_user_or_404
from app.core.record_store import SqlRecordStore, StoreUnavailableError
from app.core.records import GoalRecord, GoalStatus
from app.db.session import get_db

router = APIRouter(prefix="/users", tags=["goals"])
logger = logging.getLogger("uvicorn.error")


class GoalListResponse(BaseModel):
    items: list[GoalRecord]


@router.get("/{user_id}/goals", response_model=GoalListResponse)
def list_goals(
    user_id: int,
    goal_status: Optional[GoalStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
) -> GoalListResponse:
    get_user_or_404(db, user_id)
    try:
        goals = SqlRecordStore(db).fetch_goals(user_id)
    except StoreUnavailableError as exc:
        logger.exception("goals_store_error user_id=%s detail=%s", user_id, str(exc))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Goals are temporarily unavailable. Please retry.",
        ) from exc
    if goal_status:
        goals = [goal for goal in goals if goal.status == goal_status]
    return GoalListResponse(items=goals)
