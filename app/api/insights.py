import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.insights import UserNotFoundError, build_user_insights
from app.core.record_store import RecordStore, SqlRecordStore, StoreUnavailableError
from app.core.summaries import InsightResult
from app.db.session import get_db

router = APIRouter(prefix="/users", tags=["insights"])
logger = logging.getLogger("uvicorn.error")


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return SqlRecordStore(db)


@router.get("/{user_id}/insights", response_model=InsightResult)
def get_user_insights(user_id: int, store: RecordStore = Depends(get_record_store)) -> InsightResult:
    try:
        return build_user_insights(store, user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except StoreUnavailableError as exc:
        logger.exception("insights_store_error user_id=%s category=%s detail=%s", user_id, exc.category, str(exc))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Wellness records are temporarily unavailable. Please retry.",
        ) from exc
