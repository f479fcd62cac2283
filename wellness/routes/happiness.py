"""
Happiness score HTTP routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from wellness.auth import verify_api_key
from wellness.database import get_db
from wellness.schemas import HappinessScoreResponse, ScoreSummaryResponse
from wellness.services.date_service import DateService
from wellness.services.happiness_service import HappinessScoreEngine
from wellness.services.summary_service import SummaryService
from .deps import get_engine

router = APIRouter(prefix="/api/happiness", tags=["happiness"], dependencies=[Depends(verify_api_key)])


@router.post("/{user_id}/compute", response_model=HappinessScoreResponse)
def compute_score(
    user_id: str,
    score_date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Recompute and store a user's happiness score for a day."""
    target_date = DateService.coerce_date(score_date)
    breakdown = engine.compute_breakdown(user_id, target_date)
    return {"user_id": user_id, "score_date": target_date, **breakdown.as_dict()}


@router.get("/{user_id}/summary", response_model=ScoreSummaryResponse)
def get_summary(
    user_id: str,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Today's score with weekly and monthly averages."""
    return SummaryService(db, engine).get_summary(user_id)


@router.get("/{user_id}/history", response_model=List[HappinessScoreResponse])
def get_history(
    user_id: str,
    days: int = Query(30, ge=1, le=365),
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Stored scores for the last N days."""
    return SummaryService(db, engine).get_history(user_id, days)
